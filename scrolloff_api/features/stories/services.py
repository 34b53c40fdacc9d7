"""
➡️ But : modération et publication des stories.

Cycle de vie : pending → approved | rejected, uniquement via une action admin authentifiée.
Seules les stories `approved` sont visibles publiquement.
"""

from typing import List, Optional

from fastapi import HTTPException, status

from scrolloff_api.db.models.stories import Story
from scrolloff_api.db.repositories.stories import StoryRepository
from scrolloff_api.features.stories.schemas import (
    StoryAdminOut,
    StoryCreateIn,
    StoryPublicOut,
    StorySubmitIn,
)

TITLE_PREVIEW_LENGTH = 80


def display_title(story: Story) -> str:
    """Titre stocké, sinon début du contenu (80 caractères + '...')."""
    if story.titre:
        return story.titre
    content = story.contenu or ""
    if len(content) > TITLE_PREVIEW_LENGTH:
        return content[:TITLE_PREVIEW_LENGTH] + "..."
    return content


def to_public_out(story: Story) -> StoryPublicOut:
    return StoryPublicOut(
        id=story.id,
        titre=display_title(story),
        contenu=story.contenu,
        is_anonymous=bool(story.is_anonymous),
        date_creation=story.date_pub,
    )


def to_admin_out(story: Story) -> StoryAdminOut:
    return StoryAdminOut(
        **to_public_out(story).model_dump(),
        statut=story.statut,
        id_user=story.id_user,
        id_admin=story.id_admin,
    )


class StoryService:
    def __init__(self, repo: StoryRepository):
        self.repo = repo

    # ---------- Public ----------
    def list_public(self) -> List[StoryPublicOut]:
        return [to_public_out(s) for s in self.repo.list_filtered(statut="approved")]

    def submit(self, payload: StorySubmitIn, *, user_id: Optional[int] = None) -> Story:
        return self.repo.create(
            contenu=payload.contenu,
            titre=payload.titre,
            is_anonymous=payload.is_anonymous,
            statut="pending",
            id_user=user_id,
        )

    # ---------- Admin ----------
    def list_all(self, *, statut: Optional[str] = None) -> List[StoryAdminOut]:
        return [to_admin_out(s) for s in self.repo.list_filtered(statut=statut)]

    def _get_or_404(self, story_id: int) -> Story:
        story = self.repo.get(story_id)
        if not story:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Story not found")
        return story

    def get(self, story_id: int) -> StoryAdminOut:
        return to_admin_out(self._get_or_404(story_id))

    def create(self, payload: StoryCreateIn, *, admin_id: int) -> Story:
        return self.repo.create(
            contenu=payload.contenu,
            titre=payload.titre,
            is_anonymous=payload.is_anonymous,
            statut=payload.statut,
            id_user=payload.id_user,
            id_admin=admin_id if payload.statut != "pending" else None,
        )

    def set_status(self, story_id: int, statut: str, *, admin_id: int) -> Story:
        story = self._get_or_404(story_id)
        return self.repo.update(story, statut=statut, id_admin=admin_id)

    def delete(self, story_id: int) -> None:
        self.repo.delete_by_id(story_id)
