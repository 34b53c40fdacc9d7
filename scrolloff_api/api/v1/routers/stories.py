from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from scrolloff_api.api.v1.dependencies import get_optional_user_id, get_story_service, require_admin
from scrolloff_api.features.authentication.services import Identity
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut, UpdatedOut
from scrolloff_api.features.stories.schemas import (
    StoryAdminOut,
    StoryCreateIn,
    StoryPublicOut,
    StoryStatus,
    StoryStatusIn,
    StorySubmitIn,
)
from scrolloff_api.features.stories.services import StoryService

router = APIRouter(
    prefix="/admin/stories",
    tags=["stories"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Not Found"}},
)

public_router = APIRouter(prefix="/stories", tags=["public"])

# -----------------------------
# Public
# -----------------------------
@public_router.get(
    "",
    summary="Lister les stories publiées",
    description="Uniquement les stories approuvées, plus récentes d'abord.",
    response_model=List[StoryPublicOut],
)
def list_public_stories(svc: StoryService = Depends(get_story_service)):
    return svc.list_public()

@public_router.post(
    "",
    summary="Proposer une story",
    description="La story est créée en attente de modération. L'auteur est déduit du token utilisateur s'il est fourni.",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedOut,
)
def submit_story(
    payload: StorySubmitIn,
    user_id: Optional[int] = Depends(get_optional_user_id),
    svc: StoryService = Depends(get_story_service),
):
    story = svc.submit(payload, user_id=user_id)
    return CreatedOut(id=story.id, message="Story submitted for moderation")

# -----------------------------
# Admin
# -----------------------------
@router.get("", summary="Lister les stories (filtre par statut)", response_model=List[StoryAdminOut])
def list_stories(
    statut: Optional[StoryStatus] = Query(None, description="pending | approved | rejected"),
    svc: StoryService = Depends(get_story_service),
):
    return svc.list_all(statut=statut)

@router.post("", summary="Créer une story", status_code=status.HTTP_201_CREATED, response_model=CreatedOut)
def create_story(
    payload: StoryCreateIn,
    admin: Identity = Depends(require_admin),
    svc: StoryService = Depends(get_story_service),
):
    story = svc.create(payload, admin_id=admin.id)
    return CreatedOut(id=story.id, message="Story created successfully")

@router.get("/{story_id}", summary="Récupérer une story", response_model=StoryAdminOut)
def get_story(story_id: int = Path(..., ge=1), svc: StoryService = Depends(get_story_service)):
    return svc.get(story_id)

@router.patch(
    "/{story_id}",
    summary="Modérer une story (approve/reject)",
    response_model=UpdatedOut,
    responses={400: {"description": "Statut invalide"}},
)
def update_story_status(
    payload: StoryStatusIn,
    story_id: int = Path(..., ge=1),
    admin: Identity = Depends(require_admin),
    svc: StoryService = Depends(get_story_service),
):
    svc.set_status(story_id, payload.statut, admin_id=admin.id)
    return UpdatedOut(id=story_id, message="Story updated successfully")

@router.delete("/{story_id}", summary="Supprimer une story", response_model=MessageOut)
def delete_story(story_id: int, svc: StoryService = Depends(get_story_service)):
    svc.delete(story_id)
    return MessageOut(message="Story deleted successfully")
