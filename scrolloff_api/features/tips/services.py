from typing import Optional, Sequence

from fastapi import HTTPException, status

from scrolloff_api.db.models.tips import Tip
from scrolloff_api.db.repositories.tips import TipRepository
from scrolloff_api.features.tips.schemas import TipIn
from scrolloff_api.features.quiz.services import risk_to_tip_level


class TipService:
    def __init__(self, repo: TipRepository):
        self.repo = repo

    def list(self, *, niveau: Optional[str] = None, risk: Optional[str] = None) -> Sequence[Tip]:
        """
        Liste des tips, filtrée par niveau.
        `risk` (catégorie du quiz, ex. "Medium Risk") est converti en niveau ; `niveau` a la priorité.
        """
        level = niveau or (risk_to_tip_level(risk) if risk else None)
        return self.repo.list_by_level(level)

    def get(self, tip_id: int) -> Tip:
        tip = self.repo.get(tip_id)
        if not tip:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tip not found")
        return tip

    def create(self, payload: TipIn, *, admin_id: Optional[int] = None) -> Tip:
        return self.repo.create(**payload.model_dump(), id_admin=admin_id)

    def update(self, tip_id: int, payload: TipIn) -> Tip:
        tip = self.get(tip_id)
        return self.repo.update(tip, **payload.model_dump())

    def delete(self, tip_id: int) -> None:
        self.repo.delete_by_id(tip_id)
