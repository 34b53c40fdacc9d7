from typing import Optional, Sequence
from sqlmodel import select, func

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.stories import Story

class StoryRepository(BaseRepository[Story]):
    model = Story

    def list_filtered(self, *, statut: Optional[str] = None) -> Sequence[Story]:
        """Stories par date de publication décroissante, éventuellement filtrées par statut."""
        statement = select(self.model)
        if statut:
            statement = statement.where(self.model.statut == statut)
        statement = statement.order_by(self.model.date_pub.desc(), self.model.id.desc())
        return self.session.exec(statement).all()

    def count_by_status(self, statut: str) -> int:
        return self.session.exec(
            select(func.count(self.model.id)).where(self.model.statut == statut)
        ).one()
