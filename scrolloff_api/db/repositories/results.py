from typing import Any, Sequence
from sqlmodel import select, func

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.results import Result

class ResultRepository(BaseRepository[Result]):
    model = Result

    def list_recent(self) -> Sequence[Result]:
        return self.session.exec(
            select(self.model).order_by(self.model.date_test.desc(), self.model.id.desc())
        ).all()

    def average_score(self) -> float:
        avg = self.session.exec(select(func.avg(self.model.score))).one()
        return float(avg or 0)

    def distribution_by_level(self) -> Sequence[Any]:
        """[(niveau, count), ...]"""
        return self.session.exec(
            select(self.model.niveau, func.count(self.model.id)).group_by(self.model.niveau)
        ).all()

    def evolution_by_date(self, days: int = 30) -> Sequence[Any]:
        """[(date, count), ...] pour les `days` dernières dates ayant des tests, plus récentes d'abord."""
        day = func.date(self.model.date_test)
        return self.session.exec(
            select(day.label("date"), func.count(self.model.id))
            .group_by(day)
            .order_by(day.desc())
            .limit(days)
        ).all()
