from typing import Optional, Sequence
from sqlmodel import select, func

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.tips import Tip

class TipRepository(BaseRepository[Tip]):
    model = Tip

    def list_by_level(self, niveau: Optional[str] = None) -> Sequence[Tip]:
        statement = select(self.model)
        if niveau:
            statement = statement.where(func.lower(self.model.niveau) == niveau.lower())
        return self.session.exec(statement.order_by(self.model.id.desc())).all()
