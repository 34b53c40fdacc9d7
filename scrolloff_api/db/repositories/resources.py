from typing import Optional, Sequence
from sqlmodel import select

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.resources import Resource

class ResourceRepository(BaseRepository[Resource]):
    model = Resource

    def list_by_type(self, type_: Optional[str] = None) -> Sequence[Resource]:
        statement = select(self.model)
        if type_:
            statement = statement.where(self.model.type == type_)
        return self.session.exec(statement.order_by(self.model.id.desc())).all()
