from typing import Optional
from sqlmodel import select

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.admins import Admin

class AdminRepository(BaseRepository[Admin]):
    model = Admin

    def get_by_username(self, username: str) -> Optional[Admin]:
        return self.session.exec(
            select(self.model).where(self.model.username == username)
        ).first()
