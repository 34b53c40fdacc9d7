"""
➡️ But : Encapsuler les accès à la table `utilisateur`.

La colonne `is_active` est optionnelle selon les déploiements :
has_active_column() inspecte le schéma réel avant toute lecture/écriture de ce flag.
"""

from typing import Optional, Sequence, Tuple
from sqlalchemy import inspect, literal, literal_column, text
from sqlmodel import select

from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table utilisateur.
    Hérite du CRUD générique de BaseRepository.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()

    def has_active_column(self) -> bool:
        columns = inspect(self.session.connection()).get_columns(self.model.__tablename__)
        return any(c["name"] == "is_active" for c in columns)

    def _active_expr(self):
        if self.has_active_column():
            return literal_column(f"{self.model.__tablename__}.is_active")
        # Pas de colonne : tout le monde est considéré actif
        return literal(1)

    def list_with_status(self) -> Sequence[Tuple[User, int]]:
        """Utilisateurs (plus récents d'abord) accompagnés de leur flag is_active."""
        statement = (
            select(self.model, self._active_expr().label("is_active"))
            .order_by(self.model.date_inscription.desc())
        )
        return self.session.exec(statement).all()

    def get_with_status(self, user_id: int) -> Optional[Tuple[User, int]]:
        statement = (
            select(self.model, self._active_expr().label("is_active"))
            .where(self.model.id == user_id)
        )
        return self.session.exec(statement).first()

    def set_active(self, user_id: int, is_active: bool) -> int:
        """Met à jour le flag ; suppose que has_active_column() a été vérifié."""
        result = self.session.connection().execute(
            text(f"UPDATE {self.model.__tablename__} SET is_active = :active WHERE id_user = :id"),
            {"active": int(is_active), "id": user_id},
        )
        self.session.commit()
        return result.rowcount
