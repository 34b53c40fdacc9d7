"""
➡️ But : Contenir la logique métier des utilisateurs côté back-office.

UserService : contrôle d'unicité de l'email, gestion du flag is_active
(ignoré proprement si la colonne est absente du schéma), suppression sans contrôle d'existence.
"""

import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from scrolloff_api.db.models.users import User
from scrolloff_api.db.repositories.users import UserRepository
from scrolloff_api.features.users.schemas import UserCreateIn, UserOut, UserUpdateIn, UserUpdatedOut
from scrolloff_api.security.password import hash_password

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already exists"
STATUS_UNAVAILABLE = "User status feature not available (schema missing), client updated locally"


def to_user_out(user: User, is_active: Optional[int] = 1) -> UserOut:
    return UserOut(
        id=user.id,
        name=user.nom,
        email=user.email,
        date_inscription=user.date_inscription,
        is_active=bool(1 if is_active is None else is_active),
    )


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def list(self) -> List[UserOut]:
        return [to_user_out(user, active) for user, active in self.repo.list_with_status()]

    def get(self, user_id: int) -> UserOut:
        row = self.repo.get_with_status(user_id)
        if not row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        user, active = row
        return to_user_out(user, active)

    def _ensure_email_free(self, email: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self.repo.get_by_email(email)
        if existing and existing.id != exclude_id:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EMAIL_TAKEN)

    def create(self, payload: UserCreateIn) -> User:
        self._ensure_email_free(payload.email)
        try:
            return self.repo.create(
                nom=payload.name,
                email=payload.email,
                mot_de_passe=hash_password(payload.password),
            )
        except IntegrityError:
            # Email pris entre le contrôle et l'insertion
            self.repo.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EMAIL_TAKEN)

    def update(self, user_id: int, payload: UserUpdateIn) -> UserUpdatedOut:
        user = self.repo.get(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        changes = {}
        if payload.name is not None:
            changes["nom"] = payload.name
        if payload.email is not None:
            self._ensure_email_free(payload.email, exclude_id=user_id)
            changes["email"] = payload.email
        if changes:
            try:
                self.repo.update(user, **changes)
            except IntegrityError:
                self.repo.session.rollback()
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EMAIL_TAKEN)

        if payload.is_active is None:
            return UserUpdatedOut(id=user_id, message="User updated successfully")

        if not self.repo.has_active_column():
            logger.warning("is_active column missing; ignoring status update for user id=%s", user_id)
            return UserUpdatedOut(id=user_id, message=STATUS_UNAVAILABLE, status_persisted=False)

        self.repo.set_active(user_id, payload.is_active)
        return UserUpdatedOut(id=user_id, message="User updated successfully")

    def delete(self, user_id: int) -> None:
        self.repo.delete_by_id(user_id)
