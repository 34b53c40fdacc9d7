"""
➡️ But : gestion des comptes admin (liste, création, modification, suppression).

L'unicité du username est garantie par la contrainte UNIQUE de la table :
une violation remonte en IntegrityError, convertie ici en 409.
"""

import logging
from typing import Sequence

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from scrolloff_api.db.models.admins import Admin
from scrolloff_api.db.repositories.admins import AdminRepository
from scrolloff_api.features.admins.schemas import AdminCreateIn, AdminUpdateIn
from scrolloff_api.security.password import hash_password, is_legacy_hash

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, repo: AdminRepository):
        self.repo = repo

    def list(self) -> Sequence[Admin]:
        return self.repo.list()

    def get(self, admin_id: int) -> Admin:
        admin = self.repo.get(admin_id)
        if not admin:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found")
        return admin

    def create(self, payload: AdminCreateIn) -> Admin:
        try:
            return self.repo.create(
                username=payload.username,
                mot_de_passe=hash_password(payload.password),
            )
        except IntegrityError:
            self.repo.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    def update(self, admin_id: int, payload: AdminUpdateIn) -> Admin:
        admin = self.get(admin_id)
        changes = {"username": payload.username}
        if payload.password is not None:
            changes["mot_de_passe"] = hash_password(payload.password)
        try:
            return self.repo.update(admin, **changes)
        except IntegrityError:
            self.repo.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    def delete(self, admin_id: int) -> None:
        self.repo.delete_by_id(admin_id)

    def migrate_legacy_passwords(self) -> int:
        """Hash tous les mots de passe admin encore stockés en clair. Retourne le nombre de comptes migrés."""
        migrated = 0
        for admin in self.repo.list():
            if is_legacy_hash(admin.mot_de_passe) and admin.mot_de_passe:
                self.repo.update(admin, commit=False, mot_de_passe=hash_password(admin.mot_de_passe))
                logger.info("Hashed admin id=%s", admin.id)
                migrated += 1
        self.repo.session.commit()
        return migrated
