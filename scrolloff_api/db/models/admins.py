from typing import Optional
from sqlmodel import SQLModel, Field

from .base import pk_field


class Admin(SQLModel, table=True):
    """Compte d'administration du back-office."""
    __tablename__ = "admin"

    id: Optional[int] = pk_field("id_admin")
    username: str = Field(max_length=100, index=True, unique=True)
    # Hash bcrypt, ou mot de passe en clair pour les comptes historiques
    mot_de_passe: str = Field(max_length=255)
