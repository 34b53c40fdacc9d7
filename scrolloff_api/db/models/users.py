from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from .base import pk_field, utcnow


class User(SQLModel, table=True):
    """
    Utilisateur du site public.
    La colonne `is_active` n'existe pas dans tous les schémas déployés :
    elle n'est volontairement pas mappée ici (voir UserRepository).
    """
    __tablename__ = "utilisateur"

    id: Optional[int] = pk_field("id_user")
    nom: str = Field(max_length=100)
    email: str = Field(max_length=255, index=True, unique=True)
    mot_de_passe: str = Field(max_length=255)
    date_inscription: datetime = Field(default_factory=utcnow)
