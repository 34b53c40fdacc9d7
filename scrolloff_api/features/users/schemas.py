"""
➡️ But : Définir les formats d’entrée/sortie de l’API pour les utilisateurs (vue admin).

Le JSON expose `name` là où la table stocke `nom`, et ne renvoie jamais le mot de passe.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"

class UserCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=128)

class UserUpdateIn(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, min_length=3, max_length=255, pattern=EMAIL_PATTERN)
    is_active: Optional[bool] = None

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    date_inscription: datetime
    is_active: bool = True

class UserUpdatedOut(BaseModel):
    id: int
    message: str
    # False quand la colonne is_active n'existe pas dans le schéma
    status_persisted: bool = True
