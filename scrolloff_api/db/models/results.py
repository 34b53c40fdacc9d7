from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, ForeignKey, Integer

from .base import pk_field, utcnow


class Result(SQLModel, table=True):
    """Résultat d'un passage du quiz (source des statistiques)."""
    __tablename__ = "resultat"

    id: Optional[int] = pk_field("id_resultat")
    score: int
    niveau: str = Field(max_length=50, index=True)  # "Low Risk" | "Medium Risk" | "High Risk"
    date_test: datetime = Field(default_factory=utcnow, index=True)
    id_user: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("utilisateur.id_user", ondelete="CASCADE"), index=True),
    )
