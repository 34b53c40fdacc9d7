from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text

from .base import pk_field


class Challenge(SQLModel, table=True):
    __tablename__ = "challenges"

    id: Optional[int] = pk_field("id_challenge")
    titre: str = Field(max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))
    niveau: str = Field(max_length=50)
    duree: int = Field(description="Durée du challenge, en jours")
