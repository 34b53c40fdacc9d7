from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, ForeignKey, Integer, Text

from .base import pk_field


class Tip(SQLModel, table=True):
    __tablename__ = "tips"

    id: Optional[int] = pk_field("id_tip")
    titre: str = Field(max_length=255)
    contenu: str = Field(sa_column=Column(Text, nullable=False))
    niveau: str = Field(max_length=20, index=True)  # low | medium | high
    id_admin: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("admin.id_admin", ondelete="SET NULL")),
    )
