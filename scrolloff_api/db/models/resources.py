from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Enum, ForeignKey, Integer, Text

from .base import RESOURCE_TYPES, pk_field, utcnow


class Resource(SQLModel, table=True):
    __tablename__ = "resources"

    id: Optional[int] = pk_field("id_resource")
    titre: str = Field(max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))
    lien: str = Field(max_length=500)
    type: str = Field(
        default="Article",
        sa_column=Column(
            Enum(*RESOURCE_TYPES, name="resource_type"),
            nullable=False,
            default="Article",
            server_default="Article",
        ),
    )
    date_ajout: datetime = Field(default_factory=utcnow)
    id_admin: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("admin.id_admin", ondelete="SET NULL")),
    )
