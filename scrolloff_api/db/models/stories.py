from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, Text

from .base import STORY_STATUSES, pk_field, utcnow


class Story(SQLModel, table=True):
    """Témoignage soumis par un utilisateur, soumis à modération."""
    __tablename__ = "stories"

    id: Optional[int] = pk_field("id_story")
    titre: Optional[str] = Field(default=None, max_length=255)
    contenu: str = Field(sa_column=Column(Text, nullable=False))
    statut: str = Field(
        default="pending",
        sa_column=Column(
            Enum(*STORY_STATUSES, name="story_status"),
            nullable=False,
            default="pending",
            server_default="pending",
        ),
    )
    is_anonymous: bool = Field(default=False, sa_column=Column(Boolean, default=False))
    date_pub: datetime = Field(default_factory=utcnow, index=True)

    # Auteur (supprimé avec son compte)
    id_user: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("utilisateur.id_user", ondelete="CASCADE"), index=True),
    )
    # Admin ayant modéré la story
    id_admin: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("admin.id_admin", ondelete="SET NULL")),
    )
