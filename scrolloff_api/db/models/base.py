"""
➡️ But : Définir les briques communes des tables (ORM).

Le schéma MySQL existant nomme ses clés primaires `id_<table>` (id_admin, id_user, id_story...).
Côté Python et côté JSON, la clé s'appelle simplement `id` : pk_field() fait le lien.
"""

from datetime import datetime, timezone
from typing import Any

from sqlmodel import Field

# Valeurs autorisées (contraintes ENUM du schéma MySQL)
STORY_STATUSES = ("pending", "approved", "rejected")
RESOURCE_TYPES = ("Article", "Video", "Poster", "External link")
TIP_LEVELS = ("low", "medium", "high")


def pk_field(column_name: str) -> Any:
    """Clé primaire auto-incrémentée exposée sous le nom `id`, stockée sous `column_name`."""
    return Field(default=None, primary_key=True, sa_column_kwargs={"name": column_name})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


