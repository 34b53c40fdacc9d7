from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

StoryStatus = Literal["pending", "approved", "rejected"]

# ---------- Inputs ----------

class StorySubmitIn(BaseModel):
    """Story proposée depuis le site public (toujours créée en `pending`)."""
    contenu: str = Field(min_length=1, examples=["J'ai réduit mon temps d'écran de moitié..."])
    titre: Optional[str] = Field(default=None, max_length=255)
    is_anonymous: bool = False

class StoryCreateIn(StorySubmitIn):
    statut: StoryStatus = "pending"
    id_user: Optional[int] = None

class StoryStatusIn(BaseModel):
    statut: StoryStatus


# ---------- Outputs ----------

class StoryPublicOut(BaseModel):
    id: int
    titre: str
    contenu: str
    is_anonymous: bool
    date_creation: datetime

class StoryAdminOut(StoryPublicOut):
    statut: StoryStatus
    id_user: Optional[int] = None
    id_admin: Optional[int] = None
