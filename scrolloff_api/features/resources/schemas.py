from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

ResourceType = Literal["Article", "Video", "Poster", "External link"]

class ResourceIn(BaseModel):
    titre: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    lien: str = Field(min_length=1, max_length=500, examples=["https://example.com/guide"])
    type: ResourceType = Field(examples=["Article"])

class ResourcePublicOut(BaseModel):
    id: int
    titre: str
    description: str
    lien: str
    type: str
    date_ajout: Optional[datetime] = None

    model_config = {"from_attributes": True}

class ResourceOut(ResourcePublicOut):
    id_admin: Optional[int] = None
