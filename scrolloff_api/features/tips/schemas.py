from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

TipLevel = Literal["low", "medium", "high"]

class TipIn(BaseModel):
    titre: str = Field(min_length=1, max_length=255, examples=["Désactive les notifications"])
    contenu: str = Field(min_length=1)
    niveau: TipLevel = Field(examples=["low"])

    @field_validator("niveau", mode="before")
    @classmethod
    def _lower_level(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

class TipPublicOut(BaseModel):
    id: int
    titre: str
    contenu: str
    niveau: str

    model_config = {"from_attributes": True}

class TipOut(TipPublicOut):
    id_admin: Optional[int] = None
