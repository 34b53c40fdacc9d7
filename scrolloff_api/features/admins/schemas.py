from typing import Optional
from pydantic import BaseModel, Field

class AdminCreateIn(BaseModel):
    username: str = Field(min_length=1, max_length=100, examples=["moderator"])
    password: str = Field(min_length=1, max_length=128)

class AdminUpdateIn(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    # Absent : le mot de passe actuel est conservé
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)

class AdminOut(BaseModel):
    id: int
    username: str
    # jamais de mot_de_passe ici

    model_config = {"from_attributes": True}
