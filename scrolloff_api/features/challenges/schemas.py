from pydantic import BaseModel, Field

class ChallengeIn(BaseModel):
    titre: str = Field(min_length=1, max_length=255, examples=["7 jours sans réseaux le soir"])
    description: str = Field(min_length=1)
    niveau: str = Field(min_length=1, max_length=50, examples=["Beginner"])
    duree: int = Field(gt=0, description="Durée en jours", examples=[7])

class ChallengeOut(BaseModel):
    id: int
    titre: str
    description: str
    niveau: str
    duree: int

    model_config = {"from_attributes": True}
