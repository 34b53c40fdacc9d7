"""
Réponses génériques des opérations d'écriture (création, mise à jour, suppression).
"""

from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str

class CreatedOut(BaseModel):
    id: int
    message: str

class UpdatedOut(BaseModel):
    id: int
    message: str
