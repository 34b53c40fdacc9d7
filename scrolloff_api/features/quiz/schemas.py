from typing import Dict, List, Literal

from pydantic import BaseModel, Field

RiskCategory = Literal["Low Risk", "Medium Risk", "High Risk"]

class QuizOption(BaseModel):
    text: str
    score: int = Field(ge=0, le=3)

class QuizQuestion(BaseModel):
    id: int
    question: str
    options: List[QuizOption] = Field(min_length=1)

class QuizTier(BaseModel):
    category: RiskCategory
    message: str
    description: str

class QuizOut(BaseModel):
    title: str
    questions: List[QuizQuestion]

class QuizDefinition(QuizOut):
    results: Dict[Literal["low", "medium", "high"], QuizTier]

# ---------- Scoring ----------

class QuizAnswersIn(BaseModel):
    # question_id -> index de l'option choisie
    answers: Dict[int, int] = Field(examples=[{"1": 0, "2": 1}])
    save: bool = Field(False, description="Enregistrer aussi le résultat (table resultat)")

class QuizResultOut(BaseModel):
    score: int
    total: int
    category: RiskCategory
    message: str
    description: str
    tip_level: str
