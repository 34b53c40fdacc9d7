"""
➡️ But : calcul du résultat du quiz "réseaux sociaux".

Le score est le nombre de réponses saines (option de score 0 ou 1), sur 10 questions :
- 7 à 10 : Low Risk
- 4 à 6  : Medium Risk
- 0 à 3  : High Risk

La catégorie sert ensuite à filtrer les tips (Low Risk → niveau "low", etc.).
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

import yaml

from scrolloff_api.db.repositories.results import ResultRepository
from scrolloff_api.features.quiz.schemas import (
    QuizAnswersIn,
    QuizDefinition,
    QuizOut,
    QuizQuestion,
    QuizResultOut,
)

logger = logging.getLogger(__name__)

HEALTHY_SCORES = (0, 1)
LOW_RISK_MIN = 7
MEDIUM_RISK_MIN = 4

RISK_TO_TIP_LEVEL: Dict[str, str] = {
    "low risk": "low",
    "medium risk": "medium",
    "high risk": "high",
}


class IncompleteQuizError(ValueError):
    """Une question n'a pas de réponse, ou l'index d'option est hors limites."""
    pass


# -----------------------------
# Fonctions pures
# -----------------------------
def score_answers(questions: Sequence[QuizQuestion], answers: Mapping[int, int]) -> int:
    """Compte les réponses saines. Toutes les questions doivent avoir une réponse valide."""
    healthy = 0
    for question in questions:
        index = answers.get(question.id)
        if index is None:
            raise IncompleteQuizError(f"Question {question.id} has no answer")
        if not 0 <= index < len(question.options):
            raise IncompleteQuizError(f"Invalid option {index} for question {question.id}")
        if question.options[index].score in HEALTHY_SCORES:
            healthy += 1
    return healthy


def classify(score: int) -> str:
    """Retourne la clé du palier : "low", "medium" ou "high" (risque)."""
    if score >= LOW_RISK_MIN:
        return "low"
    if score >= MEDIUM_RISK_MIN:
        return "medium"
    return "high"


def risk_to_tip_level(category: str) -> str:
    """"Medium Risk" → "medium" ; une valeur inconnue est renvoyée en minuscules."""
    normalized = category.strip().lower()
    return RISK_TO_TIP_LEVEL.get(normalized, normalized)


# -----------------------------
# Chargement du questionnaire
# -----------------------------
@lru_cache(maxsize=8)
def load_quiz(path: str) -> QuizDefinition:
    file = Path(path)
    if not file.exists():
        raise FileNotFoundError(f"Quiz questions file not found: {file}")
    data = yaml.safe_load(file.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Quiz YAML must contain a root mapping.")
    quiz = QuizDefinition.model_validate(data)
    logger.info("Loaded quiz '%s' (%d questions)", quiz.title, len(quiz.questions))
    return quiz


class QuizService:
    def __init__(self, *, questions_path: str, result_repo: ResultRepository):
        self.quiz = load_quiz(questions_path)
        self.results = result_repo

    def questionnaire(self) -> QuizOut:
        return QuizOut(title=self.quiz.title, questions=self.quiz.questions)

    def evaluate(self, payload: QuizAnswersIn, *, user_id: Optional[int] = None) -> QuizResultOut:
        score = score_answers(self.quiz.questions, payload.answers)
        tier = self.quiz.results[classify(score)]

        if payload.save:
            self.results.create(score=score, niveau=tier.category, id_user=user_id)

        return QuizResultOut(
            score=score,
            total=len(self.quiz.questions),
            category=tier.category,
            message=tier.message,
            description=tier.description,
            tip_level=risk_to_tip_level(tier.category),
        )
