from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from scrolloff_api.api.v1.dependencies import get_optional_user_id, get_quiz_service
from scrolloff_api.features.quiz.schemas import QuizAnswersIn, QuizOut, QuizResultOut
from scrolloff_api.features.quiz.services import IncompleteQuizError, QuizService

public_router = APIRouter(prefix="/quiz", tags=["quiz"])

@public_router.get("", summary="Questionnaire du quiz", response_model=QuizOut)
def get_quiz(svc: QuizService = Depends(get_quiz_service)):
    return svc.questionnaire()

@public_router.post(
    "/score",
    summary="Calculer le résultat du quiz",
    description=(
        "Compte les réponses saines (option de score 0 ou 1) : "
        "7-10 → Low Risk, 4-6 → Medium Risk, 0-3 → High Risk. "
        "Avec `save=true`, le résultat est aussi enregistré."
    ),
    response_model=QuizResultOut,
    responses={400: {"description": "Quiz incomplet ou option invalide"}},
)
def score_quiz(
    payload: QuizAnswersIn,
    user_id: Optional[int] = Depends(get_optional_user_id),
    svc: QuizService = Depends(get_quiz_service),
):
    try:
        return svc.evaluate(payload, user_id=user_id)
    except IncompleteQuizError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
