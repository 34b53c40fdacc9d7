from typing import List

from fastapi import APIRouter, Depends, Path, status

from scrolloff_api.api.v1.dependencies import get_challenge_service, require_admin
from scrolloff_api.features.challenges.schemas import ChallengeIn, ChallengeOut
from scrolloff_api.features.challenges.services import ChallengeService
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut, UpdatedOut

router = APIRouter(
    prefix="/admin/challenges",
    tags=["challenges"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Not Found"}},
)

public_router = APIRouter(prefix="/challenges", tags=["public"])

# -----------------------------
# Public (sans token)
# -----------------------------
@public_router.get("", summary="Lister les challenges", response_model=List[ChallengeOut])
def list_public_challenges(svc: ChallengeService = Depends(get_challenge_service)):
    return svc.list()

@public_router.get("/{challenge_id}", summary="Détail d'un challenge", response_model=ChallengeOut)
def get_public_challenge(challenge_id: int = Path(..., ge=1), svc: ChallengeService = Depends(get_challenge_service)):
    return svc.get(challenge_id)

# -----------------------------
# Admin
# -----------------------------
@router.get("", summary="Lister les challenges", response_model=List[ChallengeOut])
def list_challenges(svc: ChallengeService = Depends(get_challenge_service)):
    return svc.list()

@router.get("/{challenge_id}", summary="Récupérer un challenge", response_model=ChallengeOut)
def get_challenge(challenge_id: int = Path(..., ge=1), svc: ChallengeService = Depends(get_challenge_service)):
    return svc.get(challenge_id)

@router.post("", summary="Créer un challenge", status_code=status.HTTP_201_CREATED, response_model=CreatedOut)
def create_challenge(payload: ChallengeIn, svc: ChallengeService = Depends(get_challenge_service)):
    challenge = svc.create(payload)
    return CreatedOut(id=challenge.id, message="Challenge created successfully")

@router.put("/{challenge_id}", summary="Modifier un challenge", response_model=UpdatedOut)
def update_challenge(payload: ChallengeIn, challenge_id: int = Path(..., ge=1), svc: ChallengeService = Depends(get_challenge_service)):
    svc.update(challenge_id, payload)
    return UpdatedOut(id=challenge_id, message="Challenge updated successfully")

@router.delete("/{challenge_id}", summary="Supprimer un challenge", response_model=MessageOut)
def delete_challenge(challenge_id: int, svc: ChallengeService = Depends(get_challenge_service)):
    svc.delete(challenge_id)
    return MessageOut(message="Challenge deleted successfully")
