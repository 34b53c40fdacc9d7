"""
➡️ But : routes back-office de gestion des utilisateurs du site.

Les routes ne contiennent ni SQL ni logique métier : tout passe par UserService.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from scrolloff_api.api.v1.dependencies import get_user_service, require_admin
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut
from scrolloff_api.features.users.schemas import UserCreateIn, UserOut, UserUpdateIn, UserUpdatedOut
from scrolloff_api.features.users.services import UserService

router = APIRouter(
    prefix="/admin/users",
    tags=["users"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les utilisateurs",
    description="Plus récents d'abord. `is_active` vaut true si la colonne n'existe pas dans le schéma.",
    response_model=List[UserOut],
)
def list_users(svc: UserService = Depends(get_user_service)):
    return svc.list()

@router.post(
    "",
    summary="Créer un utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedOut,
    responses={409: {"description": "Email déjà utilisé"}},
)
def create_user(payload: UserCreateIn, svc: UserService = Depends(get_user_service)):
    user = svc.create(payload)
    return CreatedOut(id=user.id, message="User created successfully")

@router.get("/{user_id}", summary="Récupérer un utilisateur", response_model=UserOut)
def get_user(user_id: int = Path(..., ge=1), svc: UserService = Depends(get_user_service)):
    return svc.get(user_id)

@router.patch(
    "/{user_id}",
    summary="Mettre à jour un utilisateur (nom, email, activation)",
    response_model=UserUpdatedOut,
)
def update_user(payload: UserUpdateIn, user_id: int = Path(..., ge=1), svc: UserService = Depends(get_user_service)):
    return svc.update(user_id, payload)

@router.delete("/{user_id}", summary="Supprimer un utilisateur", response_model=MessageOut)
def delete_user(user_id: int, svc: UserService = Depends(get_user_service)):
    svc.delete(user_id)
    return MessageOut(message="User deleted successfully")
