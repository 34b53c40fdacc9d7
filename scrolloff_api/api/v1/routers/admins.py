from typing import List

from fastapi import APIRouter, Depends, Path, status

from scrolloff_api.api.v1.dependencies import get_admin_service, require_admin
from scrolloff_api.features.admins.schemas import AdminCreateIn, AdminOut, AdminUpdateIn
from scrolloff_api.features.admins.services import AdminService
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut, UpdatedOut

router = APIRouter(
    prefix="/admin/admins",
    tags=["admins"],
    dependencies=[Depends(require_admin)],
    responses={401: {"description": "Token manquant, expiré ou invalide"}},
)

@router.get("", summary="Lister les admins", response_model=List[AdminOut])
def list_admins(svc: AdminService = Depends(get_admin_service)):
    return svc.list()

@router.post(
    "",
    summary="Créer un admin",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedOut,
    responses={409: {"description": "Username déjà pris"}},
)
def create_admin(payload: AdminCreateIn, svc: AdminService = Depends(get_admin_service)):
    admin = svc.create(payload)
    return CreatedOut(id=admin.id, message="Admin created successfully")

@router.get("/{admin_id}", summary="Récupérer un admin", response_model=AdminOut)
def get_admin(admin_id: int = Path(..., ge=1), svc: AdminService = Depends(get_admin_service)):
    return svc.get(admin_id)

@router.put("/{admin_id}", summary="Modifier un admin", response_model=UpdatedOut)
def update_admin(payload: AdminUpdateIn, admin_id: int = Path(..., ge=1), svc: AdminService = Depends(get_admin_service)):
    svc.update(admin_id, payload)
    return UpdatedOut(id=admin_id, message="Admin updated successfully")

@router.delete("/{admin_id}", summary="Supprimer un admin", response_model=MessageOut)
def delete_admin(admin_id: int, svc: AdminService = Depends(get_admin_service)):
    svc.delete(admin_id)
    return MessageOut(message="Admin deleted successfully")
