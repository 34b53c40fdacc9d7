from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from scrolloff_api.api.v1.dependencies import get_tip_service, require_admin
from scrolloff_api.features.authentication.services import Identity
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut, UpdatedOut
from scrolloff_api.features.tips.schemas import TipIn, TipOut, TipPublicOut
from scrolloff_api.features.tips.services import TipService

router = APIRouter(
    prefix="/admin/tips",
    tags=["tips"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Not Found"}},
)

public_router = APIRouter(prefix="/tips", tags=["public"])

@public_router.get(
    "",
    summary="Lister les tips",
    description="Filtre optionnel par niveau (`niveau=low`) ou par résultat du quiz (`risk=Medium Risk`).",
    response_model=List[TipPublicOut],
)
def list_public_tips(
    niveau: Optional[str] = Query(None, examples=["low"]),
    risk: Optional[str] = Query(None, examples=["High Risk"]),
    svc: TipService = Depends(get_tip_service),
):
    return svc.list(niveau=niveau, risk=risk)

@router.get("", summary="Lister les tips", response_model=List[TipOut])
def list_tips(svc: TipService = Depends(get_tip_service)):
    return svc.list()

@router.get("/{tip_id}", summary="Récupérer un tip", response_model=TipOut)
def get_tip(tip_id: int = Path(..., ge=1), svc: TipService = Depends(get_tip_service)):
    return svc.get(tip_id)

@router.post("", summary="Créer un tip", status_code=status.HTTP_201_CREATED, response_model=CreatedOut)
def create_tip(
    payload: TipIn,
    admin: Identity = Depends(require_admin),
    svc: TipService = Depends(get_tip_service),
):
    tip = svc.create(payload, admin_id=admin.id)
    return CreatedOut(id=tip.id, message="Tip created successfully")

@router.put("/{tip_id}", summary="Modifier un tip", response_model=UpdatedOut)
def update_tip(payload: TipIn, tip_id: int = Path(..., ge=1), svc: TipService = Depends(get_tip_service)):
    svc.update(tip_id, payload)
    return UpdatedOut(id=tip_id, message="Tip updated successfully")

@router.delete("/{tip_id}", summary="Supprimer un tip", response_model=MessageOut)
def delete_tip(tip_id: int, svc: TipService = Depends(get_tip_service)):
    svc.delete(tip_id)
    return MessageOut(message="Tip deleted successfully")
