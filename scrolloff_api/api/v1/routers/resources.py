from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from scrolloff_api.api.v1.dependencies import get_resource_service, require_admin
from scrolloff_api.features.authentication.services import Identity
from scrolloff_api.features.common.schemas import CreatedOut, MessageOut, UpdatedOut
from scrolloff_api.features.resources.schemas import ResourceIn, ResourceOut, ResourcePublicOut, ResourceType
from scrolloff_api.features.resources.services import ResourceService

router = APIRouter(
    prefix="/admin/resources",
    tags=["resources"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Not Found"}},
)

public_router = APIRouter(prefix="/resources", tags=["public"])

@public_router.get("", summary="Lister les ressources", response_model=List[ResourcePublicOut])
def list_public_resources(
    type: Optional[ResourceType] = Query(None, description="Article | Video | Poster | External link"),
    svc: ResourceService = Depends(get_resource_service),
):
    return svc.list(type_=type)

@router.get("", summary="Lister les ressources", response_model=List[ResourceOut])
def list_resources(svc: ResourceService = Depends(get_resource_service)):
    return svc.list()

@router.get("/{resource_id}", summary="Récupérer une ressource", response_model=ResourceOut)
def get_resource(resource_id: int = Path(..., ge=1), svc: ResourceService = Depends(get_resource_service)):
    return svc.get(resource_id)

@router.post("", summary="Créer une ressource", status_code=status.HTTP_201_CREATED, response_model=CreatedOut)
def create_resource(
    payload: ResourceIn,
    admin: Identity = Depends(require_admin),
    svc: ResourceService = Depends(get_resource_service),
):
    resource = svc.create(payload, admin_id=admin.id)
    return CreatedOut(id=resource.id, message="Resource created successfully")

@router.put("/{resource_id}", summary="Modifier une ressource", response_model=UpdatedOut)
def update_resource(payload: ResourceIn, resource_id: int = Path(..., ge=1), svc: ResourceService = Depends(get_resource_service)):
    svc.update(resource_id, payload)
    return UpdatedOut(id=resource_id, message="Resource updated successfully")

@router.delete(
    "/{resource_id}",
    summary="Supprimer une ressource",
    description="Aucun contrôle d'existence : un id absent renvoie aussi un succès.",
    response_model=MessageOut,
)
def delete_resource(resource_id: int, svc: ResourceService = Depends(get_resource_service)):
    svc.delete(resource_id)
    return MessageOut(message="Resource deleted successfully")
