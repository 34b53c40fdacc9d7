from typing import Optional, Sequence

from fastapi import HTTPException, status

from scrolloff_api.db.models.resources import Resource
from scrolloff_api.db.repositories.resources import ResourceRepository
from scrolloff_api.features.resources.schemas import ResourceIn


class ResourceService:
    def __init__(self, repo: ResourceRepository):
        self.repo = repo

    def list(self, *, type_: Optional[str] = None) -> Sequence[Resource]:
        return self.repo.list_by_type(type_)

    def get(self, resource_id: int) -> Resource:
        resource = self.repo.get(resource_id)
        if not resource:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
        return resource

    def create(self, payload: ResourceIn, *, admin_id: Optional[int] = None) -> Resource:
        return self.repo.create(**payload.model_dump(), id_admin=admin_id)

    def update(self, resource_id: int, payload: ResourceIn) -> Resource:
        resource = self.get(resource_id)
        return self.repo.update(resource, **payload.model_dump())

    def delete(self, resource_id: int) -> None:
        # Pas de contrôle d'existence : supprimer un id absent renvoie quand même un succès
        self.repo.delete_by_id(resource_id)
