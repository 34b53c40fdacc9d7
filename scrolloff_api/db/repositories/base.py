from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlalchemy import delete
from sqlmodel import SQLModel, Session, select, func

ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Accès générique à une table ScrollOff (admin, utilisateur, stories, tips...).

    👉 Pas de règle métier ici : les services décident, le repository persiste.
    👉 Chaque sous-classe fixe `model` ; la clé primaire est toujours exposée sous `id`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def _save(self, entity: ModelT, commit: bool) -> ModelT:
        self.session.add(entity)
        if not commit:
            self.session.flush()
            return entity
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- Lecture ----------

    def list(self) -> Sequence[ModelT]:
        """Toutes les lignes, plus récentes (id le plus grand) d'abord."""
        return self.session.exec(select(self.model).order_by(self.model.id.desc())).all()

    def count(self) -> int:
        return self.session.exec(select(func.count(self.model.id))).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        return self.session.get(self.model, id_)

    # ---------- Écriture ----------

    def create(self, **fields) -> ModelT:
        return self._save(self.model(**fields), commit=True)

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Applique `changes` sur l'entité puis enregistre.
        Avec commit=False, seul un flush est fait : le service commitera l'ensemble.
        """
        for field_name, value in changes.items():
            setattr(entity, field_name, value)
        return self._save(entity, commit)

    def delete_by_id(self, id_: Any) -> int:
        """
        DELETE direct par identifiant, sans lecture préalable.
        Retourne le nombre de lignes supprimées (0 si l'id n'existe pas).
        """
        result = self.session.exec(delete(self.model).where(self.model.id == id_))
        self.session.commit()
        return result.rowcount
