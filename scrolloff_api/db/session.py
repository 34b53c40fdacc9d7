"""
➡️ But : ouvrir la connexion à la base ScrollOff (MySQL en prod, SQLite en dev/test).

init_db() : crée les tables manquantes (idempotent, appelé au démarrage de l'app et par scripts/seed.py).

get_session() : une session SQLModel par requête HTTP.
"""

import logging

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Les modèles doivent être importés pour être enregistrés dans SQLModel.metadata
from scrolloff_api.db.models.admins import Admin
from scrolloff_api.db.models.users import User
from scrolloff_api.db.models.stories import Story
from scrolloff_api.db.models.tips import Tip
from scrolloff_api.db.models.resources import Resource
from scrolloff_api.db.models.challenges import Challenge
from scrolloff_api.db.models.results import Result

from scrolloff_api.core.config import settings

logger = logging.getLogger(__name__)


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite:"):
        # Le serveur partage la connexion SQLite entre threads
        return create_engine(url, connect_args={"check_same_thread": False})
    # MySQL coupe les connexions inactives : ping avant réutilisation
    return create_engine(url, pool_pre_ping=True, pool_recycle=3600)


engine: Engine = _build_engine(settings.DATABASE_URL)


def init_db(bind: Engine | None = None) -> None:
    """
    Crée les tables absentes (CREATE TABLE IF NOT EXISTS).
    Les tables existantes ne sont jamais modifiées : une colonne ajoutée à la main (is_active) est conservée.
    """
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.info("Database tables initialized (%s)", bind.url.render_as_string(hide_password=True))


def get_session():
    with Session(engine) as session:
        yield session
