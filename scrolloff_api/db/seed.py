"""
➡️ But : remplir une base vide avec des données de démonstration décrites en YAML.

Idempotent : une ligne n'est insérée que si sa clé naturelle n'existe pas encore
(username, email, titre, contenu).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session, select

from scrolloff_api.db.models.admins import Admin
from scrolloff_api.db.models.users import User
from scrolloff_api.db.models.stories import Story
from scrolloff_api.db.models.tips import Tip
from scrolloff_api.db.models.resources import Resource
from scrolloff_api.db.models.challenges import Challenge
from scrolloff_api.security.password import hash_password

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "seed_data.yaml"


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")
    return data


# -----------------------------
# Seeders
# -----------------------------
def seed_admins(session: Session, items: List[Dict[str, Any]]) -> int:
    created = 0
    for item in items:
        if session.exec(select(Admin).where(Admin.username == item["username"])).first():
            continue
        session.add(Admin(username=item["username"], mot_de_passe=hash_password(item["password"])))
        created += 1
    session.commit()
    return created


def seed_users(session: Session, items: List[Dict[str, Any]]) -> int:
    created = 0
    for item in items:
        if session.exec(select(User).where(User.email == item["email"])).first():
            continue
        session.add(User(nom=item["nom"], email=item["email"], mot_de_passe=hash_password(item["password"])))
        created += 1
    session.commit()
    return created


def seed_stories(session: Session, items: List[Dict[str, Any]]) -> int:
    created = 0
    for item in items:
        if session.exec(select(Story).where(Story.contenu == item["contenu"])).first():
            continue
        author = None
        if item.get("author_email"):
            author = session.exec(select(User).where(User.email == item["author_email"])).first()
        session.add(
            Story(
                titre=item.get("titre"),
                contenu=item["contenu"],
                statut=item.get("statut", "pending"),
                is_anonymous=item.get("is_anonymous", False),
                id_user=author.id if author else None,
            )
        )
        created += 1
    session.commit()
    return created


def _seed_by_title(session: Session, model, items: List[Dict[str, Any]]) -> int:
    created = 0
    for item in items:
        if session.exec(select(model).where(model.titre == item["titre"])).first():
            continue
        session.add(model(**item))
        created += 1
    session.commit()
    return created


def seed_all(session: Session, seed_path: str | Path = DEFAULT_SEED_PATH) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)
    summary = {
        "admins": seed_admins(session, data.get("admins", [])),
        "users": seed_users(session, data.get("users", [])),
        "stories": seed_stories(session, data.get("stories", [])),
        "tips": _seed_by_title(session, Tip, data.get("tips", [])),
        "resources": _seed_by_title(session, Resource, data.get("resources", [])),
        "challenges": _seed_by_title(session, Challenge, data.get("challenges", [])),
    }
    logger.info("Seed done: %s", summary)
    return summary
