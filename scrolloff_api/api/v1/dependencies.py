"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_tip_service() : crée un TipService à partir d’une session DB.

require_admin() : vérifie le token Bearer sur toutes les routes /api/admin/*.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from scrolloff_api.core.config import jwt_settings, settings
from scrolloff_api.security.tokens import ROLE_USER
from scrolloff_api.db.session import get_session

from scrolloff_api.db.repositories.admins import AdminRepository
from scrolloff_api.db.repositories.users import UserRepository
from scrolloff_api.db.repositories.stories import StoryRepository
from scrolloff_api.db.repositories.tips import TipRepository
from scrolloff_api.db.repositories.resources import ResourceRepository
from scrolloff_api.db.repositories.challenges import ChallengeRepository
from scrolloff_api.db.repositories.results import ResultRepository

from scrolloff_api.features.authentication.services import AuthService, Identity
from scrolloff_api.features.admins.services import AdminService
from scrolloff_api.features.users.services import UserService
from scrolloff_api.features.stories.services import StoryService
from scrolloff_api.features.tips.services import TipService
from scrolloff_api.features.resources.services import ResourceService
from scrolloff_api.features.challenges.services import ChallengeService
from scrolloff_api.features.statistics.services import StatisticsService
from scrolloff_api.features.quiz.services import QuizService

logger = logging.getLogger(__name__)


# -----------------------------
# Repositories
# -----------------------------
def get_admin_repository(session: Session = Depends(get_session)) -> AdminRepository:
    return AdminRepository(session)

def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_story_repository(session: Session = Depends(get_session)) -> StoryRepository:
    return StoryRepository(session)

def get_result_repository(session: Session = Depends(get_session)) -> ResultRepository:
    return ResultRepository(session)

def get_challenge_repository(session: Session = Depends(get_session)) -> ChallengeRepository:
    return ChallengeRepository(session)


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    admin_repo: AdminRepository = Depends(get_admin_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(admin_repo=admin_repo, user_repo=user_repo, jwt_settings=jwt_settings)


# -----------------------------
# Services
# -----------------------------
def get_admin_service(repo: AdminRepository = Depends(get_admin_repository)) -> AdminService:
    return AdminService(repo)

def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)

def get_story_service(repo: StoryRepository = Depends(get_story_repository)) -> StoryService:
    return StoryService(repo)

def get_tip_service(session: Session = Depends(get_session)) -> TipService:
    return TipService(TipRepository(session))

def get_resource_service(session: Session = Depends(get_session)) -> ResourceService:
    return ResourceService(ResourceRepository(session))

def get_challenge_service(repo: ChallengeRepository = Depends(get_challenge_repository)) -> ChallengeService:
    return ChallengeService(repo)

def get_statistics_service(
    session: Session = Depends(get_session),
    user_repo: UserRepository = Depends(get_user_repository),
    result_repo: ResultRepository = Depends(get_result_repository),
    story_repo: StoryRepository = Depends(get_story_repository),
    challenge_repo: ChallengeRepository = Depends(get_challenge_repository),
) -> StatisticsService:
    return StatisticsService(
        session=session,
        user_repo=user_repo,
        result_repo=result_repo,
        story_repo=story_repo,
        challenge_repo=challenge_repo,
    )

def get_quiz_service(result_repo: ResultRepository = Depends(get_result_repository)) -> QuizService:
    return QuizService(questions_path=settings.QUIZ_QUESTIONS_PATH, result_repo=result_repo)


# -----------------------------
# Authentication data
# -----------------------------
bearer_scheme = HTTPBearer(auto_error=False)

def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Optional[str]:
    """
    Token envoyé par le client : `Authorization: Bearer <token>`,
    ou le token brut dans Authorization / x-access-token.
    """
    if credentials and credentials.credentials:
        return credentials.credentials
    raw = request.headers.get("Authorization") or request.headers.get("x-access-token")
    if not raw:
        return None
    raw = raw.strip()
    if raw.lower() == "bearer":
        return None
    if raw.lower().startswith("bearer "):
        raw = raw[7:].strip()
    return raw or None


def require_admin(
    request: Request,
    token: Optional[str] = Depends(get_token),
    auth_svc: AuthService = Depends(get_auth_service),
) -> Identity:
    """
    Garde des routes /api/admin/* : 401 si token absent, expiré ou invalide ; 403 pour un token utilisateur.
    L'identifiant de l'admin est aussi posé sur request.state.admin_id.
    """
    identity = auth_svc.authenticate_admin(token)
    request.state.admin_id = identity.id
    return identity


def get_optional_user_id(
    token: Optional[str] = Depends(get_token),
    auth_svc: AuthService = Depends(get_auth_service),
) -> Optional[int]:
    """
    Id de l'utilisateur connecté si un token utilisateur valide est fourni, sinon None.
    Un token expiré ou invalide n'empêche pas l'action anonyme.
    """
    if not token:
        return None
    try:
        identity = auth_svc.authenticate(token)
    except HTTPException as e:
        logger.warning("Ignoring unusable token on public route: %s", e.detail)
        return None
    return identity.id if identity.role == ROLE_USER else None
