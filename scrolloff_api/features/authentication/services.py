import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from jose import ExpiredSignatureError, JWTError

from scrolloff_api.db.repositories.admins import AdminRepository
from scrolloff_api.db.repositories.users import UserRepository
from scrolloff_api.db.models.users import User
from scrolloff_api.security.password import hash_password, is_legacy_hash, verify_password
from scrolloff_api.security.tokens import (
    ROLE_ADMIN,
    ROLE_USER,
    DecodedToken,
    JWTSettings,
    create_access_token,
    decode_token,
)
from scrolloff_api.features.authentication.schemas import (
    AdminIdentityOut,
    AdminLoginIn,
    AdminLoginOut,
    RegisterIn,
    UserIdentityOut,
    UserLoginIn,
    UserLoginOut,
)

logger = logging.getLogger(__name__)

# Codes d'erreur renvoyés avec les 401 pour distinguer les cas côté client
TOKEN_MISSING = "token_missing"
TOKEN_EXPIRED = "token_expired"
TOKEN_INVALID = "token_invalid"


def auth_error(message: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": message, "code": code},
        headers={"WWW-Authenticate": "Bearer"},
    )


@dataclass
class Identity:
    """Identité extraite d'un token valide."""
    id: int
    role: str
    username: Optional[str] = None
    email: Optional[str] = None


class AuthService:
    """
    Service d'authentification : orchestre les repositories + tokens.
    Ne contient pas d'accès SQL direct et lève des HTTPException propres.
    """

    def __init__(
        self,
        *,
        admin_repo: AdminRepository,
        user_repo: UserRepository,
        jwt_settings: JWTSettings,
    ):
        self.admin_repo = admin_repo
        self.user_repo = user_repo
        self.jwt = jwt_settings

    # ---------- Admin login ----------
    def admin_login(self, payload: AdminLoginIn) -> AdminLoginOut:
        admin = self.admin_repo.get_by_username(payload.username)
        if not admin or not verify_password(payload.password, admin.mot_de_passe):
            # Ne pas révéler si le compte existe
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        if is_legacy_hash(admin.mot_de_passe):
            # Mot de passe historique en clair : on le remplace par un hash au passage
            self.admin_repo.update(admin, mot_de_passe=hash_password(payload.password))
            logger.info("Legacy plaintext password re-hashed for admin id=%s", admin.id)

        token = create_access_token(
            identity_id=admin.id,
            role=ROLE_ADMIN,
            claims={"username": admin.username},
            settings=self.jwt,
        )
        return AdminLoginOut(token=token, admin=AdminIdentityOut.model_validate(admin))

    # ---------- User sign up ----------
    def register(self, payload: RegisterIn) -> User:
        if self.user_repo.get_by_email(payload.email):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")
        try:
            return self.user_repo.create(
                nom=payload.nom,
                email=payload.email,
                mot_de_passe=hash_password(payload.password),
            )
        except IntegrityError:
            self.user_repo.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    # ---------- User login ----------
    def user_login(self, payload: UserLoginIn) -> UserLoginOut:
        user = self.user_repo.get_by_email(payload.email)
        if not user or not verify_password(payload.password, user.mot_de_passe):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        token = create_access_token(
            identity_id=user.id,
            role=ROLE_USER,
            claims={"email": user.email},
            settings=self.jwt,
        )
        return UserLoginOut(token=token, user=UserIdentityOut.model_validate(user))

    # ---------- Vérification d'un token ----------
    def authenticate(self, token: Optional[str]) -> Identity:
        if not token or token in ("null", "undefined"):
            raise auth_error("No token provided", TOKEN_MISSING)

        try:
            decoded: DecodedToken = decode_token(token, self.jwt)
        except ExpiredSignatureError:
            logger.warning("Expired token rejected")
            raise auth_error("Token expired or invalid", TOKEN_EXPIRED)
        except JWTError as e:
            logger.warning("Invalid token rejected: %s", e)
            raise auth_error("Token expired or invalid", TOKEN_INVALID)

        identity_id = decoded.get("id", decoded.get("sub"))
        try:
            identity_id = int(identity_id)
        except (TypeError, ValueError):
            raise auth_error("Token expired or invalid", TOKEN_INVALID)

        # Anciens tokens sans rôle : un admin porte un username, un utilisateur un email
        role = decoded.get("role") or (ROLE_ADMIN if "username" in decoded else ROLE_USER)
        return Identity(
            id=identity_id,
            role=role,
            username=decoded.get("username"),
            email=decoded.get("email"),
        )

    def authenticate_admin(self, token: Optional[str]) -> Identity:
        identity = self.authenticate(token)
        if identity.role != ROLE_ADMIN:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin only")
        return identity

    # ---------- Current user depuis un token ----------
    def get_current_user(self, *, access_token: Optional[str]) -> User:
        identity = self.authenticate(access_token)
        if identity.role != ROLE_USER:
            raise auth_error("Token expired or invalid", TOKEN_INVALID)
        user = self.user_repo.get(identity.id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user
