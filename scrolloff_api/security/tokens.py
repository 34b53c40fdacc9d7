"""
➡️ But : émettre et vérifier les tokens d'accès ScrollOff (JWT HS256, 30 jours).

Un même format sert aux deux populations :
- admin : claim `role="admin"` + `username`
- utilisateur du site : claim `role="user"` + `email`
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, TypedDict

from jose import jwt

ROLE_ADMIN = "admin"
ROLE_USER = "user"


@dataclass(frozen=True)
class JWTSettings:
    """Secret de signature, émetteur (`iss`), algorithme et durée de vie des tokens."""
    secret: str
    issuer: str = "scrolloff-api"
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(days=30)


class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # id sous forme de chaîne
    id: int
    role: str           # "admin" | "user"
    username: str
    email: str
    jti: str
    iat: int
    exp: int


def create_access_token(
    *,
    identity_id: int,
    role: str,
    settings: JWTSettings,
    claims: Optional[Dict[str, Any]] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Signe un token portant l'identifiant et le rôle.
    `claims` ajoute des champs libres (username pour un admin, email pour un utilisateur).
    `now` permet de dater le token (tests d'expiration).
    """
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + settings.ttl
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(identity_id),
        "id": identity_id,
        "role": role,
        "jti": str(uuid.uuid4()),
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    payload.update(claims or {})  # type: ignore[typeddict-item]
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Vérifie signature et expiration.
    Lève jose.ExpiredSignatureError si le token est expiré, jose.JWTError pour tout autre défaut.
    """
    return jwt.decode(  # type: ignore[return-value]
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        options={"verify_aud": False},
    )
