import hmac
import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def is_legacy_hash(stored: str | None) -> bool:
    """True si la valeur stockée n'est pas un hash bcrypt (mot de passe en clair hérité)."""
    return not (stored and stored.startswith(BCRYPT_PREFIXES))


def verify_password(password: str, stored: str | None) -> bool:
    """
    Vérifie un mot de passe contre la valeur en base.
    Accepte les hash bcrypt et, à défaut, l'ancien stockage en clair.
    """
    if not stored:
        return False
    if not is_legacy_hash(stored):
        try:
            return pwd_context.verify(password, stored)
        except ValueError:
            logger.warning("Malformed bcrypt hash in database")
            return False
    return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))
