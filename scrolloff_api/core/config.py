"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, base MySQL, secret JWT, logs...).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from scrolloff_api.core.config import settings
print(settings.APP_NAME)

🔹 Variables principales : DB_HOST / DB_USER / DB_PASSWORD / DB_NAME, JWT_SECRET, PORT.
"""

from datetime import timedelta
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings
from scrolloff_api.security.tokens import JWTSettings

DEFAULT_QUIZ_PATH = Path(__file__).resolve().parent.parent / "features" / "quiz" / "quiz_questions.yaml"


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "ScrollOff API"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    # DATABASE_URL a la priorité ; sinon MySQL si DB_HOST est défini ; sinon SQLite local.
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "scrolloff"
    SQLITE_PATH: str = "scrolloff.db"

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET: str = "scrolloff-secret-key-change-in-production"  # ⚠️ change en prod
    JWT_ISSUER: str = "scrolloff-api"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_DAYS: int = 30

    # -----------------------------
    # Erreurs
    # -----------------------------
    # Renvoie le message SQL au client (auto selon ENV si None)
    EXPOSE_ERROR_DETAILS: Optional[bool] = None

    # -----------------------------
    # Quiz
    # -----------------------------
    QUIZ_QUESTIONS_PATH: str = str(DEFAULT_QUIZ_PATH)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context):  # appelée automatiquement
        if not self.DATABASE_URL:
            if self.DB_HOST:
                url = (
                    f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                    f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
                )
            else:
                url = f"sqlite:///{self.SQLITE_PATH}"
            object.__setattr__(self, "DATABASE_URL", url)

        if self.EXPOSE_ERROR_DETAILS is None:
            object.__setattr__(self, "EXPOSE_ERROR_DETAILS", self.ENV != "prod")


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    ttl=timedelta(days=settings.TOKEN_TTL_DAYS),
)
