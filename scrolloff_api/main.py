"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (le front Angular envoie le header Authorization)

logs des requêtes et gestion homogène des erreurs

schéma OpenAPI personnalisé

Inclut les routers sous /api (les listes publiques restent aussi servies sans préfixe).

Crée les tables manquantes au démarrage (@app.on_event("startup")).

Point unique d’exécution : uvicorn scrolloff_api.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from scrolloff_api.core.config import settings
from scrolloff_api.core.errors import register_exception_handlers
from scrolloff_api.core.logs import configure_logging, log_requests
from scrolloff_api.core.openapi import custom_openapi
from scrolloff_api.db.session import init_db

from scrolloff_api.api.v1.routers import (
    admins,
    authentication,
    challenges,
    quiz,
    resources,
    statistics,
    stories,
    tips,
    users,
)

import uvicorn

API_PREFIX = "/api"

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    openapi_tags=[
        {"name": "auth", "description": "Connexion admin / utilisateur, inscription"},
        {"name": "public", "description": "Contenus publics du site (sans token)"},
        {"name": "quiz", "description": "Questionnaire et calcul du niveau de risque"},
        {"name": "statistics", "description": "Dashboard et statistiques des résultats"},
        {"name": "admins", "description": "Comptes du back-office"},
        {"name": "users", "description": "Utilisateurs du site"},
        {"name": "stories", "description": "Modération des stories"},
        {"name": "tips", "description": "Gestion des tips"},
        {"name": "resources", "description": "Gestion des ressources"},
        {"name": "challenges", "description": "Gestion des challenges"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["Content-Type", "Authorization", "x-access-token"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# Routers
app.include_router(authentication.router, prefix=API_PREFIX)
app.include_router(authentication.admin_router, prefix=API_PREFIX)

for module in (admins, users, stories, tips, resources, challenges, statistics):
    app.include_router(module.router, prefix=API_PREFIX)

PUBLIC_ROUTERS = (
    stories.public_router,
    tips.public_router,
    resources.public_router,
    challenges.public_router,
    statistics.public_router,
    quiz.public_router,
)
for public_router in PUBLIC_ROUTERS:
    app.include_router(public_router, prefix=API_PREFIX)

# Compatibilité : listes publiques sans préfixe (/stories, /tips, /resources, /challenges)
for public_router in PUBLIC_ROUTERS[:4]:
    app.include_router(public_router, include_in_schema=False)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)


@app.get("/", include_in_schema=False, response_class=PlainTextResponse)
def root():
    return "API ScrollOff is working"

# Démarrage
@app.on_event("startup")
def on_startup():
    try:
        init_db()
    except SQLAlchemyError:
        # Le serveur reste disponible ; les routes renverront 500 tant que la base est injoignable
        logger.exception("Database initialization failed")
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    uvicorn.run("scrolloff_api.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))
