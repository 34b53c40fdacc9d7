"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description des conventions,

déclarer le schéma d'authentification Bearer utilisé par les routes /api/admin.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API ScrollOff : contenus (stories, tips, ressources, challenges) et back-office admin.\n\n"
            "### Conventions\n"
            "- Les routes `/api/admin/*` exigent `Authorization: Bearer <token>` (sauf `/api/admin/login`).\n"
            "- Erreurs : 400 validation, 401 token, 404 introuvable, 409 conflit, 500 base de données.\n"
            "- Pas de pagination côté serveur.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    components = openapi_schema.setdefault("components", {})
    components.setdefault("securitySchemes", {})["bearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    app.openapi_schema = openapi_schema
    return app.openapi_schema
