from fastapi import APIRouter, Depends, status

from scrolloff_api.api.v1.dependencies import get_auth_service, get_token
from scrolloff_api.features.authentication.services import AuthService
from scrolloff_api.features.authentication.schemas import (
    AdminLoginIn,
    AdminLoginOut,
    RegisterIn,
    RegisterOut,
    UserIdentityOut,
    UserLoginIn,
    UserLoginOut,
)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)

# Login admin : seule route /admin accessible sans token
admin_router = APIRouter(prefix="/admin", tags=["auth"])

# -----------------------------
# Ping
# -----------------------------
@router.get("/ping", summary="Vérifier la disponibilité des routes d'auth")
def ping():
    return {"ok": True}

# -----------------------------
# Admin login
# -----------------------------
@admin_router.post(
    "/login",
    summary="Connexion admin",
    description="Retourne un token JWT (30 jours). Accepte les mots de passe hashés et les anciens mots de passe en clair.",
    response_model=AdminLoginOut,
    responses={401: {"description": "Identifiants invalides"}},
)
def admin_login(payload: AdminLoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.admin_login(payload)

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterOut,
    responses={409: {"description": "Email déjà utilisé"}},
)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    user = svc.register(payload)
    return RegisterOut(message="User registered successfully", id=user.id)

# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/login",
    summary="Connexion utilisateur",
    response_model=UserLoginOut,
    responses={401: {"description": "Identifiants invalides"}},
)
def login(payload: UserLoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.user_login(payload)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserIdentityOut,
    responses={
        401: {"description": "Token invalide ou expiré"},
        404: {"description": "Utilisateur introuvable"},
    },
)
def me(token=Depends(get_token), svc: AuthService = Depends(get_auth_service)):
    return svc.get_current_user(access_token=token)
