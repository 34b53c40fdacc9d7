from datetime import datetime, timedelta, timezone

from sqlmodel import select

from scrolloff_api.core.config import jwt_settings
from scrolloff_api.db.models.admins import Admin
from scrolloff_api.security.password import is_legacy_hash
from scrolloff_api.security.tokens import ROLE_ADMIN, JWTSettings, create_access_token, decode_token


# -----------------------------
# Admin login
# -----------------------------
def test_admin_login_returns_token_for_admin(client, admin):
    r = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    body = r.json()
    assert body["admin"] == {"id": admin.id, "username": "admin"}

    decoded = decode_token(body["token"], jwt_settings)
    assert decoded["id"] == admin.id
    assert decoded["role"] == ROLE_ADMIN
    assert decoded["username"] == "admin"


def test_admin_login_wrong_password(client, admin):
    r = client.post("/api/admin/login", json={"username": "admin", "password": "nope"})
    assert r.status_code == 401


def test_admin_login_unknown_username(client):
    r = client.post("/api/admin/login", json={"username": "ghost", "password": "x"})
    assert r.status_code == 401


def test_admin_login_missing_fields(client):
    r = client.post("/api/admin/login", json={"username": "admin"})
    assert r.status_code == 400


def test_legacy_plaintext_password_is_rehashed_on_login(client, session):
    session.add(Admin(username="legacy", mot_de_passe="plain-secret"))
    session.commit()

    r = client.post("/api/admin/login", json={"username": "legacy", "password": "plain-secret"})
    assert r.status_code == 200

    stored = session.exec(select(Admin).where(Admin.username == "legacy")).one()
    session.refresh(stored)
    assert not is_legacy_hash(stored.mot_de_passe)

    # le nouveau hash fonctionne toujours
    r = client.post("/api/admin/login", json={"username": "legacy", "password": "plain-secret"})
    assert r.status_code == 200


# -----------------------------
# Token check on /api/admin/*
# -----------------------------
def test_admin_route_without_token(client):
    r = client.get("/api/admin/tips")
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_missing"


def test_admin_route_with_garbage_token(client):
    r = client.get("/api/admin/tips", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_invalid"


def test_admin_route_with_expired_token(client, admin):
    token = create_access_token(
        identity_id=admin.id,
        role=ROLE_ADMIN,
        settings=jwt_settings,
        now=datetime.now(timezone.utc) - timedelta(days=31),
    )
    r = client.get("/api/admin/tips", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_expired"


def test_admin_route_with_token_signed_by_other_secret(client, admin):
    token = create_access_token(identity_id=admin.id, role=ROLE_ADMIN, settings=JWTSettings(secret="other"))
    r = client.get("/api/admin/tips", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_invalid"


def test_admin_route_accepts_raw_token_headers(client, admin_token):
    assert client.get("/api/admin/tips", headers={"Authorization": admin_token}).status_code == 200
    assert client.get("/api/admin/tips", headers={"x-access-token": admin_token}).status_code == 200


def test_admin_route_rejects_user_token(client, user_headers):
    r = client.get("/api/admin/tips", headers=user_headers)
    assert r.status_code == 403


def test_token_without_role_with_username_is_admin(client, admin):
    token = create_access_token(
        identity_id=admin.id, role=ROLE_ADMIN, claims={"username": "admin", "role": None}, settings=jwt_settings
    )
    r = client.get("/api/admin/tips", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200


# -----------------------------
# Users : register / login / me
# -----------------------------
def test_ping(client):
    assert client.get("/api/auth/ping").json() == {"ok": True}


def test_register_then_login_then_me(client):
    r = client.post("/api/auth/register", json={"nom": "Zoe", "email": "zoe@ex.com", "password": "secret1"})
    assert r.status_code == 201
    user_id = r.json()["id"]

    r = client.post("/api/auth/login", json={"email": "zoe@ex.com", "password": "secret1"})
    assert r.status_code == 200
    token = r.json()["token"]
    assert r.json()["user"] == {"id": user_id, "nom": "Zoe", "email": "zoe@ex.com"}

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["email"] == "zoe@ex.com"


def test_register_duplicate_email(client, user):
    r = client.post("/api/auth/register", json={"nom": "Other", "email": user.email, "password": "x1"})
    assert r.status_code == 409


def test_register_invalid_email(client):
    r = client.post("/api/auth/register", json={"nom": "Bad", "email": "not-an-email", "password": "x1"})
    assert r.status_code == 400


def test_user_login_wrong_password(client, user):
    r = client.post("/api/auth/login", json={"email": user.email, "password": "wrong"})
    assert r.status_code == 401


def test_me_without_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_missing"


def test_empty_bearer_is_missing_token(client):
    r = client.get("/api/admin/tips", headers={"Authorization": "Bearer "})
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "token_missing"
