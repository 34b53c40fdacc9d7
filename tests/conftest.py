import os

# Configuration de test : à poser avant tout import de scrolloff_api
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from scrolloff_api.core.config import jwt_settings
from scrolloff_api.db.models.admins import Admin
from scrolloff_api.db.models.users import User
from scrolloff_api.db.session import get_session
from scrolloff_api.main import app
from scrolloff_api.security.password import hash_password
from scrolloff_api.security.tokens import ROLE_ADMIN, ROLE_USER, create_access_token


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def _get_session():
        return session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(session):
    admin = Admin(username="admin", mot_de_passe=hash_password("admin123"))
    session.add(admin)
    session.commit()
    session.refresh(admin)
    return admin


@pytest.fixture
def user(session):
    user = User(nom="Test1", email="t1@ex.com", mot_de_passe=hash_password("password1"))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def admin_token(admin):
    return create_access_token(
        identity_id=admin.id, role=ROLE_ADMIN, claims={"username": admin.username}, settings=jwt_settings
    )


@pytest.fixture
def user_token(user):
    return create_access_token(
        identity_id=user.id, role=ROLE_USER, claims={"email": user.email}, settings=jwt_settings
    )


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def user_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}
