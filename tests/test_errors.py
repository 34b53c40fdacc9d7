import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from scrolloff_api.api.v1.dependencies import get_tip_service
from scrolloff_api.core.config import settings
from scrolloff_api.main import app


@pytest.fixture
def failing_client(client):
    """Client qui renvoie les 500 au lieu de relancer l'exception côté test."""
    def _broken_service():
        raise RuntimeError("boom")

    app.dependency_overrides[get_tip_service] = _broken_service
    return TestClient(app, raise_server_exceptions=False)


def test_database_error_exposes_message_outside_prod(client, session):
    session.connection().execute(text("DROP TABLE tips"))
    session.commit()

    r = client.get("/api/tips")
    assert r.status_code == 500
    assert r.json()["detail"] == "Database error"
    assert "tips" in r.json()["error"]


def test_database_error_hides_message_when_disabled(client, session, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAILS", False)
    session.connection().execute(text("DROP TABLE tips"))
    session.commit()

    r = client.get("/api/tips")
    assert r.status_code == 500
    assert r.json() == {"detail": "Database error"}


def test_unhandled_error_returns_500(failing_client):
    r = failing_client.get("/api/tips")
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}


def test_failed_request_is_still_logged(failing_client, caplog):
    with caplog.at_level(logging.INFO, logger="scrolloff_api.requests"):
        failing_client.get("/api/tips")
    assert "GET /api/tips -> 500" in caplog.text


def test_unknown_route_is_404(client):
    assert client.get("/api/nope").status_code == 404
