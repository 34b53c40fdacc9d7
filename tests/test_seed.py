from scrolloff_api.db.repositories.stories import StoryRepository
from scrolloff_api.db.seed import DEFAULT_SEED_PATH, seed_all


def test_seed_is_idempotent(session):
    first = seed_all(session, DEFAULT_SEED_PATH)
    assert first["admins"] == 1
    assert first["tips"] == 3

    second = seed_all(session, DEFAULT_SEED_PATH)
    assert set(second.values()) == {0}


def test_seeded_admin_can_log_in(client, session):
    seed_all(session, DEFAULT_SEED_PATH)
    r = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    assert StoryRepository(session).count_by_status("approved") == 1


def test_timestamps_are_timezone_aware(client):
    from scrolloff_api.db.models.base import utcnow

    assert utcnow().tzinfo is not None
    r = client.post("/api/auth/register", json={"nom": "Tz", "email": "tz@ex.com", "password": "pw"})
    assert r.status_code == 201
