from scrolloff_api.db.models.stories import Story
from scrolloff_api.features.stories.services import display_title


def test_submitted_story_is_pending_and_not_public(client):
    r = client.post("/api/stories", json={"contenu": "I deleted TikTok.", "is_anonymous": True})
    assert r.status_code == 201

    assert client.get("/api/stories").json() == []


def test_approved_story_becomes_public(client, admin_headers):
    story_id = client.post("/api/stories", json={"contenu": "Less scrolling, more sleep."}).json()["id"]

    r = client.patch(f"/api/admin/stories/{story_id}", json={"statut": "approved"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"id": story_id, "message": "Story updated successfully"}

    public = client.get("/api/stories").json()
    assert [s["id"] for s in public] == [story_id]
    assert "statut" not in public[0]

    # aussi servi sans le préfixe /api
    assert client.get("/stories").json() == public


def test_moderation_records_admin(client, admin, admin_headers):
    story_id = client.post("/api/stories", json={"contenu": "Rejected one."}).json()["id"]
    client.patch(f"/api/admin/stories/{story_id}", json={"statut": "rejected"}, headers=admin_headers)

    story = client.get(f"/api/admin/stories/{story_id}", headers=admin_headers).json()
    assert story["statut"] == "rejected"
    assert story["id_admin"] == admin.id


def test_invalid_status_is_rejected(client, admin_headers):
    story_id = client.post("/api/stories", json={"contenu": "Hello"}).json()["id"]
    r = client.patch(f"/api/admin/stories/{story_id}", json={"statut": "published"}, headers=admin_headers)
    assert r.status_code == 400


def test_update_missing_story(client, admin_headers):
    r = client.patch("/api/admin/stories/999", json={"statut": "approved"}, headers=admin_headers)
    assert r.status_code == 404


def test_admin_list_filters_by_status(client, admin_headers):
    client.post("/api/admin/stories", json={"contenu": "A", "statut": "approved"}, headers=admin_headers)
    client.post("/api/admin/stories", json={"contenu": "B"}, headers=admin_headers)

    pending = client.get("/api/admin/stories", params={"statut": "pending"}, headers=admin_headers).json()
    assert [s["contenu"] for s in pending] == ["B"]
    assert len(client.get("/api/admin/stories", headers=admin_headers).json()) == 2


def test_submission_by_logged_in_user_keeps_author(client, user, user_headers, admin_headers):
    story_id = client.post("/api/stories", json={"contenu": "Mine"}, headers=user_headers).json()["id"]
    story = client.get(f"/api/admin/stories/{story_id}", headers=admin_headers).json()
    assert story["id_user"] == user.id


def test_delete_story(client, admin_headers):
    story_id = client.post("/api/stories", json={"contenu": "Bye"}).json()["id"]
    r = client.delete(f"/api/admin/stories/{story_id}", headers=admin_headers)
    assert r.json() == {"message": "Story deleted successfully"}
    assert client.get(f"/api/admin/stories/{story_id}", headers=admin_headers).status_code == 404


def test_display_title_falls_back_to_content():
    long_content = "x" * 100
    assert display_title(Story(titre=None, contenu=long_content)) == "x" * 80 + "..."
    assert display_title(Story(titre=None, contenu="short")) == "short"
    assert display_title(Story(titre="Title", contenu=long_content)) == "Title"
