"""Tips, ressources et challenges : CRUD admin + listes publiques."""


# -----------------------------
# Tips
# -----------------------------
def test_tip_crud(client, admin, admin_headers):
    r = client.post(
        "/api/admin/tips",
        json={"titre": "Take breaks", "contenu": "Every hour.", "niveau": "LOW"},
        headers=admin_headers,
    )
    assert r.status_code == 201
    tip_id = r.json()["id"]

    tip = client.get(f"/api/admin/tips/{tip_id}", headers=admin_headers).json()
    assert tip["niveau"] == "low"
    assert tip["id_admin"] == admin.id

    r = client.put(
        f"/api/admin/tips/{tip_id}",
        json={"titre": "Take long breaks", "contenu": "Every hour.", "niveau": "medium"},
        headers=admin_headers,
    )
    assert r.json() == {"id": tip_id, "message": "Tip updated successfully"}
    assert client.get(f"/api/admin/tips/{tip_id}", headers=admin_headers).json()["niveau"] == "medium"

    client.delete(f"/api/admin/tips/{tip_id}", headers=admin_headers)
    assert client.get(f"/api/admin/tips/{tip_id}", headers=admin_headers).status_code == 404


def test_tip_invalid_level(client, admin_headers):
    r = client.post("/api/admin/tips", json={"titre": "T", "contenu": "C", "niveau": "extreme"}, headers=admin_headers)
    assert r.status_code == 400


def test_public_tips_filter(client, admin_headers):
    for niveau in ("low", "medium", "high"):
        client.post(
            "/api/admin/tips", json={"titre": f"tip {niveau}", "contenu": "c", "niveau": niveau}, headers=admin_headers
        )

    assert len(client.get("/api/tips").json()) == 3
    assert [t["titre"] for t in client.get("/api/tips", params={"niveau": "high"}).json()] == ["tip high"]
    assert [t["titre"] for t in client.get("/api/tips", params={"risk": "Medium Risk"}).json()] == ["tip medium"]


# -----------------------------
# Resources
# -----------------------------
RESOURCE = {"titre": "Guide", "description": "A guide", "lien": "https://example.com", "type": "Article"}


def test_resource_crud_and_public_filter(client, admin_headers):
    r = client.post("/api/admin/resources", json=RESOURCE, headers=admin_headers)
    assert r.status_code == 201
    resource_id = r.json()["id"]
    client.post("/api/admin/resources", json={**RESOURCE, "titre": "Clip", "type": "Video"}, headers=admin_headers)

    videos = client.get("/api/resources", params={"type": "Video"}).json()
    assert [v["titre"] for v in videos] == ["Clip"]

    r = client.put(f"/api/admin/resources/{resource_id}", json={**RESOURCE, "titre": "Guide v2"}, headers=admin_headers)
    assert r.status_code == 200
    assert client.get(f"/api/admin/resources/{resource_id}", headers=admin_headers).json()["titre"] == "Guide v2"


def test_resource_invalid_type(client, admin_headers):
    r = client.post("/api/admin/resources", json={**RESOURCE, "type": "Podcast"}, headers=admin_headers)
    assert r.status_code == 400


def test_delete_missing_resource_still_succeeds(client, admin_headers):
    r = client.delete("/api/admin/resources/4242", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Resource deleted successfully"}


# -----------------------------
# Challenges
# -----------------------------
CHALLENGE = {"titre": "No phone at dinner", "description": "Leave it.", "niveau": "Beginner", "duree": 7}


def test_challenge_crud_and_public(client, admin_headers):
    challenge_id = client.post("/api/admin/challenges", json=CHALLENGE, headers=admin_headers).json()["id"]

    public = client.get("/api/challenges").json()
    assert public == [{"id": challenge_id, **CHALLENGE}]
    assert client.get(f"/api/challenges/{challenge_id}").json()["duree"] == 7

    client.put(f"/api/admin/challenges/{challenge_id}", json={**CHALLENGE, "duree": 14}, headers=admin_headers)
    assert client.get(f"/api/challenges/{challenge_id}").json()["duree"] == 14

    client.delete(f"/api/admin/challenges/{challenge_id}", headers=admin_headers)
    assert client.get(f"/api/challenges/{challenge_id}").status_code == 404


def test_challenge_duration_must_be_positive(client, admin_headers):
    r = client.post("/api/admin/challenges", json={**CHALLENGE, "duree": 0}, headers=admin_headers)
    assert r.status_code == 400


# -----------------------------
# Listes publiques sans préfixe /api
# -----------------------------
def test_public_lists_without_api_prefix(client, admin_headers):
    client.post("/api/admin/tips", json={"titre": "T", "contenu": "C", "niveau": "low"}, headers=admin_headers)
    client.post("/api/admin/resources", json=RESOURCE, headers=admin_headers)
    client.post("/api/admin/challenges", json=CHALLENGE, headers=admin_headers)

    for path in ("/tips", "/resources", "/challenges"):
        r = client.get(path)
        assert r.status_code == 200
        assert len(r.json()) == 1
        assert r.json() == client.get(f"/api{path}").json()
