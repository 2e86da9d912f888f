from gemstore.scripts.seed_site_content import seed_pages
from gemstore.config.page_content_config import DEFAULT_PAGES


def test_admin_list_rejects_unknown_section(client, admin_headers):
    response = client.get("/api/site-content?section=footer", headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid section"


def test_admin_list_requires_admin(client):
    assert client.get("/api/site-content").status_code == 401


def test_admin_list_by_section(client, fake_db, admin_headers):
    fake_db.seed(
        "site_content",
        {"section": "hero", "key": "title", "content_type": "text", "value": "Welcome", "is_active": True},
        {"section": "about", "key": "title", "content_type": "text", "value": "About", "is_active": True},
    )

    body = client.get("/api/site-content?section=hero", headers=admin_headers).json()
    assert [c["value"] for c in body["content"]] == ["Welcome"]


def test_public_content_only_active(client, fake_db):
    fake_db.seed(
        "site_content",
        {"section": "hero", "key": "subtitle", "content_type": "text", "value": "Gems", "is_active": True},
        {"section": "hero", "key": "draft", "content_type": "text", "value": "WIP", "is_active": False},
    )

    body = client.get("/api/site-content-public").json()
    assert body["count"] == 1
    assert body["content"][0]["key"] == "subtitle"


def test_content_crud(client, fake_db, admin_headers):
    missing = client.post("/api/site-content", json={"section": "hero", "key": "title"}, headers=admin_headers)
    assert missing.status_code == 400

    created = client.post("/api/site-content", json={
        "section": "hero", "key": "title", "content_type": "text", "value": "Hello",
    }, headers=admin_headers)
    assert created.status_code == 201
    content_id = created.json()["content"]["id"]

    updated = client.put(f"/api/site-content/{content_id}", json={"value": "Hi"}, headers=admin_headers)
    assert updated.json()["content"]["value"] == "Hi"

    assert client.get(f"/api/site-content/{content_id}").json()["content"]["value"] == "Hi"
    assert client.delete(f"/api/site-content/{content_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/site-content/{content_id}").status_code == 404


def test_page_map_and_fields(client, fake_db, admin_headers):
    created = client.post("/api/admin/pages/content", json={
        "section": "about", "key": "title", "value": "About Us",
    }, headers=admin_headers)
    assert created.status_code == 200
    assert created.json()["content_type"] == "text"

    client.post("/api/admin/pages/content", json={"section": "about", "key": "intro"}, headers=admin_headers)

    assert client.get("/api/pages/about").json() == {"title": "About Us", "intro": ""}

    field_id = created.json()["id"]
    client.put(f"/api/admin/pages/content/{field_id}", json={"value": "Our Story"}, headers=admin_headers)
    rows = client.get("/api/admin/pages/about", headers=admin_headers).json()
    assert [r["value"] for r in rows] == ["Our Story", ""]

    client.delete(f"/api/admin/pages/content/{field_id}", headers=admin_headers)
    assert client.get("/api/pages/about").json() == {"intro": ""}


def test_page_field_requires_section_and_key(client, admin_headers):
    response = client.post("/api/admin/pages/content", json={"value": "x"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Section and key are required"


def test_seed_is_idempotent(fake_db):
    seed_pages(fake_db, ["about"])
    fake_db.tables["site_content"][0]["value"] = "edited"
    seed_pages(fake_db, ["about"])

    rows = fake_db.tables["site_content"]
    assert len(rows) == len(DEFAULT_PAGES["about"])
    assert rows[0]["value"] == DEFAULT_PAGES["about"][0][1]
