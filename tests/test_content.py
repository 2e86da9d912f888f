from gemstore.modules.content.service import DEFAULT_GEM_FACT


def test_public_faq_lists_active_in_order(client, fake_db):
    fake_db.seed(
        "faq",
        {"question": "Second?", "answer": "B", "sort_order": 2, "is_active": True},
        {"question": "First?", "answer": "A", "sort_order": 1, "is_active": True},
        {"question": "Hidden?", "answer": "C", "sort_order": 0, "is_active": False},
    )

    assert [f["question"] for f in client.get("/api/faq").json()] == ["First?", "Second?"]


def test_admin_faq_crud(client, fake_db, admin_headers):
    assert client.post("/api/admin/faq", json={"question": "Q?"}, headers=admin_headers).status_code == 400

    created = client.post("/api/admin/faq", json={"question": "Q?", "answer": "A."}, headers=admin_headers)
    assert created.status_code == 200
    faq_id = created.json()["id"]

    missing_id = client.put("/api/admin/faq", json={"answer": "B."}, headers=admin_headers)
    assert missing_id.status_code == 400
    assert missing_id.json()["detail"] == "Missing FAQ ID"

    updated = client.put("/api/admin/faq", json={"id": faq_id, "answer": "B."}, headers=admin_headers)
    assert updated.json()["answer"] == "B."
    assert updated.json()["question"] == "Q?"

    assert client.delete("/api/admin/faq", headers=admin_headers).status_code == 400
    assert client.delete(f"/api/admin/faq?id={faq_id}", headers=admin_headers).json() == {"success": True}
    assert fake_db.tables["faq"] == []


def test_admin_updates_only_send_provided_columns(client, fake_db, admin_headers):
    faq = fake_db.seed("faq", {"question": "Q?", "answer": "A.", "sort_order": 0, "is_active": True})
    stat = fake_db.seed("stats", {"title": "Sold", "value": "10", "is_active": True})
    fact = fake_db.seed("gem_facts", {"fact": "Old fact", "is_active": True})

    client.put("/api/admin/faq", json={"id": faq["id"], "answer": "B."}, headers=admin_headers)
    client.put("/api/admin/stats", json={"id": stat["id"], "value": "20"}, headers=admin_headers)
    client.put("/api/admin/gem-facts", json={"id": fact["id"], "is_active": False}, headers=admin_headers)

    updates = {table: payload for table, action, payload in fake_db.writes if action == "update"}
    assert updates == {
        "faq": {"answer": "B."},
        "stats": {"value": "20"},
        "gem_facts": {"is_active": False},
    }


def test_admin_faq_requires_admin(client):
    assert client.get("/api/admin/faq").status_code == 401


def test_stats_default_data_source(client, admin_headers):
    created = client.post("/api/admin/stats", json={"title": "Gems sold", "value": "1,200+"}, headers=admin_headers)
    assert created.json()["data_source"] == "manual"
    assert client.get("/api/stats").json()[0]["title"] == "Gems sold"


def test_gem_fact_default_when_empty(client):
    assert client.get("/api/gem-facts").json()["fact"] == DEFAULT_GEM_FACT["fact"]


def test_gem_fact_random_active(client, fake_db):
    fake_db.seed(
        "gem_facts",
        {"fact": "Ammolite is fossilised shell.", "is_active": True},
        {"fact": "Inactive fact.", "is_active": False},
    )
    assert client.get("/api/gem-facts").json()["fact"] == "Ammolite is fossilised shell."


def test_admin_gem_facts_newest_first(client, fake_db, admin_headers):
    fake_db.seed("gem_facts", {"fact": "old", "is_active": True}, {"fact": "new", "is_active": False})
    facts = client.get("/api/admin/gem-facts", headers=admin_headers).json()
    assert [f["fact"] for f in facts] == ["new", "old"]
