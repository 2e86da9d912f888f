from gemstore.modules.categories.service import slugify


def test_slugify():
    assert slugify("  Rare Gems & Minerals! ") == "rare-gems-minerals"


def test_list_categories_active_by_sort_order(client, fake_db):
    fake_db.seed(
        "categories",
        {"name": "B", "slug": "b", "sort_order": 2, "is_active": True},
        {"name": "A", "slug": "a", "sort_order": 1, "is_active": True},
        {"name": "Hidden", "slug": "hidden", "sort_order": 0, "is_active": False},
    )

    names = [c["name"] for c in client.get("/api/categories").json()["categories"]]
    assert names == ["A", "B"]

    all_names = [c["name"] for c in client.get("/api/categories?include_inactive=true").json()["categories"]]
    assert all_names == ["Hidden", "A", "B"]


def test_get_category_by_id_or_slug(client, fake_db):
    category = fake_db.seed("categories", {
        "id": "0b6c6f38-3f53-4d8e-9a57-1b2f0b7b2f11", "name": "Ammolite", "slug": "ammolite", "is_active": True,
    })

    assert client.get(f"/api/categories/{category['id']}").json()["category"]["name"] == "Ammolite"
    assert client.get("/api/categories/ammolite").json()["category"]["id"] == category["id"]
    assert client.get("/api/categories/unknown").status_code == 404


def test_create_category(client, fake_db, admin_headers):
    response = client.post("/api/categories", json={"name": " Blue Jay Sapphire "}, headers=admin_headers)

    assert response.status_code == 201
    category = response.json()["category"]
    assert category["name"] == "Blue Jay Sapphire"
    assert category["slug"] == "blue-jay-sapphire"

    duplicate = client.post("/api/categories", json={"name": "Blue Jay Sapphire"}, headers=admin_headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "A category with this name already exists"


def test_create_category_requires_name(client, admin_headers):
    response = client.post("/api/categories", json={"description": "x"}, headers=admin_headers)
    assert response.status_code == 400


def test_update_category(client, fake_db, admin_headers):
    category = fake_db.seed("categories", {"name": "Old", "slug": "old", "is_active": True})

    response = client.put(
        f"/api/categories/{category['id']}", json={"name": "New Name", "is_active": False}, headers=admin_headers
    )

    assert response.status_code == 200
    assert fake_db.tables["categories"][0]["slug"] == "new-name"
    assert fake_db.tables["categories"][0]["is_active"] is False
    assert client.put("/api/categories/nope", json={"name": "X"}, headers=admin_headers).status_code == 404


def test_delete_category_in_use(client, fake_db, product, admin_headers):
    category = fake_db.seed("categories", {"name": "Peridot", "slug": "peridot", "is_active": True})
    fake_db.seed("product_categories", {"product_id": product["id"], "category_id": category["id"]})

    response = client.delete(f"/api/categories/{category['id']}", headers=admin_headers)
    assert response.status_code == 409

    fake_db.tables["product_categories"].clear()
    assert client.delete(f"/api/categories/{category['id']}", headers=admin_headers).status_code == 200
    assert fake_db.tables["categories"] == []


def test_category_products_paginated(client, fake_db):
    category = fake_db.seed("categories", {"name": "Peridot", "slug": "peridot", "is_active": True})
    products = fake_db.seed(
        "products",
        *[{"name": f"Stone {i}", "price": 10.0 + i, "inventory": i, "is_active": True} for i in range(3)]
    )
    for p in products:
        fake_db.seed("product_categories", {"product_id": p["id"], "category_id": category["id"]})

    body = client.get("/api/categories/peridot/products?page=2&limit=2").json()

    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}
    assert len(body["products"]) == 1
    assert body["products"][0]["originalPrice"] == body["products"][0]["price"]
    assert body["products"][0]["stock"] == 2
