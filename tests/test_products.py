import re


def test_list_products_hides_invisible_and_resolves_category(client, fake_db, product):
    fake_db.seed("products", {
        "name": "Hidden Ammolite", "price": 80.0, "inventory": 1, "is_active": True,
        "metadata": {"frontend_visible": False},
    })
    category = fake_db.seed("categories", {"name": "Peridot", "slug": "peridot", "is_active": True, "sort_order": 0})
    fake_db.seed("product_categories", {"product_id": product["id"], "category_id": category["id"]})

    body = client.get("/api/products").json()

    assert body["count"] == 1
    assert body["products"][0]["name"] == "Alberta Peridot"
    assert body["products"][0]["category"] == "Peridot"
    assert body["products"][0]["stock"] == 3


def test_uncategorized_products(client, product):
    body = client.get("/api/products").json()
    assert body["products"][0]["category"] == "Uncategorized"


def test_include_inactive_requires_admin(client, fake_db, admin_headers):
    fake_db.seed("products", {"name": "Hidden", "price": 1.0, "metadata": {"frontend_visible": False}})

    assert client.get("/api/products?includeInactive=true").status_code == 401
    body = client.get("/api/products?includeInactive=true", headers=admin_headers).json()
    assert body["count"] == 1


def test_create_product_generates_sku(client, fake_db, admin_headers):
    response = client.post("/api/products", json={"name": "Blue Jay Sapphire", "price": 450}, headers=admin_headers)

    assert response.status_code == 201
    product = response.json()["product"]
    assert re.match(r"^PROD-\d+-[A-Z0-9]{6}$", product["sku"])
    assert product["metadata"]["featured_image_index"] == 0


def test_create_product_validations(client, admin_headers):
    missing = client.post("/api/products", json={"name": "No price"}, headers=admin_headers)
    assert missing.status_code == 400
    assert missing.json()["detail"] == "Name and price are required"

    too_expensive = client.post("/api/products", json={"name": "X", "price": 100000}, headers=admin_headers)
    assert too_expensive.status_code == 400
    assert too_expensive.json()["detail"] == "Price must be less than $99,999.99"

    too_heavy = client.post("/api/products", json={"name": "X", "price": 10, "weight": 100000}, headers=admin_headers)
    assert too_heavy.status_code == 400


def test_create_product_requires_admin(client):
    assert client.post("/api/products", json={"name": "X", "price": 1}).status_code == 401


def test_update_merges_metadata(client, fake_db, product, admin_headers):
    fake_db.tables["products"][0]["metadata"] = {"view_count": 7}

    response = client.put(
        f"/api/products/{product['id']}",
        json={"price": 99.5, "frontend_visible": False},
        headers=admin_headers,
    )

    assert response.status_code == 200
    stored = fake_db.tables["products"][0]
    assert stored["price"] == 99.5
    assert stored["metadata"] == {"view_count": 7, "frontend_visible": False}
    assert stored["name"] == "Alberta Peridot"


def test_update_missing_product(client, admin_headers):
    assert client.put("/api/products/nope", json={"price": 1}, headers=admin_headers).status_code == 404


def test_soft_and_permanent_delete(client, fake_db, product, admin_headers):
    soft = client.delete(f"/api/products/{product['id']}", headers=admin_headers)
    assert soft.json()["message"] == "Product deactivated"
    assert fake_db.tables["products"][0]["is_active"] is False

    hard = client.delete(f"/api/products/{product['id']}?permanent=true", headers=admin_headers)
    assert hard.status_code == 200
    assert fake_db.tables["products"] == []


def test_record_view(client, fake_db, product):
    client.post(f"/api/products/{product['id']}/view")
    response = client.post(f"/api/products/{product['id']}/view")

    assert response.json()["view_count"] == 2
    assert fake_db.tables["products"][0]["metadata"]["view_count"] == 2


def test_assign_and_clear_categories(client, fake_db, product, admin_headers):
    first, second = fake_db.seed(
        "categories",
        {"name": "Peridot", "slug": "peridot", "is_active": True},
        {"name": "Alberta", "slug": "alberta", "is_active": True},
    )

    response = client.post(
        f"/api/products/{product['id']}/categories",
        json={"category_ids": [first["id"], second["id"]]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert len(response.json()["assignments"]) == 2

    names = {c["name"] for c in client.get(f"/api/products/{product['id']}/categories").json()["categories"]}
    assert names == {"Peridot", "Alberta"}

    client.delete(f"/api/products/{product['id']}/categories", headers=admin_headers)
    assert fake_db.tables["product_categories"] == []


def test_assign_unknown_category(client, product, admin_headers):
    response = client.post(
        f"/api/products/{product['id']}/categories",
        json={"category_ids": ["missing"]},
        headers=admin_headers,
    )
    assert response.status_code == 404
