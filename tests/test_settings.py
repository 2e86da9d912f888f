from gemstore.modules.settings.schemas import ShippingSettings


def stored(fake_db, **values):
    fake_db.seed("site_settings", *[{"setting_key": k, "setting_value": v} for k, v in values.items()])


def test_shipping_settings_defaults(client):
    body = client.get("/api/shipping-settings").json()
    assert body == {
        "success": True,
        "settings": {
            "enableShipping": True,
            "internationalShipping": True,
            "singleItemShippingCAD": 18.5,
            "singleItemShippingUSD": 14.5,
            "combinedShippingCAD": 20.0,
            "combinedShippingUSD": 15.5,
            "combinedShippingEnabled": True,
            "combinedShippingThreshold": 2,
        },
    }


def test_shipping_settings_from_database(client, fake_db):
    stored(
        fake_db,
        enable_shipping="false",
        international_shipping="yes",
        single_item_shipping_cad="21.00",
        combined_shipping_usd="not a number",
        combined_shipping_threshold="3",
    )

    settings = client.get("/api/shipping-settings").json()["settings"]

    assert settings["enableShipping"] is False
    # only the literal 'true' counts as enabled
    assert settings["internationalShipping"] is False
    assert settings["singleItemShippingCAD"] == 21.0
    assert settings["combinedShippingUSD"] == 15.5
    assert settings["combinedShippingThreshold"] == 3


def test_shipping_settings_fall_back_on_database_error(client, fake_db):
    fake_db.fail_tables["site_settings"] = True
    body = client.get("/api/shipping-settings").json()
    assert body["success"] is True
    assert body["settings"] == ShippingSettings().model_dump(by_alias=True)


def test_admin_settings_merge_stored_values(client, fake_db, admin_headers):
    stored(fake_db, site_name="Prairie Gems", seo_title="", twitter_image="https://cdn.test/t.png")

    body = client.get("/api/admin/settings", headers=admin_headers).json()

    assert body["siteName"] == "Prairie Gems"
    assert body["seoTitle"] == "Gemsutopia - Premium Gemstone Collection"
    assert body["twitterImage"] == "https://cdn.test/t.png"
    assert body["siteFavicon"] == "/favicon.ico"
    assert body["taxRate"] == 13.0
    assert body["baseCurrency"] == "CAD"
    assert body["supportedCurrencies"] == ["CAD", "USD", "EUR"]


def test_admin_save_settings_upserts_text_values(client, fake_db, admin_headers):
    stored(fake_db, site_name="Old name")

    response = client.post("/api/admin/settings", json={
        "siteName": "New name",
        "seoAuthor": "Owner",
        "combinedShippingEnabled": False,
        "singleItemShippingCAD": 19.75,
        "taxRate": 5,
    }, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["settings"]["siteName"] == "New name"
    assert body["settings"]["combinedShippingEnabled"] is False
    assert body["settings"]["taxRate"] == 13.0

    rows = {r["setting_key"]: r["setting_value"] for r in fake_db.tables["site_settings"]}
    assert rows == {
        "site_name": "New name",
        "seo_author": "Owner",
        "combined_shipping_enabled": "false",
        "single_item_shipping_cad": "19.75",
    }
    [(table, action, payload)] = [w for w in fake_db.writes if w[1] == "upsert"]
    assert all("updated_at" in row for row in payload)

    shipping = client.get("/api/shipping-settings").json()["settings"]
    assert shipping["singleItemShippingCAD"] == 19.75


def test_admin_save_settings_database_error(client, fake_db, admin_headers):
    fake_db.fail_tables["site_settings"] = True
    response = client.post("/api/admin/settings", json={"siteName": "X"}, headers=admin_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to save settings to database"


def test_admin_settings_require_admin(client):
    assert client.get("/api/admin/settings").status_code == 401
    assert client.post("/api/admin/settings", json={}).status_code == 401
