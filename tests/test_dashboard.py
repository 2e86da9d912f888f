from datetime import datetime, timedelta, timezone

from gemstore.modules.dashboard.service import DashboardService, percent_change, top_selling_product

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def order(days_ago, total, email, items=(), is_test=True, status="confirmed"):
    return {
        "customer_name": "Buyer",
        "customer_email": email,
        "total": total,
        "status": status,
        "is_test_order": is_test,
        "items": list(items),
        "created_at": (NOW - timedelta(days=days_ago)).isoformat(),
    }


def test_percent_change():
    assert percent_change(150, 100) == 50.0
    assert percent_change(1, 3) == -66.7
    assert percent_change(10, 0) == 0


def test_top_selling_product():
    orders = [
        {"items": [{"name": "Ammolite", "quantity": 1}, {"name": "Peridot", "quantity": 2}]},
        {"items": [{"name": "Ammolite", "quantity": 2}]},
    ]
    assert top_selling_product(orders) == "Ammolite"
    assert top_selling_product([]) == "No orders yet"


def test_stats_compare_windows(fake_db):
    fake_db.seed(
        "orders",
        order(1, 200.0, "a@example.com", [{"name": "Ammolite", "quantity": 1}]),
        order(5, 100.0, "b@example.com"),
        order(40, 150.0, "a@example.com"),
        order(2, 999.0, "live@example.com", is_test=False),
        order(3, 50.0, "c@example.com", status="pending"),
    )
    fake_db.seed(
        "products",
        {"name": "Peridot", "inventory": 2, "is_active": True},
        {"name": "Ammolite", "inventory": 20, "is_active": True},
        {"name": "Retired", "inventory": 0, "is_active": False},
    )

    stats = DashboardService(fake_db).get_stats("dev", now=NOW)

    assert stats.total_revenue == 450.0
    assert stats.recent_revenue == 300.0
    assert stats.revenue_change == 100.0
    assert stats.total_orders == 3
    assert stats.recent_orders_count == 2
    assert stats.orders_change == 100.0
    assert stats.total_customers == 2
    assert stats.recent_customers == 2
    assert stats.customers_change == 100.0
    assert stats.total_products == 2
    assert stats.top_product == "Ammolite"
    assert stats.stock_status == "1 low stock"
    assert [p.name for p in stats.low_stock_products] == ["Peridot"]
    assert len(stats.recent_orders) == 3


def test_live_mode_only_counts_live_orders(fake_db):
    fake_db.seed("orders", order(1, 80.0, "a@example.com"), order(1, 120.0, "b@example.com", is_test=False))

    stats = DashboardService(fake_db).get_stats("live", now=NOW)

    assert stats.total_revenue == 120.0
    assert stats.stock_status == "All good"


def test_dashboard_endpoint(client, fake_db, admin_headers):
    assert client.get("/api/admin/dashboard-stats").status_code == 401
    assert client.get("/api/admin/dashboard-stats?mode=staging", headers=admin_headers).status_code == 422

    body = client.get("/api/admin/dashboard-stats?mode=live", headers=admin_headers).json()
    assert body["success"] is True
    assert body["stats"]["totalOrders"] == 0
    assert body["stats"]["topProduct"] == "No orders yet"
