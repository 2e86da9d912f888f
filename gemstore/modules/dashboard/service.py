from supabase import Client
from gemstore.modules.dashboard.schemas import DashboardStats, RecentOrder, LowStockProduct
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Dict, Any, Iterable
from datetime import datetime, timedelta, timezone
import logging

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5
RECENT_ORDER_LIMIT = 5
WINDOW = timedelta(days=30)


def percent_change(current: float, previous: float) -> float:
    """Change against the previous window; 0 without a baseline"""
    if previous <= 0:
        return 0
    return round((current - previous) / previous * 100, 1)


def top_selling_product(orders: Iterable[Dict[str, Any]]) -> str:
    quantities: Dict[str, int] = {}
    for order in orders:
        for item in order.get("items") or []:
            name = item.get("name")
            if name:
                quantities[name] = quantities.get(name, 0) + (item.get("quantity") or 1)
    if not quantities:
        return "No orders yet"
    return max(quantities.items(), key=lambda kv: kv[1])[0]


def _created(order: Dict[str, Any]) -> datetime:
    value = order.get("created_at")
    if isinstance(value, datetime):
        created = value
    else:
        created = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _confirmed_orders(self, mode: str) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table("orders")\
                .select("*")\
                .eq("status", "confirmed")\
                .eq("is_test_order", mode != "live")\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch dashboard stats")
        return result.data or []

    def _active_products(self) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table("products")\
                .select("id, name, inventory")\
                .eq("is_active", True)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch dashboard stats")
        return result.data or []

    def get_stats(self, mode: str = "dev", now: Optional[datetime] = None) -> DashboardStats:
        """Revenue, order and customer figures for the last 30 days against the 30 before"""
        now = now or datetime.now(timezone.utc)
        recent_start = now - WINDOW
        previous_start = now - 2 * WINDOW

        orders = self._confirmed_orders(mode)
        recent = [o for o in orders if _created(o) >= recent_start]
        previous = [o for o in orders if previous_start <= _created(o) < recent_start]

        def revenue(rows):
            return round(sum(o.get("total") or 0 for o in rows), 2)

        def customers(rows):
            return len({o.get("customer_email") for o in rows if o.get("customer_email")})

        products = self._active_products()
        low_stock = [
            LowStockProduct(id=p.get("id"), name=p["name"], inventory=p.get("inventory") or 0)
            for p in products if (p.get("inventory") or 0) <= LOW_STOCK_THRESHOLD
        ]

        logger.debug(f"Dashboard stats for {mode}: {len(orders)} confirmed orders")
        return DashboardStats(
            mode=mode,
            total_revenue=revenue(orders),
            recent_revenue=revenue(recent),
            revenue_change=percent_change(revenue(recent), revenue(previous)),
            total_orders=len(orders),
            recent_orders_count=len(recent),
            orders_change=percent_change(len(recent), len(previous)),
            total_customers=customers(orders),
            recent_customers=customers(recent),
            customers_change=percent_change(customers(recent), customers(previous)),
            total_products=len(products),
            top_product=top_selling_product(orders),
            stock_status=f"{len(low_stock)} low stock" if low_stock else "All good",
            low_stock_products=low_stock,
            recent_orders=[RecentOrder(**o) for o in orders[:RECENT_ORDER_LIMIT]],
        )
