from supabase import Client
from gemstore.modules.orders.schemas import (
    OrderCreate, OrderItem, OrderResponse, InsufficientItem
)
from gemstore.modules.orders.classification import is_test_order
from gemstore.config import settings
from typing import List, Dict
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

ORDER_STATUS_CONFIRMED = "confirmed"


class OrderService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _requested_quantities(self, items: List[OrderItem]) -> Dict[str, int]:
        """Sum quantities per product id; lines without an id are not stock-tracked."""
        requested: Dict[str, int] = {}
        for item in items:
            if item.id:
                requested[item.id] = requested.get(item.id, 0) + item.quantity
        return requested

    def check_inventory(self, items: List[OrderItem]) -> List[InsufficientItem]:
        """Return the lines that cannot be fulfilled from current inventory"""
        requested = self._requested_quantities(items)
        if not requested:
            return []
        try:
            result = self.supabase.table("products")\
                .select("id, name, inventory")\
                .in_("id", list(requested.keys()))\
                .execute()
        except Exception as e:
            logger.error(f"Inventory check failed: {e}")
            raise HTTPException(status_code=500, detail="Failed to check inventory")

        stock = {str(p["id"]): p for p in (result.data or [])}
        names = {item.id: item.name for item in items if item.id}
        insufficient = []
        for product_id, quantity in requested.items():
            product = stock.get(product_id)
            available = (product.get("inventory") or 0) if product else 0
            if available < quantity:
                insufficient.append(InsufficientItem(
                    id=product_id,
                    name=(product or {}).get("name") or names.get(product_id),
                    requested=quantity,
                    available=available,
                ))
        return insufficient

    def _build_order_row(self, order_data: OrderCreate, test_order: bool) -> dict:
        customer = order_data.customer_info
        payment = order_data.payment
        totals = order_data.totals
        payment_details = {
            "method": payment.payment_method,
            "payment_id": payment.payment_intent_id or payment.capture_id or payment.transaction_id,
            "amount": totals.total,
            "currency": payment.currency or settings.default_currency,
        }
        if payment.payment_method == "crypto":
            payment_details.update({
                "crypto_type": payment.crypto_type,
                "crypto_amount": payment.crypto_amount,
                "crypto_currency": payment.crypto_currency,
                "wallet_address": payment.wallet_address,
                "network": payment.network,
            })
        created_at = order_data.timestamp or datetime.now(timezone.utc)
        return {
            "customer_email": customer.email,
            "customer_name": f"{customer.first_name} {customer.last_name}".strip(),
            "shipping_address": {
                "address": customer.address,
                "apartment": customer.apartment,
                "city": customer.city,
                "state": customer.state,
                "zipCode": customer.zip_code,
                "country": customer.country,
            },
            "items": [item.model_dump(by_alias=True) for item in order_data.items],
            "payment_details": payment_details,
            "subtotal": totals.subtotal,
            "shipping": totals.shipping,
            "tax": totals.tax,
            "total": totals.total,
            "status": ORDER_STATUS_CONFIRMED,
            "is_test_order": test_order,
            "created_at": created_at.isoformat(),
        }

    def decrement_inventory(self, items: List[OrderItem]) -> None:
        """Best-effort stock decrement, one RPC per line. Failures are logged, never raised."""
        for item in items:
            if not item.id or not item.quantity:
                continue
            try:
                self.supabase.rpc("decrement_inventory", {
                    "p_product_id": item.id,
                    "p_quantity": item.quantity,
                }).execute()
                logger.info(f"Decremented inventory for product {item.id} by {item.quantity}")
            except Exception as e:
                logger.error(f"Error updating inventory for product {item.id}: {e}")

    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """Validate stock, classify, persist the order and reserve inventory"""
        if not order_data.customer_info or not order_data.payment or not order_data.totals:
            logger.error("Missing required order data fields")
            raise HTTPException(status_code=400, detail="Missing required order data")

        insufficient = self.check_inventory(order_data.items)
        if insufficient:
            logger.warning(f"Order rejected, insufficient inventory: {[i.id for i in insufficient]}")
            raise HTTPException(status_code=409, detail={
                "message": "Insufficient inventory",
                "items": [i.model_dump() for i in insufficient],
            })

        test_order = is_test_order(order_data.payment, settings.get_test_currencies())
        logger.info(
            f"Order detection: {'TEST' if test_order else 'LIVE'} order "
            f"for payment method: {order_data.payment.payment_method}"
        )

        try:
            result = self.supabase.table("orders")\
                .insert(self._build_order_row(order_data, test_order))\
                .execute()
        except Exception as e:
            logger.error(f"Database error saving order: {e}")
            raise HTTPException(status_code=500, detail="Failed to save order")

        if not result.data:
            raise HTTPException(status_code=500, detail="Order creation failed - no data returned")

        order = OrderResponse(**result.data[0])
        logger.info(f"Order saved: {order.id}")
        self.decrement_inventory(order_data.items)
        return order

    def list_orders(self, mode: str = "dev", limit: int = 50, offset: int = 0) -> List[OrderResponse]:
        """List orders for the admin dashboard; mode 'live' shows production orders, anything else test orders"""
        try:
            result = self.supabase.table("orders")\
                .select("*")\
                .eq("is_test_order", mode != "live")\
                .order("created_at", desc=True)\
                .range(offset, offset + limit - 1)\
                .execute()
            logger.debug(f"Found {len(result.data or [])} {mode} orders")
            return [OrderResponse(**order) for order in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching orders: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch orders")

    def get_order_by_id(self, order_id: str) -> OrderResponse:
        """Get order by ID"""
        try:
            result = self.supabase.table("orders")\
                .select("*")\
                .eq("id", order_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching order {order_id}: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")
        if not result.data:
            raise HTTPException(status_code=404, detail="Order not found")
        return OrderResponse(**result.data[0])

    def delete_order(self, order_id: str) -> None:
        """Delete a test order. Live orders are permanent."""
        order = self.get_order_by_id(order_id)
        if order.is_test_order is False:
            logger.warning(f"Attempted to delete live order {order_id} - blocked")
            raise HTTPException(status_code=403, detail="Live orders cannot be deleted")
        try:
            self.supabase.table("orders")\
                .delete()\
                .eq("id", order_id)\
                .execute()
        except Exception as e:
            logger.error(f"Database error deleting order {order_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete order")
        logger.info(f"Deleted test order {order_id}")
