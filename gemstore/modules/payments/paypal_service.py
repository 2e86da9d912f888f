import httpx
from gemstore.modules.payments.schemas import (
    PayPalOrderRequest, PayPalOrderResponse, PayPalCaptureResponse
)
from gemstore.config import settings
from fastapi import HTTPException
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class PayPalError(Exception):
    pass


class PayPalService:
    """PayPal Orders v2 over REST. Pass ``http_client`` to reuse a client (tests use a MockTransport)."""

    def __init__(self, http_client: Optional[httpx.Client] = None):
        self.http_client = http_client

    def _post(self, client: httpx.Client, path: str, **kwargs) -> Dict[str, Any]:
        response = client.post(f"{settings.paypal_api_base}{path}", **kwargs)
        if response.is_error:
            raise PayPalError(f"{path} returned {response.status_code}: {response.text}")
        return response.json()

    def _access_token(self, client: httpx.Client) -> str:
        if not settings.paypal_client_id or not settings.paypal_client_secret:
            raise HTTPException(status_code=500, detail="PayPal credentials not configured")
        data = self._post(
            client,
            "/v1/oauth2/token",
            auth=(settings.paypal_client_id, settings.paypal_client_secret),
            data={"grant_type": "client_credentials"},
        )
        return data["access_token"]

    def _call(self, fn):
        if self.http_client is not None:
            return fn(self.http_client)
        with httpx.Client(timeout=15.0) as client:
            return fn(client)

    def create_order(self, request: PayPalOrderRequest) -> PayPalOrderResponse:
        """Create a CAPTURE order for the given amount"""
        if not request.amount or request.amount <= 0:
            raise HTTPException(status_code=400, detail="Valid amount is required")

        value = f"{request.amount:.2f}"
        order_data = {
            "intent": "CAPTURE",
            "purchase_units": [{
                "amount": {
                    "currency_code": request.currency,
                    "value": value,
                    "breakdown": {"item_total": {"currency_code": request.currency, "value": value}},
                },
                "items": [
                    {
                        "name": item.name or "Item",
                        "quantity": str(item.quantity or 1),
                        "unit_amount": {"currency_code": request.currency, "value": f"{item.price:.2f}"},
                    }
                    for item in request.items
                ],
            }],
            "application_context": {
                "return_url": f"{settings.public_base_url}/checkout/success",
                "cancel_url": f"{settings.public_base_url}/checkout/cancel",
                "shipping_preference": "NO_SHIPPING",
                "user_action": "PAY_NOW",
            },
        }

        def create(client):
            token = self._access_token(client)
            return self._post(
                client, "/v2/checkout/orders",
                json=order_data, headers={"Authorization": f"Bearer {token}"},
            )

        try:
            order = self._call(create)
        except (PayPalError, httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"PayPal order creation failed: {e}")
            raise HTTPException(status_code=500, detail="Failed to create PayPal order")
        logger.info(f"Created PayPal order {order['id']} for {value} {request.currency}")
        return PayPalOrderResponse(order_id=order["id"])

    def capture_order(self, order_id: Optional[str]) -> PayPalCaptureResponse:
        """Capture an approved order"""
        if not order_id:
            raise HTTPException(status_code=400, detail="Order ID is required")

        def capture(client):
            token = self._access_token(client)
            return self._post(
                client, f"/v2/checkout/orders/{order_id}/capture",
                headers={"Authorization": f"Bearer {token}", "Content-Type": "application/json"},
            )

        try:
            data = self._call(capture)
        except (PayPalError, httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"PayPal capture failed for {order_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to capture PayPal payment")

        units = data.get("purchase_units") or [{}]
        captures = (units[0].get("payments") or {}).get("captures") or [{}]
        amount = captures[0].get("amount") or {}
        logger.info(f"Captured PayPal order {order_id}: {data.get('status')}")
        return PayPalCaptureResponse(
            capture_id=data.get("id"),
            status=data.get("status"),
            amount=float(amount.get("value") or 0),
            currency=amount.get("currency_code") or "USD",
            payment_details=data,
        )
