import stripe
from supabase import Client
from gemstore.modules.payments.schemas import PaymentIntentRequest, PaymentIntentResponse
from gemstore.modules.payments.pricing import calculate_order_amount
from gemstore.config import settings
from fastapi import HTTPException
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

RECORDED_EVENTS = {
    "payment_intent.succeeded": "succeeded",
    "payment_intent.payment_failed": "failed",
}


class StripeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_payment_intent(self, request: PaymentIntentRequest) -> PaymentIntentResponse:
        """Create a card PaymentIntent for the priced cart"""
        if not request.items:
            raise HTTPException(status_code=400, detail="No items provided")
        if not settings.stripe_secret_key:
            raise HTTPException(status_code=500, detail="Stripe is not configured")

        amounts = calculate_order_amount(request.items)
        customer = request.customer_info
        customer_name = f"{(customer and customer.first_name) or ''} {(customer and customer.last_name) or ''}".strip()
        try:
            intent = stripe.PaymentIntent.create(
                api_key=settings.stripe_secret_key,
                amount=amounts["total"],
                currency=settings.stripe_currency,
                description=f"Order for {len(request.items)} item(s)",
                payment_method_types=["card"],
                metadata={
                    "customer_email": (customer and customer.email) or "",
                    "customer_name": customer_name,
                    "items_count": str(len(request.items)),
                    "order_type": "gem_purchase",
                },
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe error creating payment intent: {e}")
            raise HTTPException(status_code=500, detail="Failed to create payment intent")

        logger.info(f"Created payment intent {intent['id']} for {amounts['total']} {settings.stripe_currency}")
        return PaymentIntentResponse(client_secret=intent["client_secret"], payment_intent_id=intent["id"])

    def construct_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """Verify the webhook signature and parse the event"""
        if not signature:
            raise HTTPException(status_code=400, detail="No signature provided")
        if not settings.stripe_webhook_secret:
            logger.error("STRIPE_WEBHOOK_SECRET not set, rejecting webhook")
            raise HTTPException(status_code=500, detail="Stripe webhook secret not configured")
        try:
            return stripe.Webhook.construct_event(payload, signature, settings.stripe_webhook_secret)
        except (ValueError, stripe.SignatureVerificationError) as e:
            logger.warning(f"Webhook signature verification failed: {e}")
            raise HTTPException(status_code=400, detail="Webhook signature verification failed")

    def handle_event(self, event: Dict[str, Any]) -> None:
        """Record payment outcomes; other event types are acknowledged and ignored"""
        event_type = event["type"]
        status = RECORDED_EVENTS.get(event_type)
        if status is None:
            logger.debug(f"Unhandled Stripe event type {event_type}")
            return

        intent = event["data"]["object"]
        # intent metadata carries items_count and order_type; the Stripe event id rides along
        metadata = {**(intent.get("metadata") or {}), "event_id": event.get("id")}
        error_message = None
        if status == "failed":
            last_error = intent.get("last_payment_error") or {}
            error_message = last_error.get("message") or "Payment failed"
        row = {
            "provider": "stripe",
            "event_type": event_type,
            "payment_id": intent.get("id"),
            "amount": intent.get("amount"),
            "currency": intent.get("currency"),
            "status": status,
            "customer_email": metadata.get("customer_email"),
            "customer_name": metadata.get("customer_name"),
            "metadata": metadata,
            "error_message": error_message,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

        try:
            self.supabase.table("payment_events").insert(row).execute()
            logger.info(f"Recorded {event_type} for {row['payment_id']}")
        except Exception as e:
            # The event is still acknowledged
            logger.error(f"Error recording payment event {row['payment_id']}: {e}")
