from fastapi import APIRouter, Depends, Header, Request
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.payments.schemas import (
    PaymentIntentRequest, PaymentIntentResponse, WebhookResponse,
    PayPalOrderRequest, PayPalOrderResponse, PayPalCaptureRequest, PayPalCaptureResponse
)
from gemstore.modules.payments.stripe_service import StripeService
from gemstore.modules.payments.paypal_service import PayPalService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/payments", tags=["payments"])


def get_stripe_service(supabase: Client = Depends(get_supabase)) -> StripeService:
    return StripeService(supabase)


def get_paypal_service() -> PayPalService:
    return PayPalService()


@router.post("/stripe/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    body: PaymentIntentRequest,
    service: StripeService = Depends(get_stripe_service)
):
    """Price the cart and open a Stripe PaymentIntent"""
    return service.create_payment_intent(body)


@router.post("/stripe/webhook", response_model=WebhookResponse)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="stripe-signature"),
    service: StripeService = Depends(get_stripe_service)
):
    """Stripe event delivery (signature verified against the raw body)"""
    payload = await request.body()
    event = service.construct_event(payload, stripe_signature)
    service.handle_event(event)
    return WebhookResponse()


@router.post("/paypal/create-order", response_model=PayPalOrderResponse)
async def create_paypal_order(
    body: PayPalOrderRequest,
    service: PayPalService = Depends(get_paypal_service)
):
    return service.create_order(body)


@router.post("/paypal/capture-order", response_model=PayPalCaptureResponse)
async def capture_paypal_order(
    body: PayPalCaptureRequest,
    service: PayPalService = Depends(get_paypal_service)
):
    return service.capture_order(body.order_id)
