from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any


class CheckoutItem(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    price: float
    quantity: Optional[int] = 1


class CheckoutCustomer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[CheckoutItem] = []
    customer_info: Optional[CheckoutCustomer] = Field(default=None, alias="customerInfo")


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")
    payment_intent_id: str = Field(alias="paymentIntentId")


class WebhookResponse(BaseModel):
    received: bool = True


class PayPalOrderRequest(BaseModel):
    amount: Optional[float] = None
    currency: str = "USD"
    items: List[CheckoutItem] = []


class PayPalOrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(alias="orderID")


class PayPalCaptureRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: Optional[str] = Field(default=None, alias="orderID")


class PayPalCaptureResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    capture_id: Optional[str] = Field(default=None, alias="captureID")
    status: Optional[str] = None
    amount: float = 0
    currency: str = "USD"
    payment_details: Dict[str, Any] = Field(default={}, alias="paymentDetails")
