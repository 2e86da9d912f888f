from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Dict, Any
from datetime import datetime


class CustomerInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field("", alias="lastName")
    address: Optional[str] = None
    apartment: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(None, alias="zipCode")
    country: Optional[str] = None
    phone: Optional[str] = None


class OrderItem(BaseModel):
    # Cart lines carry display fields (image, category, ...) that are stored as-is
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    price: float = 0
    quantity: int = Field(1, ge=1)


class PaymentInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_method: str = Field(..., alias="paymentMethod")  # stripe | card | paypal | crypto
    payment_intent_id: Optional[str] = Field(None, alias="paymentIntentId")
    capture_id: Optional[str] = Field(None, alias="captureID")
    transaction_id: Optional[str] = Field(None, alias="transactionId")
    currency: Optional[str] = None
    crypto_type: Optional[str] = Field(None, alias="cryptoType")
    crypto_amount: Optional[float] = Field(None, alias="cryptoAmount")
    crypto_currency: Optional[str] = Field(None, alias="cryptoCurrency")
    wallet_address: Optional[str] = Field(None, alias="walletAddress")
    network: Optional[str] = None


class OrderTotals(BaseModel):
    subtotal: float
    shipping: float = 0
    tax: float = 0
    total: float


class OrderCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional so a missing section is answered with 400, not a validation error
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")
    items: List[OrderItem] = []
    payment: Optional[PaymentInfo] = None
    totals: Optional[OrderTotals] = None
    timestamp: Optional[datetime] = None


class OrderResponse(BaseModel):
    id: str
    customer_email: str
    customer_name: str
    shipping_address: Optional[Dict[str, Any]] = None
    items: List[Dict[str, Any]] = []
    payment_details: Dict[str, Any] = {}
    subtotal: float
    shipping: float = 0
    tax: float = 0
    total: float
    status: str
    is_test_order: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderCreateResponse(BaseModel):
    success: bool = True
    order: OrderResponse


class OrderDetailResponse(BaseModel):
    order: OrderResponse


class OrderListResponse(BaseModel):
    orders: List[OrderResponse]


class OrderDeleteResponse(BaseModel):
    success: bool = True
    message: str


class InsufficientItem(BaseModel):
    id: str
    name: Optional[str] = None
    requested: int
    available: int
