from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class FeaturedProductCard(BaseModel):
    id: str
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: str
    card_color: str
    price: Optional[float] = None
    original_price: Optional[float] = None
    product_id: Optional[str] = None
    sort_order: int = 1
    is_active: Optional[bool] = True


class FeaturedProductCreate(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    card_color: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    product_id: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True


class FeaturedProductUpdate(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    card_color: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    product_id: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class FeaturedProductResponse(BaseModel):
    id: str
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    card_color: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    product_id: Optional[str] = None
    sort_order: Optional[int] = 0
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
