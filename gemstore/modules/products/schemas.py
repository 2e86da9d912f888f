from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime


class ProductCreate(BaseModel):
    # name and price are checked in the service so a missing value is a 400
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    sale_price: Optional[float] = None
    on_sale: bool = False
    category: Optional[str] = None
    images: List[str] = []
    video_url: Optional[str] = None
    tags: List[str] = []
    inventory: Optional[int] = None
    sku: Optional[str] = None
    weight: Optional[float] = None
    dimensions: Optional[Dict[str, Any]] = None
    is_active: bool = True
    featured: bool = False
    featured_image_index: int = 0
    metadata: Optional[Dict[str, Any]] = None


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    sale_price: Optional[float] = None
    on_sale: Optional[bool] = None
    category: Optional[str] = None
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    tags: Optional[List[str]] = None
    inventory: Optional[int] = None
    sku: Optional[str] = None
    weight: Optional[float] = None
    dimensions: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None
    featured: Optional[bool] = None
    featured_image_index: Optional[int] = None
    frontend_visible: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    sale_price: Optional[float] = None
    on_sale: Optional[bool] = False
    category: Optional[str] = None
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    tags: Optional[List[str]] = None
    inventory: Optional[int] = 0
    stock: Optional[int] = None
    sku: Optional[str] = None
    weight: Optional[float] = None
    dimensions: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = True
    featured: Optional[bool] = False
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    success: bool = True
    products: List[ProductResponse]
    count: int


class ProductDetailResponse(BaseModel):
    success: bool = True
    product: ProductResponse


class ProductMutationResponse(BaseModel):
    success: bool = True
    message: str
    product: Optional[ProductResponse] = None


class ProductViewResponse(BaseModel):
    success: bool = True
    view_count: int


class CategoryAssignRequest(BaseModel):
    category_ids: List[str]


class ProductCategoriesResponse(BaseModel):
    success: bool = True
    categories: List[Dict[str, Any]]


class CategoryAssignResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    assignments: List[Dict[str, Any]] = []
