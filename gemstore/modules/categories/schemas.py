from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime


class CategoryCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: Optional[int] = 0
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CategoryListResponse(BaseModel):
    success: bool = True
    categories: List[CategoryResponse]


class CategoryDetailResponse(BaseModel):
    success: bool = True
    category: CategoryResponse


class CategoryDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Category deleted successfully"


class CategoryProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: float
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    sale_price: Optional[float] = None
    on_sale: Optional[bool] = False
    images: Optional[List[str]] = None
    stock: int = 0
    featured: Optional[bool] = False
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class CategoryProductsResponse(BaseModel):
    success: bool = True
    category: CategoryResponse
    products: List[CategoryProduct]
    pagination: Pagination
