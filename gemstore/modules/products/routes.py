from fastapi import APIRouter, Depends, HTTPException, Query
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.products.schemas import (
    ProductCreate, ProductUpdate, ProductListResponse, ProductDetailResponse,
    ProductMutationResponse, ProductViewResponse, CategoryAssignRequest,
    ProductCategoriesResponse, CategoryAssignResponse
)
from gemstore.modules.products.service import ProductService
from gemstore.core.dependencies import require_admin, optional_admin
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(supabase: Client = Depends(get_supabase)) -> ProductService:
    return ProductService(supabase)


@router.get("", response_model=ProductListResponse)
async def list_products(
    include_inactive: bool = Query(False, alias="includeInactive"),
    category: Optional[str] = None,
    featured: bool = False,
    on_sale: bool = Query(False, alias="onSale"),
    admin: Optional[Dict] = Depends(optional_admin),
    service: ProductService = Depends(get_product_service)
):
    """List storefront products. includeInactive=true (hidden products too) requires an admin token."""
    if include_inactive and admin is None:
        raise HTTPException(status_code=401, detail="Admin access required to include inactive products")
    products = service.list_products(
        include_inactive=include_inactive, category=category, featured=featured, on_sale=on_sale
    )
    return ProductListResponse(products=products, count=len(products))


@router.post("", response_model=ProductMutationResponse, status_code=201)
async def create_product(
    product_data: ProductCreate,
    admin: Dict = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """Create a new product"""
    product = service.create_product(product_data)
    return ProductMutationResponse(message="Product created successfully", product=product)


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get product by ID"""
    return ProductDetailResponse(product=service.get_product_by_id(product_id))


@router.put("/{product_id}", response_model=ProductMutationResponse)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    admin: Dict = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """Update product (only provided fields)"""
    product = service.update_product(product_id, product_data)
    return ProductMutationResponse(message="Product updated successfully", product=product)


@router.delete("/{product_id}", response_model=ProductMutationResponse)
async def delete_product(
    product_id: str,
    permanent: bool = False,
    admin: Dict = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """Deactivate a product, or delete it with permanent=true"""
    return ProductMutationResponse(message=service.delete_product(product_id, permanent=permanent))


@router.post("/{product_id}/view", response_model=ProductViewResponse)
async def record_product_view(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Count a product page view"""
    return ProductViewResponse(view_count=service.record_view(product_id))


@router.get("/{product_id}/categories", response_model=ProductCategoriesResponse)
async def get_product_categories(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get categories for a product"""
    return ProductCategoriesResponse(categories=service.get_product_categories(product_id))


@router.post("/{product_id}/categories", response_model=CategoryAssignResponse)
async def assign_product_categories(
    product_id: str,
    body: CategoryAssignRequest,
    admin: Dict = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """Replace the product's categories; an empty list clears them"""
    assignments = service.assign_categories(product_id, body.category_ids)
    if not body.category_ids:
        return CategoryAssignResponse(message="All categories removed from product")
    return CategoryAssignResponse(assignments=assignments)


@router.delete("/{product_id}/categories", response_model=CategoryAssignResponse)
async def clear_product_categories(
    product_id: str,
    admin: Dict = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """Remove all categories from product"""
    service.clear_product_categories(product_id)
    return CategoryAssignResponse(message="All categories removed from product")
