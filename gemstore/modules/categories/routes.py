from fastapi import APIRouter, Depends, Query
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.categories.schemas import (
    CategoryCreate, CategoryUpdate, CategoryListResponse, CategoryDetailResponse,
    CategoryDeleteResponse, CategoryProductsResponse
)
from gemstore.modules.categories.service import CategoryService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_service(supabase: Client = Depends(get_supabase)) -> CategoryService:
    return CategoryService(supabase)


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    include_inactive: bool = False,
    service: CategoryService = Depends(get_category_service)
):
    """List categories"""
    return CategoryListResponse(categories=service.list_categories(include_inactive))


@router.post("", response_model=CategoryDetailResponse, status_code=201)
async def create_category(
    category_data: CategoryCreate,
    admin: Dict = Depends(require_admin),
    service: CategoryService = Depends(get_category_service)
):
    """Create a new category"""
    return CategoryDetailResponse(category=service.create_category(category_data))


@router.get("/{id_or_slug}", response_model=CategoryDetailResponse)
async def get_category(
    id_or_slug: str,
    service: CategoryService = Depends(get_category_service)
):
    """Get category by ID or slug"""
    return CategoryDetailResponse(category=service.get_category(id_or_slug))


@router.put("/{category_id}", response_model=CategoryDetailResponse)
async def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    admin: Dict = Depends(require_admin),
    service: CategoryService = Depends(get_category_service)
):
    """Update category"""
    return CategoryDetailResponse(category=service.update_category(category_id, category_data))


@router.delete("/{category_id}", response_model=CategoryDeleteResponse)
async def delete_category(
    category_id: str,
    admin: Dict = Depends(require_admin),
    service: CategoryService = Depends(get_category_service)
):
    """Delete category (409 while products are assigned)"""
    service.delete_category(category_id)
    return CategoryDeleteResponse()


@router.get("/{id_or_slug}/products", response_model=CategoryProductsResponse)
async def get_category_products(
    id_or_slug: str,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    service: CategoryService = Depends(get_category_service)
):
    """Products in a category, paged"""
    category, products, pagination = service.get_category_products(id_or_slug, page, limit)
    return CategoryProductsResponse(category=category, products=products, pagination=pagination)
