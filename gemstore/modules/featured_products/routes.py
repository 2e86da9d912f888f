from fastapi import APIRouter, Depends
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.featured_products.schemas import (
    FeaturedProductCard, FeaturedProductCreate, FeaturedProductUpdate, FeaturedProductResponse
)
from gemstore.modules.featured_products.service import FeaturedProductService
from gemstore.modules.content.schemas import ContentDeleteResponse
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(tags=["featured-products"])


def get_featured_product_service(supabase: Client = Depends(get_supabase)) -> FeaturedProductService:
    return FeaturedProductService(supabase)


@router.get("/featured-products", response_model=List[FeaturedProductCard])
async def list_featured_products(service: FeaturedProductService = Depends(get_featured_product_service)):
    return service.storefront_cards()


@router.get("/admin/featured-products", response_model=List[FeaturedProductResponse])
async def admin_list_featured_products(
    admin: Dict = Depends(require_admin),
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    return service.list_all()


@router.post("/admin/featured-products", response_model=FeaturedProductResponse)
async def create_featured_product(
    data: FeaturedProductCreate,
    admin: Dict = Depends(require_admin),
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    return service.create(data)


@router.put("/admin/featured-products", response_model=FeaturedProductResponse)
async def update_featured_product(
    data: FeaturedProductUpdate,
    admin: Dict = Depends(require_admin),
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    return service.update(data)


@router.delete("/admin/featured-products", response_model=ContentDeleteResponse)
async def delete_featured_product(
    id: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    service.delete(id)
    return ContentDeleteResponse()
