from fastapi import APIRouter, Depends
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.site_content.schemas import (
    SiteContentCreate, SiteContentUpdate, SiteContentResponse, SiteContentListResponse,
    PublicContentListResponse, SiteContentDetailResponse, SiteContentDeleteResponse,
    PageFieldCreate, PageFieldUpdate
)
from gemstore.modules.site_content.service import SiteContentService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(tags=["site-content"])


def get_site_content_service(supabase: Client = Depends(get_supabase)) -> SiteContentService:
    return SiteContentService(supabase)


@router.get("/site-content", response_model=SiteContentListResponse)
async def list_site_content(
    section: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    """All content rows, optionally for one homepage section"""
    return SiteContentListResponse(content=service.list_content(section))


@router.get("/site-content-public", response_model=PublicContentListResponse)
async def list_public_site_content(
    service: SiteContentService = Depends(get_site_content_service)
):
    content = service.list_public_content()
    return PublicContentListResponse(content=content, count=len(content))


@router.post("/site-content", response_model=SiteContentDetailResponse, status_code=201)
async def create_site_content(
    content_data: SiteContentCreate,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    return SiteContentDetailResponse(
        message="Content created successfully",
        content=service.create_content(content_data)
    )


@router.get("/site-content/{content_id}", response_model=SiteContentDetailResponse)
async def get_site_content(
    content_id: str,
    service: SiteContentService = Depends(get_site_content_service)
):
    return SiteContentDetailResponse(content=service.get_content(content_id))


@router.put("/site-content/{content_id}", response_model=SiteContentDetailResponse)
async def update_site_content(
    content_id: str,
    content_data: SiteContentUpdate,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    return SiteContentDetailResponse(
        message="Content updated successfully",
        content=service.update_content(content_id, content_data)
    )


@router.delete("/site-content/{content_id}", response_model=SiteContentDeleteResponse)
async def delete_site_content(
    content_id: str,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    service.delete_content(content_id)
    return SiteContentDeleteResponse()


@router.get("/pages/{page_id}", response_model=Dict[str, Optional[str]])
async def get_page(
    page_id: str,
    service: SiteContentService = Depends(get_site_content_service)
):
    """Page text as a key/value map"""
    return service.get_page_map(page_id)


@router.get("/admin/pages/{page_id}", response_model=List[SiteContentResponse])
async def get_page_fields(
    page_id: str,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    return service.get_page_rows(page_id)


@router.post("/admin/pages/content", response_model=SiteContentResponse)
async def create_page_field(
    field: PageFieldCreate,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    return service.create_page_field(field)


@router.put("/admin/pages/content/{field_id}", response_model=SiteContentResponse)
async def update_page_field(
    field_id: str,
    field: PageFieldUpdate,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    return service.update_page_field(field_id, field.value)


@router.delete("/admin/pages/content/{field_id}", response_model=SiteContentDeleteResponse)
async def delete_page_field(
    field_id: str,
    admin: Dict = Depends(require_admin),
    service: SiteContentService = Depends(get_site_content_service)
):
    service.delete_content(field_id)
    return SiteContentDeleteResponse()
