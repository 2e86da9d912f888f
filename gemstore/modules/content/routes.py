from fastapi import APIRouter, Depends
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.content.schemas import (
    FAQCreate, FAQUpdate, FAQResponse, StatCreate, StatUpdate, StatResponse,
    GemFactCreate, GemFactUpdate, GemFactResponse, ContentDeleteResponse
)
from gemstore.modules.content.service import FAQService, StatService, GemFactService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(tags=["content"])


def get_faq_service(supabase: Client = Depends(get_supabase)) -> FAQService:
    return FAQService(supabase)


def get_stat_service(supabase: Client = Depends(get_supabase)) -> StatService:
    return StatService(supabase)


def get_gem_fact_service(supabase: Client = Depends(get_supabase)) -> GemFactService:
    return GemFactService(supabase)


# FAQ

@router.get("/faq", response_model=List[FAQResponse])
async def list_faq(service: FAQService = Depends(get_faq_service)):
    return service.list_active()


@router.get("/admin/faq", response_model=List[FAQResponse])
async def admin_list_faq(
    admin: Dict = Depends(require_admin),
    service: FAQService = Depends(get_faq_service)
):
    return service.list_all()


@router.post("/admin/faq", response_model=FAQResponse)
async def create_faq(
    data: FAQCreate,
    admin: Dict = Depends(require_admin),
    service: FAQService = Depends(get_faq_service)
):
    return service.create(data)


@router.put("/admin/faq", response_model=FAQResponse)
async def update_faq(
    data: FAQUpdate,
    admin: Dict = Depends(require_admin),
    service: FAQService = Depends(get_faq_service)
):
    return service.update(data)


@router.delete("/admin/faq", response_model=ContentDeleteResponse)
async def delete_faq(
    id: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: FAQService = Depends(get_faq_service)
):
    service.delete(id)
    return ContentDeleteResponse()


# Stats

@router.get("/stats", response_model=List[StatResponse])
async def list_stats(service: StatService = Depends(get_stat_service)):
    return service.list_active()


@router.get("/admin/stats", response_model=List[StatResponse])
async def admin_list_stats(
    admin: Dict = Depends(require_admin),
    service: StatService = Depends(get_stat_service)
):
    return service.list_all()


@router.post("/admin/stats", response_model=StatResponse)
async def create_stat(
    data: StatCreate,
    admin: Dict = Depends(require_admin),
    service: StatService = Depends(get_stat_service)
):
    return service.create(data)


@router.put("/admin/stats", response_model=StatResponse)
async def update_stat(
    data: StatUpdate,
    admin: Dict = Depends(require_admin),
    service: StatService = Depends(get_stat_service)
):
    return service.update(data)


@router.delete("/admin/stats", response_model=ContentDeleteResponse)
async def delete_stat(
    id: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: StatService = Depends(get_stat_service)
):
    service.delete(id)
    return ContentDeleteResponse()


# Gem facts

@router.get("/gem-facts", response_model=GemFactResponse)
async def get_random_gem_fact(service: GemFactService = Depends(get_gem_fact_service)):
    """A random active gem fact"""
    return service.random_fact()


@router.get("/admin/gem-facts", response_model=List[GemFactResponse])
async def admin_list_gem_facts(
    admin: Dict = Depends(require_admin),
    service: GemFactService = Depends(get_gem_fact_service)
):
    return service.list_all()


@router.post("/admin/gem-facts", response_model=GemFactResponse)
async def create_gem_fact(
    data: GemFactCreate,
    admin: Dict = Depends(require_admin),
    service: GemFactService = Depends(get_gem_fact_service)
):
    return service.create(data)


@router.put("/admin/gem-facts", response_model=GemFactResponse)
async def update_gem_fact(
    data: GemFactUpdate,
    admin: Dict = Depends(require_admin),
    service: GemFactService = Depends(get_gem_fact_service)
):
    return service.update(data)


@router.delete("/admin/gem-facts", response_model=ContentDeleteResponse)
async def delete_gem_fact(
    id: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: GemFactService = Depends(get_gem_fact_service)
):
    service.delete(id)
    return ContentDeleteResponse()
