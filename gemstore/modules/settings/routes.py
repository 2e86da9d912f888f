from fastapi import APIRouter, Depends
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.settings.schemas import (
    SiteSettings, SiteSettingsUpdate, SiteSettingsSaveResponse, ShippingSettingsResponse
)
from gemstore.modules.settings.service import SettingsService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(tags=["settings"])


def get_settings_service(supabase: Client = Depends(get_supabase)) -> SettingsService:
    return SettingsService(supabase)


@router.get("/shipping-settings", response_model=ShippingSettingsResponse)
async def get_shipping_settings(service: SettingsService = Depends(get_settings_service)):
    """Shipping rates for cart and checkout"""
    return ShippingSettingsResponse(settings=service.shipping_settings())


@router.get("/admin/settings", response_model=SiteSettings)
async def get_site_settings(
    admin: Dict = Depends(require_admin),
    service: SettingsService = Depends(get_settings_service)
):
    return service.site_settings()


@router.post("/admin/settings", response_model=SiteSettingsSaveResponse)
async def save_site_settings(
    data: SiteSettingsUpdate,
    admin: Dict = Depends(require_admin),
    service: SettingsService = Depends(get_settings_service)
):
    settings = service.update(data)
    return SiteSettingsSaveResponse(settings=settings)
