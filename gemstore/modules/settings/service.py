from supabase import Client
from gemstore.config import settings
from gemstore.modules.settings.schemas import ShippingSettings, SiteSettings, SiteSettingsUpdate
from fastapi import HTTPException
from datetime import datetime, timezone
from typing import Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

# Settings that are not stored in site_settings
STATIC_FIELDS = ("enable_taxes", "tax_rate", "stripe_enabled", "paypal_enabled",
                 "crypto_enabled", "supported_currencies")


def to_setting_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def from_setting_value(model: Type[ShippingSettings], field: str, raw: str) -> Any:
    """Parse a stored text value for ``field``; None means fall back to the default"""
    annotation = model.model_fields[field].annotation
    if annotation is bool:
        return raw == "true"
    try:
        value = annotation(float(raw)) if annotation is int else annotation(raw)
    except (TypeError, ValueError):
        return None
    # zero and empty values fall back to the defaults as well
    return value or None


class SettingsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_all(self) -> Dict[str, str]:
        """All stored settings as {setting_key: setting_value}; empty when the table is unreachable"""
        try:
            result = self.supabase.table("site_settings")\
                .select("setting_key, setting_value")\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching site settings: {e}")
            return {}
        return {row["setting_key"]: row["setting_value"] for row in result.data or []}

    def set_many(self, values: Dict[str, str]) -> None:
        now = datetime.now(timezone.utc).isoformat()
        rows = [
            {"setting_key": key, "setting_value": value, "updated_at": now}
            for key, value in values.items()
        ]
        try:
            self.supabase.table("site_settings")\
                .upsert(rows, on_conflict="setting_key")\
                .execute()
        except Exception as e:
            logger.error(f"Failed to save settings to database: {e}")
            raise HTTPException(status_code=500, detail="Failed to save settings to database")
        logger.info(f"Saved site settings: {', '.join(sorted(values))}")

    def _load(self, model: Type[ShippingSettings], **extra):
        stored = self.get_all()
        values = dict(extra)
        for field in model.model_fields:
            if field in STATIC_FIELDS or field not in stored:
                continue
            parsed = from_setting_value(model, field, stored[field])
            if parsed is not None:
                values[field] = parsed
        return model(**values)

    def site_settings(self) -> SiteSettings:
        """Stored settings merged over the defaults"""
        return self._load(SiteSettings, base_currency=settings.default_currency)

    def shipping_settings(self) -> ShippingSettings:
        return self._load(ShippingSettings)

    def update(self, data: SiteSettingsUpdate) -> SiteSettings:
        """Persist the provided fields and return the merged settings"""
        values = {
            key: to_setting_value(value)
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if values:
            self.set_many(values)
        return self.site_settings()
