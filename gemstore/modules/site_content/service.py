from supabase import Client
from gemstore.modules.site_content.schemas import (
    SiteContentCreate, SiteContentUpdate, SiteContentResponse, PageFieldCreate
)
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Dict
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

# Homepage sections editable from the site content screen
ALLOWED_SECTIONS = ("hero", "featured", "about", "contact")
PUBLIC_COLUMNS = "id, section, key, content_type, value, is_active"


class SiteContentService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_content(self, section: Optional[str] = None) -> List[SiteContentResponse]:
        if section and section not in ALLOWED_SECTIONS:
            raise HTTPException(status_code=400, detail="Invalid section")
        try:
            query = self.supabase.table("site_content").select("*")
            if section:
                query = query.eq("section", section)
            result = query.order("section").order("key").execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch content")
        return [SiteContentResponse(**row) for row in result.data or []]

    def list_public_content(self) -> List[SiteContentResponse]:
        """Active content for the storefront"""
        try:
            result = self.supabase.table("site_content")\
                .select(PUBLIC_COLUMNS)\
                .eq("is_active", True)\
                .order("section")\
                .order("key")\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch content from database")
        return [SiteContentResponse(**row) for row in result.data or []]

    def get_content(self, content_id: str) -> SiteContentResponse:
        try:
            result = self.supabase.table("site_content")\
                .select("*")\
                .eq("id", content_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch content")
        if not result.data:
            raise HTTPException(status_code=404, detail="Content not found")
        return SiteContentResponse(**result.data[0])

    def create_content(self, content_data: SiteContentCreate) -> SiteContentResponse:
        if not (content_data.section and content_data.key and content_data.content_type and content_data.value):
            raise HTTPException(status_code=400, detail="Section, key, content_type, and value are required")
        try:
            result = self.supabase.table("site_content").insert({
                "section": content_data.section,
                "key": content_data.key,
                "content_type": content_data.content_type,
                "value": content_data.value,
                "metadata": content_data.metadata,
                "is_active": content_data.is_active,
            }).execute()
        except Exception as e:
            raise_for_api_error(
                e, "Failed to create content",
                conflict_detail="Content with this section and key already exists"
            )
        logger.info(f"Created site content {content_data.section}/{content_data.key}")
        return SiteContentResponse(**result.data[0])

    def update_content(self, content_id: str, content_data: SiteContentUpdate) -> SiteContentResponse:
        update_data = content_data.model_dump(exclude_unset=True)
        if not update_data:
            return self.get_content(content_id)
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            result = self.supabase.table("site_content")\
                .update(update_data)\
                .eq("id", content_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to update content")
        if not result.data:
            raise HTTPException(status_code=404, detail="Content not found")
        return SiteContentResponse(**result.data[0])

    def delete_content(self, content_id: str) -> None:
        try:
            self.supabase.table("site_content").delete().eq("id", content_id).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to delete content")
        logger.info(f"Deleted site content {content_id}")

    # Pages: every field of a page is a site_content row whose section is the page id

    def get_page_rows(self, page_id: str) -> List[SiteContentResponse]:
        try:
            result = self.supabase.table("site_content")\
                .select("*")\
                .eq("section", page_id)\
                .order("created_at")\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch page content")
        return [SiteContentResponse(**row) for row in result.data or []]

    def get_page_map(self, page_id: str) -> Dict[str, Optional[str]]:
        """Page fields as {key: value}; later rows win on duplicate keys"""
        return {row.key: row.value for row in self.get_page_rows(page_id)}

    def create_page_field(self, field: PageFieldCreate) -> SiteContentResponse:
        if not field.section or not field.key:
            raise HTTPException(status_code=400, detail="Section and key are required")
        try:
            result = self.supabase.table("site_content").insert({
                "section": field.section,
                "key": field.key,
                "content_type": "text",
                "value": field.value or "",
            }).execute()
        except Exception as e:
            raise_for_api_error(
                e, "Failed to create page content",
                conflict_detail="Content with this section and key already exists"
            )
        return SiteContentResponse(**result.data[0])

    def update_page_field(self, field_id: str, value: Optional[str]) -> SiteContentResponse:
        try:
            result = self.supabase.table("site_content")\
                .update({"value": value, "updated_at": datetime.now(timezone.utc).isoformat()})\
                .eq("id", field_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to update page content")
        if not result.data:
            raise HTTPException(status_code=404, detail="Content not found")
        return SiteContentResponse(**result.data[0])

    def upsert_page_field(self, section: str, key: str, value: str, content_type: str = "text") -> bool:
        """Insert or update a field by (section, key). Returns True when a new row was created."""
        existing = self.supabase.table("site_content")\
            .select("id")\
            .eq("section", section)\
            .eq("key", key)\
            .limit(1)\
            .execute()
        now = datetime.now(timezone.utc).isoformat()
        if existing.data:
            self.supabase.table("site_content")\
                .update({"value": value, "content_type": content_type, "updated_at": now})\
                .eq("id", existing.data[0]["id"])\
                .execute()
            return False
        self.supabase.table("site_content").insert({
            "section": section,
            "key": key,
            "content_type": content_type,
            "value": value,
            "is_active": True,
        }).execute()
        return True
