from supabase import Client
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Dict, Any, Tuple
from fastapi import HTTPException
from pydantic import BaseModel
import random
import logging

logger = logging.getLogger(__name__)

DEFAULT_GEM_FACT = {
    "fact": "Gems have fascinated humans for thousands of years with their beauty and rarity.",
    "gem_type": "General",
    "source": "Default",
}


class ContentTableService:
    """Public listing and admin CRUD over one storefront content table.

    ``label`` is used in error messages ("Missing FAQ ID", "Failed to create FAQ").
    ``required`` lists the fields a new row must carry, with the 400 message when one is absent.
    """

    def __init__(
        self,
        supabase: Client,
        table: str,
        label: str,
        required: Tuple[str, ...],
        required_detail: str,
        order_column: str = "sort_order",
        order_desc: bool = False,
    ):
        self.supabase = supabase
        self.table = table
        self.label = label
        self.required = required
        self.required_detail = required_detail
        self.order_column = order_column
        self.order_desc = order_desc

    def list_active(self) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table(self.table)\
                .select("*")\
                .eq("is_active", True)\
                .order(self.order_column, desc=self.order_desc)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, f"Failed to fetch {self.label}")
        return result.data or []

    def list_all(self) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table(self.table)\
                .select("*")\
                .order(self.order_column, desc=self.order_desc)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, f"Failed to fetch {self.label}")
        return result.data or []

    def create(self, data: BaseModel) -> Dict[str, Any]:
        values = data.model_dump()
        if any(not values.get(field) for field in self.required):
            raise HTTPException(status_code=400, detail=self.required_detail)
        try:
            result = self.supabase.table(self.table).insert(values).execute()
        except Exception as e:
            raise_for_api_error(e, f"Failed to create {self.label}")
        logger.info(f"Created {self.label} {result.data[0].get('id')}")
        return result.data[0]

    def update(self, data: BaseModel) -> Dict[str, Any]:
        """Update the row whose id is carried in the body; only provided fields change"""
        values = data.model_dump(exclude_unset=True)
        row_id = values.pop("id", None)
        if not row_id:
            raise HTTPException(status_code=400, detail=f"Missing {self.label} ID")
        try:
            result = self.supabase.table(self.table)\
                .update(values)\
                .eq("id", row_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, f"Failed to update {self.label}")
        if not result.data:
            raise HTTPException(status_code=404, detail=f"{self.label} not found")
        return result.data[0]

    def delete(self, row_id: Optional[str]) -> None:
        if not row_id:
            raise HTTPException(status_code=400, detail=f"Missing {self.label} ID")
        try:
            self.supabase.table(self.table).delete().eq("id", row_id).execute()
        except Exception as e:
            raise_for_api_error(e, f"Failed to delete {self.label}")
        logger.info(f"Deleted {self.label} {row_id}")


class FAQService(ContentTableService):
    def __init__(self, supabase: Client):
        super().__init__(supabase, "faq", "FAQ", ("question", "answer"), "Question and answer are required")


class StatService(ContentTableService):
    def __init__(self, supabase: Client):
        super().__init__(supabase, "stats", "stat", ("title", "value"), "Missing required fields")


class GemFactService(ContentTableService):
    def __init__(self, supabase: Client):
        super().__init__(
            supabase, "gem_facts", "gem fact", ("fact",), "Fact is required",
            order_column="created_at", order_desc=True,
        )

    def random_fact(self) -> Dict[str, Any]:
        """One random active fact, or the default fact when there are none"""
        facts = self.list_active()
        if not facts:
            return dict(DEFAULT_GEM_FACT)
        return random.choice(facts)
