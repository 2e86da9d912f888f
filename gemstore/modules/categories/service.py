from supabase import Client
from gemstore.modules.categories.schemas import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryProduct, Pagination
)
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Tuple
from fastapi import HTTPException
import math
import re
import logging

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
DUPLICATE_NAME = "A category with this name already exists"
CATEGORY_PRODUCT_COLUMNS = (
    "id, name, description, price, sale_price, on_sale, inventory, images, "
    "featured, is_active, metadata, created_at, updated_at"
)


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class CategoryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_categories(self, include_inactive: bool = False) -> List[CategoryResponse]:
        """List categories by sort order; active only unless include_inactive"""
        try:
            query = self.supabase.table("categories")\
                .select("*")\
                .order("sort_order")
            if not include_inactive:
                query = query.eq("is_active", True)
            result = query.execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch categories")
        return [CategoryResponse(**c) for c in result.data or []]

    def get_category(self, id_or_slug: str) -> CategoryResponse:
        """Look a category up by UUID, or by slug for anything else"""
        column = "id" if UUID_PATTERN.match(id_or_slug) else "slug"
        try:
            result = self.supabase.table("categories")\
                .select("*")\
                .eq(column, id_or_slug)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch category")
        if not result.data:
            raise HTTPException(status_code=404, detail="Category not found")
        return CategoryResponse(**result.data[0])

    def create_category(self, category_data: CategoryCreate) -> CategoryResponse:
        """Create a new category"""
        name = _clean(category_data.name)
        if not name:
            raise HTTPException(status_code=400, detail="Category name is required")
        insert_data = {
            "name": name,
            "slug": slugify(name),
            "description": _clean(category_data.description),
            "image_url": _clean(category_data.image_url),
            "sort_order": category_data.sort_order or 0,
            "is_active": True if category_data.is_active is None else category_data.is_active,
        }
        try:
            result = self.supabase.table("categories").insert(insert_data).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to create category", conflict_detail=DUPLICATE_NAME)
        logger.info(f"Created category {name}")
        return CategoryResponse(**result.data[0])

    def update_category(self, category_id: str, category_data: CategoryUpdate) -> CategoryResponse:
        """Update category; name is required, description and image are replaced"""
        name = _clean(category_data.name)
        if not name:
            raise HTTPException(status_code=400, detail="Category name is required")
        update_data = {
            "name": name,
            "slug": slugify(name),
            "description": _clean(category_data.description),
            "image_url": _clean(category_data.image_url),
        }
        if category_data.sort_order is not None:
            update_data["sort_order"] = category_data.sort_order
        if category_data.is_active is not None:
            update_data["is_active"] = category_data.is_active

        try:
            result = self.supabase.table("categories")\
                .update(update_data)\
                .eq("id", category_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(
                e, "Failed to update category",
                conflict_detail=DUPLICATE_NAME, not_found_detail="Category not found"
            )
        if not result.data:
            raise HTTPException(status_code=404, detail="Category not found")
        return CategoryResponse(**result.data[0])

    def delete_category(self, category_id: str) -> None:
        """Delete a category that no product uses"""
        try:
            in_use = self.supabase.table("product_categories")\
                .select("id")\
                .eq("category_id", category_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to check category usage")
        if in_use.data:
            raise HTTPException(status_code=409, detail="Cannot delete category that has products assigned to it")

        try:
            self.supabase.table("categories").delete().eq("id", category_id).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to delete category")
        logger.info(f"Deleted category {category_id}")

    def get_category_products(
        self, id_or_slug: str, page: int = 1, limit: int = 50
    ) -> Tuple[CategoryResponse, List[CategoryProduct], Pagination]:
        """Paged products assigned to a category"""
        category = self.get_category(id_or_slug)
        offset = (page - 1) * limit
        try:
            assignments = self.supabase.table("product_categories")\
                .select("product_id", count="exact")\
                .eq("category_id", category.id)\
                .range(offset, offset + limit - 1)\
                .execute()
            product_ids = [a["product_id"] for a in assignments.data or []]
            rows = []
            if product_ids:
                rows = self.supabase.table("products")\
                    .select(CATEGORY_PRODUCT_COLUMNS)\
                    .in_("id", product_ids)\
                    .execute().data or []
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch products")

        # keep assignment order; products deleted since assignment drop out
        by_id = {p["id"]: p for p in rows}
        products = [
            CategoryProduct(**{**by_id[pid], "originalPrice": by_id[pid]["price"], "stock": by_id[pid].get("inventory") or 0})
            for pid in product_ids if pid in by_id
        ]
        total = assignments.count or 0
        logger.debug(f"Found {len(products)} products in category {category.name}")
        return category, products, Pagination(
            page=page, limit=limit, total=total, total_pages=math.ceil(total / limit)
        )
