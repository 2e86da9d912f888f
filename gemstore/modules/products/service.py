from supabase import Client
from gemstore.modules.products.schemas import (
    ProductCreate, ProductUpdate, ProductResponse
)
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import random
import string
import time
import logging

logger = logging.getLogger(__name__)

MAX_PRICE = 99999.99
MAX_WEIGHT = 99999.999
UNCATEGORIZED = "Uncategorized"

# Columns copied straight from a ProductUpdate when present
DIRECT_UPDATE_FIELDS = (
    "name", "description", "price", "sale_price", "on_sale", "category", "images",
    "tags", "inventory", "sku", "weight", "dimensions", "is_active", "featured",
)
METADATA_UPDATE_FIELDS = ("featured_image_index", "frontend_visible")


def generate_sku() -> str:
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=6))
    return f"PROD-{int(time.time() * 1000)}-{suffix}"


class ProductService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _validate_limits(self, price: Optional[float], sale_price: Optional[float], weight: Optional[float]):
        if price is not None and price > MAX_PRICE:
            raise HTTPException(status_code=400, detail="Price must be less than $99,999.99")
        if sale_price is not None and sale_price > MAX_PRICE:
            raise HTTPException(status_code=400, detail="Sale price must be less than $99,999.99")
        if weight is not None and weight > MAX_WEIGHT:
            raise HTTPException(status_code=400, detail="Weight must be less than 99,999.999 grams")

    def _get_product_row(self, product_id: str, columns: str = "*") -> Dict[str, Any]:
        try:
            result = self.supabase.table("products")\
                .select(columns)\
                .eq("id", product_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch product")
        if not result.data:
            raise HTTPException(status_code=404, detail="Product not found")
        return result.data[0]

    def _category_names(self, product_ids: List[str]) -> Dict[str, str]:
        """Map product_id -> name of its first assigned category"""
        if not product_ids:
            return {}
        try:
            assignments = self.supabase.table("product_categories")\
                .select("product_id, category_id")\
                .in_("product_id", product_ids)\
                .execute()
            category_ids = list({a["category_id"] for a in assignments.data or []})
            if not category_ids:
                return {}
            categories = self.supabase.table("categories")\
                .select("id, name")\
                .in_("id", category_ids)\
                .execute()
        except Exception as e:
            # Listing still works without category names
            logger.error(f"Error fetching product categories: {e}")
            return {}
        names = {c["id"]: c["name"] for c in categories.data or []}
        out = {}
        for a in assignments.data or []:
            if a["product_id"] not in out and a["category_id"] in names:
                out[a["product_id"]] = names[a["category_id"]]
        return out

    def list_products(
        self,
        include_inactive: bool = False,
        category: Optional[str] = None,
        featured: bool = False,
        on_sale: bool = False,
    ) -> List[ProductResponse]:
        """List products with resolved category names; hidden products only for admins"""
        try:
            result = self.supabase.table("products")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch products")

        products = result.data or []
        if not include_inactive:
            products = [p for p in products if (p.get("metadata") or {}).get("frontend_visible") is not False]

        category_names = self._category_names([p["id"] for p in products])
        for p in products:
            p["stock"] = p.get("inventory") or 0
            p["category"] = category_names.get(p["id"], UNCATEGORIZED)

        if category:
            products = [p for p in products if p["category"] == category]
        if featured:
            products = [p for p in products if p.get("featured")]
        if on_sale:
            products = [p for p in products if p.get("on_sale")]

        logger.debug(f"Returning {len(products)} products (include_inactive={include_inactive})")
        return [ProductResponse(**p) for p in products]

    def get_product_by_id(self, product_id: str) -> ProductResponse:
        """Get product by ID"""
        return ProductResponse(**self._get_product_row(product_id))

    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create a new product"""
        if not product_data.name or not product_data.price:
            raise HTTPException(status_code=400, detail="Name and price are required")
        self._validate_limits(product_data.price, product_data.sale_price, product_data.weight)

        insert_data = {
            "name": product_data.name,
            "description": product_data.description or "",
            "price": product_data.price,
            "sale_price": product_data.sale_price or None,
            "on_sale": product_data.on_sale,
            "category": product_data.category or "uncategorized",
            "images": product_data.images,
            "video_url": product_data.video_url or None,
            "tags": product_data.tags,
            "inventory": product_data.inventory or 0,
            "sku": product_data.sku or generate_sku(),
            "weight": product_data.weight or None,
            "dimensions": product_data.dimensions,
            "is_active": product_data.is_active,
            "featured": product_data.featured,
            "metadata": {
                **(product_data.metadata or {}),
                "featured_image_index": product_data.featured_image_index,
            },
        }
        try:
            result = self.supabase.table("products").insert(insert_data).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to create product", conflict_detail="A product with this SKU already exists")
        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create product")
        logger.info(f"Created product {result.data[0]['id']} ({product_data.name})")
        return ProductResponse(**result.data[0])

    def update_product(self, product_id: str, product_data: ProductUpdate) -> ProductResponse:
        """Partial update; metadata keys are merged into the stored metadata"""
        current = self._get_product_row(product_id, "id, metadata")
        provided = product_data.model_dump(exclude_unset=True)
        self._validate_limits(provided.get("price"), provided.get("sale_price"), provided.get("weight"))

        update_data = {field: provided[field] for field in DIRECT_UPDATE_FIELDS if field in provided}
        if "sale_price" in update_data:
            update_data["sale_price"] = update_data["sale_price"] or None
        if "weight" in update_data:
            update_data["weight"] = update_data["weight"] or None
        if "video_url" in provided:
            update_data["video_url"] = provided["video_url"] or None

        metadata_changes = {field: provided[field] for field in METADATA_UPDATE_FIELDS if field in provided}
        if metadata_changes or "metadata" in provided:
            update_data["metadata"] = {
                **(current.get("metadata") or {}),
                **metadata_changes,
                **(provided.get("metadata") or {}),
            }

        if not update_data:
            return self.get_product_by_id(product_id)

        try:
            result = self.supabase.table("products")\
                .update(update_data)\
                .eq("id", product_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to update product", conflict_detail="A product with this SKU already exists")
        if not result.data:
            raise HTTPException(status_code=404, detail="Product not found")
        return ProductResponse(**result.data[0])

    def delete_product(self, product_id: str, permanent: bool = False) -> str:
        """Soft delete (deactivate) by default; permanent removes the row"""
        self._get_product_row(product_id, "id")
        try:
            if permanent:
                self.supabase.table("products").delete().eq("id", product_id).execute()
                logger.info(f"Deleted product {product_id} permanently")
                return "Product deleted permanently"
            self.supabase.table("products").update({"is_active": False}).eq("id", product_id).execute()
            logger.info(f"Deactivated product {product_id}")
            return "Product deactivated"
        except Exception as e:
            raise_for_api_error(e, "Failed to delete product" if permanent else "Failed to deactivate product")

    def record_view(self, product_id: str) -> int:
        """Increment metadata.view_count and return the new count"""
        current = self._get_product_row(product_id, "id, metadata")
        metadata = current.get("metadata") or {}
        view_count = (metadata.get("view_count") or 0) + 1
        try:
            self.supabase.table("products")\
                .update({"metadata": {**metadata, "view_count": view_count}})\
                .eq("id", product_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to update view count")
        return view_count

    def get_product_categories(self, product_id: str) -> List[Dict[str, Any]]:
        """Categories assigned to a product"""
        try:
            assignments = self.supabase.table("product_categories")\
                .select("category_id")\
                .eq("product_id", product_id)\
                .execute()
            category_ids = [a["category_id"] for a in assignments.data or []]
            if not category_ids:
                return []
            result = self.supabase.table("categories")\
                .select("id, name, slug, description, image_url, sort_order, is_active")\
                .in_("id", category_ids)\
                .execute()
            return result.data or []
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch product categories")

    def clear_product_categories(self, product_id: str) -> None:
        try:
            self.supabase.table("product_categories")\
                .delete()\
                .eq("product_id", product_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to remove categories")

    def assign_categories(self, product_id: str, category_ids: List[str]) -> List[Dict[str, Any]]:
        """Replace the product's category assignments"""
        if not category_ids:
            self.clear_product_categories(product_id)
            return []

        self._get_product_row(product_id, "id")
        category_ids = list(dict.fromkeys(category_ids))
        try:
            found = self.supabase.table("categories")\
                .select("id")\
                .in_("id", category_ids)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to verify categories")
        if len(found.data or []) != len(category_ids):
            raise HTTPException(status_code=404, detail="One or more categories not found")

        self.clear_product_categories(product_id)
        try:
            result = self.supabase.table("product_categories").insert([
                {"product_id": product_id, "category_id": category_id}
                for category_id in category_ids
            ]).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to assign categories")
        logger.info(f"Assigned {len(category_ids)} categories to product {product_id}")
        return result.data or []
