from supabase import Client
from gemstore.core.errors import raise_for_api_error
from gemstore.modules.content.service import ContentTableService
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/images/placeholder.jpg"
DEFAULT_CARD_COLOR = "#1f2937"


def default_description(gem_type: str) -> str:
    return (
        f"Hand-mined {gem_type} from Alberta, Canada. "
        "Premium quality gemstone with exceptional clarity and natural beauty."
    )


def product_card(product: Dict[str, Any]) -> Dict[str, Any]:
    """Shape a featured product row into a storefront card"""
    metadata = product.get("metadata") or {}
    images = product.get("images") or []
    on_sale_price = product.get("sale_price") if product.get("on_sale") else None
    return {
        "id": product["id"],
        "name": product["name"],
        "type": product.get("category"),
        "description": product.get("description") or default_description(product.get("category") or "gemstone"),
        "image_url": images[0] if images else PLACEHOLDER_IMAGE,
        "card_color": metadata.get("card_color") or DEFAULT_CARD_COLOR,
        "price": on_sale_price or product.get("price"),
        "original_price": product.get("price"),
        "product_id": product["id"],
        "sort_order": 1,
        "is_active": product.get("is_active"),
    }


class FeaturedProductService(ContentTableService):
    def __init__(self, supabase: Client):
        super().__init__(
            supabase, "featured_products", "featured product",
            ("name", "type", "image_url"), "Missing required fields",
        )

    def storefront_cards(self) -> List[Dict[str, Any]]:
        """Cards for active featured products that are not hidden, newest first"""
        try:
            result = self.supabase.table("products")\
                .select("*")\
                .eq("featured", True)\
                .eq("is_active", True)\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch featured products")
        products = [
            p for p in result.data or []
            if (p.get("metadata") or {}).get("frontend_visible") is not False
        ]
        return [product_card(p) for p in products]
