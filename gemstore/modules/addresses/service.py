import httpx
from gemstore.config import settings
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
MAX_SUGGESTIONS = 5


class AddressService:
    """Address autocomplete backed by OpenStreetMap Nominatim"""

    def __init__(self, http_client: Optional[httpx.Client] = None):
        self.http_client = http_client

    def suggest(self, query: Optional[str], country: str = "Canada") -> List[str]:
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []
        params = {
            "q": query,
            "format": "json",
            "limit": str(MAX_SUGGESTIONS),
            "addressdetails": "1",
            "countrycodes": "ca" if country == "Canada" else "us",
        }
        headers = {"User-Agent": settings.nominatim_user_agent}
        try:
            if self.http_client is not None:
                response = self.http_client.get(settings.nominatim_url, params=params, headers=headers)
            else:
                with httpx.Client(timeout=10.0) as client:
                    response = client.get(settings.nominatim_url, params=params, headers=headers)
            response.raise_for_status()
            results = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Address lookup failed: {e}")
            return []
        return [r["display_name"] for r in results if r.get("display_name")][:MAX_SUGGESTIONS]
