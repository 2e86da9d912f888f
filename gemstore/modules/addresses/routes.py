from fastapi import APIRouter, Depends
from gemstore.modules.addresses.schemas import AddressSuggestionsResponse
from gemstore.modules.addresses.service import AddressService
from typing import Optional

router = APIRouter(tags=["addresses"])


def get_address_service() -> AddressService:
    return AddressService()


@router.get("/address-suggestions", response_model=AddressSuggestionsResponse)
async def address_suggestions(
    q: Optional[str] = None,
    country: str = "Canada",
    service: AddressService = Depends(get_address_service)
):
    """Checkout address autocomplete (Canada or US)"""
    return AddressSuggestionsResponse(suggestions=service.suggest(q, country))
