from fastapi import APIRouter, Depends, HTTPException, Query
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.auctions.schemas import (
    AuctionCreate, AuctionUpdate, AuctionListResponse, AuctionDetailResponse,
    AuctionMutationResponse
)
from gemstore.modules.auctions.service import AuctionService
from gemstore.core.dependencies import require_admin, optional_admin
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/auctions", tags=["auctions"])


def get_auction_service(supabase: Client = Depends(get_supabase)) -> AuctionService:
    return AuctionService(supabase)


@router.get("", response_model=AuctionListResponse)
async def list_auctions(
    include_inactive: bool = Query(False, alias="includeInactive"),
    status: Optional[str] = None,
    admin: Optional[Dict] = Depends(optional_admin),
    service: AuctionService = Depends(get_auction_service)
):
    """List auctions (statuses are refreshed first)"""
    if include_inactive and admin is None:
        raise HTTPException(status_code=401, detail="Admin access required to include inactive auctions")
    auctions = service.list_auctions(include_inactive=include_inactive, status=status)
    return AuctionListResponse(auctions=auctions, count=len(auctions))


@router.post("", response_model=AuctionMutationResponse, status_code=201)
async def create_auction(
    auction_data: AuctionCreate,
    admin: Dict = Depends(require_admin),
    service: AuctionService = Depends(get_auction_service)
):
    return AuctionMutationResponse(
        message="Auction created successfully",
        auction=service.create_auction(auction_data)
    )


@router.get("/{auction_id}", response_model=AuctionDetailResponse)
async def get_auction(
    auction_id: str,
    service: AuctionService = Depends(get_auction_service)
):
    return AuctionDetailResponse(auction=service.get_auction(auction_id))


@router.put("/{auction_id}", response_model=AuctionMutationResponse)
async def update_auction(
    auction_id: str,
    auction_data: AuctionUpdate,
    admin: Dict = Depends(require_admin),
    service: AuctionService = Depends(get_auction_service)
):
    return AuctionMutationResponse(
        message="Auction updated successfully",
        auction=service.update_auction(auction_id, auction_data)
    )


@router.delete("/{auction_id}", response_model=AuctionMutationResponse)
async def delete_auction(
    auction_id: str,
    admin: Dict = Depends(require_admin),
    service: AuctionService = Depends(get_auction_service)
):
    """Delete auction (400 once bids exist)"""
    service.delete_auction(auction_id)
    return AuctionMutationResponse(message="Auction deleted successfully")
