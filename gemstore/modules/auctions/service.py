from supabase import Client
from gemstore.modules.auctions.schemas import AuctionCreate, AuctionUpdate, AuctionResponse
from gemstore.core.errors import raise_for_api_error
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timedelta, timezone
import logging

logger = logging.getLogger(__name__)

STATUS_PENDING = "pending"
STATUS_ACTIVE = "active"
STATUS_ENDED = "ended"
MAX_DURATION = timedelta(days=30)


def _utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse(value: Any) -> datetime:
    if isinstance(value, datetime):
        return _utc(value)
    return _utc(datetime.fromisoformat(str(value).replace("Z", "+00:00")))


def status_for_window(start_time: datetime, end_time: datetime, now: datetime) -> str:
    if end_time <= now:
        return STATUS_ENDED
    if start_time <= now:
        return STATUS_ACTIVE
    return STATUS_PENDING


def validate_auction(
    starting_bid: float,
    reserve_price: Optional[float],
    start_time: datetime,
    end_time: datetime,
):
    if starting_bid < 0:
        raise HTTPException(status_code=400, detail="Starting bid must be greater than or equal to 0")
    if reserve_price and reserve_price < starting_bid:
        raise HTTPException(status_code=400, detail="Reserve price must be greater than or equal to starting bid")
    if end_time <= start_time:
        raise HTTPException(status_code=400, detail="End time must be after start time")
    if end_time - start_time > MAX_DURATION:
        raise HTTPException(status_code=400, detail="Auction duration cannot exceed 30 days")


class AuctionService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def refresh_statuses(self, now: Optional[datetime] = None) -> None:
        """
        Move pending auctions whose window opened to active, and any pending or
        active auction whose end time has passed to ended
        """
        now_iso = _utc(now or datetime.now(timezone.utc)).isoformat()
        try:
            self.supabase.table("auctions")\
                .update({"status": STATUS_ACTIVE})\
                .eq("status", STATUS_PENDING)\
                .lte("start_time", now_iso)\
                .gt("end_time", now_iso)\
                .execute()
            for status in (STATUS_ACTIVE, STATUS_PENDING):
                self.supabase.table("auctions")\
                    .update({"status": STATUS_ENDED})\
                    .eq("status", status)\
                    .lte("end_time", now_iso)\
                    .execute()
        except Exception as e:
            # Stale statuses are corrected on the next listing
            logger.error(f"Error refreshing auction statuses: {e}")

    def list_auctions(self, include_inactive: bool = False, status: Optional[str] = None) -> List[AuctionResponse]:
        """List auctions, newest first"""
        self.refresh_statuses()
        try:
            query = self.supabase.table("auctions")\
                .select("*")\
                .order("created_at", desc=True)
            if not include_inactive:
                query = query.eq("is_active", True)
            if status:
                query = query.eq("status", status)
            result = query.execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch auctions")
        return [AuctionResponse(**a) for a in result.data or []]

    def _get_auction_row(self, auction_id: str) -> Dict[str, Any]:
        try:
            result = self.supabase.table("auctions")\
                .select("*")\
                .eq("id", auction_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to fetch auction")
        if not result.data:
            raise HTTPException(status_code=404, detail="Auction not found")
        return result.data[0]

    def get_auction(self, auction_id: str) -> AuctionResponse:
        return AuctionResponse(**self._get_auction_row(auction_id))

    def create_auction(self, auction_data: AuctionCreate, now: Optional[datetime] = None) -> AuctionResponse:
        """Create auction; status starts from where now falls in the bidding window"""
        if (not auction_data.title or auction_data.starting_bid is None
                or not auction_data.start_time or not auction_data.end_time):
            raise HTTPException(
                status_code=400,
                detail="Title, starting bid, start time, and end time are required"
            )
        start_time = _utc(auction_data.start_time)
        end_time = _utc(auction_data.end_time)
        validate_auction(auction_data.starting_bid, auction_data.reserve_price, start_time, end_time)

        insert_data = {
            "title": auction_data.title,
            "description": auction_data.description or None,
            "images": auction_data.images,
            "video_url": auction_data.video_url or None,
            "featured_image_index": auction_data.featured_image_index,
            "starting_bid": auction_data.starting_bid,
            "current_bid": auction_data.starting_bid,
            "reserve_price": auction_data.reserve_price or None,
            "bid_count": 0,
            "start_time": start_time.isoformat(),
            "end_time": end_time.isoformat(),
            "status": status_for_window(start_time, end_time, _utc(now or datetime.now(timezone.utc))),
            "is_active": auction_data.is_active,
            "metadata": auction_data.metadata,
        }
        try:
            result = self.supabase.table("auctions").insert(insert_data).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to create auction")
        logger.info(f"Created auction {result.data[0]['id']} ({insert_data['status']})")
        return AuctionResponse(**result.data[0])

    def update_auction(
        self, auction_id: str, auction_data: AuctionUpdate, now: Optional[datetime] = None
    ) -> AuctionResponse:
        """Partial update validated against the merged auction"""
        existing = self._get_auction_row(auction_id)
        provided = auction_data.model_dump(exclude_unset=True)

        starting_bid = provided.get("starting_bid")
        if starting_bid is None:
            starting_bid = existing["starting_bid"]
        reserve_price = provided["reserve_price"] if "reserve_price" in provided else existing.get("reserve_price")
        start_time = _utc(provided["start_time"]) if provided.get("start_time") else _parse(existing["start_time"])
        end_time = _utc(provided["end_time"]) if provided.get("end_time") else _parse(existing["end_time"])
        validate_auction(starting_bid, reserve_price, start_time, end_time)

        if provided.get("start_time") or provided.get("end_time"):
            status = status_for_window(start_time, end_time, _utc(now or datetime.now(timezone.utc)))
        else:
            status = provided.get("status") or existing["status"]

        update_data = {
            field: provided[field]
            for field in ("title", "description", "images", "video_url", "featured_image_index", "is_active", "metadata")
            if field in provided
        }
        if "starting_bid" in provided:
            update_data["starting_bid"] = starting_bid
        if "reserve_price" in provided:
            update_data["reserve_price"] = reserve_price or None
        if provided.get("start_time"):
            update_data["start_time"] = start_time.isoformat()
        if provided.get("end_time"):
            update_data["end_time"] = end_time.isoformat()
        update_data["status"] = status
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            result = self.supabase.table("auctions")\
                .update(update_data)\
                .eq("id", auction_id)\
                .execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to update auction")
        return AuctionResponse(**result.data[0])

    def delete_auction(self, auction_id: str) -> None:
        """Delete an auction nobody has bid on"""
        auction = self._get_auction_row(auction_id)
        if (auction.get("bid_count") or 0) > 0:
            raise HTTPException(
                status_code=400,
                detail="Cannot delete auction with existing bids. Consider setting it as inactive instead."
            )
        try:
            self.supabase.table("auctions").delete().eq("id", auction_id).execute()
        except Exception as e:
            raise_for_api_error(e, "Failed to delete auction")
        logger.info(f"Deleted auction {auction_id}")
