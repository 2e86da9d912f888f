from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime


class AuctionCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    images: List[str] = []
    video_url: Optional[str] = None
    featured_image_index: int = 0
    starting_bid: Optional[float] = None
    reserve_price: Optional[float] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    is_active: bool = True
    metadata: Dict[str, Any] = {}


class AuctionUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    featured_image_index: Optional[int] = None
    starting_bid: Optional[float] = None
    reserve_price: Optional[float] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[str] = None
    is_active: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class AuctionResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    featured_image_index: Optional[int] = 0
    starting_bid: float
    current_bid: Optional[float] = None
    reserve_price: Optional[float] = None
    bid_count: Optional[int] = 0
    start_time: datetime
    end_time: datetime
    status: str
    is_active: Optional[bool] = True
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuctionListResponse(BaseModel):
    success: bool = True
    auctions: List[AuctionResponse]
    count: int


class AuctionDetailResponse(BaseModel):
    success: bool = True
    auction: AuctionResponse


class AuctionMutationResponse(BaseModel):
    success: bool = True
    message: str
    auction: Optional[AuctionResponse] = None
