from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime


class SiteContentCreate(BaseModel):
    section: Optional[str] = None
    key: Optional[str] = None
    content_type: Optional[str] = None
    value: Optional[str] = None
    metadata: Dict[str, Any] = {}
    is_active: bool = True


class SiteContentUpdate(BaseModel):
    value: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class SiteContentResponse(BaseModel):
    id: str
    section: str
    key: str
    content_type: Optional[str] = "text"
    value: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SiteContentListResponse(BaseModel):
    success: bool = True
    content: List[SiteContentResponse]


class PublicContentListResponse(SiteContentListResponse):
    count: int


class SiteContentDetailResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    content: SiteContentResponse


class SiteContentDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Content deleted successfully"


class PageFieldCreate(BaseModel):
    section: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None


class PageFieldUpdate(BaseModel):
    value: Optional[str] = None
