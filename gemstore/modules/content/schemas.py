from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class FAQCreate(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True


class FAQUpdate(BaseModel):
    id: Optional[str] = None
    question: Optional[str] = None
    answer: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class FAQResponse(BaseModel):
    id: str
    question: str
    answer: str
    sort_order: Optional[int] = 0
    is_active: Optional[bool] = True


class StatCreate(BaseModel):
    title: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    data_source: str = "manual"
    is_real_time: bool = False
    sort_order: int = 0
    is_active: bool = True


class StatUpdate(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    data_source: Optional[str] = None
    is_real_time: Optional[bool] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class StatResponse(BaseModel):
    id: str
    title: str
    value: str
    description: Optional[str] = None
    icon: Optional[str] = None
    data_source: Optional[str] = "manual"
    is_real_time: Optional[bool] = False
    sort_order: Optional[int] = 0
    is_active: Optional[bool] = True


class GemFactCreate(BaseModel):
    fact: Optional[str] = None
    gem_type: Optional[str] = None
    source: Optional[str] = None
    is_active: bool = True


class GemFactUpdate(BaseModel):
    id: Optional[str] = None
    fact: Optional[str] = None
    gem_type: Optional[str] = None
    source: Optional[str] = None
    is_active: Optional[bool] = None


class GemFactResponse(BaseModel):
    id: Optional[str] = None
    fact: str
    gem_type: Optional[str] = None
    source: Optional[str] = None
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None


class ContentDeleteResponse(BaseModel):
    success: bool = True
