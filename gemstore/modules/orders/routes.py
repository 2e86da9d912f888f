from fastapi import APIRouter, Depends, Query
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.orders.schemas import (
    OrderCreate, OrderCreateResponse, OrderDetailResponse,
    OrderListResponse, OrderDeleteResponse
)
from gemstore.modules.orders.service import OrderService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(supabase: Client = Depends(get_supabase)) -> OrderService:
    return OrderService(supabase)


@router.post("", response_model=OrderCreateResponse, status_code=201)
async def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """Place an order after payment: checks stock (409 when short), saves, reserves inventory"""
    return OrderCreateResponse(order=service.create_order(order_data))


@router.get("", response_model=OrderListResponse)
async def list_orders(
    mode: str = Query("dev", pattern="^(dev|live)$"),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    admin: Dict = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """List test (mode=dev) or live (mode=live) orders, newest first"""
    return OrderListResponse(orders=service.list_orders(mode=mode, limit=limit, offset=offset))


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service)
):
    """Get order by ID (checkout confirmation page)"""
    return OrderDetailResponse(order=service.get_order_by_id(order_id))


@router.delete("/{order_id}", response_model=OrderDeleteResponse)
async def delete_order(
    order_id: str,
    admin: Dict = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """Delete a test order; live orders answer 403"""
    service.delete_order(order_id)
    return OrderDeleteResponse(message="Test order deleted successfully")
