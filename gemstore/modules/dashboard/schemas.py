from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime


class RecentOrder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    customer_email: Optional[str] = Field(default=None, alias="customerEmail")
    total: float = 0
    status: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class LowStockProduct(BaseModel):
    id: Optional[str] = None
    name: str
    inventory: int = 0


class DashboardStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mode: str
    total_revenue: float = Field(alias="totalRevenue")
    recent_revenue: float = Field(alias="recentRevenue")
    revenue_change: float = Field(alias="revenueChange")
    total_orders: int = Field(alias="totalOrders")
    recent_orders_count: int = Field(alias="recentOrdersCount")
    orders_change: float = Field(alias="ordersChange")
    total_customers: int = Field(alias="totalCustomers")
    recent_customers: int = Field(alias="recentCustomers")
    customers_change: float = Field(alias="customersChange")
    total_products: int = Field(alias="totalProducts")
    top_product: str = Field(alias="topProduct")
    stock_status: str = Field(alias="stockStatus")
    low_stock_products: List[LowStockProduct] = Field(alias="lowStockProducts")
    recent_orders: List[RecentOrder] = Field(alias="recentOrders")


class DashboardStatsResponse(BaseModel):
    success: bool = True
    stats: DashboardStats
