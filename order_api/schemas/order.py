"""
Order schemas
"""
from typing import Any, Dict, List, Literal, Union
from pydantic import BaseModel, Field

Number = Union[int, float]
Area = Literal["dhaka", "outside"]


class Customer(BaseModel):
    """Customer contact details"""
    name: str = Field(..., min_length=1, description="Customer name")
    phone: str = Field(..., min_length=1, description="Phone number")
    address: str = Field(..., min_length=1, description="Delivery address")


class Order(BaseModel):
    """Stored order"""
    orderId: str = Field(..., description="Order code, e.g. GG-7KQ2M9XHPA")
    createdAt: str = Field(..., description="Creation time (ISO-8601, UTC)")
    status: str = Field("new", description="Order status")
    productId: str = Field(..., min_length=1)
    productName: str = Field(..., min_length=1)
    productLink: str = ""
    unitPrice: Number = Field(..., description="Price of one item")
    qty: int = Field(..., ge=1)
    size: str = ""
    area: Area
    shipping: Number = Field(..., description="70 inside Dhaka, 130 outside")
    total: Number = Field(..., description="qty * unitPrice + shipping")
    customer: Customer


class OrderCreatedResponse(BaseModel):
    ok: bool = True
    orderId: str


class OrderListResponse(BaseModel):
    ok: bool = True
    # Stored records are returned as-is
    orders: List[Dict[str, Any]]


class DeleteResponse(BaseModel):
    ok: bool = True
    deleted: int = Field(..., ge=0, description="Number of orders removed")
