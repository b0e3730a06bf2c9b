# shopapp/schemas/orders.py
from datetime import date
from typing import List, Optional, Literal, NewType
from pydantic import BaseModel, ConfigDict, EmailStr, Field, constr

from shopapp.models.order_model import OrderStatus

from .order_details import OrderDetailOut

# Literal[tuple] expands to the tuple's members
OrderStatusValue = Literal[OrderStatus.ALL]
Phone = NewType("Phone", constr(strip_whitespace=True, min_length=5, max_length=20))


class CartItemIn(BaseModel):
    product_id: int = Field(gt=0)
    quantity: int = Field(gt=0)


class OrderCreate(BaseModel):
    user_id: int = Field(gt=0)
    fullname: str = ""
    email: Optional[EmailStr] = None
    phone_number: Phone
    address: str = ""
    note: str = ""
    total_money: Optional[float] = Field(default=None, ge=0)
    shipping_method: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_date: Optional[date] = None
    payment_method: Optional[str] = None
    cart_items: List[CartItemIn] = []


class OrderUpdate(BaseModel):
    user_id: int = Field(gt=0)
    fullname: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[Phone] = None
    address: Optional[str] = None
    note: Optional[str] = None
    total_money: Optional[float] = Field(default=None, ge=0)
    shipping_method: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_date: Optional[date] = None
    tracking_number: Optional[str] = None
    payment_method: Optional[str] = None
    status: Optional[OrderStatusValue] = None


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    fullname: Optional[str] = None
    email: Optional[str] = None
    phone_number: str
    address: Optional[str] = None
    note: Optional[str] = None
    order_date: Optional[date] = None
    status: OrderStatusValue
    total_money: float
    shipping_method: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_date: Optional[date] = None
    tracking_number: Optional[str] = None
    payment_method: Optional[str] = None
    active: bool
    order_details: List[OrderDetailOut] = []


class OrderListResponse(BaseModel):
    orders: List[OrderOut] = []
    total_pages: int = 0
