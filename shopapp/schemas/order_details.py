# shopapp/schemas/order_details.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class OrderDetailCreate(BaseModel):
    order_id: int = Field(gt=0)
    product_id: int = Field(gt=0)
    price: float = Field(ge=0)
    number_of_products: int = Field(ge=1)
    total_money: Optional[float] = Field(default=None, ge=0)
    color: Optional[str] = None


class OrderDetailOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    product_id: int
    price: float
    number_of_products: int
    total_money: float
    color: Optional[str] = None
