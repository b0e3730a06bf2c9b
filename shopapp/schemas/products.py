# shopapp/schemas/products.py
from datetime import datetime
from typing import List, Optional, NewType
from pydantic import BaseModel, ConfigDict, Field, constr

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=3, max_length=200))
ImageUrl = NewType("ImageUrl", constr(strip_whitespace=True, min_length=5, max_length=200))


class ProductCreate(BaseModel):
    name: NameStr
    price: float = Field(ge=0, le=10_000_000)
    thumbnail: Optional[str] = ""
    description: Optional[str] = ""
    category_id: int = Field(gt=0)


class ProductUpdate(BaseModel):
    name: Optional[NameStr] = None
    price: Optional[float] = Field(default=None, ge=0, le=10_000_000)
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = Field(default=None, gt=0)


class ProductImageCreate(BaseModel):
    image_url: ImageUrl


class ProductImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    image_url: str


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    category_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductListResponse(BaseModel):
    products: List[ProductOut] = []
    total_pages: int = 0


class ProductResponse(BaseModel):
    message: str
    product: Optional[ProductOut] = None
