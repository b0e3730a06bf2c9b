# shopapp/schemas/categories.py
from typing import Optional, NewType
from pydantic import BaseModel, ConfigDict, constr

CategoryName = NewType("CategoryName", constr(strip_whitespace=True, min_length=1, max_length=100))


class CategoryCreate(BaseModel):
    name: CategoryName


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CategoryResponse(BaseModel):
    message: str
    category: Optional[CategoryOut] = None
