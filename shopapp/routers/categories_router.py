# shopapp/routers/categories_router.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.schemas.categories import CategoryCreate, CategoryOut, CategoryResponse
from shopapp.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryResponse)
def create_category(body: CategoryCreate, db: Session = Depends(get_db)):
    category = CategoryService(db).create_category(body)
    return CategoryResponse(
        message="Insert category successfully",
        category=CategoryOut.model_validate(category),
    )


@router.get("", response_model=List[CategoryOut])
def get_all_categories(
    page: int = Query(default=0, ge=0),
    limit: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    """All categories; ``limit=0`` returns everything."""
    categories = CategoryService(db).get_all_categories(page, limit)
    return [CategoryOut.model_validate(c) for c in categories]


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return CategoryOut.model_validate(CategoryService(db).get_category_by_id(category_id))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(category_id: int, body: CategoryCreate, db: Session = Depends(get_db)):
    category = CategoryService(db).update_category(category_id, body)
    return CategoryResponse(
        message="Update category successfully",
        category=CategoryOut.model_validate(category),
    )


@router.delete("/{category_id}", response_model=CategoryResponse)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    CategoryService(db).delete_category(category_id)
    return CategoryResponse(message=f"Delete category with id: {category_id} successfully")
