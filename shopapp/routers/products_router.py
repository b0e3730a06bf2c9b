# shopapp/routers/products_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.schemas.products import (
    ProductCreate, ProductUpdate, ProductOut, ProductListResponse, ProductResponse,
    ProductImageCreate, ProductImageOut,
)
from shopapp.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
def list_products(
    keyword: Optional[str] = Query(default=None),
    category_id: Optional[int] = Query(default=None),
    page: int = Query(default=0, ge=0),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    products, total_pages = ProductService(db).get_all_products(keyword, category_id, page, limit)
    return ProductListResponse(
        products=[ProductOut.model_validate(p) for p in products],
        total_pages=total_pages,
    )


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return ProductOut.model_validate(ProductService(db).get_product_by_id(product_id))


@router.post("", response_model=ProductOut)
def create_product(body: ProductCreate, db: Session = Depends(get_db)):
    return ProductOut.model_validate(ProductService(db).create_product(body))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, body: ProductUpdate, db: Session = Depends(get_db)):
    return ProductOut.model_validate(ProductService(db).update_product(product_id, body))


@router.delete("/{product_id}", response_model=ProductResponse)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    ProductService(db).delete_product(product_id)
    return ProductResponse(message=f"Product with id: {product_id} deleted successfully")


@router.post("/{product_id}/images", response_model=ProductImageOut)
def add_product_image(product_id: int, body: ProductImageCreate, db: Session = Depends(get_db)):
    return ProductImageOut.model_validate(ProductService(db).create_product_image(product_id, body))


@router.get("/{product_id}/images", response_model=List[ProductImageOut])
def get_product_images(product_id: int, db: Session = Depends(get_db)):
    return [ProductImageOut.model_validate(i) for i in ProductService(db).get_product_images(product_id)]
