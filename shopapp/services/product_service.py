# shopapp/services/product_service.py
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shopapp.config.settings import MAX_IMAGES_PER_PRODUCT
from shopapp.exceptions import DataNotFoundError, InvalidParamError
from shopapp.models.category_model import Category
from shopapp.models.order_detail_model import OrderDetail
from shopapp.models.product_model import Product, ProductImage
from shopapp.schemas.products import ProductCreate, ProductUpdate, ProductImageCreate
from shopapp.services.mapping import apply_fields
from shopapp.services.pagination import paginate


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def _require_category(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if not category:
            raise DataNotFoundError(f"Cannot find category with id: {category_id}")
        return category

    def create_product(self, payload: ProductCreate) -> Product:
        self._require_category(payload.category_id)
        product = apply_fields(payload, Product(), exclude_unset=False)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def get_product_by_id(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if not product:
            raise DataNotFoundError(f"Cannot find product with id: {product_id}")
        return product

    def get_all_products(
        self,
        keyword: Optional[str] = None,
        category_id: Optional[int] = None,
        page: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Product], int]:
        q = self.db.query(Product)
        if category_id:
            q = q.filter(Product.category_id == category_id)
        if keyword:
            like = f"%{keyword}%"
            q = q.filter(or_(Product.name.ilike(like), Product.description.ilike(like)))
        return paginate(q.order_by(Product.id.desc()), page, limit)

    def update_product(self, product_id: int, payload: ProductUpdate) -> Product:
        product = self.get_product_by_id(product_id)
        if payload.category_id is not None:
            self._require_category(payload.category_id)
        apply_fields(payload, product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product_by_id(product_id)
        ordered = self.db.query(OrderDetail.id).filter(OrderDetail.product_id == product_id).first()
        if ordered:
            raise InvalidParamError("Cannot delete a product that appears in orders")
        self.db.delete(product)
        self.db.commit()

    def create_product_image(self, product_id: int, payload: ProductImageCreate) -> ProductImage:
        product = self.get_product_by_id(product_id)
        count = self.db.query(ProductImage).filter(ProductImage.product_id == product.id).count()
        if count >= MAX_IMAGES_PER_PRODUCT:
            raise InvalidParamError(f"Number of images must be <= {MAX_IMAGES_PER_PRODUCT}")
        image = ProductImage(product_id=product.id, image_url=payload.image_url)
        self.db.add(image)
        if not product.thumbnail:
            product.thumbnail = payload.image_url
        self.db.commit()
        self.db.refresh(image)
        return image

    def get_product_images(self, product_id: int) -> List[ProductImage]:
        self.get_product_by_id(product_id)
        return (
            self.db.query(ProductImage)
            .filter(ProductImage.product_id == product_id)
            .order_by(ProductImage.id)
            .all()
        )
