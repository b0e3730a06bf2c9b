# shopapp/services/category_service.py
from typing import List

from sqlalchemy.orm import Session

from shopapp.exceptions import DataNotFoundError, DuplicateDataError, InvalidParamError
from shopapp.models.category_model import Category
from shopapp.models.product_model import Product
from shopapp.schemas.categories import CategoryCreate


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def _ensure_unique(self, name: str, exclude_id: int = None) -> None:
        q = self.db.query(Category.id).filter(Category.name == name)
        if exclude_id is not None:
            q = q.filter(Category.id != exclude_id)
        if q.first():
            raise DuplicateDataError(f"Category '{name}' already exists")

    def create_category(self, payload: CategoryCreate) -> Category:
        self._ensure_unique(payload.name)
        category = Category(name=payload.name)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def get_category_by_id(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if not category:
            raise DataNotFoundError(f"Category not found with id: {category_id}")
        return category

    def get_all_categories(self, page: int = 0, limit: int = 0) -> List[Category]:
        q = self.db.query(Category).order_by(Category.id)
        if limit > 0:
            q = q.offset(max(page, 0) * limit).limit(limit)
        return q.all()

    def update_category(self, category_id: int, payload: CategoryCreate) -> Category:
        category = self.get_category_by_id(category_id)
        self._ensure_unique(payload.name, exclude_id=category_id)
        category.name = payload.name
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int) -> None:
        category = self.get_category_by_id(category_id)
        in_use = self.db.query(Product.id).filter(Product.category_id == category_id).first()
        if in_use:
            raise InvalidParamError("Cannot delete a category that still has products")
        self.db.delete(category)
        self.db.commit()
