# shopapp/models/__init__.py
from .role_model import Role
from .user_model import User
from .category_model import Category
from .product_model import Product, ProductImage
from .order_model import Order, OrderStatus
from .order_detail_model import OrderDetail

__all__ = [
    "Role", "User", "Category", "Product", "ProductImage",
    "Order", "OrderStatus", "OrderDetail",
]
