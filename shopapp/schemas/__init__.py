# shopapp/schemas/__init__.py

# users
from .users import (
    RegisterPayload, RegisterResponse, LoginPayload, LoginResponse,
    UpdateUserPayload, UserOut, RoleOut,
)

# catalog
from .categories import CategoryCreate, CategoryOut, CategoryResponse
from .products import (
    ProductCreate, ProductUpdate, ProductOut, ProductListResponse, ProductResponse,
    ProductImageCreate, ProductImageOut,
)

# orders
from .orders import (
    OrderCreate, OrderUpdate, OrderOut, OrderListResponse, OrderStatusValue, CartItemIn,
)
from .order_details import OrderDetailCreate, OrderDetailOut

__all__ = [
    # users
    "RegisterPayload", "RegisterResponse", "LoginPayload", "LoginResponse",
    "UpdateUserPayload", "UserOut", "RoleOut",
    # catalog
    "CategoryCreate", "CategoryOut", "CategoryResponse",
    "ProductCreate", "ProductUpdate", "ProductOut", "ProductListResponse", "ProductResponse",
    "ProductImageCreate", "ProductImageOut",
    # orders
    "OrderCreate", "OrderUpdate", "OrderOut", "OrderListResponse", "OrderStatusValue", "CartItemIn",
    "OrderDetailCreate", "OrderDetailOut",
]
