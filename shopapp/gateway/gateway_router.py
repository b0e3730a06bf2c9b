# shopapp/gateway/gateway_router.py
from fastapi import APIRouter

from shopapp.routers.users_router import router as users_router
from shopapp.routers.roles_router import router as roles_router
from shopapp.routers.categories_router import router as categories_router
from shopapp.routers.products_router import router as products_router
from shopapp.routers.orders_router import router as orders_router
from shopapp.routers.order_details_router import router as order_details_router

# mounted under API_PREFIX by create_app()
gateway_router = APIRouter()

gateway_router.include_router(users_router)          # /users/...
gateway_router.include_router(roles_router)          # /roles
gateway_router.include_router(categories_router)     # /categories/...
gateway_router.include_router(products_router)       # /products/...
gateway_router.include_router(orders_router)         # /orders/...
gateway_router.include_router(order_details_router)  # /order_details/...
