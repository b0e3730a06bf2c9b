# shopapp/routers/orders_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.schemas.orders import OrderCreate, OrderUpdate, OrderOut, OrderListResponse
from shopapp.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut)
def create_order(body: OrderCreate, db: Session = Depends(get_db)):
    return OrderOut.model_validate(OrderService(db).create_order(body))


@router.get("", response_model=OrderListResponse)
def get_orders_by_keyword(
    keyword: Optional[str] = Query(default=None),
    page: int = Query(default=0, ge=0),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    orders, total_pages = OrderService(db).get_orders_by_keyword(keyword, page, limit)
    return OrderListResponse(
        orders=[OrderOut.model_validate(o) for o in orders],
        total_pages=total_pages,
    )


@router.get("/user/{user_id}", response_model=List[OrderOut])
def get_user_orders(user_id: int, db: Session = Depends(get_db)):
    return [OrderOut.model_validate(o) for o in OrderService(db).find_by_user_id(user_id)]


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, db: Session = Depends(get_db)):
    return OrderOut.model_validate(OrderService(db).get_order(order_id))


@router.put("/{order_id}", response_model=OrderOut)
def update_order(order_id: int, body: OrderUpdate, db: Session = Depends(get_db)):
    return OrderOut.model_validate(OrderService(db).update_order(order_id, body))


@router.delete("/{order_id}", response_model=dict)
def delete_order(order_id: int, db: Session = Depends(get_db)):
    # soft delete
    OrderService(db).delete_order(order_id)
    return {"message": f"Order with id: {order_id} deleted successfully"}
