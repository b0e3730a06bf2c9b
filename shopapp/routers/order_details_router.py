# shopapp/routers/order_details_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.schemas.order_details import OrderDetailCreate, OrderDetailOut
from shopapp.services.order_detail_service import OrderDetailService

router = APIRouter(prefix="/order_details", tags=["order-details"])


@router.post("", response_model=OrderDetailOut)
def create_order_detail(body: OrderDetailCreate, db: Session = Depends(get_db)):
    return OrderDetailOut.model_validate(OrderDetailService(db).create_order_detail(body))


@router.get("/order/{order_id}", response_model=List[OrderDetailOut])
def get_order_details(order_id: int, db: Session = Depends(get_db)):
    """Line items of one order."""
    return [OrderDetailOut.model_validate(d) for d in OrderDetailService(db).find_by_order_id(order_id)]


@router.get("/{detail_id}", response_model=OrderDetailOut)
def get_order_detail(detail_id: int, db: Session = Depends(get_db)):
    return OrderDetailOut.model_validate(OrderDetailService(db).get_order_detail(detail_id))


@router.put("/{detail_id}", response_model=OrderDetailOut)
def update_order_detail(detail_id: int, body: OrderDetailCreate, db: Session = Depends(get_db)):
    return OrderDetailOut.model_validate(OrderDetailService(db).update_order_detail(detail_id, body))


@router.delete("/{detail_id}", response_model=dict)
def delete_order_detail(detail_id: int, db: Session = Depends(get_db)):
    OrderDetailService(db).delete_by_id(detail_id)
    return {"message": f"Delete order detail with id: {detail_id}"}
