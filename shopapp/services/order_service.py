# shopapp/services/order_service.py
"""
Order lifecycle.

An order and its line items are written in one transaction: if any cart
item references a missing product nothing is persisted. Orders are never
physically removed; deleting one only clears its ``active`` flag.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import or_, true
from sqlalchemy.orm import Session, selectinload

from shopapp.exceptions import DataNotFoundError, InvalidParamError
from shopapp.models.order_detail_model import OrderDetail
from shopapp.models.order_model import Order, OrderStatus
from shopapp.models.product_model import Product
from shopapp.models.user_model import User
from shopapp.schemas.orders import OrderCreate, OrderUpdate
from shopapp.services.mapping import apply_fields
from shopapp.services.pagination import paginate

logger = logging.getLogger(__name__)

# filled in by create_order itself, not copied from the payload
_CREATE_SKIP = ("id", "user_id", "cart_items", "shipping_date", "total_money")


class OrderService:
    def __init__(self, db: Session):
        self.db = db

    def _require_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise DataNotFoundError(f"Cannot find user with id: {user_id}")
        return user

    def create_order(self, payload: OrderCreate) -> Order:
        user = self._require_user(payload.user_id)

        today = date.today()
        shipping_date = payload.shipping_date or today
        if shipping_date < today:
            raise InvalidParamError("Date must be at least today!")

        order = Order(
            user_id=user.id,
            order_date=today,
            status=OrderStatus.PENDING,
            shipping_date=shipping_date,
            active=True,
        )
        apply_fields(payload, order, skip=_CREATE_SKIP, exclude_unset=False, exclude_none=False)

        try:
            self.db.add(order)
            self.db.flush()

            lines_total = 0.0
            for item in payload.cart_items:
                product = self.db.get(Product, item.product_id)
                if not product:
                    raise DataNotFoundError(f"Product not found with id: {item.product_id}")
                line_total = product.price * item.quantity
                self.db.add(OrderDetail(
                    order_id=order.id,
                    product_id=product.id,
                    price=product.price,
                    number_of_products=item.quantity,
                    total_money=line_total,
                ))
                lines_total += line_total

            order.total_money = payload.total_money if payload.total_money is not None else lines_total
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(order)
        logger.info("Created order id=%s for user id=%s (%d items)",
                    order.id, user.id, len(payload.cart_items))
        return order

    def get_order(self, order_id: int) -> Order:
        """Looks up an order by id whether or not it has been soft-deleted."""
        order = (
            self.db.query(Order)
            .options(selectinload(Order.order_details))
            .filter(Order.id == order_id)
            .first()
        )
        if not order:
            raise DataNotFoundError(f"Cannot find order with id: {order_id}")
        return order

    def update_order(self, order_id: int, payload: OrderUpdate) -> Order:
        """Overwrite an order's fields; orders in a terminal status refuse every update."""
        order = self.get_order(order_id)
        self._require_user(payload.user_id)

        # delivered and cancelled orders are frozen
        if order.status in OrderStatus.TERMINAL:
            raise InvalidParamError(f"Order is already {order.status} and cannot be changed")
        if payload.shipping_date is not None and order.order_date and payload.shipping_date < order.order_date:
            raise InvalidParamError("Shipping date cannot be before the order date")

        apply_fields(payload, order)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order

    def delete_order(self, order_id: int) -> None:
        order = self.db.get(Order, order_id)
        if order is None:
            return
        order.active = False
        self.db.commit()
        logger.info("Soft-deleted order id=%s", order_id)

    def find_by_user_id(self, user_id: int) -> List[Order]:
        return (
            self.db.query(Order)
            .options(selectinload(Order.order_details))
            .filter(Order.user_id == user_id, Order.active == true())
            .order_by(Order.id.desc())
            .all()
        )

    def get_orders_by_keyword(
        self, keyword: Optional[str], page: int = 0, limit: int = 10
    ) -> Tuple[List[Order], int]:
        q = (
            self.db.query(Order)
            .options(selectinload(Order.order_details))
            .filter(Order.active == true())
        )
        if keyword:
            like = f"%{keyword}%"
            q = q.filter(or_(
                Order.fullname.ilike(like),
                Order.address.ilike(like),
                Order.note.ilike(like),
                Order.tracking_number.ilike(like),
            ))
        return paginate(q.order_by(Order.id.desc()), page, limit)
