# shopapp/services/order_detail_service.py
from typing import List

from sqlalchemy.orm import Session

from shopapp.exceptions import DataNotFoundError
from shopapp.models.order_detail_model import OrderDetail
from shopapp.models.order_model import Order
from shopapp.models.product_model import Product
from shopapp.schemas.order_details import OrderDetailCreate


class OrderDetailService:
    def __init__(self, db: Session):
        self.db = db

    def _require_order_and_product(self, payload: OrderDetailCreate):
        order = self.db.get(Order, payload.order_id)
        if not order:
            raise DataNotFoundError(f"Cannot find order with id: {payload.order_id}")
        product = self.db.get(Product, payload.product_id)
        if not product:
            raise DataNotFoundError(f"Cannot find product with id: {payload.product_id}")
        return order, product

    @staticmethod
    def _line_total(payload: OrderDetailCreate) -> float:
        if payload.total_money is not None:
            return payload.total_money
        return payload.price * payload.number_of_products

    def create_order_detail(self, payload: OrderDetailCreate) -> OrderDetail:
        order, product = self._require_order_and_product(payload)
        detail = OrderDetail(
            order_id=order.id,
            product_id=product.id,
            price=payload.price,
            number_of_products=payload.number_of_products,
            total_money=self._line_total(payload),
            color=payload.color,
        )
        self.db.add(detail)
        self.db.commit()
        self.db.refresh(detail)
        return detail

    def get_order_detail(self, detail_id: int) -> OrderDetail:
        detail = self.db.get(OrderDetail, detail_id)
        if not detail:
            raise DataNotFoundError(f"Cannot find order detail with id: {detail_id}")
        return detail

    def find_by_order_id(self, order_id: int) -> List[OrderDetail]:
        return (
            self.db.query(OrderDetail)
            .filter(OrderDetail.order_id == order_id)
            .order_by(OrderDetail.id)
            .all()
        )

    def update_order_detail(self, detail_id: int, payload: OrderDetailCreate) -> OrderDetail:
        detail = self.get_order_detail(detail_id)
        order, product = self._require_order_and_product(payload)
        detail.order_id = order.id
        detail.product_id = product.id
        detail.price = payload.price
        detail.number_of_products = payload.number_of_products
        detail.total_money = self._line_total(payload)
        detail.color = payload.color
        self.db.commit()
        self.db.refresh(detail)
        return detail

    def delete_by_id(self, detail_id: int) -> None:
        detail = self.db.get(OrderDetail, detail_id)
        if detail is None:
            return
        self.db.delete(detail)
        self.db.commit()
