# shopapp/models/order_detail_model.py
from sqlalchemy import Column, Integer, Float, ForeignKey
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship
from shopapp.database.session import Base


class OrderDetail(Base):
    __tablename__ = "order_details"
    id                 = Column(Integer, primary_key=True, index=True)
    order_id           = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id         = Column(Integer, ForeignKey("products.id"), nullable=False)
    price              = Column(Float, nullable=False)
    number_of_products = Column(Integer, nullable=False)
    total_money        = Column(Float, nullable=False, default=0)
    color              = Column(Unicode(20))

    order   = relationship("Order", back_populates="order_details")
    product = relationship("Product")
