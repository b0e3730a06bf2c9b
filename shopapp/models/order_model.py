# shopapp/models/order_model.py
from sqlalchemy import Column, Integer, Float, Boolean, Date, ForeignKey
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship
from shopapp.database.session import Base


class OrderStatus:
    PENDING    = "pending"
    PROCESSING = "processing"
    SHIPPED    = "shipped"
    DELIVERED  = "delivered"
    CANCELLED  = "cancelled"

    ALL = (PENDING, PROCESSING, SHIPPED, DELIVERED, CANCELLED)
    TERMINAL = (DELIVERED, CANCELLED)


class Order(Base):
    __tablename__ = "orders"
    id               = Column(Integer, primary_key=True, index=True)
    user_id          = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    fullname         = Column(Unicode(100), default="")
    email            = Column(Unicode(100), default="")
    phone_number     = Column(Unicode(20), nullable=False)
    address          = Column(Unicode(200), nullable=False)
    note             = Column(Unicode(100), default="")
    order_date       = Column(Date)
    status           = Column(Unicode(20), nullable=False, default=OrderStatus.PENDING)
    total_money      = Column(Float, nullable=False, default=0)
    shipping_method  = Column(Unicode(100))
    shipping_address = Column(Unicode(200))
    shipping_date    = Column(Date)
    tracking_number  = Column(Unicode(100))
    payment_method   = Column(Unicode(100))
    active           = Column(Boolean, nullable=False, default=True)

    user          = relationship("User")
    order_details = relationship("OrderDetail", cascade="all, delete-orphan", back_populates="order")
