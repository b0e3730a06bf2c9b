# shopapp/models/product_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship
from shopapp.database.session import Base


class Product(Base):
    __tablename__ = "products"

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(Unicode(350), nullable=False)
    price       = Column(Float, nullable=False, default=0)
    thumbnail   = Column(Unicode(300), default="")
    description = Column(UnicodeText, default="")
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    created_at  = Column(DateTime, default=datetime.utcnow)
    updated_at  = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category")
    images   = relationship("ProductImage", cascade="all, delete-orphan", back_populates="product")


class ProductImage(Base):
    __tablename__ = "product_images"

    id         = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    image_url  = Column(Unicode(300), nullable=False)

    product = relationship("Product", back_populates="images")
