# shopapp/models/user_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship
from shopapp.database.session import Base


class User(Base):
    __tablename__ = "users"
    id                  = Column(Integer, primary_key=True, index=True)
    fullname            = Column(Unicode(100), default="")
    phone_number        = Column(Unicode(20), unique=True, nullable=False, index=True)
    address             = Column(Unicode(200), default="")
    password            = Column(Unicode(100), nullable=True)  # NULL for facebook/google accounts
    is_active           = Column(Boolean, nullable=False, default=True)
    date_of_birth       = Column(Date)
    facebook_account_id = Column(Integer, nullable=False, default=0)
    google_account_id   = Column(Integer, nullable=False, default=0)
    role_id             = Column(Integer, ForeignKey("roles.id"), nullable=False)
    created_at          = Column(DateTime, default=datetime.utcnow)
    updated_at          = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    role = relationship("Role", lazy="joined")

    @property
    def is_federated(self) -> bool:
        return bool(self.facebook_account_id) or bool(self.google_account_id)
