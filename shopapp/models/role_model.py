# shopapp/models/role_model.py
from sqlalchemy import Column, Integer, String
from shopapp.database.session import Base


class Role(Base):
    __tablename__ = "roles"
    id   = Column(Integer, primary_key=True, index=True)
    name = Column(String(20), unique=True, nullable=False)

    USER = "USER"
    ADMIN = "ADMIN"

    # reference data written by init_db()
    SEED = {1: "user", 2: "admin"}

    @property
    def authority(self) -> str:
        return self.name.upper()
