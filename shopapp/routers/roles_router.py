# shopapp/routers/roles_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.models.role_model import Role
from shopapp.schemas.users import RoleOut

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("", response_model=List[RoleOut])
def get_roles(db: Session = Depends(get_db)):
    return [RoleOut.model_validate(r) for r in db.query(Role).order_by(Role.id).all()]
