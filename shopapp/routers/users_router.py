# shopapp/routers/users_router.py
from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from shopapp.database.session import get_db
from shopapp.exceptions import BadCredentialsError, InvalidParamError, PermissionDeniedError
from shopapp.models.user_model import User
from shopapp.schemas.users import (
    RegisterPayload, RegisterResponse, LoginPayload, LoginResponse,
    UpdateUserPayload, UserOut, RoleOut,
)
from shopapp.security.auth_gate import BEARER_PREFIX, Principal, get_current_principal
from shopapp.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _to_out(u: User) -> UserOut:
    return UserOut(
        id=u.id,
        fullname=u.fullname,
        phone_number=u.phone_number,
        address=u.address,
        active=bool(u.is_active),
        date_of_birth=u.date_of_birth,
        facebook_account_id=u.facebook_account_id or 0,
        google_account_id=u.google_account_id or 0,
        role=RoleOut.model_validate(u.role),
    )


@router.post("/register", response_model=RegisterResponse)
def register_user(body: RegisterPayload, db: Session = Depends(get_db)):
    if body.password != body.retype_password:
        raise InvalidParamError("Password does not match")
    user = UserService(db).create_user(body)
    return RegisterResponse(message="Register successfully", user=_to_out(user))


@router.post("/login", response_model=LoginResponse)
def login(body: LoginPayload, db: Session = Depends(get_db)):
    token = UserService(db).login(body.phone_number, body.password, body.role_id)
    return LoginResponse(message="Login successfully", token=token)


@router.post("/details", response_model=UserOut)
def get_user_details(
    authorization: str = Header(default=""),
    db: Session = Depends(get_db),
):
    """Profile of the caller identified by the bearer token."""
    if not authorization.startswith(BEARER_PREFIX):
        raise BadCredentialsError("Unauthorized")
    token = authorization[len(BEARER_PREFIX):]
    user = UserService(db).get_user_details_from_token(token)
    return _to_out(user)


@router.put("/details/{user_id}", response_model=UserOut)
def update_user_details(
    user_id: int,
    body: UpdateUserPayload,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    # users may only edit their own profile
    if principal.user_id != user_id:
        raise PermissionDeniedError("You can only update your own account")
    user = UserService(db).update_user(user_id, body)
    return _to_out(user)
