# shopapp/schemas/users.py
from datetime import date
from typing import Optional, NewType
from pydantic import BaseModel, ConfigDict, Field, constr

Phone = NewType("Phone", constr(strip_whitespace=True, min_length=1, max_length=20))
Password = NewType("Password", constr(min_length=1, max_length=100))


class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RegisterPayload(BaseModel):
    fullname: str = ""
    phone_number: Phone
    address: str = ""
    password: Password
    retype_password: str
    date_of_birth: Optional[date] = None
    facebook_account_id: int = 0
    google_account_id: int = 0
    role_id: int = Field(gt=0)


class LoginPayload(BaseModel):
    phone_number: Phone
    password: str = ""
    role_id: Optional[int] = None


class UpdateUserPayload(BaseModel):
    fullname: Optional[str] = None
    phone_number: Optional[Phone] = None
    address: Optional[str] = None
    password: Optional[str] = None
    retype_password: Optional[str] = None
    date_of_birth: Optional[date] = None
    facebook_account_id: int = 0
    google_account_id: int = 0


class UserOut(BaseModel):
    id: int
    fullname: Optional[str] = None
    phone_number: str
    address: Optional[str] = None
    active: bool
    date_of_birth: Optional[date] = None
    facebook_account_id: int = 0
    google_account_id: int = 0
    role: RoleOut


class RegisterResponse(BaseModel):
    message: str = ""
    user: Optional[UserOut] = None


class LoginResponse(BaseModel):
    message: str
    token: str
