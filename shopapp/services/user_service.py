# shopapp/services/user_service.py
import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopapp.exceptions import (
    BadCredentialsError, DataNotFoundError, DuplicateDataError,
    InvalidParamError, PermissionDeniedError,
)
from shopapp.models.role_model import Role
from shopapp.models.user_model import User
from shopapp.schemas.users import RegisterPayload, UpdateUserPayload
from shopapp.services.token_service import TokenService, token_service

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_ROLE_ID = 1
WRONG_PHONE_PASSWORD = "Wrong phone number or password"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


class UserService:
    def __init__(self, db: Session, tokens: TokenService = token_service):
        self.db = db
        self.tokens = tokens

    def get_user_by_phone(self, phone_number: str) -> Optional[User]:
        return self.db.query(User).filter(User.phone_number == phone_number).first()

    def _phone_exists(self, phone_number: str) -> bool:
        return self.db.query(User.id).filter(User.phone_number == phone_number).first() is not None

    def _commit(self, claimed_phone: Optional[str] = None) -> None:
        """Commit; an integrity error is a duplicate only if ``claimed_phone`` is now taken."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # another request may have taken the phone number after the pre-check
            if claimed_phone and self._phone_exists(claimed_phone):
                raise DuplicateDataError("Phone number already exists")
            logger.exception("Integrity error while saving user")
            raise

    def create_user(self, payload: RegisterPayload) -> User:
        if self._phone_exists(payload.phone_number):
            raise DuplicateDataError("Phone number already exists")

        role = self.db.get(Role, payload.role_id)
        if not role:
            raise DataNotFoundError("Role not found")
        if role.authority == Role.ADMIN:
            raise PermissionDeniedError("You cannot register an admin account")

        user = User(
            fullname=payload.fullname,
            phone_number=payload.phone_number,
            address=payload.address,
            date_of_birth=payload.date_of_birth,
            facebook_account_id=payload.facebook_account_id,
            google_account_id=payload.google_account_id,
            role_id=role.id,
            is_active=True,
        )
        # facebook/google accounts sign in without a local password
        if not user.is_federated:
            user.password = hash_password(payload.password)

        self.db.add(user)
        self._commit(payload.phone_number)
        self.db.refresh(user)
        logger.info("Registered user id=%s role=%s", user.id, role.name)
        return user

    def login(self, phone_number: str, password: str, role_id: Optional[int] = None) -> str:
        role_id = role_id or DEFAULT_ROLE_ID
        user = self.get_user_by_phone(phone_number)
        if not user:
            logger.warning("Login failed: unknown phone number")
            raise BadCredentialsError(WRONG_PHONE_PASSWORD)

        if not user.is_federated and not verify_password(password, user.password):
            logger.warning("Login failed: wrong password for user id=%s", user.id)
            raise BadCredentialsError(WRONG_PHONE_PASSWORD)

        role = self.db.get(Role, role_id)
        if not role or role.id != user.role_id:
            logger.warning("Login failed: role %s does not match user id=%s", role_id, user.id)
            raise PermissionDeniedError("Role does not exist")

        if not user.is_active:
            logger.warning("Login failed: user id=%s is locked", user.id)
            raise PermissionDeniedError("User is locked")

        logger.info("User id=%s logged in", user.id)
        return self.tokens.generate_token(user)

    def get_user_details_from_token(self, token: str) -> User:
        if self.tokens.is_token_expired(token):
            raise BadCredentialsError("Token is expired")
        phone_number = self.tokens.extract_phone_number(token)
        user = self.get_user_by_phone(phone_number)
        if not user:
            raise DataNotFoundError("User not found")
        return user

    def update_user(self, user_id: int, payload: UpdateUserPayload) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise DataNotFoundError("User not found")

        new_phone = payload.phone_number
        phone_changed = bool(new_phone) and new_phone != user.phone_number
        if phone_changed and self._phone_exists(new_phone):
            raise DuplicateDataError("Phone number already exists")

        if payload.fullname is not None:
            user.fullname = payload.fullname
        if new_phone:
            user.phone_number = new_phone
        if payload.address is not None:
            user.address = payload.address
        if payload.date_of_birth is not None:
            user.date_of_birth = payload.date_of_birth
        if payload.facebook_account_id > 0:
            user.facebook_account_id = payload.facebook_account_id
        if payload.google_account_id > 0:
            user.google_account_id = payload.google_account_id

        if payload.password:
            if payload.password != payload.retype_password:
                self.db.rollback()
                raise InvalidParamError("Password and retype password are not the same")
            user.password = hash_password(payload.password)

        self._commit(new_phone if phone_changed else None)
        self.db.refresh(user)
        return user
