# shopapp/services/token_service.py
"""
Signed bearer tokens for authenticated users.

A token carries the user's phone number as its subject and an expiry.
Validation never raises: any decoding problem means the caller is
treated as unauthenticated.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shopapp.config.settings import JWT_SECRET_KEY, JWT_ALGORITHM, JWT_EXPIRATION_SECONDS
from shopapp.exceptions import BadCredentialsError

logger = logging.getLogger(__name__)


class TokenService:
    """Issue and verify HS256 JWTs."""

    def __init__(
        self,
        secret_key: str = JWT_SECRET_KEY,
        expiration_seconds: int = JWT_EXPIRATION_SECONDS,
        algorithm: str = JWT_ALGORITHM,
    ):
        self.secret_key = secret_key
        self.expiration_seconds = expiration_seconds
        self.algorithm = algorithm

    def generate_token(self, user) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "phoneNumber": user.phone_number,
            "sub": user.phone_number,
            "iat": now,
            "exp": now + timedelta(seconds=self.expiration_seconds),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def _decode(self, token: str) -> dict:
        return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])

    def extract_phone_number(self, token: str) -> str:
        """Subject of a token whose signature and expiry check out.

        Raises ``BadCredentialsError`` for expired, tampered or malformed tokens.
        """
        try:
            claims = self._decode(token)
        except jwt.ExpiredSignatureError:
            raise BadCredentialsError("Token is expired")
        except jwt.PyJWTError:
            raise BadCredentialsError("Invalid token")
        subject = claims.get("sub")
        if not subject:
            raise BadCredentialsError("Invalid token")
        return subject

    def is_token_expired(self, token: str) -> bool:
        """True only for a well-signed token past its expiry; bad tokens raise ``BadCredentialsError``."""
        try:
            self._decode(token)
        except jwt.ExpiredSignatureError:
            return True
        except jwt.PyJWTError:
            raise BadCredentialsError("Invalid token")
        return False

    def validate_token(self, token: str, user: Optional[object]) -> bool:
        if user is None:
            return False
        try:
            phone_number = self.extract_phone_number(token)
        except BadCredentialsError as e:
            logger.debug("Token rejected: %s", e.message)
            return False
        return phone_number == user.phone_number and bool(user.is_active)


token_service = TokenService()
