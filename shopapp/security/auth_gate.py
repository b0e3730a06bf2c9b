# shopapp/security/auth_gate.py
"""
Per-request authentication and authorization.

Runs once for every request under the API prefix: public routes pass
straight through, everything else needs ``Authorization: Bearer <token>``.
A valid token puts a ``Principal`` on ``request.state.principal`` before the
route runs; the route table in ``policy`` then decides whether the
principal's role may continue.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from shopapp.config.settings import API_PREFIX
from shopapp.database import session as db_session
from shopapp.exceptions import BadCredentialsError
from shopapp.models.user_model import User
from shopapp.security.policy import is_bypassed, match_rule
from shopapp.services.token_service import token_service

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Principal:
    user_id: int
    phone_number: str
    role: str


def authenticate(token: str) -> Optional[Principal]:
    """Resolve a bearer token to a principal, or None if it is not acceptable."""
    db = db_session.SessionLocal()
    try:
        phone_number = token_service.extract_phone_number(token)
        user = db.query(User).filter(User.phone_number == phone_number).first()
        if not token_service.validate_token(token, user):
            return None
        return Principal(user_id=user.id, phone_number=user.phone_number, role=user.role.authority)
    except Exception as e:
        logger.warning("Token authentication failed: %s", e.__class__.__name__)
        return None
    finally:
        db.close()


def _reject(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _relative_path(path: str) -> Optional[str]:
    if path == API_PREFIX:
        return "/"
    if path.startswith(API_PREFIX + "/"):
        return path[len(API_PREFIX):]
    return None


async def auth_gate(request: Request, call_next):
    path = _relative_path(request.url.path)
    method = request.method
    # docs, health and CORS preflight are not gated
    if path is None or method == "OPTIONS":
        return await call_next(request)

    if is_bypassed(method, path):
        return await call_next(request)

    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        logger.warning("%s %s rejected: missing bearer token", method, request.url.path)
        return _reject(401, "Unauthorized")

    principal = await run_in_threadpool(authenticate, auth_header[len(BEARER_PREFIX):])
    if principal is None:
        logger.warning("%s %s rejected: invalid token", method, request.url.path)
        return _reject(401, "Unauthorized")

    rule = match_rule(method, path)
    if rule is not None and not rule.allows(principal.role):
        logger.warning("%s %s forbidden for user id=%s (%s)",
                       method, request.url.path, principal.user_id, principal.role)
        return _reject(403, "Forbidden")

    request.state.principal = principal
    return await call_next(request)


def get_current_principal(request: Request) -> Principal:
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise BadCredentialsError("Unauthorized")
    return principal
