# shopapp/security/policy.py
"""
Route authorization table.

Rules are ``(method, path pattern, roles)`` tuples checked top to bottom;
the first rule whose method and pattern match decides. ``roles`` is
``PUBLIC`` (no token needed), ``AUTHENTICATED`` (any valid token) or a
tuple of role authorities.

Patterns are relative to the API prefix. ``*`` matches one path segment,
``**`` matches the rest of the path (including nothing).
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple, Union

from shopapp.models.role_model import Role

PUBLIC = "PUBLIC"
AUTHENTICATED = "AUTHENTICATED"

Roles = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class Rule:
    method: Optional[str]  # None matches any method
    pattern: str
    roles: Roles

    def matches(self, method: str, path: str) -> bool:
        if self.method is not None and self.method != method:
            return False
        return _compile(self.pattern).fullmatch(path) is not None

    def allows(self, role: Optional[str]) -> bool:
        if self.roles == PUBLIC:
            return True
        if role is None:
            return False
        if self.roles == AUTHENTICATED:
            return True
        return role in self.roles


@lru_cache(maxsize=None)
def _compile(pattern: str) -> "re.Pattern":
    out = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("/**", i):
            out.append(r"(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(r".*")
            i += 2
        elif pattern[i] == "*":
            out.append(r"[^/]*")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(out))


ADMIN = (Role.ADMIN,)
USER = (Role.USER,)

RULES: Tuple[Rule, ...] = (
    Rule("POST", "/users/register", PUBLIC),
    Rule("POST", "/users/login", PUBLIC),

    Rule("GET", "/roles/**", PUBLIC),

    # categories
    Rule("GET", "/categories/**", PUBLIC),
    Rule("POST", "/categories/**", ADMIN),
    Rule("PUT", "/categories/**", ADMIN),
    Rule("DELETE", "/categories/**", ADMIN),

    # products
    Rule("GET", "/products/**", PUBLIC),
    Rule("POST", "/products/**", ADMIN),
    Rule("PUT", "/products/**", ADMIN),
    Rule("DELETE", "/products/**", ADMIN),

    # orders
    Rule("POST", "/orders/**", USER),
    Rule("GET", "/orders/**", AUTHENTICATED),
    Rule("PUT", "/orders/**", ADMIN),
    Rule("DELETE", "/orders/**", ADMIN),

    # order details
    Rule("POST", "/order_details/**", USER),
    Rule("GET", "/order_details/**", USER + ADMIN),
    Rule("PUT", "/order_details/**", ADMIN),
    Rule("DELETE", "/order_details/**", ADMIN),

    Rule(None, "/**", AUTHENTICATED),
)

# Requests that skip token checks entirely: (method, path prefix).
BYPASS: Tuple[Tuple[str, str], ...] = (
    ("GET", "/roles"),
    ("GET", "/products"),
    ("GET", "/categories"),
    ("POST", "/users/register"),
    ("POST", "/users/login"),
)
# exact-path bypass; /orders/{id} still needs a token
BYPASS_EXACT: Tuple[Tuple[str, str], ...] = (
    ("GET", "/orders"),
)


def match_rule(method: str, path: str, rules: Sequence[Rule] = RULES) -> Optional[Rule]:
    for rule in rules:
        if rule.matches(method, path):
            return rule
    return None


def is_bypassed(method: str, path: str) -> bool:
    path = path.rstrip("/") or "/"
    if (method, path) in BYPASS_EXACT:
        return True
    for bypass_method, prefix in BYPASS:
        if method == bypass_method and (path == prefix or path.startswith(prefix + "/")):
            return True
    return False
