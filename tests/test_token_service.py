# tests/test_token_service.py
from types import SimpleNamespace

import jwt
import pytest

from shopapp.exceptions import BadCredentialsError
from shopapp.services.token_service import TokenService


def _user(phone="0900000001", active=True):
    return SimpleNamespace(phone_number=phone, is_active=active)


def test_generated_token_carries_phone_number_as_subject():
    tokens = TokenService(secret_key="k")
    token = tokens.generate_token(_user())

    assert tokens.extract_phone_number(token) == "0900000001"
    claims = jwt.decode(token, "k", algorithms=["HS256"])
    assert claims["phoneNumber"] == "0900000001"
    assert claims["exp"] > claims["iat"]


def test_validate_token_accepts_matching_active_user():
    tokens = TokenService(secret_key="k")
    token = tokens.generate_token(_user())
    assert tokens.validate_token(token, _user()) is True


def test_validate_token_rejects_other_subject_or_inactive_user():
    tokens = TokenService(secret_key="k")
    token = tokens.generate_token(_user())
    assert tokens.validate_token(token, _user(phone="0911111111")) is False
    assert tokens.validate_token(token, _user(active=False)) is False
    assert tokens.validate_token(token, None) is False


def test_expired_token_fails_validation():
    tokens = TokenService(secret_key="k", expiration_seconds=-60)
    token = tokens.generate_token(_user())

    assert tokens.is_token_expired(token) is True
    assert tokens.validate_token(token, _user()) is False
    with pytest.raises(BadCredentialsError):
        tokens.extract_phone_number(token)


def test_tampered_signature_fails_validation():
    tokens = TokenService(secret_key="k")
    token = tokens.generate_token(_user())
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    tampered = ".".join([header, payload, flipped])

    assert tokens.validate_token(tampered, _user()) is False


def test_token_signed_with_other_secret_is_rejected():
    token = TokenService(secret_key="other").generate_token(_user())
    assert TokenService(secret_key="k").validate_token(token, _user()) is False


def test_malformed_tokens_raise_bad_credentials():
    tokens = TokenService(secret_key="k")
    token = tokens.generate_token(_user())
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, ("A" if signature[0] != "A" else "B") + signature[1:]])

    for bad in (tampered, "not-a-jwt"):
        with pytest.raises(BadCredentialsError):
            tokens.is_token_expired(bad)
        with pytest.raises(BadCredentialsError):
            tokens.extract_phone_number(bad)
