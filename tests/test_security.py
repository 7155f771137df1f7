from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from jurnal_digital import config
from jurnal_digital.app import create_app
from jurnal_digital.core.exceptions import ConfigurationError
from jurnal_digital.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("rahasia123")
    assert hashed != "rahasia123"
    assert verify_password("rahasia123", hashed)
    assert not verify_password("salah123", hashed)


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("rahasia123", "not-a-bcrypt-hash")
    assert not verify_password("rahasia123", "")


def test_token_carries_identity_and_24h_expiry():
    token = create_access_token("65a1b2c3d4e5f60718293a4b", "ani", "teacher")
    claims = jwt.decode(token, config.get_jwt_secret(), algorithms=[config.JWT_ALGORITHM])
    assert claims["sub"] == "65a1b2c3d4e5f60718293a4b"
    assert claims["username"] == "ani"
    assert claims["role"] == "teacher"
    assert claims["exp"] - claims["iat"] == 24 * 3600

    user = decode_access_token(token)
    assert user.user_id == "65a1b2c3d4e5f60718293a4b"


def test_expired_token_is_rejected():
    token = create_access_token("65a1b2c3d4e5f60718293a4b", "ani", "teacher", timedelta(seconds=-5))
    with pytest.raises(HTTPException) as exc_info:
        decode_access_token(token)
    assert exc_info.value.status_code == 401


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": "x", "username": "ani", "role": "admin"}, "other-secret", algorithm="HS256")
    with pytest.raises(HTTPException) as exc_info:
        decode_access_token(token)
    assert exc_info.value.status_code == 401


def test_token_without_identity_claims_is_rejected():
    token = jwt.encode({"sub": "x"}, config.get_jwt_secret(), algorithm=config.JWT_ALGORITHM)
    with pytest.raises(HTTPException):
        decode_access_token(token)


def test_app_refuses_to_start_without_secret(monkeypatch):
    monkeypatch.setattr(config, "JWT_SECRET_KEY", None)
    with pytest.raises(ConfigurationError):
        create_app()
