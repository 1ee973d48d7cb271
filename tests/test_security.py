"""Unit tests for session token issue / verify."""

import time
import uuid
from datetime import timedelta

import pytest
from jose import jwt

from bookdesk.core.config import get_settings
from bookdesk.core.errors import TokenExpiredError, TokenInvalidError
from bookdesk.core.security import (
    hash_password,
    hash_reset_token,
    issue_token,
    verify_password,
    verify_token,
)


def test_issue_and_verify_round_trip():
    business_id = uuid.uuid4()
    token = issue_token(business_id, "a@b.com")
    assert verify_token(token) == business_id


def test_default_lifetime_is_two_hours():
    token = issue_token(uuid.uuid4(), "a@b.com")
    remaining = jwt.get_unverified_claims(token)["exp"] - time.time()
    assert 7190 <= remaining <= 7201


def test_expired_token():
    token = issue_token(uuid.uuid4(), "a@b.com", expires_delta=timedelta(seconds=-1))
    with pytest.raises(TokenExpiredError):
        verify_token(token)


def test_wrong_signature():
    settings = get_settings()
    token = jwt.encode(
        {"tid": str(uuid.uuid4())}, "some-other-secret", algorithm=settings.jwt_algorithm
    )
    with pytest.raises(TokenInvalidError):
        verify_token(token)


def test_payload_without_tenant():
    settings = get_settings()
    token = jwt.encode({"email": "a@b.com"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    with pytest.raises(TokenInvalidError):
        verify_token(token)


def test_garbage_token():
    with pytest.raises(TokenInvalidError):
        verify_token("not-a-jwt")


def test_password_hashing():
    hashed = hash_password("s3cret!")
    assert hashed != "s3cret!"
    assert verify_password("s3cret!", hashed)
    assert not verify_password("wrong", hashed)


def test_reset_token_hash_is_deterministic():
    assert hash_reset_token("abc") == hash_reset_token("abc")
    assert hash_reset_token("abc") != hash_reset_token("abd")
