"""
Unit tests for backend/auth.py (Supabase JWT and API key validation).
"""
import asyncio
import time

import jwt
import pytest
from fastapi import HTTPException

from backend.auth import (
    get_current_user,
    validate_api_key,
    validate_jwt,
    validate_supabase_jwt,
)
from backend.settings import get_settings

JWT_SECRET = "test-supabase-jwt-secret-with-enough-length"


def make_token(sub="user-123", aud="authenticated", exp_offset=3600, secret=JWT_SECRET, **extra):
    payload = {"aud": aud, "exp": int(time.time()) + exp_offset, "role": "authenticated", **extra}
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def auth_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("API_KEYS", "sk_test_abc123,sk_test_def456")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestValidateApiKey:

    def test_simple_key_returns_admin(self):
        assert validate_api_key("sk_test_abc123") == "admin"

    def test_key_with_user(self):
        assert validate_api_key("sk_test_def456:user_12345") == "user_12345"

    def test_invalid_key(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_live_wrong")
        assert exc_info.value.status_code == 401

    def test_no_keys_configured(self, monkeypatch):
        monkeypatch.setenv("API_KEYS", "")
        get_settings.cache_clear()

        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_test_abc123")
        assert exc_info.value.detail == "API key authentication not configured"


@pytest.mark.unit
class TestValidateSupabaseJwt:

    def test_valid_token(self):
        assert validate_supabase_jwt(make_token()) == "user-123"

    def test_bearer_header(self):
        assert validate_jwt(f"Bearer {make_token(sub='user-456')}") == "user-456"

    def test_header_without_bearer_prefix(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(make_token())
        assert exc_info.value.status_code == 401

    def test_expired_token(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_supabase_jwt(make_token(exp_offset=-60))
        assert exc_info.value.detail == "Token expired"

    def test_wrong_audience(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_supabase_jwt(make_token(aud="anon-service"))
        assert exc_info.value.status_code == 401

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_supabase_jwt(make_token(secret="another-secret-of-sufficient-length"))
        assert exc_info.value.status_code == 401

    def test_missing_sub(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_supabase_jwt(make_token(sub=None))
        assert exc_info.value.detail == "Token missing user ID"

    def test_secret_not_configured(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_JWT_SECRET")
        get_settings.cache_clear()

        with pytest.raises(HTTPException) as exc_info:
            validate_supabase_jwt(make_token())
        assert exc_info.value.status_code == 500


@pytest.mark.unit
class TestGetCurrentUser:

    def test_api_key_takes_precedence(self):
        user_id = asyncio.run(get_current_user(
            authorization=f"Bearer {make_token()}",
            x_api_key="sk_test_abc123:user_999",
        ))
        assert user_id == "user_999"

    def test_jwt(self):
        user_id = asyncio.run(get_current_user(authorization=f"Bearer {make_token()}", x_api_key=None))
        assert user_id == "user-123"

    def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(get_current_user(authorization=None, x_api_key=None))
        assert exc_info.value.status_code == 401
