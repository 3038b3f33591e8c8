"""Tests for extracting the authentication context from request headers."""

import os
from unittest.mock import patch
from uuid import UUID, uuid4

import pytest
from fastapi import HTTPException

from agendas.auth.adapters.jwt import JWTAuthAdapter
from agendas.auth.adapters.none import DEFAULT_DEV_USER_ID
from agendas.auth.middleware import get_auth_context, get_auth_context_optional

SECRET = "middleware-test-secret"


@pytest.fixture
def jwt_env():
    with patch.dict(os.environ, {"AGENDAS_AUTH_PROVIDER": "jwt", "AGENDAS_JWT_SECRET": SECRET}):
        yield


@pytest.fixture
def issuer():
    return JWTAuthAdapter(secret_key=SECRET)


@pytest.mark.asyncio
async def test_no_auth_mode_without_header():
    with patch.dict(os.environ, {"AGENDAS_AUTH_PROVIDER": "none"}):
        context = await get_auth_context(None)

    assert context.is_authenticated
    assert context.user_id == UUID(DEFAULT_DEV_USER_ID)
    assert context.provider == "none"


@pytest.mark.asyncio
async def test_missing_header_is_unauthenticated(jwt_env):
    context = await get_auth_context(None)

    assert not context.is_authenticated
    assert context.provider is None


@pytest.mark.asyncio
async def test_valid_bearer_token(jwt_env, issuer):
    user_id = uuid4()
    token = await issuer.issue_token(user_id=user_id)

    context = await get_auth_context(f"Bearer {token}")

    assert context.is_authenticated
    assert context.user_id == user_id
    assert context.token == token
    assert context.provider == "jwt"


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Token abc", "Bearer "])
async def test_malformed_header_rejected(jwt_env, header):
    with pytest.raises(HTTPException) as exc_info:
        await get_auth_context(header)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_subject_must_be_a_user_id(jwt_env):
    token = await JWTAuthAdapter(secret_key=SECRET).issue_token(claims={"sub": "not-a-uuid"})

    with pytest.raises(HTTPException) as exc_info:
        await get_auth_context(f"Bearer {token}")

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Token subject is not a valid user id"


@pytest.mark.asyncio
async def test_optional_degrades_to_unauthenticated(jwt_env):
    context = await get_auth_context_optional("Bearer garbage")

    assert not context.is_authenticated
