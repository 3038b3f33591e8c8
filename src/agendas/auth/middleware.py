"""Authentication middleware for FastAPI."""

from __future__ import annotations

from uuid import UUID

from fastapi import Header, HTTPException

from ..logging import bind_user_id, get_logger
from .adapters.base import AuthenticationError
from .context import AuthContext, unauthenticated_context
from .factory import get_auth_adapter_cached

logger = get_logger(__name__)


async def get_auth_context(authorization: str | None = Header(None)) -> AuthContext:
    """
    Extract authentication context from request headers.

    This function:
    1. Extracts Bearer token from Authorization header
    2. Verifies token using the configured auth adapter
    3. Reads the user id from the token subject
    4. Returns AuthContext for the request

    The user id is not checked against the database here; resolvers look the
    user up themselves and treat a missing row as an invalid session.

    For no-auth mode, any token (or none at all) will work.
    """
    adapter = get_auth_adapter_cached()

    is_no_auth_mode = hasattr(adapter, "default_user_id")  # NoAuthAdapter has this attribute

    if not authorization:
        if is_no_auth_mode:
            authorization = "Bearer dev-token"
        else:
            return unauthenticated_context()

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization format. Expected: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:]

    if not token:
        logger.warning("Empty token provided")
        raise HTTPException(
            status_code=401,
            detail="Empty token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        principal = await adapter.verify_token(token)

        try:
            user_id = UUID(principal["subject"])
        except ValueError as e:
            raise AuthenticationError("Token subject is not a valid user id") from e

        bind_user_id(str(user_id))
        logger.debug(
            "Request authenticated",
            provider=principal.get("provider"),
            user_id=str(user_id),
        )

        return AuthContext(user_id=user_id, principal=principal, token=token)

    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def get_auth_context_optional(authorization: str | None = Header(None)) -> AuthContext:
    """
    Optional authentication - returns unauthenticated context if no valid token.

    Use this for endpoints that work both authenticated and unauthenticated.
    """
    try:
        return await get_auth_context(authorization)
    except HTTPException:
        return unauthenticated_context()
