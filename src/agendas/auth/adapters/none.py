"""Development adapter: every bearer token acts as one fixed agenda user."""

from __future__ import annotations

import os
from uuid import UUID

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)

DEFAULT_DEV_USER_ID = "00000000-0000-0000-0000-000000000001"
DEV_TOKEN_PREFIX = "dev-token"

_PRODUCTION_NAMES = ("production", "prod")


def _deployment_environment() -> str:
    return os.getenv("AGENDAS_ENVIRONMENT", os.getenv("ENVIRONMENT", "")).lower()


class NoAuthAdapter:
    """
    Maps any non-empty token to ``default_user_id``.

    The user still has to exist in the users table, otherwise the resolvers
    answer ``unauthenticated`` like they would for a stale token.
    """

    def __init__(self, default_user_id: str = DEFAULT_DEV_USER_ID):
        environment = _deployment_environment()
        if environment in _PRODUCTION_NAMES:
            logger.error("Refusing to start without authentication", environment=environment)
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Set AGENDAS_AUTH_PROVIDER=jwt."
            )

        self.default_user_id = default_user_id
        logger.warning(
            "Authentication disabled, acting as development user", user_id=default_user_id
        )

    def _principal(self) -> Principal:
        return Principal(
            provider="none",
            subject=self.default_user_id,
            email="dev@example.com",
            display_name="Development User",
        )

    async def verify_token(self, token: str) -> Principal:
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")
        principal = self._principal()
        principal["claims"] = {"mode": "development"}
        return principal

    async def issue_token(self, user_id: UUID | None = None, claims: dict | None = None) -> str:
        """Build a readable token; its contents are never checked."""
        parts = [DEV_TOKEN_PREFIX, str(user_id) if user_id else self.default_user_id]
        parts.extend(f"{k}={v}" for k, v in (claims or {}).items())
        return "|".join(parts)

    async def get_user_info(self, token: str) -> dict:
        _ = token
        principal = self._principal()
        return {
            "id": principal["subject"],
            "email": principal["email"],
            "name": principal["display_name"],
        }
