"""Factory for creating auth adapters based on configuration."""

from __future__ import annotations

import json
import os

from ..config import settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter
from .adapters.none import DEFAULT_DEV_USER_ID, NoAuthAdapter


def get_auth_adapter() -> AuthAdapter:
    """Create and return the configured auth adapter."""
    provider = os.getenv("AGENDAS_AUTH_PROVIDER", settings.auth_provider)
    config_str = os.getenv("AGENDAS_AUTH_CONFIG")

    if config_str is None:
        config = dict(settings.auth_config)
    else:
        try:
            config = json.loads(config_str)
        except json.JSONDecodeError:
            config = {}

    if provider == "none":
        return NoAuthAdapter(default_user_id=config.get("default_user_id", DEFAULT_DEV_USER_ID))

    elif provider == "jwt":
        secret_key = (
            config.get("secret_key") or os.getenv("AGENDAS_JWT_SECRET") or settings.jwt_secret
        )
        if not secret_key:
            raise ValueError(
                "JWT secret key is required. Set AGENDAS_JWT_SECRET or provide in config."
            )

        return JWTAuthAdapter(
            secret_key=secret_key,
            algorithm=config.get("algorithm", settings.jwt_algorithm),
            issuer=config.get("issuer", settings.jwt_issuer),
            audience=config.get("audience", settings.jwt_audience),
        )

    else:
        raise ValueError(f"Unsupported auth provider: {provider}")


def get_auth_adapter_cached() -> AuthAdapter:
    """Get the auth adapter instance (no global caching for thread safety)."""
    return get_auth_adapter()
