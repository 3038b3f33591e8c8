"""Self-issued JWTs whose subject is an agenda user id."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)

# Claims a token must carry before it is looked at any further
REQUIRED_CLAIMS = ["sub", "exp", "iss", "aud"]


class JWTAuthAdapter:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "agendas",
        audience: str = "agendas-api",
        token_lifetime: timedelta = timedelta(hours=24),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_lifetime = token_lifetime

    def _claims(self, token: str) -> dict:
        return jwt.decode(
            token,
            self.secret_key,
            algorithms=[self.algorithm],
            issuer=self.issuer,
            audience=self.audience,
            options={"require": REQUIRED_CLAIMS},
        )

    async def verify_token(self, token: str) -> Principal:
        """Decode ``token`` and expose its subject as the caller's user id.

        Raises:
            AuthenticationError: On any signature, expiry, issuer, audience
                or missing-claim failure.
        """
        try:
            claims = self._claims(token)
        except InvalidTokenError as e:
            logger.warning("Rejected bearer token", reason=type(e).__name__)
            raise AuthenticationError("Invalid token") from e

        principal = Principal(provider="jwt", subject=claims["sub"], claims=claims)
        if "email" in claims:
            principal["email"] = claims["email"]
        if "name" in claims:
            principal["display_name"] = claims["name"]
        return principal

    async def issue_token(self, user_id: UUID | None = None, claims: dict | None = None) -> str:
        issued_at = datetime.now(UTC)
        payload: dict = {
            "iss": self.issuer,
            "aud": self.audience,
            "iat": issued_at,
            "exp": issued_at + self.token_lifetime,
        }
        if user_id is not None:
            payload["sub"] = str(user_id)
        payload.update(claims or {})
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    async def get_user_info(self, token: str) -> dict:
        """Claims of a valid token, or an empty dict."""
        try:
            return self._claims(token)
        except InvalidTokenError:
            return {}
