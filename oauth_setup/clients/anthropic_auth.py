"""
Anthropic OAuth token endpoint client.

Exchanges a stored refresh token for a new access/refresh token pair.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from oauth_setup.core.config import OAuthSettings
from oauth_setup.schemas import TokenRefreshResponse

logger = logging.getLogger(__name__)


class OAuthCredentialsNotFoundError(Exception):
    """Raised when no persisted OAuth credentials are available."""


class OAuthTokenRefreshError(Exception):
    """Raised when the token endpoint rejects or garbles a refresh request."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Failed to refresh token: {status_code} {detail}")


class OAuthTokenRenewalError(Exception):
    """Raised when an expiring access token could not be renewed."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AnthropicOAuthClient:
    """Call the OAuth token endpoint with a refresh grant."""

    TOKEN_URL = "https://api.anthropic.com/v1/oauth/token"

    def __init__(
        self,
        oauth_settings: OAuthSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = oauth_settings
        self._transport = transport

    @property
    def token_url(self) -> str:
        return self._settings.token_url or self.TOKEN_URL

    async def refresh_token(self, refresh_token: str) -> TokenRefreshResponse:
        """
        Exchange a refresh token for a new token pair.

        Transport failures propagate as ``httpx.HTTPError``.
        """
        payload = {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }

        async with httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.token_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )

        if not response.is_success:
            logger.warning("Token endpoint returned HTTP %s", response.status_code)
            raise OAuthTokenRefreshError(response.status_code, response.text)

        try:
            return TokenRefreshResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise OAuthTokenRefreshError(
                response.status_code,
                "Incomplete refresh payload returned from token endpoint.",
            ) from exc


__all__ = [
    "AnthropicOAuthClient",
    "OAuthCredentialsNotFoundError",
    "OAuthTokenRefreshError",
    "OAuthTokenRenewalError",
]
