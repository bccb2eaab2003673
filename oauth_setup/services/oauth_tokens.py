"""
Helpers for setting up and refreshing the local OAuth credentials.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Callable, Optional

import httpx

from oauth_setup.clients import (
    AnthropicOAuthClient,
    OAuthCredentialsNotFoundError,
    OAuthTokenRefreshError,
    OAuthTokenRenewalError,
)
from oauth_setup.core.config import OAuthSettings
from oauth_setup.models.credentials import (
    DEFAULT_SCOPES,
    ClaudeAiOAuthCredentials,
    StoredCredentials,
)
from oauth_setup.schemas import OAuthSetupPayload
from oauth_setup.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_expires_at(value: str) -> Optional[int]:
    """
    Parse the leading integer of ``value`` as a Unix timestamp.

    Trailing garbage is ignored; ``None`` is returned when no digits lead.
    """
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


class OAuthTokenService:
    """Keeps the persisted access token valid, refreshing it near expiry."""

    def __init__(
        self,
        store: CredentialStore,
        oauth_client: AnthropicOAuthClient,
        oauth_settings: OAuthSettings,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._oauth = oauth_client
        self._refresh_buffer = oauth_settings.refresh_buffer_seconds
        self._clock = clock

    def needs_refresh(self, credentials: ClaudeAiOAuthCredentials, *, now: int) -> bool:
        """Return True when the token is expired or inside the refresh buffer."""
        if credentials.expires_at is None:
            return True
        return credentials.expires_at - now <= self._refresh_buffer

    async def ensure_valid_token(self) -> ClaudeAiOAuthCredentials:
        """Load credentials, refreshing and persisting them when expiring."""
        stored = self._store.load()
        if stored is None:
            raise OAuthCredentialsNotFoundError(
                "No OAuth credentials found. Please set up OAuth first."
            )

        now = int(self._clock())
        current = stored.claude_ai_oauth
        if not self.needs_refresh(current, now=now):
            logger.debug("Access token valid until %s", current.expires_at)
            return current

        logger.info("Access token expired or expiring soon, refreshing...")
        try:
            refreshed = await self._oauth.refresh_token(current.refresh_token)
            updated = current.model_copy(
                update={
                    "access_token": refreshed.access_token,
                    "refresh_token": refreshed.refresh_token,
                    "expires_at": now + refreshed.expires_in,
                }
            )
            self._store.save(stored.model_copy(update={"claude_ai_oauth": updated}))
        except OAuthTokenRefreshError as exc:
            raise OAuthTokenRenewalError(
                f"Failed to refresh OAuth token: {exc}", status_code=exc.status_code
            ) from exc
        except (httpx.HTTPError, OSError) as exc:
            raise OAuthTokenRenewalError(f"Failed to refresh OAuth token: {exc}") from exc

        logger.info("Access token refreshed successfully")
        return updated

    def setup_credentials(self, payload: OAuthSetupPayload) -> StoredCredentials:
        """Persist externally obtained credentials, replacing any prior record."""
        credentials = StoredCredentials(
            claude_ai_oauth=ClaudeAiOAuthCredentials(
                access_token=payload.access_token,
                refresh_token=payload.refresh_token,
                expires_at=parse_expires_at(payload.expires_at),
                scopes=list(DEFAULT_SCOPES),
            )
        )
        self._store.save(credentials)
        logger.info("OAuth credentials written to %s", self._store.path)
        return credentials


__all__ = ["OAuthTokenService", "parse_expires_at"]
