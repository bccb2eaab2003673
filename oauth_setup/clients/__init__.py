"""Expose constructed client wrappers."""

from .anthropic_auth import (
    AnthropicOAuthClient,
    OAuthCredentialsNotFoundError,
    OAuthTokenRefreshError,
    OAuthTokenRenewalError,
)

__all__ = [
    "AnthropicOAuthClient",
    "OAuthCredentialsNotFoundError",
    "OAuthTokenRefreshError",
    "OAuthTokenRenewalError",
]
