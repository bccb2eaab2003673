"""
Factory functions to provide shared clients and services.
"""

from functools import lru_cache

from oauth_setup.clients import AnthropicOAuthClient
from oauth_setup.core.config import get_settings
from oauth_setup.services import CredentialStore, OAuthTokenService


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_credential_store() -> CredentialStore:
    """Provide the credential store rooted at the user's home directory."""
    return CredentialStore()


@lru_cache()
def get_anthropic_oauth_client() -> AnthropicOAuthClient:
    """Create a singleton token endpoint client."""
    settings = _settings()
    return AnthropicOAuthClient(settings.oauth)


def get_oauth_token_service() -> OAuthTokenService:
    """Build the token lifecycle service using configured clients."""
    settings = _settings()
    return OAuthTokenService(
        store=get_credential_store(),
        oauth_client=get_anthropic_oauth_client(),
        oauth_settings=settings.oauth,
    )


def reset_caches() -> None:
    """Drop cached settings and clients so the next lookup rebuilds them."""
    get_settings.cache_clear()
    _settings.cache_clear()
    get_credential_store.cache_clear()
    get_anthropic_oauth_client.cache_clear()


__all__ = [
    "get_anthropic_oauth_client",
    "get_credential_store",
    "get_oauth_token_service",
    "reset_caches",
]
