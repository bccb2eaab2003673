"""Expose dependency helpers for the command line entry points."""

from .clients import (
    get_anthropic_oauth_client,
    get_credential_store,
    get_oauth_token_service,
    reset_caches,
)

__all__ = [
    "get_anthropic_oauth_client",
    "get_credential_store",
    "get_oauth_token_service",
    "reset_caches",
]
