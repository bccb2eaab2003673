"""Service layer exports."""

from .credential_store import (
    CredentialLoadResult,
    CredentialLoadStatus,
    CredentialStore,
    default_credentials_path,
)
from .oauth_tokens import OAuthTokenService, parse_expires_at

__all__ = [
    "CredentialLoadResult",
    "CredentialLoadStatus",
    "CredentialStore",
    "OAuthTokenService",
    "default_credentials_path",
    "parse_expires_at",
]
