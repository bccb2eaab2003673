"""Pydantic schemas shared across the OAuth tooling."""

from .oauth import OAuthSetupPayload, TokenRefreshResponse

__all__ = ["OAuthSetupPayload", "TokenRefreshResponse"]
