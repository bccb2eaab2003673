"""Schemas for the OAuth setup input and token endpoint responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OAuthSetupPayload(BaseModel):
    """Credentials handed over by an external authorization flow."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")
    expires_at: str = Field(
        ...,
        alias="expiresAt",
        description="Absolute Unix timestamp in seconds, as a numeric string.",
    )


class TokenRefreshResponse(BaseModel):
    """Success body returned by the token endpoint for a refresh grant."""

    access_token: str
    refresh_token: str
    expires_in: int = Field(..., description="Seconds until the new access token expires.")


__all__ = ["OAuthSetupPayload", "TokenRefreshResponse"]
