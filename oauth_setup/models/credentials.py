"""
Domain models for OAuth credential persistence.
"""

from __future__ import annotations

import json
import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SCOPES: tuple[str, ...] = ("user:inference", "user:profile")


class ClaudeAiOAuthCredentials(BaseModel):
    """Represents the token pair stored under the ``claudeAiOauth`` key."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")
    expires_at: Optional[int] = Field(
        ...,
        alias="expiresAt",
        description="Absolute Unix timestamp in seconds; null when unparseable.",
    )
    scopes: list[str] = Field(default_factory=lambda: list(DEFAULT_SCOPES))

    @field_validator("expires_at", mode="before")
    @classmethod
    def _floor_fractional_seconds(cls, value: Any) -> Any:
        """Accept any finite JSON number, dropping sub-second precision."""
        if isinstance(value, float) and math.isfinite(value):
            return math.floor(value)
        return value


class StoredCredentials(BaseModel):
    """Top-level credentials document written to disk."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    claude_ai_oauth: ClaudeAiOAuthCredentials = Field(..., alias="claudeAiOauth")

    def to_json(self) -> str:
        """Serialize using the on-disk key names with a two-space indent."""
        return json.dumps(self.model_dump(by_alias=True), indent=2, ensure_ascii=False)


__all__ = ["ClaudeAiOAuthCredentials", "DEFAULT_SCOPES", "StoredCredentials"]
