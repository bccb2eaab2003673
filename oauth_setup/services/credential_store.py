"""
JSON file persistence for the local OAuth credentials document.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from oauth_setup.models.credentials import StoredCredentials

logger = logging.getLogger(__name__)

CredentialStorePath = Union[str, os.PathLike]


def default_credentials_path() -> Path:
    """Return ``<home>/.claude/.credentials.json``."""
    return Path.home() / ".claude" / ".credentials.json"


class CredentialLoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class CredentialLoadResult:
    """Outcome of reading the credentials document."""

    status: CredentialLoadStatus
    credentials: Optional[StoredCredentials] = None
    error: Optional[str] = None


class CredentialStore:
    """Read and write the credentials document at a fixed path."""

    def __init__(self, path: Optional[CredentialStorePath] = None) -> None:
        self._path = Path(path) if path is not None else default_credentials_path()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> CredentialLoadResult:
        """Load the document, reporting why nothing usable was found."""
        if not self._path.exists():
            return CredentialLoadResult(status=CredentialLoadStatus.NOT_FOUND)
        try:
            raw = self._path.read_text(encoding="utf-8")
            credentials = StoredCredentials.model_validate(json.loads(raw))
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning(
                "Failed to read credentials from %s: %s",
                self._path,
                type(exc).__name__,
            )
            return CredentialLoadResult(
                status=CredentialLoadStatus.PARSE_ERROR, error=str(exc)
            )
        return CredentialLoadResult(
            status=CredentialLoadStatus.OK, credentials=credentials
        )

    def load(self) -> Optional[StoredCredentials]:
        """Return stored credentials, or ``None`` when missing or unreadable."""
        return self.read().credentials

    def save(self, credentials: StoredCredentials) -> None:
        """Overwrite the document, creating the containing directory if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(credentials.to_json(), encoding="utf-8")

        try:
            os.chmod(self._path, 0o600)
        except OSError as exc:  # pragma: no cover - depends on platform
            logger.warning("Could not set permissions on %s: %s", self._path, exc)


__all__ = [
    "CredentialLoadResult",
    "CredentialLoadStatus",
    "CredentialStore",
    "CredentialStorePath",
    "default_credentials_path",
]
