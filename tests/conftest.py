"""Pytest configuration shared across the suite."""

from pathlib import Path

import pytest

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temp dir and rebuild cached factories."""
    from oauth_setup import dependencies

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("APP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OAUTH_TOKEN_URL", raising=False)
    monkeypatch.delenv("OAUTH_REFRESH_BUFFER_SECONDS", raising=False)
    for key in ("CLAUDE_ACCESS_TOKEN", "CLAUDE_REFRESH_TOKEN", "CLAUDE_EXPIRES_AT"):
        monkeypatch.delenv(key, raising=False)
    dependencies.reset_caches()
    yield home
    dependencies.reset_caches()
