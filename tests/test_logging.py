try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import logging
import sys

import pytest

from oauth_setup.core.logging import configure_logging


def test_configure_logging_targets_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")

    (kwargs,) = calls
    assert kwargs["stream"] is sys.stderr
    assert kwargs["level"] == "DEBUG"


def test_configure_logging_quiets_http_request_logs(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    httpx_logger = logging.getLogger("httpx")
    monkeypatch.setattr(httpx_logger, "level", logging.NOTSET)

    configure_logging("INFO")

    assert httpx_logger.level == logging.WARNING
