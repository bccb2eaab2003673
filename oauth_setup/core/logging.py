"""
Logging utilities for the command line tooling.

Log records go to stderr so command output on stdout stays clean.
"""

import logging
import sys

# httpx logs every request URL at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure_logging"]
