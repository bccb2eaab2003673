"""Command line entry point for writing and renewing local OAuth credentials.

Two subcommands are provided:

1. ``setup`` stores tokens obtained from an external authorization flow in
   ``~/.claude/.credentials.json``, replacing whatever was there.
2. ``ensure`` checks the stored access token and refreshes it through the
   token endpoint when it expires within the refresh buffer.

Example usages::

    # Tokens are read from CLAUDE_ACCESS_TOKEN, CLAUDE_REFRESH_TOKEN and
    # CLAUDE_EXPIRES_AT when the flags are omitted, keeping them out of ps.
    python -m scripts.setup_oauth setup

    # Run before each job that needs a valid bearer token.
    python -m scripts.setup_oauth ensure
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import Callable

from pydantic import ValidationError

from oauth_setup import dependencies
from oauth_setup.clients import OAuthCredentialsNotFoundError, OAuthTokenRenewalError
from oauth_setup.core.config import get_settings
from oauth_setup.core.logging import configure_logging
from oauth_setup.schemas import OAuthSetupPayload

EXIT_OK = 0
EXIT_MISSING_CREDENTIALS = 2
EXIT_REFRESH_ERROR = 3
EXIT_RUNTIME_ERROR = 5

ACCESS_TOKEN_ENV = "CLAUDE_ACCESS_TOKEN"
REFRESH_TOKEN_ENV = "CLAUDE_REFRESH_TOKEN"
EXPIRES_AT_ENV = "CLAUDE_EXPIRES_AT"


def _setup(args: argparse.Namespace) -> int:
    """Write the supplied credentials, overwriting any previous record."""
    payload = OAuthSetupPayload(
        access_token=args.access_token,
        refresh_token=args.refresh_token,
        expires_at=args.expires_at,
    )
    service = dependencies.get_oauth_token_service()
    service.setup_credentials(payload)
    return EXIT_OK


def _ensure(args: argparse.Namespace) -> int:
    """Refresh the stored access token if it is close to expiry."""
    service = dependencies.get_oauth_token_service()
    try:
        asyncio.run(service.ensure_valid_token())
    except OAuthCredentialsNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_MISSING_CREDENTIALS
    except OAuthTokenRenewalError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_REFRESH_ERROR
    return EXIT_OK


def _add_env_argument(
    parser: argparse.ArgumentParser, flag: str, env_var: str, help_text: str
) -> None:
    """Add a flag that falls back to ``env_var`` and is required only without it."""
    default = os.environ.get(env_var)
    parser.add_argument(
        flag,
        default=default,
        required=not default,
        help=f"{help_text} Defaults to ${env_var}.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Store OAuth credentials and keep the access token fresh."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser(
        "setup",
        help="Write credentials obtained from an external authorization flow.",
    )
    _add_env_argument(
        setup_parser,
        "--access-token",
        ACCESS_TOKEN_ENV,
        "Access token from the authorization flow.",
    )
    _add_env_argument(
        setup_parser,
        "--refresh-token",
        REFRESH_TOKEN_ENV,
        "Refresh token from the authorization flow.",
    )
    _add_env_argument(
        setup_parser,
        "--expires-at",
        EXPIRES_AT_ENV,
        "Absolute Unix timestamp (seconds) at which the access token expires.",
    )

    subparsers.add_parser(
        "ensure",
        help="Refresh the stored access token when it is about to expire.",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(get_settings().log_level)
    except ValidationError as exc:
        print(
            "Settings validation failed. Missing or invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    command: str = args.command
    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "setup": _setup,
        "ensure": _ensure,
    }
    try:
        return handlers[command](args)
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Unexpected error while running {command}: {exc}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
