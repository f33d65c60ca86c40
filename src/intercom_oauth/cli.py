"""Command-line entry point.

Example
-------
    intercom-oauth serve --port 8000 --env-file .env
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from intercom_oauth.servers.main import create_app
from intercom_oauth.utils.environment import AppSettings
from intercom_oauth.utils.logging import setup_logging

logger = logging.getLogger("intercom-oauth.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intercom-oauth", description="Intercom OAuth2 demo server."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="dotenv file to load before reading settings (default: ./.env if present)",
    )
    serve.add_argument(
        "--log-level",
        default=None,
        help="overrides LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    )
    return parser


def _serve(args: argparse.Namespace) -> int:
    if args.env_file is not None and not args.env_file.is_file():
        print(f"env file not found: {args.env_file}", file=sys.stderr)
        return 2
    env_file = args.env_file or Path(".env")
    if env_file.is_file():
        load_dotenv(env_file, override=False)

    settings = AppSettings.from_env()
    level = (args.log_level or settings.log_level).upper()
    setup_logging(level)
    resolved = logging.getLevelName(level)
    # uvicorn only knows the canonical names, so WARN becomes "warning"
    uvicorn_level = (
        logging.getLevelName(resolved).lower() if isinstance(resolved, int) else "info"
    )
    logger.info("Serving on http://%s:%s", args.host, args.port)

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=uvicorn_level,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "serve":
        return _serve(args)
    return 1  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
