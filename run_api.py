#!/usr/bin/env python
"""
Run the login-app API server.

Usage:
    python run_api.py
    python run_api.py --env production --port 9000
    python run_api.py --reload  # Development mode
"""

import argparse
import os
import platform
import sys

import uvicorn

from shared.config import get_settings
from shared.exceptions import ConfigurationError
from shared.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run login-app API server")
    parser.add_argument("--env", type=str, help="Environment (development, production)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Exported so the reloader's worker process loads the same profile
    if args.env:
        os.environ["ENVIRONMENT"] = args.env
        get_settings.cache_clear()

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Failed to load configuration: {e.message}", file=sys.stderr)
        return 1

    if args.version:
        print(
            f"{settings.app_name} version: {settings.app_version}\n"
            f"Python version: {platform.python_version()} ({sys.platform})",
            file=sys.stderr,
        )
        return 0

    setup_logging(settings.log_level, settings.log_format)

    uvicorn.run(
        "api:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
