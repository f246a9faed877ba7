#!/usr/bin/env python3
"""Serve the Alumni Connect API with uvicorn.

Usage:
    python scripts/start_app.py             # bind 0.0.0.0 on $PORT (default 8000)
    python scripts/start_app.py --reload    # development autoreload
"""

import argparse
import sys

import logfire
import uvicorn

from alumni.config import Settings
from alumni.util.logging import setup_logging
from alumni.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the Alumni Connect API")
    parser.add_argument("--bind", default="0.0.0.0", help="Interface to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Alumni Connect API",
        bind=args.bind,
        port=settings.port,
        environment=settings.environment,
        reload=args.reload,
    )
    try:
        # The factory builds the production DI container in the worker process
        uvicorn.run(
            "alumni.interface.api.app:create_app",
            factory=True,
            host=args.bind,
            port=settings.port,
            reload=args.reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
