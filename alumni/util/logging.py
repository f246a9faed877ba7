"""Standard-library logging setup.

Application code logs through logfire. Third-party libraries (uvicorn,
alembic, SQLAlchemy, asyncpg) use the ``logging`` module; their records are
written to stdout and also forwarded to Logfire so startup and migration
failures appear next to request traces.
"""

import logging
import sys

import logfire

from alumni.config import Settings

# Loggers that are chatty at INFO and only interesting when debugging
_NOISY_LOGGERS = ("httpx", "httpcore", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,
    )

    quiet = logging.DEBUG if settings.debug else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    # SQL echo is controlled by the engine (echo=settings.debug)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
