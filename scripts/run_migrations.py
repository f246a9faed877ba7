#!/usr/bin/env python3
"""Apply Alembic migrations to the Alumni Connect database.

Usage:
    python scripts/run_migrations.py                 # upgrade to head
    python scripts/run_migrations.py --to a7d40e5c2f81
    python scripts/run_migrations.py --down -1       # roll back one revision
    python scripts/run_migrations.py --sql > schema.sql
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from alumni.config import Settings
from alumni.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--to", default="head", help="Revision to upgrade to")
    target.add_argument("--down", metavar="REVISION", help="Revision to downgrade to")
    parser.add_argument(
        "--sql", action="store_true", help="Print the SQL instead of executing it"
    )
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(args.config)

    direction = "downgrade" if args.down else "upgrade"
    revision = args.down or args.to

    with logfire.span(
        "run_migrations", direction=direction, revision=revision, offline=args.sql
    ):
        try:
            if args.down:
                command.downgrade(alembic_cfg, revision, sql=args.sql)
            else:
                command.upgrade(alembic_cfg, revision, sql=args.sql)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Propagate so the container exits non-zero
            raise

    logfire.info("Database migrations completed", direction=direction, revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
