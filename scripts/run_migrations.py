#!/usr/bin/env python3
"""Apply comments_votes migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from tally.config import Settings
from tally.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision."""
    configure_logfire(Settings())
    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve votes against a stale schema
            raise

    logfire.info("Migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
