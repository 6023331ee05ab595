#!/usr/bin/env python3
"""Apply the posts schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to revision
    python scripts/run_migrations.py -1         # step back one revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from feed.config import Settings
from feed.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the feed database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    database = make_url(settings.database_url)

    with logfire.span(
        "run_migrations", target=target, host=database.host, database=database.database
    ):
        try:
            alembic_cfg = Config("alembic.ini")
            if target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
            logfire.info("Feed schema migrated", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Feed schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
