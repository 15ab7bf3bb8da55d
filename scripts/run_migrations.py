#!/usr/bin/env python3
"""Apply database migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from cardiac.config import Settings
from cardiac.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema, logging the outcome to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Running database migrations")

        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Never start the API on a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
