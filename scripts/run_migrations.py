#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from quest.config import Settings
from quest.util.logging import setup_logging
from quest.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("migrations.upgrade", target="head"):
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
        # Re-raise so the deploy stops before serving a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
