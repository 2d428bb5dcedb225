"""
Programmatic Alembic migration runner.

Allows running migrations without an alembic.ini by configuring the script location
to this package's migrations directory. Migrations are an explicit deployment step:
nothing in the data-access layer runs them on import or on first use.

Usage examples:
    python -m blog_data.db.run_migrations upgrade head
    python -m blog_data.db.run_migrations downgrade -1
    python -m blog_data.db.run_migrations history
"""

import logging
import sys
from pathlib import Path
from typing import List

from alembic import command
from alembic.config import Config

from blog_data.core.logging import configure_logging
from blog_data.db.config import get_settings

logger = logging.getLogger(__name__)


def build_config(database_url: str) -> Config:
    """Return an Alembic Config pointing at the bundled migrations."""
    cfg = Config()
    here = Path(__file__).resolve()
    cfg.set_main_option("script_location", str(here.parent / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Run Alembic command with programmatic configuration."""
    args = list(sys.argv[1:] if argv is None else argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    if not args:
        print("No Alembic arguments provided. Example: upgrade head")
        sys.exit(1)

    cfg = build_config(settings.database_url)

    # Dispatch to Alembic CLI command
    cmd = args[0]
    other = args[1:]
    logger.info("Running Alembic command: %s %s", cmd, " ".join(other))

    if cmd == "upgrade":
        command.upgrade(cfg, *(other or ["head"]))
    elif cmd == "downgrade":
        command.downgrade(cfg, *(other or ["-1"]))
    elif cmd == "history":
        command.history(cfg, *other)
    elif cmd == "current":
        command.current(cfg, *other)
    elif cmd == "heads":
        command.heads(cfg, *other)
    elif cmd == "show":
        if not other:
            print("Usage: show <revision>")
            sys.exit(2)
        command.show(cfg, other[0])
    else:
        print(f"Unsupported Alembic command: {cmd}")
        sys.exit(2)


if __name__ == "__main__":
    main()
