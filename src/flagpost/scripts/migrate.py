# src/flagpost/scripts/migrate.py
"""Apply Alembic migrations up to head."""
from __future__ import annotations

import logging
import os

from alembic import command
from alembic.config import Config

from flagpost.core.settings import settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))


def build_config(database_url: str | None = None) -> Config:
    """Return an Alembic config rooted at the repository's migrations folder."""
    cfg = Config(os.path.join(PROJECT_ROOT, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(PROJECT_ROOT, "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url or settings.effective_database_url)
    return cfg


def run_upgrade_head(database_url: str | None = None) -> None:
    cfg = build_config(database_url)
    logger.info("Upgrading %s to head", cfg.get_main_option("sqlalchemy.url"))
    command.upgrade(cfg, "head")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_upgrade_head()
