# scripts/import_users.py
"""
Import the remote user list into the customers table.

Usage:
    python -m scripts.import_users
"""

import logging

import httpx

from dashboard.config import get_settings
from dashboard.db.engine import build_engine
from dashboard.importer import fetch_all_users, import_users

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    with httpx.Client(timeout=settings.HTTP_TIMEOUT) as client:
        users = fetch_all_users(client, settings.USERS_API_URL, settings.IMPORT_PAGE_LIMIT)

    engine = build_engine(settings.DATABASE_URL)
    try:
        n_imported = import_users(engine, users)
    finally:
        engine.dispose()

    logger.info("Imported/updated: %s users", n_imported)


def run():
    """Run main(); any failure is logged and ends the process with status 1."""
    try:
        main()
    except Exception:
        logger.exception("User import failed")
        raise SystemExit(1)


if __name__ == "__main__":
    run()
