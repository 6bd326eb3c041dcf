from database import engine, Base
from sqlalchemy import inspect
import logging

# Register models on Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("users", "user_authorities", "todo_lists", "tasks")


def missing_tables(bind=None) -> list[str]:
    """Return the required tables that do not exist yet."""
    inspector = inspect(bind or engine)
    existing = set(inspector.get_table_names())
    return [table for table in REQUIRED_TABLES if table not in existing]


def init_database(bind=None):
    """
    Create any missing tables.

    Existing tables are left untouched, so this is safe to run on every startup.
    """
    target = bind or engine
    missing = missing_tables(target)
    if not missing:
        logger.info("Database schema up to date")
        return

    logger.info(f"Creating tables: {', '.join(missing)}")
    Base.metadata.create_all(bind=target)
    logger.info("✅ Database initialized")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
