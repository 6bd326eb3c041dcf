from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from pathlib import Path

from config.app_config import DATABASE_URL
from exceptions import DatabaseError


def _engine_options(url: str) -> dict:
    """Build create_engine keyword arguments for the configured backend."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True, "pool_recycle": 3600}

    options = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # In-memory databases live on a single connection
        options["poolclass"] = StaticPool
    else:
        Path(parsed.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return options


def enable_sqlite_pragmas(engine):
    """Register WAL mode and foreign key enforcement on new SQLite connections."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(DATABASE_URL, echo=False, **_engine_options(DATABASE_URL))
enable_sqlite_pragmas(engine)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_session(db, operation: str) -> None:
    """
    Commit the current transaction, rolling back on failure.

    Args:
        db: Database session
        operation: Name of the operation, recorded on the raised error

    Raises:
        DatabaseError: If the commit fails
    """
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError(operation, f"{operation} could not be saved") from e
