from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from ..config import settings
import logging

logger = logging.getLogger(__name__)

# Configure SQLite connection args with timeout for better concurrency handling
sqlite_connect_args = {}
if "sqlite" in settings.database_url:
    sqlite_connect_args = {
        "check_same_thread": False,
        "timeout": 30.0,  # Wait up to 30 seconds for lock to be released
    }

engine = create_engine(
    settings.database_url,
    connect_args=sqlite_connect_args,
    echo=settings.debug,
    pool_pre_ping=True,  # Verify connections before using
)


def enable_sqlite_foreign_keys(target: Engine, wal: bool = False) -> None:
    """Switch on foreign key enforcement for every new SQLite connection

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection,
    so chat message cleanup depends on this listener.
    """
    @event.listens_for(target, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if wal:
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds in milliseconds
        cursor.close()
        logger.debug("SQLite pragmas applied (foreign_keys=ON, wal=%s)", wal)


if "sqlite" in settings.database_url:
    enable_sqlite_foreign_keys(engine, wal=":memory:" not in settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables"""
    # Register the mapped classes on Base.metadata before creating tables
    from .. import models  # noqa: F401

    logger.info("Initializing database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")
