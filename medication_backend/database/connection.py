"""
Database Configuration
Supports SQLite (dev) and PostgreSQL (production)
"""
import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from medication_backend.config import settings
from medication_backend.database.models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Database connection manager with support for multiple backends"""

    def __init__(self):
        self.engine = None
        self.SessionLocal = None
        self._initialized = False

    def init_db(self, database_url: str = None):
        """Initialize database connection"""
        if self._initialized:
            return

        if database_url is None:
            database_url = settings.DATABASE_URL

        # Handle PostgreSQL URL format from some cloud providers
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)

        if "sqlite" in database_url:
            self.engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=settings.SQL_DEBUG
            )

            @event.listens_for(self.engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()
        else:
            self.engine = create_engine(
                database_url,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
                echo=settings.SQL_DEBUG
            )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        Base.metadata.create_all(bind=self.engine)

        self._initialized = True
        logger.info(f"Database initialized: {database_url.split('@')[-1] if '@' in database_url else database_url}")

    def get_session(self) -> Session:
        """Get a new database session"""
        if not self._initialized:
            self.init_db()
        return self.SessionLocal()

    def close(self):
        """Close database connection"""
        if self.engine:
            self.engine.dispose()
            self._initialized = False


# Global database manager instance
db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions"""
    db = db_manager.get_session()
    try:
        yield db
    finally:
        db.close()


