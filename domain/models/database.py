"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("foodapi.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_options(url: str) -> dict:
    """Extra create_engine arguments for the configured backend."""
    options = {"echo": settings.db_echo, "future": True}
    if url.startswith("sqlite"):
        # Requests are served from FastAPI's threadpool
        options["connect_args"] = {"check_same_thread": False}
        if url.rstrip("/").endswith(":") or ":memory:" in url:
            # In-memory databases live as long as their single connection
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True
    return options


# Create engine
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

# Create session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info(
        "Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables))
    )


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
