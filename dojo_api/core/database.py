# dojo_api/core/database.py
"""Database connection and session management using SQLAlchemy."""
import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL"""
    if settings.database_url.startswith("sqlite"):
        engine = create_async_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )

        # SQLite leaves foreign keys off unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        settings.database_url,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
        echo=(settings.environment == 'development' and settings.log_level == 'debug'),
        connect_args={
            "command_timeout": 60,
            "server_settings": {
                "application_name": "dojo_api",
                "statement_timeout": "30s",
                "idle_in_transaction_session_timeout": "60s",
            }
        }
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
        autocommit=False,
    )


async def create_tables(engine: AsyncEngine):
    """Create every table known to the declarative Base"""
    from ..models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session for API requests with proper error handling"""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def health_check_db(engine: AsyncEngine) -> bool:
    """Fast health check"""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
