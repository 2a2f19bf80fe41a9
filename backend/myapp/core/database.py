from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from myapp.core.config import settings

Base = declarative_base()


class DatabaseManager:
    """Owns one async engine and hands out transaction-scoped sessions."""

    def __init__(self, database_url: str, base=Base, echo: bool = False):
        self.base = base
        self.engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=NullPool,  # Use NullPool for async
            future=True,
        )
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session bound to a single transaction.

        Commits when the block exits normally and rolls back on errors. The
        session is closed on every exit path, including ``aclose()`` of a
        stream that is still holding it.
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(self.base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(self.base.metadata.drop_all)

    async def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    async def close(self) -> None:
        """Close the database engine."""
        await self.engine.dispose()


_db_manager: Optional[DatabaseManager] = None


def get_default_db_manager() -> DatabaseManager:
    """Lazily build the manager for ``settings.database_url``."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(
            settings.database_url,
            echo=settings.app_env == "development" and settings.log_level.upper() == "DEBUG",
        )
    return _db_manager


# Dependency for FastAPI routes
def get_db_manager(request: Request) -> DatabaseManager:
    """FastAPI dependency returning the database manager of the running app."""
    return request.app.state.db_manager
