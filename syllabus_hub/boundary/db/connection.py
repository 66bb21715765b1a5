"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, syllabus_hub.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from syllabus_hub.configs import get_settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_async_engine(url: str, echo: bool = False, **engine_kwargs) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Args:
        url: SQLAlchemy async URL
        echo: Echo SQL statements to logs
        **engine_kwargs: Extra create_async_engine arguments (pool sizing,
            poolclass, connect_args)

    Returns:
        AsyncEngine: Configured engine
    """
    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=echo, **engine_kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        **engine_kwargs,
    )


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Get the process-wide async engine, built from settings on first use.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database
    pool_kwargs = {}
    if not db_config.is_sqlite:
        pool_kwargs = {
            "pool_size": db_config.pool_size,
            "max_overflow": db_config.max_overflow,
            "pool_timeout": db_config.pool_timeout,
        }
    return build_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        **pool_kwargs,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker:
    """
    Get the async session factory bound to the shared engine.

    autoflush=False and expire_on_commit=False keep transaction control
    explicit and let services read attributes after commit.

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it is
    closed after the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        @router.get("/courses/{id}")
        async def get_course(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.get_with_sections(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session
