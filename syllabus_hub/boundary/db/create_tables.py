"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.
Runs on application startup when POSTGRES_AUTO_CREATE_TABLES is set,
or manually.

Dependencies: sqlalchemy, syllabus_hub.configs
System role: Database schema initialization

Usage:
    python -m syllabus_hub.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from syllabus_hub.boundary.db.base import Base
from syllabus_hub.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from syllabus_hub.boundary.db.models.course_model import CourseModel  # noqa: F401
from syllabus_hub.boundary.db.models.section_model import SectionModel  # noqa: F401
from syllabus_hub.boundary.db.models.lecture_model import LectureModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged.

    Args:
        engine: Engine to use; defaults to the shared application engine

    Raises:
        SQLAlchemyError: If the connection or DDL fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    asyncio.run(create_all_tables())
