"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, fake extractor and PDF store, sample
extraction payloads
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from syllabus_hub.boundary.storage.pdf_store import PdfStore
from syllabus_hub.core.extraction.extraction_schema import ExtractedCourseData

SAMPLE_PDF = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << >>\n%%EOF"


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine with foreign keys enforced (lazy imported to avoid settings issues)
    """
    from sqlalchemy.pool import StaticPool
    from syllabus_hub.boundary.db.base import Base
    from syllabus_hub.boundary.db.connection import build_async_engine
    import syllabus_hub.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = build_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_async_engine):
    """Session factory configured like the application's."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_async_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create an async session on the in-memory database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


class InMemoryPdfStore(PdfStore):
    """PdfStore keeping files in a dict."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def save(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        self.files[key] = data
        return key

    async def delete(self, key: str) -> bool:
        return self.files.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        return key in self.files


@pytest.fixture
def pdf_store() -> InMemoryPdfStore:
    """Provide empty in-memory PDF store."""
    return InMemoryPdfStore()


@pytest.fixture
def sample_pdf() -> bytes:
    """Provide minimal PDF bytes."""
    return SAMPLE_PDF


@pytest.fixture
def extraction_payload() -> dict:
    """Raw extraction answer with one fully and one partially filled section."""
    return {
        "name": "CSC108H5: Introduction to Computer Programming",
        "term": "Fall 2025",
        "description": "Fundamentals of programming in Python.",
        "materials": "Practical Programming, 3rd edition",
        "assessment": "Midterm: 25%, Final Exam: 55%, Participation: 20%",
        "policies": "Late work is not accepted.",
        "examDates": "Midterm: October 20. Final: TBA.",
        "sections": [
            {
                "sectionCode": "LEC0101",
                "instructor": "Dr. Ada Lovelace",
                "lectures": [
                    {"dayOfWeek": "Monday", "startTime": "10:00", "endTime": "11:00", "location": "MN 1210"},
                    {"dayOfWeek": "Wednesday", "startTime": "10:00", "endTime": "11:00"},
                ],
            },
            {"sectionCode": "TUT0101", "lectures": [{}]},
        ],
    }


@pytest.fixture
def extracted_course(extraction_payload) -> ExtractedCourseData:
    """Validated extraction result for extraction_payload."""
    return ExtractedCourseData.model_validate(extraction_payload)


@pytest.fixture
def mock_extractor(extracted_course) -> AsyncMock:
    """
    Create mock SyllabusExtractor returning extracted_course.

    Returns:
        AsyncMock: Extractor whose extract() succeeds
    """
    extractor = AsyncMock()
    extractor.extract = AsyncMock(return_value=extracted_course)
    return extractor


@pytest.fixture
def fake_genai_client(extraction_payload) -> MagicMock:
    """
    Create fake google-genai client answering with extraction_payload as JSON.

    Returns:
        MagicMock: Client exposing models.generate_content
    """
    client = MagicMock()
    response = MagicMock()
    response.text = json.dumps(extraction_payload)
    client.models.generate_content.return_value = response
    return client
