"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: syllabus_hub.configs, syllabus_hub.application, syllabus_hub.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from syllabus_hub.configs import Settings, get_settings
from syllabus_hub.boundary.db import get_async_db
from syllabus_hub.boundary.storage import PdfStore, get_pdf_store
from syllabus_hub.application.services import CourseIngestionService, CourseService
from syllabus_hub.core.extraction import SyllabusExtractor


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._genai_client = None
        self._extractor = None
        self._pdf_store = None

    @property
    def genai_client(self):
        """Get cached Google GenAI client."""
        if self._genai_client is None:
            from google import genai

            settings = get_settings()
            self._genai_client = genai.Client(api_key=settings.gemini.api_key)
        return self._genai_client

    @property
    def extractor(self) -> SyllabusExtractor:
        """Get cached syllabus extractor."""
        if self._extractor is None:
            settings = get_settings()
            self._extractor = SyllabusExtractor(
                client=self.genai_client,
                model_id=settings.gemini.model,
                temperature=settings.gemini.temperature,
            )
        return self._extractor

    @property
    def pdf_store(self) -> PdfStore:
        """Get cached PDF store."""
        if self._pdf_store is None:
            self._pdf_store = get_pdf_store()
        return self._pdf_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._genai_client = None
        self._extractor = None
        self._pdf_store = None


# Global service cache
_service_cache = ServiceCache()

def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_pdf_store_dependency() -> PdfStore:
    """
    Get the configured PDF store.

    Returns:
        PdfStore: Local or S3 store selected by STORAGE_BACKEND
    """
    return get_service_cache().pdf_store


def get_extractor() -> SyllabusExtractor:
    """
    Get the Gemini-backed syllabus extractor.

    Returns:
        SyllabusExtractor: Extractor sharing one GenAI client
    """
    return get_service_cache().extractor


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    pdf_store: PdfStore = Depends(get_pdf_store_dependency),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        pdf_store: PDF store used to remove files on delete

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, pdf_store=pdf_store)


def get_ingestion_service(
    db: AsyncSession = Depends(get_async_db),
    extractor: SyllabusExtractor = Depends(get_extractor),
    pdf_store: PdfStore = Depends(get_pdf_store_dependency),
    settings: Settings = Depends(get_settings_dependency),
) -> CourseIngestionService:
    """
    Get course ingestion service instance.

    Args:
        db: Async database session (injected via Depends)
        extractor: Syllabus extractor (injected)
        pdf_store: PDF store for uploads (injected)
        settings: Application settings (injected)

    Returns:
        CourseIngestionService: Ingestion service for one request
    """
    return CourseIngestionService(
        db=db,
        extractor=extractor,
        pdf_store=pdf_store,
        key_prefix=settings.storage.prefix,
    )
