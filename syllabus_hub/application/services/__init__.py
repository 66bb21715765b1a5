"""Service orchestrators."""

from .course_service import CourseService
from .ingestion_service import (
    CourseIngestionService,
    IngestionResult,
    IngestionState,
    UploadedPdf,
)

__all__ = [
    "CourseService",
    "CourseIngestionService",
    "IngestionResult",
    "IngestionState",
    "UploadedPdf",
]
