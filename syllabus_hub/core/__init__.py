"""
Core business logic module.

Contains the exception hierarchy, the syllabus extraction adapter and the
presentation normalizer. Nothing here touches the database or HTTP layer.
"""

from syllabus_hub.core.exceptions import (
    CourseNotFoundError,
    ExtractionError,
    ExtractionFailedError,
    InvalidUploadError,
    MalformedExtractionError,
    PersistenceError,
    RateLimitedError,
    StorageError,
    SyllabusHubException,
)

__all__ = [
    "SyllabusHubException",
    "InvalidUploadError",
    "ExtractionError",
    "RateLimitedError",
    "MalformedExtractionError",
    "ExtractionFailedError",
    "CourseNotFoundError",
    "PersistenceError",
    "StorageError",
]
