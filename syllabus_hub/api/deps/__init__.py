"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_course_service,
    get_extractor,
    get_ingestion_service,
    get_pdf_store_dependency,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_course_service",
    "get_extractor",
    "get_ingestion_service",
    "get_pdf_store_dependency",
    "get_service_cache",
    "get_settings_dependency",
]
