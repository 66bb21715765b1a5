"""
PDF store factory for selecting between local disk (dev) and S3 (prod).

Depends on the STORAGE_BACKEND environment variable.

Dependencies: syllabus_hub.boundary, syllabus_hub.configs
System role: PDF store instantiation and selection
"""

import logging

from syllabus_hub.boundary.storage.pdf_store import LocalPdfStore, PdfStore
from syllabus_hub.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_pdf_store(settings: Settings | None = None) -> PdfStore:
    """
    Factory function to get the PDF store based on configuration.

    Returns:
        LocalPdfStore or S3PdfStore: Configured store

    Raises:
        ValueError: If STORAGE_BACKEND is invalid
    """
    settings = settings or get_settings()
    backend = settings.storage.backend.lower()

    if backend == "local":
        logger.info(
            f"{__name__}:get_pdf_store - Creating local PDF store at {settings.storage.local_dir}"
        )
        return LocalPdfStore(settings.storage.local_dir)

    elif backend == "s3":
        # boto3 is only imported when S3 is actually selected
        from syllabus_hub.boundary.aws.s3_client import S3PdfStore

        logger.info(f"{__name__}:get_pdf_store - Creating S3 PDF store ({settings.storage.bucket})")
        return S3PdfStore(
            bucket=settings.storage.bucket,
            region=settings.storage.region,
        )

    else:
        raise ValueError(
            f"Invalid STORAGE_BACKEND: {backend}. "
            f"Must be 'local' (dev) or 's3' (production)."
        )
