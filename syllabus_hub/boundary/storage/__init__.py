"""
PDF storage boundary.

Exports: PdfStore, LocalPdfStore, build_storage_key, get_pdf_store
"""

from .pdf_store import LocalPdfStore, PdfStore, build_storage_key
from .pdf_store_factory import get_pdf_store

__all__ = ["PdfStore", "LocalPdfStore", "build_storage_key", "get_pdf_store"]
