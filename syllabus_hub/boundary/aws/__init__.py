"""
AWS boundary modules.

Exports: S3PdfStore
"""

from .s3_client import S3PdfStore

__all__ = ["S3PdfStore"]
