"""
S3-backed PDF store.

Keeps uploaded syllabus PDFs in an S3 bucket. boto3 calls are blocking,
so each one runs in a worker thread.

Dependencies: boto3
System role: Production PDF storage
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from syllabus_hub.boundary.storage.pdf_store import PdfStore
from syllabus_hub.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class S3PdfStore(PdfStore):
    """PDF store backed by an S3 bucket."""

    def __init__(self, bucket: str, region: str = "ap-southeast-2", s3_client=None) -> None:
        """
        Initialize S3 store for the upload bucket.

        Args:
            bucket: S3 bucket name for PDF storage
            region: AWS region for S3 bucket
            s3_client: Preconfigured boto3 S3 client (tests inject a stub)
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    async def save(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        """
        Upload PDF bytes to S3.

        Args:
            key: S3 object key
            data: File contents
            content_type: MIME type stored with the object

        Returns:
            str: The object key

        Raises:
            StorageError: If the upload fails
        """
        try:
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to upload file to S3: {e}", path=key) from e
        logger.debug("Uploaded PDF to S3", extra={"bucket": self._bucket, "s3_key": key})
        return key

    async def delete(self, key: str) -> bool:
        """
        Delete an object from S3.

        Returns:
            bool: False when the object did not exist

        Raises:
            StorageError: If the existence check or the delete call fails
        """
        if not await self.exists(key):
            return False
        try:
            await asyncio.to_thread(
                self._s3_client.delete_object,
                Bucket=self._bucket,
                Key=key,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to delete file from S3: {e}", path=key) from e
        return True

    async def exists(self, key: str) -> bool:
        """
        Check if an object exists in S3.

        Args:
            key: S3 object key to check

        Returns:
            bool: True if object exists, False otherwise

        Raises:
            StorageError: If the check fails for any reason other than a missing object
        """
        try:
            await asyncio.to_thread(
                self._s3_client.head_object,
                Bucket=self._bucket,
                Key=key,
            )
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(f"Failed to check file in S3: {e}", path=key) from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to check file in S3: {e}", path=key) from e
