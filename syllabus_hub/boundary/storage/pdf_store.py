"""
PDF store interface and local filesystem implementation.

Uploaded syllabi are addressed by an opaque key such as
"uploads/1718000000000-syllabus.pdf". The key is what gets persisted in
Course.source_path.

Dependencies: pathlib, asyncio
System role: File storage for uploaded PDFs
"""

import abc
import asyncio
import logging
import re
import time
from pathlib import Path

from syllabus_hub.core.exceptions import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def build_storage_key(filename: str, prefix: str = "uploads", timestamp_ms: int | None = None) -> str:
    """
    Build a unique storage key for an uploaded file.

    Args:
        filename: Original filename from the client
        prefix: Key prefix (folder)
        timestamp_ms: Millisecond timestamp; defaults to now

    Returns:
        str: "<prefix>/<timestamp>-<sanitised filename>"
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", Path(filename).name) or "upload.pdf"
    return f"{prefix.strip('/')}/{timestamp_ms}-{safe_name}"


class PdfStore(abc.ABC):
    """Storage for uploaded PDF bytes."""

    @abc.abstractmethod
    async def save(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        """
        Store bytes under key.

        Returns:
            str: The key the file was stored under

        Raises:
            StorageError: If the write fails
        """

    @abc.abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Remove the file stored under key.

        Returns:
            bool: True if a file was removed, False if nothing was there

        Raises:
            StorageError: If the removal fails
        """

    @abc.abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether a file is stored under key."""


class LocalPdfStore(PdfStore):
    """PDF store backed by a local directory (development mode)."""

    def __init__(self, root_dir: str | Path) -> None:
        self._root = Path(root_dir).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if self._root not in path.parents:
            raise StorageError("Storage key escapes the storage root", path=key)
        return path

    async def save(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        path = self._resolve(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            raise StorageError(f"Failed to store file: {e}", path=key) from e
        logger.debug("Stored PDF", extra={"path": key, "size_bytes": len(data)})
        return key

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def delete(self, key: str) -> bool:
        path = self._resolve(key)
        try:
            removed = await asyncio.to_thread(self._unlink, path)
        except OSError as e:
            raise StorageError(f"Failed to delete file: {e}", path=key) from e
        if removed:
            logger.debug("Deleted PDF", extra={"path": key})
        return removed

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    async def exists(self, key: str) -> bool:
        return await asyncio.to_thread(self._resolve(key).is_file)
