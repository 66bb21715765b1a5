"""
Course ingestion service.

Runs one syllabus upload through its lifecycle:

    CREATED -> EXTRACTING -> COMPLETE
                          |-> ROLLED_BACK

The pending course row is the only durable effect before the extraction
call. Afterwards exactly one of two things is committed: the finalize
transaction (fields, status, sections, lectures) or the deletion of the
pending row. A failed upload leaves no course behind.

Dependencies: sqlalchemy, syllabus_hub.boundary, syllabus_hub.core.extraction
System role: Upload -> extraction -> persistence orchestration
"""

import enum
import logging
from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from syllabus_hub.boundary.db.CRUD.course_crud import course_crud
from syllabus_hub.boundary.db.CRUD.section_crud import lecture_crud, section_crud
from syllabus_hub.boundary.db.models.course_model import CourseStatus
from syllabus_hub.boundary.storage.pdf_store import PdfStore, build_storage_key
from syllabus_hub.core.exceptions import (
    ExtractionError,
    InvalidUploadError,
    PersistenceError,
    StorageError,
)
from syllabus_hub.core.extraction.extraction_schema import ExtractedCourseData
from syllabus_hub.core.extraction.syllabus_extractor import PDF_MIME_TYPE, SyllabusExtractor
from syllabus_hub.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class IngestionState(str, enum.Enum):
    """Upload lifecycle states."""

    CREATED = "created"
    EXTRACTING = "extracting"
    COMPLETE = "complete"
    ROLLED_BACK = "rolled_back"


@dataclass(frozen=True)
class UploadedPdf:
    """A file received from the client, read fully into memory."""

    filename: str | None
    content_type: str | None
    data: bytes


class IngestionResult(BaseModel):
    """Outcome of a successful ingestion."""

    course_id: UUID
    state: IngestionState
    status: CourseStatus


def validate_upload(uploads: Sequence[UploadedPdf] | None) -> UploadedPdf:
    """
    Check that the submission is exactly one non-empty PDF.

    Args:
        uploads: Files received under the upload field

    Returns:
        UploadedPdf: The single accepted file

    Raises:
        InvalidUploadError: Missing file, several files, wrong MIME type or empty file
    """
    if not uploads:
        raise InvalidUploadError("No PDF file uploaded")
    if len(uploads) != 1:
        raise InvalidUploadError(
            "Upload exactly one PDF file",
            details={"file_count": len(uploads)},
        )

    upload = uploads[0]
    if not upload.filename:
        raise InvalidUploadError("No PDF file uploaded")
    if upload.content_type != PDF_MIME_TYPE:
        raise InvalidUploadError(
            "File must be a PDF",
            filename=upload.filename,
            content_type=upload.content_type,
        )
    if not upload.data:
        raise InvalidUploadError("Uploaded PDF is empty", filename=upload.filename)
    return upload


class CourseIngestionService:
    """Orchestrates a syllabus upload into a completed course."""

    def __init__(
        self,
        db: AsyncSession,
        extractor: SyllabusExtractor,
        pdf_store: PdfStore,
        key_prefix: str = "uploads",
    ) -> None:
        """
        Initialize ingestion service.

        Args:
            db: Async SQLAlchemy session
            extractor: Syllabus extraction adapter
            pdf_store: Store for the uploaded PDF
            key_prefix: Storage key prefix for uploads
        """
        self.db = db
        self.extractor = extractor
        self.pdf_store = pdf_store
        self.key_prefix = key_prefix

    async def ingest(self, uploads: Sequence[UploadedPdf] | None) -> IngestionResult:
        """
        Validate, store, extract and persist one syllabus upload.

        Args:
            uploads: Files received under the upload field

        Returns:
            IngestionResult: New course ID in state COMPLETE

        Raises:
            InvalidUploadError: Submission rejected; nothing was stored
            RateLimitedError: Extraction quota exhausted; rolled back
            MalformedExtractionError, ExtractionFailedError: Extraction failed; rolled back
            StorageError: The PDF could not be stored; no course was created
            PersistenceError: The record store failed; rolled back
        """
        upload = validate_upload(uploads)

        # CREATED
        key = build_storage_key(upload.filename, prefix=self.key_prefix)
        await self.pdf_store.save(key, upload.data, upload.content_type)

        try:
            course = await course_crud.create_pending(self.db, source_path=key)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            await self._discard_file(key)
            logger.error("Failed to create pending course", extra={"error": str(e), "path": key})
            raise PersistenceError("Failed to create course record", operation="create") from e

        course_id = course.id
        logger.info(
            "Course upload accepted",
            extra={"course_id": str(course_id), "state": IngestionState.CREATED.value, "path": key},
        )

        # EXTRACTING
        try:
            extracted = await self.extractor.extract(upload.data, upload.content_type)
            await self._finalize(course_id, extracted)
        except Exception as e:
            await self._roll_back(course_id, key, e)
            if isinstance(e, SQLAlchemyError):
                raise PersistenceError(
                    "Failed to save extracted course",
                    operation="finalize",
                    details={
                        "state": IngestionState.ROLLED_BACK.value,
                        "course_status": CourseStatus.FAILED.value,
                    },
                ) from e
            if isinstance(e, ExtractionError):
                e.details.setdefault("state", IngestionState.ROLLED_BACK.value)
                e.details.setdefault("course_status", CourseStatus.FAILED.value)
            raise

        logger.info(
            "Course extraction complete",
            extra={
                "course_id": str(course_id),
                "state": IngestionState.COMPLETE.value,
                "section_count": len(extracted.sections),
            },
        )
        return IngestionResult(
            course_id=course_id,
            state=IngestionState.COMPLETE,
            status=CourseStatus.COMPLETE,
        )

    async def _finalize(self, course_id: UUID, extracted: ExtractedCourseData) -> None:
        """Write extracted fields and child rows in one transaction."""
        await course_crud.update_by_id(
            self.db,
            course_id,
            **extracted.course_fields(),
            status=CourseStatus.COMPLETE,
        )

        for section_position, section in enumerate(extracted.sections):
            section_row = await section_crud.create_for_course(
                self.db,
                course_id=course_id,
                section_code=section.section_code,
                instructor=section.instructor,
                position=section_position,
            )
            for lecture_position, lecture in enumerate(section.lectures):
                await lecture_crud.create_for_section(
                    self.db,
                    section_id=section_row.id,
                    day_of_week=lecture.day_of_week,
                    start_time=lecture.start_time,
                    end_time=lecture.end_time,
                    location=lecture.location,
                    position=lecture_position,
                )

        await self.db.commit()

    async def _roll_back(self, course_id: UUID, key: str, error: Exception) -> None:
        """Delete the pending course and its stored PDF after a failure."""
        log_with_context(
            logger,
            logging.WARNING,
            "Course ingestion failed, rolling back",
            course_id=course_id,
            state=IngestionState.ROLLED_BACK,
            error_type=type(error).__name__,
            error_msg=str(error),
        )
        await self.db.rollback()
        try:
            await course_crud.delete_by_id(self.db, course_id)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception(
                "Compensating delete failed; pending course left behind",
                extra={"course_id": str(course_id)},
            )
        await self._discard_file(key)

    async def _discard_file(self, key: str) -> None:
        try:
            await self.pdf_store.delete(key)
        except StorageError as e:
            logger.warning("Failed to delete PDF file", extra={"path": key, "error": str(e)})
