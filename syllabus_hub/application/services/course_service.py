"""
Course service orchestrator.

Coordinates course queries, archiving and deletion.

Dependencies: sqlalchemy, syllabus_hub.boundary.db.CRUD, syllabus_hub.boundary.storage
System role: Course use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from syllabus_hub.boundary.db.CRUD.course_crud import course_crud
from syllabus_hub.boundary.db.models.course_model import CourseModel, CourseStatus
from syllabus_hub.boundary.storage.pdf_store import PdfStore
from syllabus_hub.core.exceptions import CourseNotFoundError, PersistenceError, StorageError

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel) -> dict:
    """
    Serialize a course with its sections and lectures.

    Args:
        course: CourseModel with children loaded

    Returns:
        dict: Plain data consumed by the response mappers
    """
    return {
        "id": course.id,
        "name": course.name,
        "term": course.term,
        "description": course.description,
        "materials": course.materials,
        "assessment": course.assessment,
        "policies": course.policies,
        "exam_dates": course.exam_dates,
        "source_path": course.source_path,
        "status": course.status.value,
        "archived": course.archived,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
        "sections": [
            {
                "id": section.id,
                "section_code": section.section_code,
                "instructor": section.instructor,
                "lectures": [
                    {
                        "id": lecture.id,
                        "day_of_week": lecture.day_of_week,
                        "start_time": lecture.start_time,
                        "end_time": lecture.end_time,
                        "location": lecture.location,
                    }
                    for lecture in section.lectures
                ],
            }
            for section in course.sections
        ],
    }


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, pdf_store: PdfStore | None = None) -> None:
        """
        Initialize course service.

        Args:
            db: Async SQLAlchemy session
            pdf_store: Store holding uploaded PDFs; deletes skip file cleanup without it
        """
        self.db = db
        self.pdf_store = pdf_store

    async def get_course(self, course_id: UUID) -> dict:
        """
        Get course by ID with sections and lectures.

        Args:
            course_id: Course UUID

        Returns:
            dict: Course data

        Raises:
            CourseNotFoundError: If course does not exist
            PersistenceError: If the query fails
        """
        try:
            course = await course_crud.get_with_sections(self.db, course_id)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to get course",
                extra={"error": str(e), "course_id": str(course_id)}
            )
            raise PersistenceError("Failed to fetch course", operation="get") from e

        if course is None:
            raise CourseNotFoundError(course_id)
        return course_to_dict(course)

    async def list_courses(self, limit: int | None = None) -> dict[str, list[dict]]:
        """
        List completed courses split into active and archived, newest first.

        Args:
            limit: Maximum number of courses per list

        Returns:
            dict: {"active": [...], "archived": [...]}

        Raises:
            PersistenceError: If the query fails
        """
        try:
            active = await course_crud.list_by_status(
                self.db, status=CourseStatus.COMPLETE, archived=False, limit=limit
            )
            archived = await course_crud.list_by_status(
                self.db, status=CourseStatus.COMPLETE, archived=True, limit=limit
            )
        except SQLAlchemyError as e:
            logger.error("Failed to list courses", extra={"error": str(e)})
            raise PersistenceError("Failed to fetch courses", operation="list") from e

        return {
            "active": [course_to_dict(c) for c in active],
            "archived": [course_to_dict(c) for c in archived],
        }

    async def set_archived(self, course_id: UUID, archived: bool) -> dict:
        """
        Move a course between the active and archived lists.

        Args:
            course_id: Course UUID
            archived: New archive flag

        Returns:
            dict: Updated course data

        Raises:
            CourseNotFoundError: If course does not exist or is not complete
            PersistenceError: If the update fails
        """
        try:
            existing = await course_crud.get_by_id(self.db, course_id)
            if existing is None:
                raise CourseNotFoundError(course_id)
            # Only listed courses can move between the lists
            if existing.status != CourseStatus.COMPLETE:
                raise CourseNotFoundError(course_id, details={"status": existing.status.value})
            await course_crud.update_by_id(self.db, course_id, archived=archived)
            await self.db.commit()
            course = await course_crud.get_with_sections(self.db, course_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)}
            )
            raise PersistenceError("Failed to update course", operation="update") from e

        logger.info(
            "Course archive flag updated",
            extra={"course_id": str(course_id), "archived": archived}
        )
        return course_to_dict(course)

    async def delete_course(self, course_id: UUID) -> bool:
        """
        Delete course with its sections and lectures, then its stored PDF.

        The database delete is authoritative; failing to remove the file is
        logged and ignored.

        Args:
            course_id: Course UUID

        Returns:
            bool: True if deleted

        Raises:
            CourseNotFoundError: If course does not exist (nothing is modified)
            PersistenceError: If the delete fails
        """
        try:
            deleted = await course_crud.delete_with_children(self.db, course_id)
            if deleted is None:
                raise CourseNotFoundError(course_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": str(course_id)}
            )
            raise PersistenceError("Failed to delete course", operation="delete") from e

        logger.info("Course deleted", extra={"course_id": str(course_id)})
        await self._remove_file(deleted.source_path, course_id)
        return True

    async def _remove_file(self, source_path: str | None, course_id: UUID) -> None:
        if not source_path or self.pdf_store is None:
            return
        try:
            removed = await self.pdf_store.delete(source_path)
        except StorageError as e:
            logger.warning(
                "Failed to delete PDF file",
                extra={"course_id": str(course_id), "path": source_path, "error": str(e)}
            )
            return
        if not removed:
            logger.info(
                "PDF file already absent",
                extra={"course_id": str(course_id), "path": source_path}
            )
