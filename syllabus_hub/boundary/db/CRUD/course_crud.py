"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific queries that eagerly load sections and lectures.

Dependencies: sqlalchemy, syllabus_hub.boundary.db.models
System role: Course persistence operations
"""

from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from syllabus_hub.boundary.db.models.course_model import EXTRACTED_FIELDS, CourseModel, CourseStatus
from syllabus_hub.boundary.db.models.section_model import SectionModel
from syllabus_hub.boundary.db.CRUD.base_crud import BaseCRUD


def _with_children():
    """Loader option for the full Course -> Section -> Lecture graph."""
    return selectinload(CourseModel.sections).selectinload(SectionModel.lectures)


@dataclass(frozen=True)
class DeletedCourse:
    """Identity and stored-file reference of a course that was just deleted."""

    id: UUID
    source_path: str | None


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with pending-record creation, status/archive
    filtered listing and cascading deletion.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def create_pending(
        self,
        session: AsyncSession,
        source_path: str | None = None,
    ) -> CourseModel:
        """
        Create a placeholder course awaiting extraction.

        Args:
            session: Async database session
            source_path: Storage key of the uploaded PDF

        Returns:
            CourseModel with status PENDING and no extracted fields
        """
        return await self.create(
            session,
            source_path=source_path,
            status=CourseStatus.PENDING,
            archived=False,
            **dict.fromkeys(EXTRACTED_FIELDS),
        )

    async def get_with_sections(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> CourseModel | None:
        """
        Retrieve course with eagerly loaded sections and lectures.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            CourseModel with children loaded, None if not found
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.id == id)
            .options(_with_children())
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_status(
        self,
        session: AsyncSession,
        status: CourseStatus = CourseStatus.COMPLETE,
        archived: bool | None = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        """
        List courses newest first, filtered by status and archive flag.

        Args:
            session: Async database session
            status: Status to match
            archived: Archive flag to match; None matches both
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            Sequence of CourseModels with children loaded
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.status == status)
            .options(_with_children())
            .order_by(CourseModel.created_at.desc())
            .offset(offset)
        )
        if archived is not None:
            stmt = stmt.where(CourseModel.archived.is_(archived))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_with_children(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> DeletedCourse | None:
        """
        Delete a course through the ORM so sections and lectures cascade.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            DeletedCourse with the stored-file reference, None if not found
            (nothing is modified in that case)
        """
        course = await self.get_with_sections(session, id)
        if course is None:
            return None

        deleted = DeletedCourse(id=course.id, source_path=course.source_path)
        await session.delete(course)
        await session.flush()
        return deleted


course_crud = CourseCRUD()
