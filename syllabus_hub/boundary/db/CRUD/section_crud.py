"""
Section and lecture CRUD operations.

Dependencies: sqlalchemy, syllabus_hub.boundary.db.models
System role: Child-record persistence for extracted course schedules
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from syllabus_hub.boundary.db.models.lecture_model import LectureModel
from syllabus_hub.boundary.db.models.section_model import SectionModel
from syllabus_hub.boundary.db.CRUD.base_crud import BaseCRUD


class SectionCRUD(BaseCRUD[SectionModel]):
    """CRUD operations for SectionModel."""

    def __init__(self) -> None:
        super().__init__(SectionModel)

    async def create_for_course(
        self,
        session: AsyncSession,
        course_id: UUID,
        section_code: str,
        instructor: str,
        position: int,
    ) -> SectionModel:
        """
        Create a section under a course.

        Args:
            session: Async database session
            course_id: Owning course UUID
            section_code: Section code ("TBD" when unknown)
            instructor: Instructor name ("TBD" when unknown)
            position: Index in the extraction output

        Returns:
            Created SectionModel
        """
        return await self.create(
            session,
            course_id=course_id,
            section_code=section_code,
            instructor=instructor,
            position=position,
        )


class LectureCRUD(BaseCRUD[LectureModel]):
    """CRUD operations for LectureModel."""

    def __init__(self) -> None:
        super().__init__(LectureModel)

    async def create_for_section(
        self,
        session: AsyncSession,
        section_id: UUID,
        day_of_week: str,
        start_time: str,
        end_time: str,
        location: str,
        position: int,
    ) -> LectureModel:
        """
        Create a lecture under a section.

        Args:
            session: Async database session
            section_id: Owning section UUID
            day_of_week: Meeting day
            start_time: Start time as written in the syllabus
            end_time: End time as written in the syllabus
            location: Room or building
            position: Order within the section

        Returns:
            Created LectureModel
        """
        return await self.create(
            session,
            section_id=section_id,
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
            location=location,
            position=position,
        )


section_crud = SectionCRUD()
lecture_crud = LectureCRUD()
