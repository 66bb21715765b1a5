"""
Test suite for CourseService.

System role: Verification of course queries, archiving and deletion
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import EndpointConnectionError
from sqlalchemy.ext.asyncio import AsyncSession

from syllabus_hub.application.services.course_service import CourseService
from syllabus_hub.boundary.aws.s3_client import S3PdfStore
from syllabus_hub.boundary.db.CRUD.course_crud import course_crud
from syllabus_hub.boundary.db.CRUD.section_crud import lecture_crud, section_crud
from syllabus_hub.boundary.db.models.course_model import CourseStatus
from syllabus_hub.core.exceptions import CourseNotFoundError, StorageError


async def _complete_course(session: AsyncSession, pdf_store, name: str = "CSC108") -> uuid.UUID:
    key = f"uploads/1-{name}.pdf"
    await pdf_store.save(key, b"%PDF-1.4")
    course = await course_crud.create_pending(session, source_path=key)
    await course_crud.update_by_id(
        session, course.id, name=name, assessment="Midterm: 40%", status=CourseStatus.COMPLETE
    )
    section = await section_crud.create_for_course(
        session, course_id=course.id, section_code="LEC0101", instructor="TBD", position=0
    )
    await lecture_crud.create_for_section(
        session, section_id=section.id, day_of_week="Monday", start_time="9:00",
        end_time="10:00", location="TBD", position=0,
    )
    await session.commit()
    return course.id


@pytest.fixture
def course_service(test_async_db: AsyncSession, pdf_store) -> CourseService:
    """Provide CourseService on the test database."""
    return CourseService(db=test_async_db, pdf_store=pdf_store)


class TestGetCourse:
    """Test suite for CourseService.get_course()."""

    @pytest.mark.asyncio
    async def test_returns_nested_data(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test the course dict carries sections and lectures."""
        course_id = await _complete_course(test_async_db, pdf_store)

        data = await course_service.get_course(course_id)

        assert data["name"] == "CSC108"
        assert data["status"] == "complete"
        assert data["sections"][0]["section_code"] == "LEC0101"
        assert data["sections"][0]["lectures"][0]["day_of_week"] == "Monday"

    @pytest.mark.asyncio
    async def test_not_found(self, course_service: CourseService) -> None:
        """Test unknown IDs raise CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError):
            await course_service.get_course(uuid.uuid4())


class TestListCourses:
    """Test suite for CourseService.list_courses()."""

    @pytest.mark.asyncio
    async def test_splits_active_and_archived(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test pending courses are hidden and archived ones listed apart."""
        await _complete_course(test_async_db, pdf_store, "Active")
        archived_id = await _complete_course(test_async_db, pdf_store, "Old")
        await course_crud.create_pending(test_async_db, source_path="uploads/2-pending.pdf")
        await test_async_db.commit()
        await course_service.set_archived(archived_id, True)

        listing = await course_service.list_courses()

        assert [c["name"] for c in listing["active"]] == ["Active"]
        assert [c["name"] for c in listing["archived"]] == ["Old"]


class TestSetArchived:
    """Test suite for CourseService.set_archived()."""

    @pytest.mark.asyncio
    async def test_toggles_flag(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test archiving and restoring a course."""
        course_id = await _complete_course(test_async_db, pdf_store)

        archived = await course_service.set_archived(course_id, True)
        restored = await course_service.set_archived(course_id, False)

        assert archived["archived"] is True
        assert restored["archived"] is False
        assert len(restored["sections"]) == 1

    @pytest.mark.asyncio
    async def test_not_found(self, course_service: CourseService) -> None:
        """Test archiving an unknown course fails."""
        with pytest.raises(CourseNotFoundError):
            await course_service.set_archived(uuid.uuid4(), True)

    @pytest.mark.asyncio
    async def test_pending_course_cannot_be_archived(
        self, course_service: CourseService, test_async_db: AsyncSession
    ) -> None:
        """Test courses still awaiting extraction are not archivable."""
        course = await course_crud.create_pending(test_async_db, source_path="uploads/1-a.pdf")
        await test_async_db.commit()

        with pytest.raises(CourseNotFoundError) as exc_info:
            await course_service.set_archived(course.id, True)

        assert exc_info.value.details["status"] == CourseStatus.PENDING.value
        refreshed = await course_crud.get_by_id(test_async_db, course.id)
        assert refreshed.archived is False


class TestDeleteCourse:
    """Test suite for CourseService.delete_course()."""

    @pytest.mark.asyncio
    async def test_deletes_rows_and_file(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test the course graph and its PDF are removed."""
        course_id = await _complete_course(test_async_db, pdf_store)

        assert await course_service.delete_course(course_id) is True

        assert await course_crud.count(test_async_db) == 0
        assert await section_crud.count(test_async_db) == 0
        assert await lecture_crud.count(test_async_db) == 0
        assert pdf_store.files == {}

    @pytest.mark.asyncio
    async def test_succeeds_when_file_already_gone(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test a missing PDF does not block deletion."""
        course_id = await _complete_course(test_async_db, pdf_store)
        pdf_store.files.clear()

        assert await course_service.delete_course(course_id) is True
        assert await course_crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_succeeds_when_store_fails(
        self, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test storage errors during cleanup are logged, not raised."""
        course_id = await _complete_course(test_async_db, pdf_store)
        failing_store = AsyncMock()
        failing_store.delete = AsyncMock(side_effect=StorageError("permission denied"))
        service = CourseService(db=test_async_db, pdf_store=failing_store)

        assert await service.delete_course(course_id) is True
        assert await course_crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_succeeds_when_s3_unreachable(
        self, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test S3 connection errors during cleanup do not fail the delete."""
        course_id = await _complete_course(test_async_db, pdf_store)
        s3 = MagicMock()
        s3.head_object.side_effect = EndpointConnectionError(endpoint_url="https://s3.example.com")
        service = CourseService(db=test_async_db, pdf_store=S3PdfStore(bucket="uploads-bucket", s3_client=s3))

        assert await service.delete_course(course_id) is True
        assert await course_crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_not_found_changes_nothing(
        self, course_service: CourseService, test_async_db: AsyncSession, pdf_store
    ) -> None:
        """Test deleting an unknown ID raises and leaves data intact."""
        await _complete_course(test_async_db, pdf_store)

        with pytest.raises(CourseNotFoundError):
            await course_service.delete_course(uuid.uuid4())

        assert await course_crud.count(test_async_db) == 1
        assert await section_crud.count(test_async_db) == 1
        assert len(pdf_store.files) == 1
