"""
Course API endpoints.

Routes:
- POST /courses - Upload a syllabus PDF and create a course from it
- GET /courses - List completed courses (active and archived)
- GET /courses/{id} - Get course detail
- PATCH /courses/{id} - Archive or restore a course
- DELETE /courses/{id} - Delete course, its sections and its PDF

Dependencies: syllabus_hub.application.services, syllabus_hub.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from syllabus_hub.api.deps.dependencies import (
    get_course_service,
    get_ingestion_service,
)
from syllabus_hub.application.services.course_service import CourseService
from syllabus_hub.application.services.ingestion_service import CourseIngestionService
from syllabus_hub.models.course import (
    CourseDetailResponse,
    CourseListResponse,
    CourseSummaryResponse,
    DeleteCourseResponse,
    UpdateCourseRequest,
    UploadCourseResponse,
)

from .course_error_handling import handle_course_errors
from .course_validators import read_uploads
from .course_views import build_course_detail, build_course_list, build_course_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=UploadCourseResponse)
@handle_course_errors
async def upload_course(
    request: Request,
    ingestion_service: CourseIngestionService = Depends(get_ingestion_service),
) -> UploadCourseResponse:
    """
    Upload a syllabus PDF and extract a course from it.

    Args:
        request: Multipart request with exactly one PDF under the "pdf" field
        ingestion_service: Injected CourseIngestionService

    Returns:
        UploadCourseResponse: Success message and new course ID

    Raises:
        HTTPException(400): Missing, non-PDF or multiple files
        HTTPException(500): Extraction or persistence failed (course rolled back)
    """
    uploads = await read_uploads(request)

    logger.info(
        "Receiving syllabus upload",
        extra={"file_count": len(uploads), "filenames": [u.filename for u in uploads]}
    )

    result = await ingestion_service.ingest(uploads)

    logger.info(
        "Syllabus processed successfully",
        extra={"course_id": str(result.course_id), "state": result.state.value}
    )

    return UploadCourseResponse(
        message="PDF uploaded and processed successfully",
        course_id=result.course_id,
    )


@router.get("", response_model=CourseListResponse)
@handle_course_errors
async def list_courses(
    limit: int | None = None,
    course_service: CourseService = Depends(get_course_service),
) -> CourseListResponse:
    """
    List completed courses split into active and archived.

    Args:
        limit: Maximum number of courses per list (default all)
        course_service: Injected CourseService

    Returns:
        CourseListResponse: Dashboard cards, newest first

    Raises:
        HTTPException(500): Retrieval failed
    """
    listing = await course_service.list_courses(limit=limit)

    logger.info(
        "Courses retrieved successfully",
        extra={"active": len(listing["active"]), "archived": len(listing["archived"])}
    )

    return build_course_list(listing)


@router.get("/{course_id}", response_model=CourseDetailResponse)
@handle_course_errors
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseDetailResponse:
    """
    Get course detail by ID.

    Args:
        course_id: Course UUID
        course_service: Injected CourseService

    Returns:
        CourseDetailResponse: Normalized course page

    Raises:
        HTTPException(404): Course not found
        HTTPException(500): Retrieval failed
    """
    course_data = await course_service.get_course(course_id)
    return build_course_detail(course_data)


@router.patch("/{course_id}", response_model=CourseSummaryResponse)
@handle_course_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseSummaryResponse:
    """
    Archive or restore a course.

    Args:
        course_id: Course UUID
        request: UpdateCourseRequest with the archived flag
        course_service: Injected CourseService

    Returns:
        CourseSummaryResponse: Updated course card

    Raises:
        HTTPException(404): Course not found
        HTTPException(500): Update failed
    """
    logger.info(
        "Updating course",
        extra={"course_id": str(course_id), "archived": request.archived}
    )

    course_data = await course_service.set_archived(course_id, request.archived)
    return build_course_summary(course_data)


@router.delete("/{course_id}", response_model=DeleteCourseResponse)
@handle_course_errors
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> DeleteCourseResponse:
    """
    Delete course by ID together with its sections, lectures and PDF.

    Args:
        course_id: Course UUID
        course_service: Injected CourseService

    Returns:
        DeleteCourseResponse: Confirmation message

    Raises:
        HTTPException(404): Course not found
        HTTPException(500): Deletion failed
    """
    logger.info(
        "Deleting course",
        extra={"course_id": str(course_id)}
    )

    await course_service.delete_course(course_id)
    return DeleteCourseResponse()
