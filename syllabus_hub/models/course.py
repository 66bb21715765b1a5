"""
Course domain models and schemas.

Request/response schemas for course operations. Responses serialize with
camelCase keys (courseId, sectionCode, dayOfWeek, ...).

Dependencies: pydantic, syllabus_hub.core.presentation
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from syllabus_hub.core.presentation import AssessmentItem, ExamItem, NormalizedField


class CamelModel(BaseModel):
    """Base for response bodies with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateCourseRequest(BaseModel):
    """Request schema for archiving or restoring a course."""

    archived: bool = Field(..., description="Move the course to the archived list")


class LectureResponse(CamelModel):
    """One weekly meeting of a section."""

    id: uuid.UUID
    day_of_week: str
    start_time: str
    end_time: str
    location: str


class SectionResponse(CamelModel):
    """A section with its lectures in extraction order."""

    id: uuid.UUID
    section_code: str
    instructor: str
    lectures: list[LectureResponse] = Field(default_factory=list)


class SectionGroupResponse(CamelModel):
    """Sections sharing a type prefix (LEC, TUT, PRA, OTHER)."""

    section_type: str
    sections: list[SectionResponse]


class CourseSummaryResponse(CamelModel):
    """Dashboard card for a course."""

    id: uuid.UUID
    name: str | None
    term: str | None
    description: str | None
    archived: bool
    created_at: datetime
    assessment: NormalizedField[AssessmentItem] | None = None
    sections: list[SectionResponse] = Field(default_factory=list)


class CourseDetailResponse(CourseSummaryResponse):
    """Full course page."""

    status: str
    policies: str | None
    source_path: str | None
    updated_at: datetime
    materials: NormalizedField[str] | None = None
    exam_dates: NormalizedField[ExamItem] | None = None
    section_groups: list[SectionGroupResponse] = Field(default_factory=list)


class CourseListResponse(CamelModel):
    """Completed courses split by archive flag, newest first."""

    active: list[CourseSummaryResponse]
    archived: list[CourseSummaryResponse]


class UploadCourseResponse(CamelModel):
    """Response for a successful syllabus upload."""

    message: str
    course_id: uuid.UUID


class DeleteCourseResponse(BaseModel):
    """Response for a successful delete."""

    message: str = "Course deleted successfully"
