"""
Course view builders.

Turns service-layer course dictionaries into the dashboard card and the
detail page. Both views normalize assessment through the same function,
so a course renders identical assessment items everywhere.

Dependencies: syllabus_hub.core.presentation, syllabus_hub.models.course
System role: Course response transformation
"""

from typing import Any

from syllabus_hub.core.presentation import (
    parse_assessment,
    parse_exam_dates,
    parse_materials,
    section_type,
)
from syllabus_hub.models.course import (
    CourseDetailResponse,
    CourseListResponse,
    CourseSummaryResponse,
    LectureResponse,
    SectionGroupResponse,
    SectionResponse,
)


def build_sections(sections_data: list[dict[str, Any]]) -> list[SectionResponse]:
    """Map section dictionaries (with nested lectures) to responses."""
    return [
        SectionResponse(
            id=section["id"],
            section_code=section["section_code"],
            instructor=section["instructor"],
            lectures=[LectureResponse(**lecture) for lecture in section["lectures"]],
        )
        for section in sections_data
    ]


def group_sections(sections: list[SectionResponse]) -> list[SectionGroupResponse]:
    """
    Group sections by type prefix, keeping first-seen group order.

    Args:
        sections: Sections in extraction order

    Returns:
        list[SectionGroupResponse]: One group per prefix (LEC, TUT, PRA, OTHER, ...)
    """
    groups: dict[str, list[SectionResponse]] = {}
    for section in sections:
        groups.setdefault(section_type(section.section_code), []).append(section)
    return [
        SectionGroupResponse(section_type=kind, sections=members)
        for kind, members in groups.items()
    ]


def build_course_summary(course_data: dict[str, Any]) -> CourseSummaryResponse:
    """
    Build the dashboard card for a course.

    Args:
        course_data: Course dictionary from CourseService

    Returns:
        CourseSummaryResponse: Card with normalized assessment items
    """
    return CourseSummaryResponse(
        id=course_data["id"],
        name=course_data["name"],
        term=course_data["term"],
        description=course_data["description"],
        archived=course_data["archived"],
        created_at=course_data["created_at"],
        assessment=parse_assessment(course_data["assessment"]),
        sections=build_sections(course_data["sections"]),
    )


def build_course_detail(course_data: dict[str, Any]) -> CourseDetailResponse:
    """
    Build the detail page for a course.

    Args:
        course_data: Course dictionary from CourseService

    Returns:
        CourseDetailResponse: All fields with normalized assessment, exam
            dates and materials, plus sections grouped by type
    """
    sections = build_sections(course_data["sections"])
    return CourseDetailResponse(
        id=course_data["id"],
        name=course_data["name"],
        term=course_data["term"],
        description=course_data["description"],
        archived=course_data["archived"],
        created_at=course_data["created_at"],
        updated_at=course_data["updated_at"],
        status=course_data["status"],
        policies=course_data["policies"],
        source_path=course_data["source_path"],
        assessment=parse_assessment(course_data["assessment"]),
        exam_dates=parse_exam_dates(course_data["exam_dates"]),
        materials=parse_materials(course_data["materials"]),
        sections=sections,
        section_groups=group_sections(sections),
    )


def build_course_list(listing: dict[str, list[dict[str, Any]]]) -> CourseListResponse:
    """Map the service's active/archived split to a response."""
    return CourseListResponse(
        active=[build_course_summary(course) for course in listing["active"]],
        archived=[build_course_summary(course) for course in listing["archived"]],
    )
