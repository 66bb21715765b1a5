"""
CRUD operations package.

Exports CRUD classes and their module-level singletons.
"""

from syllabus_hub.boundary.db.CRUD.base_crud import BaseCRUD
from syllabus_hub.boundary.db.CRUD.course_crud import CourseCRUD, DeletedCourse, course_crud
from syllabus_hub.boundary.db.CRUD.section_crud import (
    LectureCRUD,
    SectionCRUD,
    lecture_crud,
    section_crud,
)

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "SectionCRUD",
    "LectureCRUD",
    "DeletedCourse",
    "course_crud",
    "section_crud",
    "lecture_crud",
]
