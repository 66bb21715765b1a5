"""
Database models package.

Exports:
  - CourseModel, CourseStatus: Course ORM model and status enum
  - SectionModel: Section ORM model
  - LectureModel: Lecture ORM model

Dependencies: sqlalchemy, syllabus_hub.boundary.db.base
System role: Database model definitions for domain entities
"""

from syllabus_hub.boundary.db.models.course_model import CourseModel, CourseStatus, EXTRACTED_FIELDS
from syllabus_hub.boundary.db.models.section_model import SectionModel
from syllabus_hub.boundary.db.models.lecture_model import LectureModel

__all__ = [
    "CourseModel",
    "CourseStatus",
    "EXTRACTED_FIELDS",
    "SectionModel",
    "LectureModel",
]
