"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - CourseModel, SectionModel, LectureModel: Course record graph
  - CourseStatus: Course lifecycle enum
  - course_crud, section_crud, lecture_crud: CRUD operation singletons

Dependencies: sqlalchemy, syllabus_hub.configs
System role: Database adapter for the course record store
"""

from syllabus_hub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from syllabus_hub.boundary.db.connection import (
    build_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from syllabus_hub.boundary.db.models import (
    CourseModel,
    CourseStatus,
    LectureModel,
    SectionModel,
)
from syllabus_hub.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    DeletedCourse,
    LectureCRUD,
    SectionCRUD,
    course_crud,
    lecture_crud,
    section_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "build_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "CourseStatus",
    "SectionModel",
    "LectureModel",
    # CRUD classes
    "BaseCRUD",
    "CourseCRUD",
    "SectionCRUD",
    "LectureCRUD",
    "DeletedCourse",
    # CRUD singletons
    "course_crud",
    "section_crud",
    "lecture_crud",
]
