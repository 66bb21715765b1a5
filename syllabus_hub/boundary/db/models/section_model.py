"""
Section ORM model.

One registered offering of a course (lecture, tutorial, practical).

Dependencies: sqlalchemy, syllabus_hub.boundary.db.base
System role: Section persistence under a course
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from syllabus_hub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SectionModel(Base, UUIDMixin, TimestampMixin):
    """
    Section ORM model.

    Attributes:
        section_code: Free-form code, usually with a type prefix (LEC0101)
        instructor: Instructor name or "TBD"
        position: Index in the extraction output, preserves ordering
        course_id: Owning course (cascade delete)
        lectures: LectureModel rows ordered by position
    """

    __tablename__ = "sections"

    section_code: Mapped[str] = mapped_column(String(255), nullable=False, default="TBD")
    instructor: Mapped[str] = mapped_column(String(512), nullable=False, default="TBD")
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    course = relationship("CourseModel", back_populates="sections")
    lectures = relationship(
        "LectureModel",
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="LectureModel.position",
    )
