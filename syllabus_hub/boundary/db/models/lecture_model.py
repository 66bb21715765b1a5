"""
Lecture ORM model.

One scheduled meeting of a section. Times are kept as the free text the
syllabus used since source formats are inconsistent.

Dependencies: sqlalchemy, syllabus_hub.boundary.db.base
System role: Lecture persistence under a section
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from syllabus_hub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class LectureModel(Base, UUIDMixin, TimestampMixin):
    """
    Lecture ORM model.

    Attributes:
        day_of_week: e.g. "Monday"
        start_time: e.g. "2:00 PM"
        end_time: e.g. "3:00 PM"
        location: Room or building
        position: Order within the section
        section_id: Owning section (cascade delete)
    """

    __tablename__ = "lectures"

    day_of_week: Mapped[str] = mapped_column(String(64), nullable=False, default="TBD")
    start_time: Mapped[str] = mapped_column(String(64), nullable=False, default="TBD")
    end_time: Mapped[str] = mapped_column(String(64), nullable=False, default="TBD")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="TBD")
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    section_id: Mapped[UUID] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    section = relationship("SectionModel", back_populates="lectures")
