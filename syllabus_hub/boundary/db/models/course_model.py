"""
Course ORM model.

Represents one uploaded syllabus and the fields extracted from it.
A course owns its sections, which own their lectures.

Dependencies: sqlalchemy, syllabus_hub.boundary.db.base
System role: Course persistence for the syllabus dashboard
"""

import enum

from sqlalchemy import Boolean, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from syllabus_hub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseStatus(str, enum.Enum):
    """
    Course extraction lifecycle.

    PENDING: Upload accepted, extraction in progress, extracted fields NULL
    COMPLETE: Extraction succeeded and fields were written
    FAILED: Extraction failed; only ever reported, never stored
    """

    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


# Columns written by a successful extraction; all NULL while pending.
EXTRACTED_FIELDS = (
    "name",
    "term",
    "description",
    "materials",
    "assessment",
    "policies",
    "exam_dates",
)


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model for one syllabus upload.

    Attributes:
        id: UUID primary key (auto-generated)
        name, term, description, materials, assessment, policies, exam_dates:
            Extracted text, NULL until extraction completes
        source_path: Storage key of the uploaded PDF (advisory)
        status: CourseStatus, PENDING on creation
        archived: Whether the course is listed under archived
        sections: SectionModel rows ordered by position
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        sections: One-to-many with SectionModel (cascade delete)
    """

    __tablename__ = "courses"

    name: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
    term: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    materials: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    assessment: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    policies: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    exam_dates: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    source_path: Mapped[str | None] = mapped_column(
        String(1024),
        nullable=True,
        default=None,
        doc="Storage key of the uploaded PDF",
    )

    status: Mapped[CourseStatus] = mapped_column(
        Enum(CourseStatus, native_enum=False),
        nullable=False,
        default=CourseStatus.PENDING,
    )

    archived: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    # Relationships
    sections = relationship(
        "SectionModel",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="SectionModel.position",
    )
