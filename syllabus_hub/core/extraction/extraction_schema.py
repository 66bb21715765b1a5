"""Schemas for the syllabus extraction response.

Every field is optional: the model answers on a best-effort basis.
Fallback literals ("TBD" and the sentinel strings) are applied here, once,
so nothing downstream has to handle missing values.

Dependencies: pydantic, json
System role: Data contract between the extraction call and the ingestion pipeline
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from syllabus_hub.core.extraction.extraction_prompt import (
    NO_EXAM_DATES_SENTINEL,
    NO_MATERIALS_SENTINEL,
)

TBD = "TBD"


def _to_text(value: Any) -> str | None:
    """Coerce a JSON value into stored text; structured values stay JSON."""
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _or_tbd(value: Any) -> str:
    return _to_text(value) or TBD


class ExtractedLecture(BaseModel):
    """One meeting time of a section."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    day_of_week: str = Field(default=TBD, alias="dayOfWeek")
    start_time: str = Field(default=TBD, alias="startTime")
    end_time: str = Field(default=TBD, alias="endTime")
    location: str = Field(default=TBD)

    @field_validator("day_of_week", "start_time", "end_time", "location", mode="before")
    @classmethod
    def _fill_missing(cls, value: Any) -> str:
        return _or_tbd(value)


class ExtractedSection(BaseModel):
    """One offering of the course with its meeting times."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    section_code: str = Field(default=TBD, alias="sectionCode")
    instructor: str = Field(default=TBD)
    lectures: list[ExtractedLecture] = Field(default_factory=list)

    @field_validator("section_code", "instructor", mode="before")
    @classmethod
    def _fill_missing(cls, value: Any) -> str:
        return _or_tbd(value)

    @field_validator("lectures", mode="before")
    @classmethod
    def _lectures_list(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]


class ExtractedCourseData(BaseModel):
    """Course fields returned by the extraction call.

    Attributes mirror the Course columns; sections carry their lectures.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    term: str | None = None
    description: str | None = None
    materials: str = Field(default=NO_MATERIALS_SENTINEL)
    assessment: str | None = None
    policies: str | None = None
    exam_dates: str = Field(default=NO_EXAM_DATES_SENTINEL, alias="examDates")
    sections: list[ExtractedSection] = Field(default_factory=list)

    @field_validator("name", "term", "description", "assessment", "policies", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _to_text(value)

    @field_validator("materials", mode="before")
    @classmethod
    def _materials_sentinel(cls, value: Any) -> str:
        return _to_text(value) or NO_MATERIALS_SENTINEL

    @field_validator("exam_dates", mode="before")
    @classmethod
    def _exam_dates_sentinel(cls, value: Any) -> str:
        return _to_text(value) or NO_EXAM_DATES_SENTINEL

    @field_validator("sections", mode="before")
    @classmethod
    def _sections_list(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]

    def course_fields(self) -> dict[str, str | None]:
        """Scalar fields keyed by Course column name."""
        return {
            "name": self.name,
            "term": self.term,
            "description": self.description,
            "materials": self.materials,
            "assessment": self.assessment,
            "policies": self.policies,
            "exam_dates": self.exam_dates,
        }
