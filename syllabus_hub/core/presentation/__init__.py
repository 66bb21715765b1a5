"""
Presentation normalizer package.

Exports the parse functions and item models shared by every course view.
"""

from .text_normalizer import (
    ASSESSMENT_KEYWORDS,
    EXAM_KEYWORDS,
    AssessmentItem,
    ExamItem,
    NormalizedField,
    parse_assessment,
    parse_assessment_fragment,
    parse_exam_dates,
    parse_materials,
    section_type,
    split_line_items,
)

__all__ = [
    "ASSESSMENT_KEYWORDS",
    "EXAM_KEYWORDS",
    "AssessmentItem",
    "ExamItem",
    "NormalizedField",
    "parse_assessment",
    "parse_assessment_fragment",
    "parse_exam_dates",
    "parse_materials",
    "section_type",
    "split_line_items",
]
