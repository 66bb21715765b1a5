"""
Syllabus extraction package.

Exports: SyllabusExtractor, ExtractedCourseData, ExtractedSection, ExtractedLecture
"""

from .extraction_schema import ExtractedCourseData, ExtractedLecture, ExtractedSection
from .syllabus_extractor import SyllabusExtractor, is_rate_limit_error, parse_extraction_response

__all__ = [
    "SyllabusExtractor",
    "ExtractedCourseData",
    "ExtractedSection",
    "ExtractedLecture",
    "is_rate_limit_error",
    "parse_extraction_response",
]
