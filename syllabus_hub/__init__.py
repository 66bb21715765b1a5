"""Syllabus Hub: syllabus PDF extraction and course dashboard service."""

__version__ = "0.1.0"
