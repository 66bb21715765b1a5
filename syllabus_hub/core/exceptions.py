"""
Exception hierarchy for Syllabus Hub.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a few minutes."
PROCESSING_FAILED_MESSAGE = "Failed to process PDF with AI. Please try again."


class SyllabusHubException(Exception):
    """Base exception for all Syllabus Hub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidUploadError(SyllabusHubException):
    """Raised when an upload is missing, not a PDF, or not a single file."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        content_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid upload error.

        Args:
            message: Error message shown to the client
            filename: Name of the rejected file, if any
            content_type: Declared MIME type of the rejected file
            details: Additional context
        """
        details = details or {}
        if filename:
            details["filename"] = filename
        if content_type:
            details["content_type"] = content_type
        super().__init__(message, details)


class ExtractionError(SyllabusHubException):
    """Base exception for failures of the syllabus extraction call."""

    user_message = PROCESSING_FAILED_MESSAGE


class RateLimitedError(ExtractionError):
    """Raised when the extraction service reports quota or rate-limit exhaustion."""

    user_message = RATE_LIMIT_MESSAGE

    def __init__(self, message: str = RATE_LIMIT_MESSAGE, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class MalformedExtractionError(ExtractionError):
    """Raised when the extraction response is not the expected JSON object."""

    def __init__(
        self,
        message: str,
        raw_response: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed extraction error.

        Args:
            message: Error message
            raw_response: Leading part of the unparseable response
            details: Additional context
        """
        details = details or {}
        if raw_response is not None:
            details["raw_response"] = raw_response[:200]
        super().__init__(message, details)


class ExtractionFailedError(ExtractionError):
    """Raised for any other upstream extraction failure."""

    pass


class CourseNotFoundError(SyllabusHubException):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize course not found error.

        Args:
            course_id: ID of the missing course
            details: Additional context
        """
        details = details or {}
        details["course_id"] = str(course_id)
        self.course_id = course_id
        super().__init__("Course not found", details)


class PersistenceError(SyllabusHubException):
    """Raised when the record store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            operation: Store operation that failed (create, finalize, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageError(SyllabusHubException):
    """Raised when the PDF store cannot save or delete a file."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            path: Storage key involved
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
