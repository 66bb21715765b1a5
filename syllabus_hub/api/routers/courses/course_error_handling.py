"""
Course error handling utilities.

Provides a decorator for consistent error handling across course-related
API endpoints. Domain exceptions become ErrorResponse JSON bodies; the
details field is left out in production.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from syllabus_hub.configs import get_settings
from syllabus_hub.core.exceptions import (
    CourseNotFoundError,
    ExtractionError,
    InvalidUploadError,
    PersistenceError,
    StorageError,
    SyllabusHubException,
)
from syllabus_hub.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "An internal error occurred during course operation"


def error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Build an ErrorResponse JSON body.

    Args:
        status_code: HTTP status code
        message: Client-facing error message
        details: Diagnostic context, dropped in production

    Returns:
        JSONResponse: {"success": false, "error": ..., "details": ...}
    """
    if get_settings().is_production:
        details = None
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def handle_course_errors(func: F) -> F:
    """
    Decorator to handle course-related errors and transform them into error responses.

    This centralizes:
    - Logging of errors with context (course_id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except InvalidUploadError as e:
            logger.warning("Invalid upload", extra={"error": str(e)})
            return error_response(status.HTTP_400_BAD_REQUEST, e.message, e.details)

        except CourseNotFoundError as e:
            logger.warning(
                "Course not found",
                extra={"course_id": str(e.course_id), "error": str(e)}
            )
            return error_response(status.HTTP_404_NOT_FOUND, e.message, e.details)

        except ExtractionError as e:
            logger.error(
                "Syllabus extraction failed",
                extra={"error_type": type(e).__name__, "error": str(e)}
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, e.user_message, e.details
            )

        except (PersistenceError, StorageError) as e:
            logger.error(
                "Course operation failed",
                extra={"error_type": type(e).__name__, "error": str(e)}
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, e.message, e.details
            )

        except SyllabusHubException as e:
            logger.error("Unhandled application error", extra={"error": str(e)})
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, e.message, e.details
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in course operation",
                extra={"error": str(e)}
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTERNAL_ERROR_MESSAGE,
                {"error_type": type(e).__name__, "error": str(e)},
            )

    return wrapper  # type: ignore
