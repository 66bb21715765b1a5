"""Syllabus extraction via Google Gemini.

Sends the PDF bytes plus the extraction prompt to Gemini in a single
request, parses the JSON answer into ExtractedCourseData and classifies
failures (rate limit, malformed answer, anything else). One attempt per
upload; retrying is up to the user.

Dependencies: google.genai, pydantic, asyncio, json
System role: Extraction oracle adapter
"""

import asyncio
import json
import logging
import re
from typing import TYPE_CHECKING

from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from syllabus_hub.core.exceptions import (
    ExtractionFailedError,
    InvalidUploadError,
    MalformedExtractionError,
    RateLimitedError,
)
from syllabus_hub.core.extraction.extraction_prompt import get_syllabus_extraction_prompt
from syllabus_hub.core.extraction.extraction_schema import ExtractedCourseData

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

_RATE_LIMIT_PATTERN = re.compile(
    r"\b429\b|quota|resource_exhausted|rate limit|too many requests", re.IGNORECASE
)
_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def is_rate_limit_error(error: BaseException) -> bool:
    """
    Decide whether an upstream error signals quota or rate-limit exhaustion.

    Args:
        error: Exception raised by the Gemini client

    Returns:
        bool: True for HTTP 429 / RESOURCE_EXHAUSTED style failures
    """
    if isinstance(error, genai_errors.APIError):
        if error.code == 429 or (error.status or "").upper() == "RESOURCE_EXHAUSTED":
            return True
    return bool(_RATE_LIMIT_PATTERN.search(str(error)))


def parse_extraction_response(text: str | None) -> ExtractedCourseData:
    """
    Parse the raw model answer into ExtractedCourseData.

    Args:
        text: Response text, expected to be one JSON object

    Returns:
        ExtractedCourseData: Parsed and fallback-filled result

    Raises:
        MalformedExtractionError: Empty answer, invalid JSON, non-object JSON
            or a shape the schema rejects
    """
    if not text or not text.strip():
        raise MalformedExtractionError("Extraction response was empty", raw_response=text or "")

    cleaned = _CODE_FENCE.sub("", text.strip())
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedExtractionError(
            f"Extraction response is not valid JSON: {e.msg}",
            raw_response=text,
        ) from e

    if not isinstance(payload, dict):
        raise MalformedExtractionError(
            f"Extraction response must be a JSON object, got {type(payload).__name__}",
            raw_response=text,
        )

    try:
        return ExtractedCourseData.model_validate(payload)
    except ValidationError as e:
        raise MalformedExtractionError(
            f"Extraction response does not match the course schema ({e.error_count()} errors)",
            raw_response=text,
        ) from e


class SyllabusExtractor:
    """Extracts structured course data from a syllabus PDF with Gemini."""

    def __init__(
        self,
        client: "genai.Client",
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.0,
    ) -> None:
        """
        Initialize extractor.

        Args:
            client: Google GenAI client
            model_id: Gemini model that accepts PDF parts
            temperature: Sampling temperature
        """
        self._client = client
        self._model_id = model_id
        self._temperature = temperature

    async def extract(self, pdf_bytes: bytes, mime_type: str = PDF_MIME_TYPE) -> ExtractedCourseData:
        """
        Extract course data from PDF bytes.

        Args:
            pdf_bytes: Raw PDF content
            mime_type: Declared MIME type; must be application/pdf

        Returns:
            ExtractedCourseData: Parsed course data

        Raises:
            InvalidUploadError: If mime_type is not application/pdf
            RateLimitedError: If Gemini reports quota/rate-limit exhaustion
            MalformedExtractionError: If the answer is not the expected JSON
            ExtractionFailedError: For any other upstream failure
        """
        if mime_type != PDF_MIME_TYPE:
            raise InvalidUploadError("File must be a PDF", content_type=mime_type)

        logger.info(
            f"{__name__}:extract - START",
            extra={"model_id": self._model_id, "size_bytes": len(pdf_bytes)},
        )

        try:
            response = await asyncio.to_thread(
                self._client.models.generate_content,
                model=self._model_id,
                contents=[
                    types.Part.from_bytes(data=pdf_bytes, mime_type=mime_type),
                    get_syllabus_extraction_prompt(),
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    temperature=self._temperature,
                ),
            )
        except Exception as e:
            if is_rate_limit_error(e):
                logger.warning(
                    f"{__name__}:extract - Rate limited by Gemini",
                    extra={"error_type": type(e).__name__, "error_msg": str(e)[:200]},
                )
                raise RateLimitedError(details={"upstream": str(e)[:200]}) from e
            logger.error(
                f"{__name__}:extract - FAILED at Gemini API call - {type(e).__name__}: {str(e)[:200]}",
                exc_info=True,
            )
            raise ExtractionFailedError(
                "Failed to extract course information from PDF",
                details={"error_type": type(e).__name__},
            ) from e

        data = parse_extraction_response(response.text)

        logger.info(
            f"{__name__}:extract - END",
            extra={
                "course_name": data.name,
                "section_count": len(data.sections),
            },
        )
        return data
