"""
Test suite for the Gemini syllabus extractor.

Uses a fake google-genai client; no network calls are made.

System role: Verification of the extraction oracle adapter
"""

import json
from unittest.mock import MagicMock

import pytest
from google.genai import errors as genai_errors

from syllabus_hub.core.exceptions import (
    RATE_LIMIT_MESSAGE,
    ExtractionFailedError,
    InvalidUploadError,
    MalformedExtractionError,
    RateLimitedError,
)
from syllabus_hub.core.extraction import (
    SyllabusExtractor,
    is_rate_limit_error,
    parse_extraction_response,
)
from syllabus_hub.core.extraction.extraction_prompt import (
    NO_EXAM_DATES_SENTINEL,
    NO_MATERIALS_SENTINEL,
)
from syllabus_hub.core.extraction.extraction_schema import TBD


class TestParseExtractionResponse:
    """Test suite for parse_extraction_response()."""

    def test_fills_fallbacks(self) -> None:
        """Test missing fields get TBD and sentinel values."""
        data = parse_extraction_response(
            json.dumps({"name": "MAT137", "sections": [{"lectures": [{"dayOfWeek": "Friday"}]}]})
        )

        assert data.name == "MAT137"
        assert data.term is None
        assert data.materials == NO_MATERIALS_SENTINEL
        assert data.exam_dates == NO_EXAM_DATES_SENTINEL
        section = data.sections[0]
        assert section.section_code == TBD
        assert section.instructor == TBD
        lecture = section.lectures[0]
        assert lecture.day_of_week == "Friday"
        assert (lecture.start_time, lecture.end_time, lecture.location) == (TBD, TBD, TBD)

    def test_empty_strings_become_fallbacks(self) -> None:
        """Test blank answers are treated as missing."""
        data = parse_extraction_response(
            json.dumps({"materials": "  ", "examDates": "", "sections": [{"sectionCode": ""}]})
        )

        assert data.materials == NO_MATERIALS_SENTINEL
        assert data.exam_dates == NO_EXAM_DATES_SENTINEL
        assert data.sections[0].section_code == TBD

    def test_strips_code_fences(self) -> None:
        """Test fenced JSON answers are accepted."""
        data = parse_extraction_response('```json\n{"name": "CSC148"}\n```')

        assert data.name == "CSC148"

    def test_structured_fields_stay_json(self) -> None:
        """Test array answers are stored as JSON text for the normalizer."""
        assessment = [{"name": "Midterm", "weightPercent": 30}]

        data = parse_extraction_response(json.dumps({"assessment": assessment}))

        assert json.loads(data.assessment) == assessment

    def test_ignores_non_object_sections(self) -> None:
        """Test junk entries in sections are dropped."""
        data = parse_extraction_response(json.dumps({"sections": ["LEC0101", {"sectionCode": "TUT0101"}]}))

        assert [s.section_code for s in data.sections] == ["TUT0101"]

    @pytest.mark.parametrize("text", ["", "not json", "[1, 2]", "```\n```"])
    def test_malformed(self, text) -> None:
        """Test unusable answers raise MalformedExtractionError."""
        with pytest.raises(MalformedExtractionError):
            parse_extraction_response(text)


class TestIsRateLimitError:
    """Test suite for is_rate_limit_error()."""

    def test_api_error_429(self) -> None:
        """Test HTTP 429 from the client is a rate limit."""
        error = genai_errors.ClientError(
            429,
            {"error": {"code": 429, "message": "Resource has been exhausted", "status": "RESOURCE_EXHAUSTED"}},
        )

        assert is_rate_limit_error(error)

    @pytest.mark.parametrize(
        "message",
        ["429 Too Many Requests", "Quota exceeded for metric", "RESOURCE_EXHAUSTED"],
    )
    def test_message_markers(self, message) -> None:
        """Test textual rate-limit markers are recognised."""
        assert is_rate_limit_error(RuntimeError(message))

    def test_other_errors(self) -> None:
        """Test unrelated failures are not rate limits."""
        assert not is_rate_limit_error(ConnectionError("connection reset by peer"))

    def test_number_containing_429_is_not_rate_limit(self) -> None:
        """Test digits inside a larger number do not count as HTTP 429."""
        assert not is_rate_limit_error(RuntimeError("Request payload of 14290 bytes rejected"))


class TestSyllabusExtractor:
    """Test suite for SyllabusExtractor.extract()."""

    @pytest.mark.asyncio
    async def test_extract_success(self, fake_genai_client: MagicMock, sample_pdf: bytes) -> None:
        """Test a JSON answer is parsed and the PDF is sent inline."""
        extractor = SyllabusExtractor(client=fake_genai_client, model_id="gemini-test")

        data = await extractor.extract(sample_pdf)

        assert data.name.startswith("CSC108H5")
        assert [s.section_code for s in data.sections] == ["LEC0101", "TUT0101"]
        assert data.sections[1].lectures[0].day_of_week == TBD

        call = fake_genai_client.models.generate_content.call_args
        assert call.kwargs["model"] == "gemini-test"
        assert len(call.kwargs["contents"]) == 2
        assert call.kwargs["config"].response_mime_type == "application/json"

    @pytest.mark.asyncio
    async def test_rejects_non_pdf(self, fake_genai_client: MagicMock) -> None:
        """Test non-PDF input never reaches Gemini."""
        extractor = SyllabusExtractor(client=fake_genai_client)

        with pytest.raises(InvalidUploadError):
            await extractor.extract(b"hello", mime_type="text/plain")

        fake_genai_client.models.generate_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_rate_limited(self, fake_genai_client: MagicMock, sample_pdf: bytes) -> None:
        """Test a 429 maps to RateLimitedError with the user-facing message."""
        fake_genai_client.models.generate_content.side_effect = genai_errors.ClientError(
            429, {"error": {"code": 429, "message": "quota", "status": "RESOURCE_EXHAUSTED"}}
        )
        extractor = SyllabusExtractor(client=fake_genai_client)

        with pytest.raises(RateLimitedError) as exc_info:
            await extractor.extract(sample_pdf)

        assert exc_info.value.user_message == RATE_LIMIT_MESSAGE

    @pytest.mark.asyncio
    async def test_upstream_failure(self, fake_genai_client: MagicMock, sample_pdf: bytes) -> None:
        """Test any other client failure maps to ExtractionFailedError."""
        fake_genai_client.models.generate_content.side_effect = ConnectionError("reset")
        extractor = SyllabusExtractor(client=fake_genai_client)

        with pytest.raises(ExtractionFailedError):
            await extractor.extract(sample_pdf)

    @pytest.mark.asyncio
    async def test_malformed_answer(self, fake_genai_client: MagicMock, sample_pdf: bytes) -> None:
        """Test a non-JSON answer maps to MalformedExtractionError."""
        fake_genai_client.models.generate_content.return_value.text = "Sorry, I cannot read this."
        extractor = SyllabusExtractor(client=fake_genai_client)

        with pytest.raises(MalformedExtractionError):
            await extractor.extract(sample_pdf)
