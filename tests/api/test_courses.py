import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from uuid import uuid4

from syllabus_hub.api.main import create_app
from syllabus_hub.api.deps.dependencies import get_course_service, get_ingestion_service
from syllabus_hub.application.services.ingestion_service import (
    CourseIngestionService,
    IngestionResult,
    IngestionState,
)
from syllabus_hub.boundary.db.models.course_model import CourseStatus
from syllabus_hub.configs import get_settings
from syllabus_hub.core.exceptions import (
    PROCESSING_FAILED_MESSAGE,
    RATE_LIMIT_MESSAGE,
    CourseNotFoundError,
    MalformedExtractionError,
    PersistenceError,
    RateLimitedError,
)

from datetime import datetime, timezone

PDF_BYTES = b"%PDF-1.4\n%%EOF"


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)

@pytest.fixture
def mock_course_service():
    return AsyncMock()

@pytest.fixture
def mock_ingestion_service():
    return AsyncMock()

@pytest.fixture
def validating_ingestion_service():
    """Real ingestion service whose collaborators must never be reached."""
    return CourseIngestionService(db=AsyncMock(), extractor=AsyncMock(), pdf_store=AsyncMock())

@pytest.fixture
def production_env(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _course_data(name="CSC108", archived=False):
    now = datetime.now(timezone.utc)
    return {
        "id": uuid4(),
        "name": name,
        "term": "Fall 2025",
        "description": "Intro",
        "materials": "Course notes",
        "assessment": "Midterm: 25%, Final Exam: 55%, Participation: 20%",
        "policies": "No late work",
        "exam_dates": "Midterm: October 20. Final: TBA.",
        "source_path": "uploads/1-csc108.pdf",
        "status": "complete",
        "archived": archived,
        "created_at": now,
        "updated_at": now,
        "sections": [
            {
                "id": uuid4(),
                "section_code": "LEC0101",
                "instructor": "Dr. Ada",
                "lectures": [
                    {
                        "id": uuid4(),
                        "day_of_week": "Monday",
                        "start_time": "10:00",
                        "end_time": "11:00",
                        "location": "MN 1210",
                    }
                ],
            },
            {"id": uuid4(), "section_code": "TUT0101", "instructor": "TBD", "lectures": []},
        ],
    }


def test_upload_course(client, mock_ingestion_service):
    course_id = uuid4()
    mock_ingestion_service.ingest.return_value = IngestionResult(
        course_id=course_id, state=IngestionState.COMPLETE, status=CourseStatus.COMPLETE
    )

    client.app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files={"pdf": ("syllabus.pdf", PDF_BYTES, "application/pdf")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["courseId"] == str(course_id)
    assert data["message"]

    uploads = mock_ingestion_service.ingest.call_args.args[0]
    assert len(uploads) == 1
    assert uploads[0].filename == "syllabus.pdf"
    assert uploads[0].data == PDF_BYTES

def test_upload_without_file(client, validating_ingestion_service):
    client.app.dependency_overrides[get_ingestion_service] = lambda: validating_ingestion_service

    response = client.post("/api/v1/courses")

    assert response.status_code == 400
    assert response.json()["error"] == "No PDF file uploaded"

def test_upload_non_pdf(client, validating_ingestion_service):
    client.app.dependency_overrides[get_ingestion_service] = lambda: validating_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files={"pdf": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "File must be a PDF"
    validating_ingestion_service.extractor.extract.assert_not_called()

def test_upload_text_field_instead_of_file(client, validating_ingestion_service):
    client.app.dependency_overrides[get_ingestion_service] = lambda: validating_ingestion_service

    response = client.post("/api/v1/courses", data={"pdf": "not a file"})

    assert response.status_code == 400
    assert response.json()["error"] == "File must be a PDF"
    validating_ingestion_service.pdf_store.save.assert_not_called()

def test_upload_multiple_files(client, validating_ingestion_service):
    client.app.dependency_overrides[get_ingestion_service] = lambda: validating_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files=[
            ("pdf", ("a.pdf", PDF_BYTES, "application/pdf")),
            ("pdf", ("b.pdf", PDF_BYTES, "application/pdf")),
        ],
    )

    assert response.status_code == 400
    validating_ingestion_service.pdf_store.save.assert_not_called()

def test_upload_rate_limited(client, mock_ingestion_service):
    mock_ingestion_service.ingest.side_effect = RateLimitedError()

    client.app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files={"pdf": ("syllabus.pdf", PDF_BYTES, "application/pdf")},
    )

    assert response.status_code == 500
    assert response.json()["error"] == RATE_LIMIT_MESSAGE

def test_upload_malformed_extraction(client, mock_ingestion_service):
    mock_ingestion_service.ingest.side_effect = MalformedExtractionError("bad json", raw_response="oops")

    client.app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files={"pdf": ("syllabus.pdf", PDF_BYTES, "application/pdf")},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == PROCESSING_FAILED_MESSAGE
    assert body["details"]["raw_response"] == "oops"

def test_error_details_hidden_in_production(client, mock_ingestion_service, production_env):
    mock_ingestion_service.ingest.side_effect = MalformedExtractionError("bad json", raw_response="oops")

    client.app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service

    response = client.post(
        "/api/v1/courses",
        files={"pdf": ("syllabus.pdf", PDF_BYTES, "application/pdf")},
    )

    assert response.status_code == 500
    assert response.json()["details"] is None

def test_list_courses(client, mock_course_service):
    mock_course_service.list_courses.return_value = {
        "active": [_course_data("Course 1"), _course_data("Course 2")],
        "archived": [_course_data("Course 3", archived=True)],
    }

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get("/api/v1/courses")

    assert response.status_code == 200
    data = response.json()
    assert [c["name"] for c in data["active"]] == ["Course 1", "Course 2"]
    assert data["archived"][0]["archived"] is True
    card = data["active"][0]
    assert [i["markup"] for i in card["assessment"]["items"]] == [
        "Midterm: **25%**",
        "Final Exam: **55%**",
        "Participation: **20%**",
    ]
    assert card["sections"][0]["sectionCode"] == "LEC0101"
    assert card["sections"][0]["lectures"][0]["dayOfWeek"] == "Monday"
    mock_course_service.list_courses.assert_called_once()

def test_get_course(client, mock_course_service):
    course = _course_data()
    mock_course_service.get_course.return_value = course

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get(f"/api/v1/courses/{course['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "CSC108"
    assert data["assessment"]["kind"] == "free_text"
    assert [e["text"] for e in data["examDates"]["items"]] == ["Midterm: October 20", "Final: TBA"]
    assert data["materials"]["items"] == ["Course notes"]
    assert [g["sectionType"] for g in data["sectionGroups"]] == ["LEC", "TUT"]

def test_get_course_not_found(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.get_course.side_effect = CourseNotFoundError(course_id)

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get(f"/api/v1/courses/{course_id}")

    assert response.status_code == 404
    assert response.json()["error"] == "Course not found"

def test_archive_course(client, mock_course_service):
    course = _course_data(archived=True)
    mock_course_service.set_archived.return_value = course

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.patch(f"/api/v1/courses/{course['id']}", json={"archived": True})

    assert response.status_code == 200
    assert response.json()["archived"] is True
    mock_course_service.set_archived.assert_called_once_with(course["id"], True)

def test_delete_course(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.delete_course.return_value = True

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.delete(f"/api/v1/courses/{course_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Course deleted successfully"}
    mock_course_service.delete_course.assert_called_once_with(course_id)

def test_delete_course_not_found(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.delete_course.side_effect = CourseNotFoundError(course_id)

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.delete(f"/api/v1/courses/{course_id}")

    assert response.status_code == 404
    assert response.json()["error"] == "Course not found"

def test_delete_course_store_failure(client, mock_course_service):
    mock_course_service.delete_course.side_effect = PersistenceError("Failed to delete course", operation="delete")

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.delete(f"/api/v1/courses/{uuid4()}")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to delete course"
