"""
Course upload helpers.

Reads the multipart upload field into UploadedPdf values for the ingestion
service. Validation rules themselves live in the service so that every
entry point applies them; only form values that are not files at all are
rejected here.

Dependencies: fastapi, starlette, syllabus_hub.application.services
System role: Multipart to domain conversion
"""

from fastapi import Request
from starlette.datastructures import UploadFile

from syllabus_hub.application.services.ingestion_service import UploadedPdf
from syllabus_hub.core.exceptions import InvalidUploadError

UPLOAD_FIELD = "pdf"


async def read_uploads(request: Request, field: str = UPLOAD_FIELD) -> list[UploadedPdf]:
    """
    Read every file sent under the upload field fully into memory.

    Args:
        request: Incoming request carrying a multipart body
        field: Form field holding the files

    Returns:
        list[UploadedPdf]: One entry per received file, in order (empty when absent)

    Raises:
        InvalidUploadError: If the field carries a plain text value
    """
    form = await request.form()
    uploads: list[UploadedPdf] = []
    for entry in form.getlist(field):
        if not isinstance(entry, UploadFile):
            raise InvalidUploadError("File must be a PDF", details={"field": field})
        data = await entry.read()
        uploads.append(
            UploadedPdf(
                filename=entry.filename,
                content_type=entry.content_type,
                data=data,
            )
        )
    return uploads
