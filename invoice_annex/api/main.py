"""FastAPI application serving merged summary reports."""

import json
import logging
from typing import List

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import TypeAdapter, ValidationError

from ..config import get_app_name, get_app_version
from ..errors import DecodeError, EncodeError
from ..pipeline.image_source import source_to_pdf_bytes
from ..report import generate_report
from .models import ErrorResponse, InvoiceRecordPayload

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate combined PDF"

app = FastAPI(
    title="Invoice Annex API",
    description="Credit sales summary PDF with the scanned invoice appended",
    version=get_app_version(),
)

_records_adapter = TypeAdapter(List[InvoiceRecordPayload])


def _parse_records(raw: str) -> List[InvoiceRecordPayload]:
    """Parse the records form field: a JSON list of objects (or one object)."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Records are not valid JSON: {e}")
    if isinstance(data, dict):
        data = [data]
    try:
        return _records_adapter.validate_python(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid records: {e.error_count()} validation error(s)",
        )


def _error(status_code: int, detail: str) -> JSONResponse:
    body = ErrorResponse(error=GENERIC_FAILURE, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": get_app_name(),
        "version": get_app_version(),
        "docs": "/docs",
    }


@app.post(
    "/api/reports",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_report(
    records: str = Form(..., description="JSON list of invoice records"),
    source: UploadFile = File(..., description="Original invoice (PDF, PNG or JPEG)"),
):
    """Generate the summary for `records` and append the uploaded source.
    
    Returns:
        The merged PDF as an attachment named after the supplier and period
    """
    payloads = _parse_records(records)
    content = await source.read()
    
    try:
        source_bytes = source_to_pdf_bytes(content, source.filename or "")
        report = generate_report([payload.to_record() for payload in payloads], source_bytes)
    except DecodeError as e:
        logger.warning(f"Rejected source {source.filename}: {e}")
        return _error(422, str(e))
    except EncodeError as e:
        logger.error(f"Report serialization failed: {e}")
        return _error(500, str(e))
    
    return Response(
        content=report.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{report.filename}"',
            "X-Page-Count": str(report.page_count),
        },
    )
