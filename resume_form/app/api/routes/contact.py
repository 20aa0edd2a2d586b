import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from resume_form.app.api.routes.route_logic.contact_validation import (
    validate_contact_record,
)
from resume_form.app.api.routes.route_logic.pagination import (
    TooManyPagesError,
    paginate,
    scaled_image_height,
)
from resume_form.app.api.routes.route_logic.phone_format import format_phone_number
from resume_form.app.api.routes.route_logic.resume_export import (
    EXPORT_ERROR_MESSAGE,
    PdfExportError,
    RecordNotValidError,
    content_disposition,
    export_pdf_serialized,
    pdf_filename,
)
from resume_form.app.api.routes.route_logic.resume_raster import RasterOptions
from resume_form.app.api.routes.route_models import (
    PagePlacementResponse,
    PaginationRequest,
    PaginationResponse,
    PhoneFormatRequest,
    PhoneFormatResponse,
    ValidationResponse,
)
from resume_form.app.core.config import Settings, get_settings
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
async def validate_contact(record: ContactRecord) -> ValidationResponse:
    """Validate a contact record.

    Args:
        record (ContactRecord): The record to validate, from the JSON body.

    Returns:
        ValidationResponse: Whether the record is valid and the error per field.

    """
    errors = validate_contact_record(record)
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/format-phone", response_model=PhoneFormatResponse)
async def format_phone(request: PhoneFormatRequest) -> PhoneFormatResponse:
    """Format a phone number for display."""
    return PhoneFormatResponse(
        phone=request.phone,
        formatted=format_phone_number(request.phone),
    )


@router.post("/pages", response_model=PaginationResponse)
def page_placements(request: PaginationRequest) -> PaginationResponse:
    """Compute the page placements for a bitmap of the given size.

    Args:
        request (PaginationRequest): The bitmap width and height in pixels.

    Returns:
        PaginationResponse: The scaled height and one placement per page.

    Raises:
        HTTPException: 422 if the bitmap needs more than MAX_PAGES pages.

    """
    try:
        placements = paginate(request.width, request.height)
    except TooManyPagesError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return PaginationResponse(
        scaled_height=scaled_image_height(request.width, request.height),
        pages=[PagePlacementResponse(**asdict(p)) for p in placements],
    )


@router.post("/export")
async def export_contact_pdf(
    record: ContactRecord,
    settings: Annotated[Settings, Depends(get_settings)],
) -> StreamingResponse:
    """Export a contact record as a PDF file.

    Args:
        record (ContactRecord): The record to export, from the JSON body.
        settings (Settings): The application settings.

    Returns:
        StreamingResponse: A streaming response with the generated PDF.

    Raises:
        HTTPException: 422 with the field errors if the record is invalid,
            500 with a generic message if rendering fails.

    Notes:
        1. Export the record through the serialized export pipeline.
        2. If validation fails, return the field errors.
        3. If rasterization or encoding fails, return the generic error message.
        4. Stream the PDF as an attachment named after the person.

    """
    _msg = "export_contact_pdf starting"
    log.debug(_msg)

    try:
        file_stream = await export_pdf_serialized(
            record, RasterOptions.from_settings(settings)
        )
    except RecordNotValidError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    except PdfExportError:
        raise HTTPException(status_code=500, detail=EXPORT_ERROR_MESSAGE)

    filename = pdf_filename(record, settings.default_pdf_name)
    headers = {"Content-Disposition": content_disposition(filename)}

    _msg = "export_contact_pdf returning"
    log.debug(_msg)
    return StreamingResponse(
        file_stream,
        media_type="application/pdf",
        headers=headers,
    )
