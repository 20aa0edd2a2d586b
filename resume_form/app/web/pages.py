import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.templating import Jinja2Templates

from resume_form.app.api.routes.route_logic.phone_format import format_phone_number
from resume_form.app.api.routes.route_logic.resume_export import (
    EXPORT_ERROR_MESSAGE,
    PdfExportError,
    content_disposition,
    export_pdf_serialized,
    pdf_filename,
)
from resume_form.app.api.routes.route_logic.resume_raster import RasterOptions
from resume_form.app.core.config import Settings, get_settings
from resume_form.app.core.form_flow import FlowState, FormFlow
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["phone"] = format_phone_number


async def contact_form(
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    phone: Annotated[str, Form()] = "",
    position: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
) -> ContactRecord:
    """Build a contact record from the posted form fields."""
    return ContactRecord(
        name=name,
        email=email,
        phone=phone,
        position=position,
        description=description,
    )


def _render_flow(
    request: Request,
    flow: FormFlow,
    status_code: int = status.HTTP_200_OK,
    error_message: str | None = None,
) -> HTMLResponse:
    """Render the template for the screen the flow is on."""
    template = "preview.html" if flow.state is FlowState.PREVIEWING else "form.html"
    return templates.TemplateResponse(
        request,
        template,
        {
            "record": flow.record,
            "errors": flow.errors,
            "error_message": error_message,
        },
        status_code=status_code,
    )


async def _export_response(
    request: Request,
    flow: FormFlow,
    record: ContactRecord,
    settings: Settings,
) -> StreamingResponse | HTMLResponse:
    """Export the record, or re-render the current screen with an alert."""
    try:
        file_stream = await export_pdf_serialized(
            record, RasterOptions.from_settings(settings)
        )
    except PdfExportError as e:
        _msg = f"PDF export failed: {e.detail}"
        log.error(_msg)
        return _render_flow(
            request,
            flow,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_message=EXPORT_ERROR_MESSAGE,
        )

    filename = pdf_filename(record, settings.default_pdf_name)
    return StreamingResponse(
        file_stream,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )


@router.get("/", response_class=HTMLResponse, name="form_page")
async def form_page(request: Request) -> HTMLResponse:
    """Serve the empty contact form.

    Args:
        request: The HTTP request object.

    Returns:
        TemplateResponse: The rendered form template.

    """
    _msg = "Form page requested"
    log.debug(_msg)
    return _render_flow(request, FormFlow())


@router.post("/view", response_class=HTMLResponse)
async def view_preview(
    request: Request,
    record: Annotated[ContactRecord, Depends(contact_form)],
) -> HTMLResponse:
    """Validate the form and show the preview.

    Args:
        request: The HTTP request object.
        record (ContactRecord): The posted form fields.

    Returns:
        TemplateResponse: The preview when the record is valid, otherwise the
            form with inline errors and status 422.

    """
    _msg = "Preview requested"
    log.debug(_msg)
    flow = FormFlow().view(record)
    if flow.state is FlowState.PREVIEWING:
        return _render_flow(request, flow)
    return _render_flow(
        request, flow, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


@router.post("/submit", response_model=None)
async def submit_form(
    request: Request,
    record: Annotated[ContactRecord, Depends(contact_form)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StreamingResponse | HTMLResponse:
    """Validate the form and download the PDF directly.

    Args:
        request: The HTTP request object.
        record (ContactRecord): The posted form fields.
        settings (Settings): The application settings.

    Returns:
        StreamingResponse: The PDF when the record is valid and exports.
        TemplateResponse: The form with inline errors (422), or with the
            export alert (500) when rendering fails.

    Notes:
        1. Validate the record without leaving the form.
        2. If validation fails, re-render the form with the errors.
        3. Export the record and stream the PDF.
        4. If the export fails, re-render the form with the generic alert.

    """
    _msg = "Direct download requested"
    log.debug(_msg)
    flow = FormFlow().submit(record)
    if not flow.exportable:
        return _render_flow(
            request, flow, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
    return await _export_response(request, flow, flow.record, settings)


@router.post("/back", response_class=HTMLResponse)
async def back_to_form(
    request: Request,
    record: Annotated[ContactRecord, Depends(contact_form)],
) -> HTMLResponse:
    """Return from the preview to the form, pre-filled with the record."""
    _msg = "Back to form requested"
    log.debug(_msg)
    flow = FormFlow(state=FlowState.PREVIEWING, record=record).back()
    return _render_flow(request, flow)


@router.post("/download", response_model=None)
async def download_from_preview(
    request: Request,
    record: Annotated[ContactRecord, Depends(contact_form)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StreamingResponse | HTMLResponse:
    """Download the PDF of the record shown in the preview.

    The record comes back from the browser, so it is validated again before
    the preview state is re-entered.
    """
    _msg = "Download from preview requested"
    log.debug(_msg)
    flow = FormFlow().view(record)
    if flow.state is not FlowState.PREVIEWING:
        return _render_flow(
            request, flow, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
    return await _export_response(request, flow, flow.download(), settings)
