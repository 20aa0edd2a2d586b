import asyncio
import io
import logging
from urllib.parse import quote

from fastapi.concurrency import run_in_threadpool
from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from resume_form.app.api.routes.route_logic.contact_validation import (
    validate_contact_record,
)
from resume_form.app.api.routes.route_logic.pagination import (
    PagePlacement,
    paginate,
)
from resume_form.app.api.routes.route_logic.resume_raster import (
    RasterOptions,
    rasterize_contact_record,
)
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)

EXPORT_ERROR_MESSAGE = "Error generating PDF. Please try again."
DEFAULT_PDF_NAME = "resume"

# Exports run one at a time.
_export_lock = asyncio.Lock()


class RecordNotValidError(ValueError):
    """Raised when an export is requested for a record that fails validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(f"Record is not valid: {', '.join(sorted(errors))}")


class PdfExportError(RuntimeError):
    """Raised when rasterization or PDF encoding fails."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(EXPORT_ERROR_MESSAGE)


def pdf_filename(record: ContactRecord, default_name: str = DEFAULT_PDF_NAME) -> str:
    """Filename of the exported document, `<name>.pdf` or `resume.pdf`."""
    return f"{record.name or default_name}.pdf"


def content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition header for a filename.

    Args:
        filename (str): The filename offered to the browser.

    Returns:
        str: The header value. Names that are not plain ASCII also get an
            RFC 5987 `filename*` parameter with an ASCII fallback.

    """
    safe = filename.replace('"', "'").replace("\r", " ").replace("\n", " ")
    if safe.isascii():
        return f'attachment; filename="{safe}"'
    fallback = safe.encode("ascii", "replace").decode("ascii")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(safe)}"


def encode_pdf(image: Image.Image, placements: list[PagePlacement]) -> io.BytesIO:
    """Encode page placements of a bitmap into an A4 PDF.

    Args:
        image (Image.Image): The full rasterized resume.
        placements (list[PagePlacement]): One placement per page, offsets in
            millimetres from the top-left corner of the page.

    Returns:
        io.BytesIO: An in-memory buffer holding the PDF, positioned at 0.

    Notes:
        1. Create a reportlab canvas on an in-memory buffer, A4 portrait.
        2. For every placement draw the whole image at its offset. reportlab
           measures from the bottom-left corner, so the top-left offset is
           converted against the page height.
        3. Close each page, save the document and rewind the buffer.

    """
    _msg = f"encode_pdf starting for {len(placements)} page(s)"
    log.debug(_msg)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    _, page_height = A4
    reader = ImageReader(image)

    for placement in placements:
        pdf.drawImage(
            reader,
            placement.x * mm,
            page_height - (placement.y + placement.height) * mm,
            width=placement.width * mm,
            height=placement.height * mm,
        )
        pdf.showPage()

    pdf.save()
    buffer.seek(0)

    _msg = "encode_pdf returning"
    log.debug(_msg)
    return buffer


def export_contact_record_pdf(
    record: ContactRecord, options: RasterOptions | None = None
) -> io.BytesIO:
    """Render a validated record to a paginated PDF.

    Args:
        record (ContactRecord): The record to export.
        options (RasterOptions | None): Rasterization options.

    Returns:
        io.BytesIO: The PDF, positioned at 0.

    Raises:
        RecordNotValidError: If the record fails validation.
        PdfExportError: If rasterization or encoding fails.

    Notes:
        1. Validate the record; only valid records are exported.
        2. Rasterize the resume layout to a bitmap.
        3. Paginate the bitmap into page placements.
        4. Encode the placements into a PDF.
        5. Any failure in steps 2-4 is logged and re-raised as PdfExportError.

    """
    _msg = "export_contact_record_pdf starting"
    log.debug(_msg)

    errors = validate_contact_record(record)
    if errors:
        raise RecordNotValidError(errors)

    try:
        image = rasterize_contact_record(record, options)
        placements = paginate(image.width, image.height)
        buffer = encode_pdf(image, placements)
    except Exception as e:
        _msg = f"Error generating PDF: {e}"
        log.exception(_msg)
        raise PdfExportError(str(e)) from e

    _msg = "export_contact_record_pdf returning"
    log.debug(_msg)
    return buffer


async def export_pdf_serialized(
    record: ContactRecord, options: RasterOptions | None = None
) -> io.BytesIO:
    """Run `export_contact_record_pdf` in the threadpool, one export at a time."""
    async with _export_lock:
        return await run_in_threadpool(export_contact_record_pdf, record, options)
