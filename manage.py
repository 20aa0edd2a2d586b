import logging
import sys
from pathlib import Path

import click

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
    PdfExportError,
    RecordNotValidError,
    export_contact_record_pdf,
    pdf_filename,
)
from resume_form.app.api.routes.route_logic.resume_raster import RasterOptions
from resume_form.app.core.config import get_settings
from resume_form.app.models.contact import ContactRecord

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)


def record_options(func):
    """Add the contact record fields as command options."""
    options = [
        click.option("--name", default="", help="Full name."),
        click.option("--email", default="", help="Email address."),
        click.option("--phone", default="", help="Phone number, any punctuation."),
        click.option("--position", default="", help="Position or job title."),
        click.option("--description", default="", help="Free text, kept as typed."),
        click.option(
            "--description-file",
            type=click.File("r"),
            default=None,
            help="Read the description from a file ('-' for stdin). "
            "Overrides --description.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_record(
    name, email, phone, position, description, description_file
) -> ContactRecord:
    if description_file is not None:
        description = description_file.read()
    return ContactRecord(
        name=name,
        email=email,
        phone=phone,
        position=position,
        description=description,
    )


@click.group()
def cli():
    """Management script for the Resume Form application."""
    pass


@cli.command("validate")
@record_options
def validate(name, email, phone, position, description, description_file):
    """
    Validate contact details and print any field errors.

    Notes:
        1. Builds a record from the options.
        2. Prints "valid" or one "field: message" line per error.
        3. Exits with status 1 when the record is invalid.

    """
    record = _build_record(
        name, email, phone, position, description, description_file
    )
    errors = validate_contact_record(record)
    if not errors:
        click.echo("valid")
        return
    for field, message in errors.items():
        click.echo(f"{field}: {message}", err=True)
    sys.exit(1)


@cli.command("format-phone")
@click.argument("raw_phone")
def format_phone(raw_phone: str):
    """Print the display form of RAW_PHONE."""
    click.echo(format_phone_number(raw_phone))


@cli.command("pages")
@click.argument("width", type=click.IntRange(min=1))
@click.argument("height", type=click.IntRange(min=1))
def pages(width: int, height: int):
    """Print the page placements for a WIDTH x HEIGHT pixel bitmap."""
    try:
        placements = paginate(width, height)
    except TooManyPagesError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    click.echo(f"scaled height: {scaled_image_height(width, height):g}mm")
    for placement in placements:
        click.echo(f"page {placement.page_number}: offset {placement.y:g}mm")


@cli.command("export")
@record_options
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the PDF. Defaults to <name>.pdf.",
)
def export(
    name, email, phone, position, description, description_file, output: Path | None
):
    """
    Render contact details to a paginated PDF.

    Args:
        output (Path | None): Destination file, or None for `<name>.pdf`.

    Returns:
        None

    Notes:
        1. Builds and validates a record from the options.
        2. Rasterizes, paginates and encodes the PDF.
        3. Writes the PDF to the output path.
        4. On invalid input or a rendering failure, prints an error and exits with status 1.

    """
    _msg = "export starting"
    log.debug(_msg)
    settings = get_settings()
    record = _build_record(
        name, email, phone, position, description, description_file
    )
    output = output or Path(pdf_filename(record, settings.default_pdf_name))

    try:
        buffer = export_contact_record_pdf(record, RasterOptions.from_settings(settings))
    except RecordNotValidError as e:
        for field, message in e.errors.items():
            click.echo(f"{field}: {message}", err=True)
        sys.exit(1)
    except PdfExportError as e:
        _error_msg = f"{e}: {e.detail}"
        click.echo(_error_msg, err=True)
        log.error(_error_msg)
        sys.exit(1)

    output.write_bytes(buffer.getvalue())
    _success_msg = f"Wrote {output}"
    click.echo(_success_msg)
    log.info(_success_msg)
    _msg = "export returning"
    log.debug(_msg)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
