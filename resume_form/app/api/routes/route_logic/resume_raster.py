import logging
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

from resume_form.app.api.routes.route_logic.phone_format import format_phone_number
from resume_form.app.core.config import Settings
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)

# Layout in CSS pixels, multiplied by the render scale when drawing.
PADDING = 40
NAME_SIZE = 32
POSITION_SIZE = 18
BODY_SIZE = 16
HEADER_GAP = 10
HEADER_MARGIN = 30
ROW_PADDING = 8
ROW_MARGIN = 10
DESCRIPTION_MARGIN = 20
VALUE_GAP = 16
LINE_HEIGHT = 1.6

BLACK = "#000000"
LABEL_COLOR = "#333333"
MUTED_COLOR = "#666666"
RULE_COLOR = "#eeeeee"

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class RasterOptions:
    """Options for rasterizing the resume layout.

    Attributes:
        scale (int): Device pixel ratio; the bitmap is `scale` times the
            layout size.
        background_color (str): Opaque fill behind the layout.
        width (int): Layout width in CSS pixels.
        regular_font_path (str): TrueType font for body text.
        bold_font_path (str): TrueType font for headings and labels.

    """

    scale: int = 2
    background_color: str = "#ffffff"
    width: int = 800
    regular_font_path: str = "DejaVuSans.ttf"
    bold_font_path: str = "DejaVuSans-Bold.ttf"

    @classmethod
    def from_settings(cls, settings: Settings) -> "RasterOptions":
        """Build raster options from the application settings."""
        return cls(
            scale=settings.render_scale,
            width=settings.render_width,
            regular_font_path=settings.regular_font_path,
            bold_font_path=settings.bold_font_path,
        )


def _load_font(path: str, size: int) -> FontType:
    """Load a TrueType font, falling back to Pillow's built-in font."""
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        _msg = f"Font {path} unavailable, using the built-in font"
        log.debug(_msg)
        return ImageFont.load_default(size=size)


def _line_height(font: FontType, factor: float = 1.0) -> int:
    ascent, descent = font.getmetrics()
    return int(round((ascent + descent) * factor))


def _wrap_text(
    draw: ImageDraw.ImageDraw, text: str, font: FontType, max_width: int
) -> list[str]:
    """Wrap text to a pixel width, keeping the author's line breaks.

    Blank lines are kept as empty strings so paragraphs stay separated.
    Words wider than the line are broken by character.
    """
    lines: list[str] = []
    for paragraph in text.splitlines():
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if draw.textlength(candidate, font=font) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = ""
            for char in word:
                if draw.textlength(current + char, font=font) > max_width and current:
                    lines.append(current)
                    current = ""
                current += char
        lines.append(current)
    return lines


def _wrap_lines(
    draw: ImageDraw.ImageDraw, text: str, font: FontType, max_width: int
) -> list[str]:
    """Like `_wrap_text`, but an empty value still takes up one line."""
    return _wrap_text(draw, text, font, max_width) or [""]


class _ResumeCanvas:
    """Lays out and draws the resume.

    `draw_to` walks the same layout whether it is measuring or painting, so
    the bitmap height always matches what gets drawn.
    """

    def __init__(self, record: ContactRecord, options: RasterOptions):
        s = options.scale
        self.record = record
        self.options = options
        self.s = s
        self.width = options.width * s
        self.inner_width = (options.width - 2 * PADDING) * s
        self.name_font = _load_font(options.bold_font_path, NAME_SIZE * s)
        self.position_font = _load_font(options.regular_font_path, POSITION_SIZE * s)
        self.label_font = _load_font(options.bold_font_path, BODY_SIZE * s)
        self.body_font = _load_font(options.regular_font_path, BODY_SIZE * s)

    def rows(self) -> list[tuple[str, str]]:
        return [
            ("Name:", self.record.name),
            ("Email:", self.record.email),
            ("Phone Number:", format_phone_number(self.record.phone)),
            ("Position:", self.record.position),
        ]

    def draw_to(self, draw: ImageDraw.ImageDraw, paint: bool) -> int:
        """Lay out the resume and return the total height in pixels.

        Header lines wrap at the inner width and row values wrap to the width
        left beside their label, so no text reaches past the padding.
        """
        s = self.s
        left = PADDING * s
        right = left + self.inner_width
        y = PADDING * s

        # Header
        name_step = _line_height(self.name_font)
        for line in _wrap_lines(
            draw, self.record.name, self.name_font, self.inner_width
        ):
            if paint and line:
                draw.text((left, y), line, font=self.name_font, fill=BLACK)
            y += name_step
        y += HEADER_GAP * s

        position_step = _line_height(self.position_font)
        for line in _wrap_lines(
            draw, self.record.position, self.position_font, self.inner_width
        ):
            if paint and line:
                draw.text((left, y), line, font=self.position_font, fill=MUTED_COLOR)
            y += position_step
        y += HEADER_MARGIN * s

        # Label/value rows
        row_text_height = _line_height(self.body_font)
        for label, value in self.rows():
            y += ROW_PADDING * s
            label_width = draw.textlength(label, font=self.label_font)
            value_width = max(
                int(self.inner_width - label_width - VALUE_GAP * s), BODY_SIZE * s
            )
            if paint:
                draw.text((left, y), label, font=self.label_font, fill=LABEL_COLOR)
            for line in _wrap_lines(draw, value, self.body_font, value_width):
                if paint and line:
                    line_width = draw.textlength(line, font=self.body_font)
                    draw.text(
                        (right - line_width, y), line, font=self.body_font, fill=BLACK
                    )
                y += row_text_height
            y += ROW_PADDING * s
            if paint:
                draw.line([(left, y), (right, y)], fill=RULE_COLOR, width=s)
            y += s + ROW_MARGIN * s

        # Description
        y += DESCRIPTION_MARGIN * s
        if paint:
            draw.text((left, y), "Description:", font=self.label_font, fill=LABEL_COLOR)
        y += _line_height(self.label_font) + HEADER_GAP * s

        step = _line_height(self.body_font, LINE_HEIGHT)
        for line in _wrap_text(
            draw, self.record.description, self.body_font, self.inner_width
        ):
            if paint and line:
                draw.text((left, y), line, font=self.body_font, fill=BLACK)
            y += step

        return y + PADDING * s


def rasterize_contact_record(
    record: ContactRecord, options: RasterOptions | None = None
) -> Image.Image:
    """Rasterize the resume layout of a record into a bitmap.

    Args:
        record (ContactRecord): The record to draw.
        options (RasterOptions | None): Rasterization options; defaults are
            used when None.

    Returns:
        Image.Image: An RGB bitmap on an opaque background.

    Notes:
        1. Measure the layout on a scratch surface to find the height.
        2. Create a bitmap of the layout width and height, times the scale.
        3. Draw the header, the label/value rows and the description.
        4. The phone number is drawn through `format_phone_number`.

    """
    _msg = "rasterize_contact_record starting"
    log.debug(_msg)

    options = options or RasterOptions()
    canvas = _ResumeCanvas(record, options)

    scratch = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    height = canvas.draw_to(scratch, paint=False)

    image = Image.new("RGB", (canvas.width, height), options.background_color)
    canvas.draw_to(ImageDraw.Draw(image), paint=True)

    _msg = f"rasterize_contact_record returning {image.width}x{image.height} bitmap"
    log.debug(_msg)
    return image
