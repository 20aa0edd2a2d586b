"""Splits a rasterized resume into A4 page placements."""

import logging
import math
from dataclasses import dataclass

log = logging.getLogger(__name__)

PAGE_WIDTH = 210
PAGE_HEIGHT = 295
# Upper bound on pages per document; taller bitmaps are rejected.
MAX_PAGES = 100


class TooManyPagesError(ValueError):
    """Raised when a bitmap would need more than MAX_PAGES pages."""


@dataclass(frozen=True)
class PagePlacement:
    """Where the full scaled image sits on one page, in millimetres.

    Attributes:
        page_number (int): One-based page number.
        x (float): Horizontal offset from the left edge of the page.
        y (float): Vertical offset from the top edge of the page. Zero or
            negative; a negative offset shifts the image upward so the page
            shows the next unseen band.
        width (float): Width the image is drawn at.
        height (float): Height the image is drawn at.

    """

    page_number: int
    x: float
    y: float
    width: float
    height: float


def scaled_image_height(bitmap_width_px: int, bitmap_height_px: int) -> float:
    """Height of the bitmap once scaled to fill the page width.

    Args:
        bitmap_width_px (int): Bitmap width in pixels.
        bitmap_height_px (int): Bitmap height in pixels.

    Returns:
        float: The scaled height in millimetres.

    Raises:
        ValueError: If either dimension is not positive.

    """
    if bitmap_width_px <= 0 or bitmap_height_px <= 0:
        _msg = (
            f"Bitmap dimensions must be positive, got "
            f"{bitmap_width_px}x{bitmap_height_px}"
        )
        log.error(_msg)
        raise ValueError(_msg)
    return bitmap_height_px * PAGE_WIDTH / bitmap_width_px


def paginate(bitmap_width_px: int, bitmap_height_px: int) -> list[PagePlacement]:
    """Slice a bitmap into fixed-height page placements.

    Every page draws the same full image; pages after the first shift it
    upward by a cumulative offset, so the pages stacked edge to edge show
    one continuous image cut every PAGE_HEIGHT millimetres.

    Args:
        bitmap_width_px (int): Bitmap width in pixels.
        bitmap_height_px (int): Bitmap height in pixels.

    Returns:
        list[PagePlacement]: The placements, in page order.

    Raises:
        ValueError: If either dimension is not positive.
        TooManyPagesError: If the bitmap needs more than MAX_PAGES pages.

    Notes:
        1. Reject bitmaps that need more than MAX_PAGES pages.
        2. Scale the image height to the page width, preserving aspect ratio.
        3. Place the first page at offset 0.
        4. Subtract one page height from the remaining height.
        5. While some of the image is still unseen, place another page at
           `remaining - scaled_height` and subtract another page height.
        6. An image that ends exactly on a page boundary gets no trailing
           blank page.

    """
    _msg = f"paginate starting for {bitmap_width_px}x{bitmap_height_px}"
    log.debug(_msg)

    pages = page_count(bitmap_width_px, bitmap_height_px)
    if pages > MAX_PAGES:
        _msg = f"Bitmap needs {pages} pages, more than the limit of {MAX_PAGES}"
        log.error(_msg)
        raise TooManyPagesError(_msg)

    scaled_height = scaled_image_height(bitmap_width_px, bitmap_height_px)

    placements = [
        PagePlacement(
            page_number=1, x=0, y=0, width=PAGE_WIDTH, height=scaled_height
        )
    ]
    remaining = scaled_height - PAGE_HEIGHT

    while remaining > 0:
        placements.append(
            PagePlacement(
                page_number=len(placements) + 1,
                x=0,
                y=remaining - scaled_height,
                width=PAGE_WIDTH,
                height=scaled_height,
            )
        )
        remaining -= PAGE_HEIGHT

    _msg = f"paginate returning {len(placements)} page(s)"
    log.debug(_msg)
    return placements


def page_count(bitmap_width_px: int, bitmap_height_px: int) -> int:
    """Number of pages `paginate` emits for the given bitmap."""
    scaled_height = scaled_image_height(bitmap_width_px, bitmap_height_px)
    return max(1, math.ceil(scaled_height / PAGE_HEIGHT))
