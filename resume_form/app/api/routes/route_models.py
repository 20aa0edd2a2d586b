import logging

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)


class ValidationResponse(BaseModel):
    """Response model for contact validation.

    Attributes:
        valid (bool): True when the record has no errors.
        errors (dict[str, str]): Error message per invalid field.

    """

    valid: bool
    errors: dict[str, str]


class PhoneFormatRequest(BaseModel):
    """Request model for phone formatting.

    Attributes:
        phone (str): The phone number as typed.

    """

    phone: str


class PhoneFormatResponse(BaseModel):
    """Response model for phone formatting.

    Attributes:
        phone (str): The phone number as typed.
        formatted (str): The display form of the phone number.

    """

    phone: str
    formatted: str


class PaginationRequest(BaseModel):
    """Request model for page placement calculation.

    Attributes:
        width (int): Bitmap width in pixels.
        height (int): Bitmap height in pixels.

    """

    width: int = Field(gt=0)
    height: int = Field(gt=0)


class PagePlacementResponse(BaseModel):
    page_number: int
    x: float
    y: float
    width: float
    height: float


class PaginationResponse(BaseModel):
    """Response model for page placement calculation.

    Attributes:
        scaled_height (float): Image height once scaled to the page width, in millimetres.
        pages (list[PagePlacementResponse]): Placements in page order.

    """

    scaled_height: float
    pages: list[PagePlacementResponse]
