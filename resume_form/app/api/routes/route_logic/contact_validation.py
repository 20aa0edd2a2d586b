import logging
import re

from resume_form.app.api.routes.route_logic.phone_format import phone_digits
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email format"
PHONE_REQUIRED = "Phone number is required"
PHONE_TOO_SHORT = "Phone number must have at least 10 digits"

MIN_PHONE_DIGITS = 10

_EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    """Check that the whole string has the `local@domain.tld` shape."""
    return _EMAIL_SHAPE.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Check that the phone number contains at least ten digits."""
    return len(phone_digits(phone)) >= MIN_PHONE_DIGITS


def validate_contact_record(record: ContactRecord) -> dict[str, str]:
    """Validate the required fields of a contact record.

    Args:
        record (ContactRecord): The record to validate.

    Returns:
        dict[str, str]: A mapping of field name to error message. An empty
            mapping means the record is valid.

    Notes:
        1. Every field is checked; errors are collected, never short-circuited.
        2. The name must not be empty after trimming.
        3. The email must not be empty after trimming, and the value as typed
           must match the email shape.
        4. The phone must not be empty after trimming, and must contain at
           least ten digits once punctuation is discarded.
        5. Position and description are free text and never produce errors.
        6. The function is pure; validating the same record twice yields the
           same errors.

    """
    _msg = "validate_contact_record starting"
    log.debug(_msg)

    errors: dict[str, str] = {}

    if not record.name.strip():
        errors["name"] = NAME_REQUIRED

    if not record.email.strip():
        errors["email"] = EMAIL_REQUIRED
    elif not is_valid_email(record.email):
        errors["email"] = EMAIL_INVALID

    if not record.phone.strip():
        errors["phone"] = PHONE_REQUIRED
    elif not is_valid_phone(record.phone):
        errors["phone"] = PHONE_TOO_SHORT

    _msg = f"validate_contact_record returning {len(errors)} error(s)"
    log.debug(_msg)
    return errors
