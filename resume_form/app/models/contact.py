import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "position", "description")


class ContactRecord(BaseModel):
    """Holds the contact and resume details submitted through the form.

    The record is immutable. Editing a field produces a new record, so a
    record that has been previewed or exported never changes underneath
    the caller.

    Attributes:
        name (str): The full name of the person. Required by validation.
        email (str): The email address of the person. Required by validation.
        phone (str): The phone number as typed. Required by validation.
        position (str): The position the person holds or is applying for.
        description (str): Free text, usually work experience. Line breaks
            are preserved when displayed.

    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    description: str = ""

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def validate_text(cls, v):
        """Coerce missing values to empty text.

        Args:
            v: The raw field value.

        Returns:
            str: The value, or an empty string when None was supplied.

        Raises:
            ValueError: If the value is neither a string nor None.

        Notes:
            1. Form posts leave optional fields out entirely; treat None as empty.
            2. Whitespace is kept as typed. Trimming is a validation concern.

        """
        if v is None:
            return ""
        if not isinstance(v, str):
            raise ValueError("field must be a string")
        return v

    def with_field(self, field: str, value: str) -> "ContactRecord":
        """Return a copy of the record with one field overwritten.

        Args:
            field (str): The name of the field to overwrite.
            value (str): The new value for the field.

        Returns:
            ContactRecord: A new record; this record is left unchanged.

        Raises:
            ValueError: If `field` is not one of the contact fields.

        """
        if field not in CONTACT_FIELDS:
            _msg = f"Unknown contact field: {field}"
            log.error(_msg)
            raise ValueError(_msg)
        return self.model_validate({**self.model_dump(), field: value})
