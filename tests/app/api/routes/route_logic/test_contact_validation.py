import pytest

from resume_form.app.api.routes.route_logic.contact_validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    PHONE_REQUIRED,
    PHONE_TOO_SHORT,
    is_valid_email,
    is_valid_phone,
    validate_contact_record,
)
from resume_form.app.models.contact import ContactRecord


def test_valid_record_has_no_errors(valid_record):
    """Test that a complete record validates cleanly."""
    assert validate_contact_record(valid_record) == {}


def test_validation_is_idempotent(valid_record):
    """Test that validating twice yields the same result."""
    assert validate_contact_record(valid_record) == {}
    assert validate_contact_record(valid_record) == {}

    invalid = ContactRecord(email="foo", phone="12345")
    assert validate_contact_record(invalid) == validate_contact_record(invalid)


def test_empty_record_collects_every_error():
    """Test that all required-field errors are reported together."""
    assert validate_contact_record(ContactRecord()) == {
        "name": NAME_REQUIRED,
        "email": EMAIL_REQUIRED,
        "phone": PHONE_REQUIRED,
    }


@pytest.mark.parametrize("name", ["", " ", "\t\n "])
def test_blank_name(valid_record, name):
    """Test that a blank name reports only the required error."""
    errors = validate_contact_record(valid_record.with_field("name", name))
    assert errors == {"name": NAME_REQUIRED}


@pytest.mark.parametrize("email", ["foo", "foo@bar", "@bar.com", "a b@c.de", "a@@b.co"])
def test_malformed_email(valid_record, email):
    """Test that malformed addresses report the format error."""
    errors = validate_contact_record(valid_record.with_field("email", email))
    assert errors == {"email": EMAIL_INVALID}


@pytest.mark.parametrize("email", ["", "   "])
def test_blank_email(valid_record, email):
    """Test that a blank email reports the required error, not the format error."""
    errors = validate_contact_record(valid_record.with_field("email", email))
    assert errors == {"email": EMAIL_REQUIRED}


@pytest.mark.parametrize(
    "email, expected",
    [
        ("a@b.co", True),
        ("first.last@sub.example.org", True),
        ("a@b.c.d", True),
        ("a@.co", False),
        ("a@b.", False),
        (" a@b.co", False),
        ("a@b.co\n", False),
    ],
)
def test_is_valid_email(email, expected):
    """Test the email shape check against the whole string."""
    assert is_valid_email(email) is expected


def test_short_phone(valid_record):
    """Test that fewer than ten digits reports the length error."""
    errors = validate_contact_record(valid_record.with_field("phone", "12345"))
    assert errors == {"phone": PHONE_TOO_SHORT}


@pytest.mark.parametrize("phone", ["", "  "])
def test_blank_phone(valid_record, phone):
    """Test that a blank phone reports the required error."""
    errors = validate_contact_record(valid_record.with_field("phone", phone))
    assert errors == {"phone": PHONE_REQUIRED}


@pytest.mark.parametrize(
    "phone, expected",
    [
        ("1234567890", True),
        ("(123) 456-789", False),
        ("+44 20 7946 0958", True),
        ("phone: 555-0199", False),
    ],
)
def test_is_valid_phone(phone, expected):
    """Test that punctuation is discarded before counting digits."""
    assert is_valid_phone(phone) is expected


def test_optional_fields_never_error(valid_record):
    """Test that position and description accept anything."""
    record = valid_record.with_field("position", "").with_field("description", "")
    assert validate_contact_record(record) == {}
