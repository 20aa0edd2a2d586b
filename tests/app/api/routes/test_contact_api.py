from unittest.mock import patch

from fastapi.testclient import TestClient

from resume_form.app.api.routes.route_logic.resume_export import (
    EXPORT_ERROR_MESSAGE,
    PdfExportError,
)

VALID_PAYLOAD = {
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "123-456-7890",
    "position": "Engineer",
    "description": "Line one\nLine two",
}


def test_validate_valid(client: TestClient):
    """Test validating a complete record."""
    response = client.post("/api/contact/validate", json=VALID_PAYLOAD)
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": {}}


def test_validate_invalid(client: TestClient):
    """Test that every invalid field is reported."""
    response = client.post(
        "/api/contact/validate", json={"name": " ", "email": "foo", "phone": "12345"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": {
            "name": "Name is required",
            "email": "Please enter a valid email format",
            "phone": "Phone number must have at least 10 digits",
        },
    }


def test_validate_rejects_non_text(client: TestClient):
    """Test that non-string fields are rejected by the request model."""
    response = client.post("/api/contact/validate", json={"phone": 1234567890})
    assert response.status_code == 422


def test_format_phone(client: TestClient):
    """Test formatting a phone number through the API."""
    response = client.post("/api/contact/format-phone", json={"phone": "11234567890"})
    assert response.status_code == 200
    assert response.json() == {"phone": "11234567890", "formatted": "+1 123 456 7890"}


def test_pages(client: TestClient):
    """Test computing page placements through the API."""
    response = client.post("/api/contact/pages", json={"width": 210, "height": 600})
    assert response.status_code == 200
    body = response.json()
    assert body["scaled_height"] == 600
    assert [p["y"] for p in body["pages"]] == [0, -295, -590]
    assert [p["page_number"] for p in body["pages"]] == [1, 2, 3]


def test_pages_rejects_empty_bitmap(client: TestClient):
    """Test that zero dimensions are rejected."""
    response = client.post("/api/contact/pages", json={"width": 0, "height": 600})
    assert response.status_code == 422


def test_pages_rejects_extreme_aspect_ratio(client: TestClient):
    """Test that a bitmap needing more than the page limit gets 422."""
    response = client.post(
        "/api/contact/pages", json={"width": 1, "height": 10**9}
    )
    assert response.status_code == 422
    assert "more than the limit of 100" in response.json()["detail"]


def test_export_pdf(client: TestClient):
    """Test exporting a valid record as a PDF download."""
    response = client.post("/api/contact/export", json=VALID_PAYLOAD)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="John Doe.pdf"'
    )
    assert response.content.startswith(b"%PDF")


def test_export_invalid_record(client: TestClient):
    """Test that an invalid record returns the field errors."""
    response = client.post("/api/contact/export", json={"name": "John"})
    assert response.status_code == 422
    assert response.json() == {
        "detail": {
            "email": "Email is required",
            "phone": "Phone number is required",
        }
    }


@patch(
    "resume_form.app.api.routes.contact.export_pdf_serialized",
    side_effect=PdfExportError("encoder crashed"),
)
def test_export_failure(mock_export, client: TestClient):
    """Test that a rendering failure returns the generic message."""
    response = client.post("/api/contact/export", json=VALID_PAYLOAD)
    assert response.status_code == 500
    assert response.json() == {"detail": EXPORT_ERROR_MESSAGE}
