import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resume_form.app.core.config import get_settings
from resume_form.app.main import create_app
from resume_form.app.models.contact import ContactRecord


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and .env file."""
    for var in (
        "RENDER_SCALE",
        "RENDER_WIDTH",
        "REGULAR_FONT_PATH",
        "BOLD_FONT_PATH",
        "DEFAULT_PDF_NAME",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_record() -> ContactRecord:
    """Fixture for a record that passes validation."""
    return ContactRecord(
        name="John Doe",
        email="john@example.com",
        phone="(123) 456-7890",
        position="Junior Front end Developer",
        description="Acme Corp, 2020-2023\n\nBuilt the billing dashboard.",
    )


@pytest.fixture
def app() -> FastAPI:
    """Fixture to create a new app for each test."""
    _app = create_app()
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Fixture to create a test client for each test."""
    with TestClient(app) as c:
        yield c
