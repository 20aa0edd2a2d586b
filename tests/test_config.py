import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from resume_form.app.core.config import Settings, get_settings


def test_settings_default_values():
    """Test that Settings loads default values correctly."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.render_scale == 2
    assert settings.render_width == 800
    assert settings.regular_font_path == "DejaVuSans.ttf"
    assert settings.bold_font_path == "DejaVuSans-Bold.ttf"
    assert settings.default_pdf_name == "resume"


def test_settings_from_environment():
    """Test that Settings loads values from environment variables."""
    env_vars = {
        "RENDER_SCALE": "3",
        "RENDER_WIDTH": "640",
        "REGULAR_FONT_PATH": "/fonts/Inter.ttf",
        "BOLD_FONT_PATH": "/fonts/Inter-Bold.ttf",
        "DEFAULT_PDF_NAME": "cv",
    }
    with patch.dict(os.environ, env_vars):
        settings = Settings(_env_file=None)

    assert settings.render_scale == 3
    assert settings.render_width == 640
    assert settings.regular_font_path == "/fonts/Inter.ttf"
    assert settings.bold_font_path == "/fonts/Inter-Bold.ttf"
    assert settings.default_pdf_name == "cv"


def test_settings_from_env_file(tmp_path):
    """Test that Settings reads a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("RENDER_SCALE=4\n", encoding="utf-8")
    settings = Settings(_env_file=str(env_file))
    assert settings.render_scale == 4


def test_settings_rejects_invalid_scale():
    """Test that a non-positive render scale is rejected."""
    with patch.dict(os.environ, {"RENDER_SCALE": "0"}):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_cached():
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()
