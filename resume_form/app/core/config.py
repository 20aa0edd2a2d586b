import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This class defines the configuration used when rendering a resume to
    PDF. Values are loaded from environment variables or a `.env` file with
    fallback defaults.

    Attributes:
        render_scale (int): Device pixel ratio used when rasterizing the
            layout. Higher values give sharper text and larger PDFs.
        render_width (int): Width of the resume layout in CSS pixels before
            scaling.
        regular_font_path (str): TrueType font used for body text.
        bold_font_path (str): TrueType font used for headings and labels.
        default_pdf_name (str): Base filename used when the record has no name.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Rendering settings
    render_scale: int = Field(default=2, ge=1, validation_alias="RENDER_SCALE")
    render_width: int = Field(default=800, ge=1, validation_alias="RENDER_WIDTH")

    # Fonts
    regular_font_path: str = Field(
        default="DejaVuSans.ttf",
        validation_alias="REGULAR_FONT_PATH",
    )
    bold_font_path: str = Field(
        default="DejaVuSans-Bold.ttf",
        validation_alias="BOLD_FONT_PATH",
    )

    # Export settings
    default_pdf_name: str = Field(default="resume", validation_alias="DEFAULT_PDF_NAME")


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Args:
        None: This function does not take any arguments.

    Returns:
        Settings: The global settings instance.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. If environment variables are not set, default values are used.
        3. The function returns a cached instance to avoid repeated parsing of the .env file.
        4. This function performs disk access to read the .env file on first call.

    """
    return Settings()
