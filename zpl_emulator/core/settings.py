"""Application settings and validation helpers."""

from pathlib import Path
from typing import Final
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings

PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parents[2]
DEFAULT_LABEL_CONFIG_PATH: Final[Path] = PROJECT_ROOT / "config.json"
DEFAULT_RENDER_SERVICE_URL: Final[str] = "http://api.labelary.com/v1"


class InvalidRenderServiceUrlError(ValueError):
    """Raised when the rendering service URL uses an unsupported scheme."""

    def __init__(self) -> None:
        """Set a descriptive validation message."""
        super().__init__("render_service_url must use http or https")


class PositiveTimeoutValidationError(ValueError):
    """Raised when the render timeout is not positive."""

    def __init__(self) -> None:
        """Set a descriptive validation message."""
        super().__init__("render_timeout must be a positive number of seconds")


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Label output options (directory, filename template, date format) are not
    settings; they are resolved per request from ``label_config_path``.
    """

    app_name: str = "ZPL Printer Emulator"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    label_config_path: Path = DEFAULT_LABEL_CONFIG_PATH

    render_service_url: str = DEFAULT_RENDER_SERVICE_URL
    render_timeout: float = 30.0

    @field_validator("render_service_url")
    @classmethod
    def _validate_render_service_url(cls, value: str) -> str:
        parsed = urlsplit(value)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise InvalidRenderServiceUrlError()
        return value.rstrip("/")

    @field_validator("render_timeout")
    @classmethod
    def _validate_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise PositiveTimeoutValidationError()
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()
