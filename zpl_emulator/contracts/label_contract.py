"""Data contracts for label configuration and rendering.

``LabelConfiguration`` is the fully resolved, immutable configuration used for
a single print request. ``ConfigurationOverride`` mirrors the keys accepted in
the override file, where every key is optional.
"""

from __future__ import annotations

import tempfile
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_PLACEHOLDER: Final[str] = "%timestamp%"

DEFAULT_FILE_TEMPLATE: Final[str] = f"label-{TIMESTAMP_PLACEHOLDER}"
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d_%H-%M-%S"

# Fixed rendering parameters: 8 dots/mm density, 4x6 inch label, first label.
PRINT_DENSITY: Final[str] = "8dpmm"
LABEL_WIDTH_INCHES: Final[int] = 4
LABEL_HEIGHT_INCHES: Final[int] = 6
LABEL_INDEX: Final[int] = 0


class LabelFormat(Enum):
    """Output document formats offered by the rendering service."""

    PDF = ("application/pdf", "pdf")
    PNG = ("image/png", "png")

    def __init__(self, media_type: str, extension: str) -> None:
        self.media_type = media_type
        self.extension = extension


class LabelConfiguration(BaseModel):
    """Resolved label output configuration.

    Attributes:
        output_directory: Directory that receives rendered labels.
        file_template: Filename stem; ``%timestamp%`` is replaced on each call.
        date_format: ``strftime`` pattern used to render the timestamp.

    Examples:
        LabelConfiguration(outputPath="/tmp", fileTemplate="label-%timestamp%")
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    output_directory: str = Field(
        default_factory=tempfile.gettempdir,
        alias="outputPath",
    )
    file_template: str = Field(default=DEFAULT_FILE_TEMPLATE, alias="fileTemplate")
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, alias="dateFormat")


class ConfigurationOverride(BaseModel):
    """Keys accepted in the override configuration file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    output_directory: str | None = Field(default=None, alias="outputPath")
    file_template: str | None = Field(default=None, alias="fileTemplate")
    date_format: str | None = Field(default=None, alias="dateFormat")
