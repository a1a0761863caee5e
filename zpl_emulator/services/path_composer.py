"""Output path composition for rendered labels."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from zpl_emulator.contracts.label_contract import TIMESTAMP_PLACEHOLDER

if TYPE_CHECKING:
    from datetime import datetime

    from zpl_emulator.contracts.label_contract import LabelConfiguration


def compose_path(config: LabelConfiguration, extension: str, now: datetime) -> str:
    """Build the artifact path for ``now``.

    Trailing separators are stripped from the configured directory before the
    directory, templated filename and extension are joined.

    Examples:
        compose_path(
            LabelConfiguration(outputPath="/tmp/", dateFormat="%Y-%m-%d"),
            "pdf",
            datetime(2024, 1, 2),
        )  # -> "/tmp/label-2024-01-02.pdf"
    """
    directory = config.output_directory.rstrip(os.sep)
    base = config.file_template.replace(TIMESTAMP_PLACEHOLDER, now.strftime(config.date_format))
    return f"{directory}{os.sep}{base}.{extension}"
