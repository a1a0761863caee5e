"""Error types raised along the label print pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LabelPipelineError(RuntimeError):
    """Base class for every failure that aborts a print request."""


class EmptyPayloadError(LabelPipelineError):
    """Raised when the request body carries no label data."""

    _MESSAGE = "No ZPL data passed in request body"

    def __init__(self) -> None:
        """Initialize with the fixed rejection message."""
        super().__init__(self._MESSAGE)


class ConfigLoadError(LabelPipelineError):
    """Raised when the override configuration file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the offending file and why it was rejected."""
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read configuration file {path}: {reason}")


class RenderServiceError(LabelPipelineError):
    """Raised when the rendering service does not return a document.

    Carries either the HTTP status the service answered with or, for
    transport failures, a description of the underlying cause.
    """

    def __init__(self, status_code: int | None = None, cause: str | None = None) -> None:
        """Describe the failed render call."""
        self.status_code = status_code
        self.cause = cause
        if status_code is not None:
            message = f"Rendering service responded with status {status_code}"
        else:
            message = f"Rendering service request failed: {cause or 'unknown error'}"
        super().__init__(message)


class WriteError(LabelPipelineError):
    """Raised when a rendered artifact cannot be persisted."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the target path and the OS-level reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write label to {path}: {reason}")


__all__ = [
    "ConfigLoadError",
    "EmptyPayloadError",
    "LabelPipelineError",
    "RenderServiceError",
    "WriteError",
]
