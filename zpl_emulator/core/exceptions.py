"""Exception handlers that map pipeline failures to HTTP responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Response

from zpl_emulator.contracts.errors import LabelPipelineError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fastapi import Request


async def label_pipeline_exception_handler(request: Request, exc: Exception) -> Response:
    """Log the failure and answer with a bare 500; details are never echoed."""
    if not isinstance(exc, LabelPipelineError):
        raise TypeError from exc
    logger.warning(
        "Label request %s %s failed with %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )
    return Response(status_code=500)
