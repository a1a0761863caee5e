"""Service layer for turning a label description into a file on disk.

The pipeline is linear: resolve configuration, render remotely, compose the
output path and write the artifact. Any failure stops the pipeline and is
raised unchanged to the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

import anyio.to_thread

from zpl_emulator.contracts.errors import EmptyPayloadError, RenderServiceError
from zpl_emulator.contracts.label_contract import LabelFormat
from zpl_emulator.services.path_composer import compose_path

if TYPE_CHECKING:
    from collections.abc import Callable

    from zpl_emulator.infrastructure.artifact_writer import ArtifactWriter
    from zpl_emulator.infrastructure.render_client import RenderClient
    from zpl_emulator.services.config_resolver import ConfigResolver

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class LabelPrintService:
    """Orchestrates a single print request."""

    def __init__(
        self,
        resolver: ConfigResolver,
        render_client: RenderClient,
        writer: ArtifactWriter,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        """Initialize the service with its collaborators.

        Args:
            resolver: Produces the label configuration for this request.
            render_client: Converts the payload into a document.
            writer: Persists the rendered document.
            clock: Source of the timestamp used in the filename.
        """
        self._resolver = resolver
        self._render_client = render_client
        self._writer = writer
        self._clock = clock

    async def handle(self, raw_payload: bytes) -> str:
        """Render ``raw_payload`` and store it, returning the written path.

        Raises:
            EmptyPayloadError: ``raw_payload`` is empty.
            ConfigLoadError: The override configuration is unusable.
            RenderServiceError: The rendering service did not return a document.
            WriteError: The document could not be written.
        """
        if not raw_payload:
            raise EmptyPayloadError()

        config = self._resolver.resolve()

        match await self._render_client.render(raw_payload, LabelFormat.PDF):
            case RenderServiceError() as failure:
                raise failure
            case document:
                rendered = document

        path = compose_path(config, LabelFormat.PDF.extension, self._clock())
        await anyio.to_thread.run_sync(self._writer.write, path, rendered)
        logger.info("Stored label (%s bytes) at %s", len(rendered), path)
        return path
