"""HTTP client for the Labelary-compatible label rendering service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

import httpx

from zpl_emulator.contracts.errors import RenderServiceError
from zpl_emulator.contracts.label_contract import (
    LABEL_HEIGHT_INCHES,
    LABEL_INDEX,
    LABEL_WIDTH_INCHES,
    PRINT_DENSITY,
    LabelFormat,
)

if TYPE_CHECKING:
    from zpl_emulator.core.settings import Settings

logger = logging.getLogger(__name__)

RENDER_PATH: Final[str] = (
    f"/printers/{PRINT_DENSITY}/labels/{LABEL_WIDTH_INCHES}x{LABEL_HEIGHT_INCHES}/{LABEL_INDEX}/"
)


class RenderClient:
    """Posts label descriptions to the rendering service.

    ``render`` never raises for service or transport failures; it hands back a
    ``RenderServiceError`` value so callers decide how to surface it.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        """Wrap an existing async HTTP client.

        Args:
            http_client: Client owning the connection pool and timeout policy.
            base_url: Service root, e.g. ``http://api.labelary.com/v1``.
        """
        self._client = http_client
        self._url = f"{base_url.rstrip('/')}{RENDER_PATH}"

    @property
    def url(self) -> str:
        return self._url

    async def render(
        self, payload: bytes, label_format: LabelFormat = LabelFormat.PDF
    ) -> bytes | RenderServiceError:
        """Render ``payload`` with a single POST request.

        Returns:
            The document bytes when the service answers 200, otherwise a
            ``RenderServiceError`` describing the status or transport failure.
        """
        try:
            response = await self._client.post(
                self._url,
                content=payload,
                headers={"Accept": label_format.media_type},
            )
        except httpx.HTTPError as exc:
            logger.warning("Rendering service request to %s failed: %s", self._url, exc)
            return RenderServiceError(cause=f"{type(exc).__name__}: {exc}")

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Rendering service returned status %s: %s",
                response.status_code,
                response.text[:500],
            )
            return RenderServiceError(status_code=response.status_code)

        logger.debug("Rendered %s bytes of %s", len(response.content), label_format.media_type)
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()


def create_render_client(settings: Settings) -> RenderClient:
    """Factory that builds a RenderClient from settings."""
    http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.render_timeout))
    return RenderClient(http_client, settings.render_service_url)
