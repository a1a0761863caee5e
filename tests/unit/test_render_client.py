from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
import pytest_check as check

from tests.conftest import RENDER_BASE_URL, RENDERED_PDF, SAMPLE_ZPL
from zpl_emulator.contracts.errors import RenderServiceError
from zpl_emulator.contracts.label_contract import LabelFormat
from zpl_emulator.core.settings import Settings
from zpl_emulator.infrastructure.render_client import RenderClient, create_render_client

if TYPE_CHECKING:
    from tests.conftest import FakeRenderService

pytestmark = pytest.mark.asyncio


async def test_render_posts_payload_verbatim(
    render_client: RenderClient, render_service: FakeRenderService
) -> None:
    result = await render_client.render(SAMPLE_ZPL)

    assert result == RENDERED_PDF
    assert len(render_service.requests) == 1
    request = render_service.requests[0]
    check.equal(request.method, "POST")
    check.equal(str(request.url), f"{RENDER_BASE_URL}/printers/8dpmm/labels/4x6/0/")
    check.equal(request.headers["Accept"], "application/pdf")
    check.equal(request.content, SAMPLE_ZPL)


async def test_render_png_requests_image(
    render_client: RenderClient, render_service: FakeRenderService
) -> None:
    await render_client.render(SAMPLE_ZPL, LabelFormat.PNG)

    assert render_service.requests[0].headers["Accept"] == "image/png"


@pytest.mark.parametrize("status_code", [201, 204, 400, 404, 429, 500, 503])
async def test_non_200_status_returns_error_value(
    render_client: RenderClient, render_service: FakeRenderService, status_code: int
) -> None:
    render_service.status_code = status_code
    render_service.content = b"ERROR: Invalid label"

    result = await render_client.render(SAMPLE_ZPL)

    assert isinstance(result, RenderServiceError)
    assert result.status_code == status_code
    assert len(render_service.requests) == 1


async def test_transport_failure_returns_error_value(
    render_client: RenderClient, render_service: FakeRenderService
) -> None:
    render_service.error = httpx.ConnectError("connection refused")

    result = await render_client.render(SAMPLE_ZPL)

    assert isinstance(result, RenderServiceError)
    assert result.status_code is None
    assert "ConnectError" in (result.cause or "")
    assert len(render_service.requests) == 1


async def test_timeout_is_not_retried(
    render_client: RenderClient, render_service: FakeRenderService
) -> None:
    render_service.error = httpx.ReadTimeout("timed out")

    result = await render_client.render(SAMPLE_ZPL)

    assert isinstance(result, RenderServiceError)
    assert len(render_service.requests) == 1


async def test_create_render_client_uses_settings() -> None:
    settings = Settings(render_service_url="https://render.example/v1/", render_timeout=5)

    client = create_render_client(settings)
    try:
        assert client.url == "https://render.example/v1/printers/8dpmm/labels/4x6/0/"
    finally:
        await client.close()
