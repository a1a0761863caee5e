"""
Test Fixtures Module.

Shared fixtures for unit and integration tests. The remote rendering service
is replaced with ``httpx.MockTransport`` so no test leaves the process:

1. Unit tests build components directly and use ``render_transport`` /
   ``render_client`` to control what the rendering service answers.
2. Integration tests use the ``client`` fixture, a FastAPI ``TestClient`` whose
   lifespan wires the same mock transport in place of the real service.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from zpl_emulator.core.factory import create_app
from zpl_emulator.core.settings import Settings
from zpl_emulator.infrastructure.render_client import RenderClient

RENDER_BASE_URL = "http://render.test/v1"
RENDERED_PDF = b"%PDF-1.4\n% rendered label\n%%EOF\n"
SAMPLE_ZPL = b"^XA^FO50,50^ADN,36,20^FDHello^FS^XZ"


@dataclass
class FakeRenderService:
    """Programmable stand-in for the rendering service."""

    status_code: int = 200
    content: bytes = RENDERED_PDF
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def render_service() -> FakeRenderService:
    """Provide a rendering service double answering 200 with a PDF."""
    return FakeRenderService()


@pytest.fixture
def render_transport(render_service: FakeRenderService) -> httpx.MockTransport:
    return httpx.MockTransport(render_service)


@pytest.fixture
def render_client(render_transport: httpx.MockTransport) -> RenderClient:
    return RenderClient(httpx.AsyncClient(transport=render_transport), RENDER_BASE_URL)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "labels"
    directory.mkdir()
    return directory


@pytest.fixture
def label_config_path(tmp_path: Path, output_dir: Path) -> Path:
    """Write an override file that points label output at ``output_dir``."""
    path = tmp_path / "config.json"
    path.write_text(f'{{"outputPath": "{output_dir}/"}}', encoding="utf-8")
    return path


@pytest.fixture
def test_settings(label_config_path: Path) -> Settings:
    """Provide a Settings instance isolated from the developer's config.json."""
    return Settings(label_config_path=label_config_path, render_service_url=RENDER_BASE_URL)


@pytest.fixture
def test_app(
    test_settings: Settings,
    render_transport: httpx.MockTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> FastAPI:
    """Create the application with the rendering service mocked out."""

    def _fake_render_client(settings: Settings) -> RenderClient:
        return RenderClient(
            httpx.AsyncClient(transport=render_transport), settings.render_service_url
        )

    monkeypatch.setattr("zpl_emulator.core.factory.create_render_client", _fake_render_client)
    return create_app(test_settings)


@pytest.fixture
def client(test_app: FastAPI) -> Iterator[TestClient]:
    """Yield a synchronous TestClient with the lifespan running."""
    with TestClient(test_app) as c:
        yield c
