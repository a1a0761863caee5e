"""Dependency injection utilities for FastAPI routes."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from zpl_emulator.core.settings import Settings
from zpl_emulator.infrastructure.artifact_writer import ArtifactWriter
from zpl_emulator.services.config_resolver import ConfigResolver
from zpl_emulator.services.print_service import LabelPrintService


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings."""
    return Settings()


def get_print_service(request: Request) -> LabelPrintService:
    """Build a LabelPrintService for the current request.

    The render client is shared through ``app.state``; the configuration
    resolver is created per request so the override file is re-read each time.
    """
    settings: Settings = request.app.state.settings
    return LabelPrintService(
        resolver=ConfigResolver(settings.label_config_path),
        render_client=request.app.state.render_client,
        writer=ArtifactWriter(),
    )
