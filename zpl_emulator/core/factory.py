"""FastAPI app construction."""

from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from zpl_emulator.core.settings import Settings
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from zpl_emulator.api.v1.router import api_router
from zpl_emulator.contracts.errors import LabelPipelineError
from zpl_emulator.core.exceptions import label_pipeline_exception_handler
from zpl_emulator.infrastructure.render_client import RenderClient, create_render_client
from zpl_emulator.routes.health_router import health_check

logger = logging.getLogger(__name__)
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(settings: Settings) -> None:
    level = logging.getLevelNamesMapping().get(settings.log_level, logging.INFO)
    if settings.debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("zpl_emulator").setLevel(level)


def _lifespan(settings: Settings) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        render_client: RenderClient | None = None
        try:
            render_client = create_render_client(settings)
            app.state.render_client = render_client
            logger.info("Initialized rendering client for %s", render_client.url)

            yield
        except Exception:
            logger.exception("Failed to initialize application resources")
            raise
        finally:
            if render_client is not None:
                try:
                    await render_client.close()
                except Exception:  # pragma: no cover - defensive logging
                    logger.exception("Failed to close rendering client cleanly")

    return lifespan


def create_app(settings: Settings) -> FastAPI:
    """Construct and configure the FastAPI application instance.

    Args:
        settings: Validated runtime options.

    Returns:
        FastAPI: Application with the label endpoint mounted under /api/v1.
    """
    _configure_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=ORJSONResponse,
        lifespan=_lifespan(settings),
    )
    app.state.settings = settings
    app.include_router(api_router, prefix="/api/v1")
    app.add_exception_handler(LabelPipelineError, label_pipeline_exception_handler)
    app.add_api_route("/health", health_check, methods=["GET"], include_in_schema=False)

    return app
