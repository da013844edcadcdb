from __future__ import annotations

from fastapi import FastAPI

from bbsmarkup.api.render_routes import create_router
from bbsmarkup.logging import configure_logging, get_logger
from bbsmarkup.renderer import MarkupRenderer
from bbsmarkup.settings import Settings

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the render service app."""
    settings = settings or Settings()
    configure_logging(settings)

    renderer = MarkupRenderer.from_settings(settings)
    app = FastAPI(title="bbsmarkup")
    app.include_router(create_router(renderer))
    app.state.renderer = renderer

    logger.info("app_created", max_input_chars=renderer.max_input_chars)
    return app


__all__ = ["create_app"]
