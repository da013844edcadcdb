# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render API routes.

Board, mail and chat handlers post member-authored text here and mount the
returned markup as-is, so every response body is already escaped.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bbsmarkup.errors import InputTooLargeError
from bbsmarkup.logging import get_logger
from bbsmarkup.renderer import MarkupRenderer

logger = get_logger(__name__)


class RenderRequest(BaseModel):
    text: str
    block: bool = False
    css_class: str | None = None


class RenderResponse(BaseModel):
    html: str
    has_escape_markup: bool


class StripRequest(BaseModel):
    text: str


class StripResponse(BaseModel):
    text: str


def _too_large(exc: InputTooLargeError) -> JSONResponse:
    return JSONResponse(
        {"error": str(exc), "size": exc.size, "limit": exc.limit},
        status_code=413,
    )


def create_router(renderer: MarkupRenderer | None = None) -> APIRouter:
    """Build the render router.

    Args:
        renderer: Renderer to use (an unlimited one if None)

    Returns:
        APIRouter with /api/render, /api/strip and /api/health
    """
    renderer = renderer or MarkupRenderer()
    router = APIRouter(prefix="/api")

    @router.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.post("/render", response_model=RenderResponse)
    async def render(req: RenderRequest):
        try:
            html = renderer.render(req.text, block=req.block, css_class=req.css_class)
        except InputTooLargeError as exc:
            return _too_large(exc)
        return RenderResponse(html=html, has_escape_markup=renderer.has_markup(req.text))

    @router.post("/strip", response_model=StripResponse)
    async def strip(req: StripRequest):
        try:
            text = renderer.strip(req.text)
        except InputTooLargeError as exc:
            return _too_large(exc)
        return StripResponse(text=text)

    return router
