# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bbsmarkup.renderer import MarkupRenderer
from bbsmarkup.settings import Settings

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def renderer() -> MarkupRenderer:
    """Renderer without a size limit."""
    return MarkupRenderer()


@pytest.fixture
def small_renderer() -> MarkupRenderer:
    """Renderer that rejects anything over 16 characters."""
    return MarkupRenderer(max_input_chars=16)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the caller's BBSMARKUP_* environment."""
    for var in ("BBSMARKUP_LOG_LEVEL", "BBSMARKUP_LOG_FORMAT", "BBSMARKUP_MAX_INPUT_CHARS"):
        monkeypatch.delenv(var, raising=False)
    return Settings()


@pytest.fixture
def ansi_post(tmp_path: Path) -> Path:
    """A board post saved with caret notation, as the BBS editor writes it."""
    path = tmp_path / "post.ans"
    path.write_bytes(b"^[[1;33mWelcome^[[0m to <the> board\n")
    return path
