# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render legacy BBS text with ANSI escape sequences as safe HTML."""

from __future__ import annotations

from bbsmarkup.errors import InputTooLargeError, MarkupError
from bbsmarkup.renderer import MarkupRenderer
from bbsmarkup.terminal import (
    ansi_to_html,
    contains_escape_markup,
    normalize_caret_escape,
    render_block,
    strip_escapes,
)

__version__ = "0.1.0"

__all__ = [
    "InputTooLargeError",
    "MarkupError",
    "MarkupRenderer",
    "ansi_to_html",
    "contains_escape_markup",
    "normalize_caret_escape",
    "render_block",
    "strip_escapes",
]
