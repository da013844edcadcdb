# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal escape-sequence handling and HTML rendering."""

from __future__ import annotations

from bbsmarkup.terminal.escape import (
    contains_escape_markup,
    normalize_caret_escape,
    strip_escapes,
    tokenize,
)
from bbsmarkup.terminal.markup import ansi_to_html, escape_html, render_block, wrap_block
from bbsmarkup.terminal.palette import Color, color_256
from bbsmarkup.terminal.sgr import StyleState, apply_sgr_codes, parse_sgr_params

__all__ = [
    "Color",
    "StyleState",
    "ansi_to_html",
    "apply_sgr_codes",
    "color_256",
    "contains_escape_markup",
    "escape_html",
    "normalize_caret_escape",
    "parse_sgr_params",
    "render_block",
    "strip_escapes",
    "tokenize",
    "wrap_block",
]
