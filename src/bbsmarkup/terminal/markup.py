# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ANSI-to-HTML rendering.

The renderer makes one pass over the text. SGR sequences update a running
``StyleState`` and close/reopen a single ``<span style="...">``; every other
control sequence is dropped; literal characters are HTML-escaped. Spans never
nest, so the output is always balanced.
"""

from __future__ import annotations

from bbsmarkup.constants import SGR_FINAL
from bbsmarkup.terminal.escape import normalize_caret_escape, tokenize
from bbsmarkup.terminal.sgr import StyleState, apply_sgr_codes, parse_sgr_params

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

SPAN_CLOSE = "</span>"


def escape_html(text: str) -> str:
    """Escape the five markup metacharacters."""
    return text.translate(_HTML_ESCAPES)


def ansi_to_html(text: str) -> str:
    """Convert text with ANSI escape sequences (or ``^[`` notation) to HTML.

    Args:
        text: Raw BBS text, untrusted

    Returns:
        Escaped text wrapped in inline-styled spans, safe to insert as markup
    """
    state = StyleState()
    parts: list[str] = []
    span_open = False

    for token in tokenize(normalize_caret_escape(text)):
        if token.kind == "text":
            parts.append(escape_html(token.value))
            continue
        if token.final != SGR_FINAL:
            # Cursor movement, erase and friends have no rendering
            continue

        apply_sgr_codes(state, parse_sgr_params(token.value))
        if span_open:
            parts.append(SPAN_CLOSE)
            span_open = False
        if state.has_style():
            parts.append(f'<span style="{state.css()}">')
            span_open = True

    if span_open:
        parts.append(SPAN_CLOSE)
    return "".join(parts)


def wrap_block(markup: str, css_class: str | None = None) -> str:
    """Wrap rendered markup in a whitespace-preserving ``<div>``.

    Line breaks and runs of spaces in BBS posts are significant, so the block
    carries ``white-space: pre-wrap``.
    """
    class_attr = f' class="{escape_html(css_class)}"' if css_class else ""
    return f'<div{class_attr} style="white-space: pre-wrap">{markup}</div>'


def render_block(text: str, css_class: str | None = None) -> str:
    """Render text as a whitespace-preserving block."""
    return wrap_block(ansi_to_html(text), css_class)
