# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Renderer facade used by the HTTP API and the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbsmarkup.errors import InputTooLargeError
from bbsmarkup.logging import get_logger
from bbsmarkup.terminal.escape import contains_escape_markup, strip_escapes
from bbsmarkup.terminal.markup import ansi_to_html, escape_html, wrap_block

if TYPE_CHECKING:
    from bbsmarkup.settings import Settings

logger = get_logger(__name__)


class MarkupRenderer:
    """Turn member-authored BBS text into markup or plain text."""

    def __init__(self, max_input_chars: int | None = None) -> None:
        """Initialize renderer.

        Args:
            max_input_chars: Reject longer inputs; None or 0 means unlimited
        """
        self.max_input_chars = max_input_chars or None

    @classmethod
    def from_settings(cls, settings: Settings) -> MarkupRenderer:
        return cls(max_input_chars=settings.max_input_chars)

    def _check_size(self, text: str) -> None:
        if self.max_input_chars is not None and len(text) > self.max_input_chars:
            logger.warning("input_too_large", size=len(text), limit=self.max_input_chars)
            raise InputTooLargeError(len(text), self.max_input_chars)

    def has_markup(self, text: str) -> bool:
        return contains_escape_markup(text)

    def render(self, text: str, *, block: bool = False, css_class: str | None = None) -> str:
        """Render text as HTML.

        Args:
            text: Raw text, possibly with ANSI sequences or ``^[`` notation
            block: Wrap the result in a whitespace-preserving ``<div>``
            css_class: Class attribute for the block wrapper

        Returns:
            Markup safe to insert into a page

        Raises:
            InputTooLargeError: If text exceeds max_input_chars
        """
        self._check_size(text)
        if contains_escape_markup(text):
            body = ansi_to_html(text)
            logger.debug("rendered_markup", size=len(text), output_size=len(body))
        else:
            body = escape_html(text)
            logger.debug("rendered_plain", size=len(text))

        if not block:
            return body
        return wrap_block(body, css_class)

    def strip(self, text: str) -> str:
        """Return text with all escape sequences removed.

        Raises:
            InputTooLargeError: If text exceeds max_input_chars
        """
        self._check_size(text)
        if not contains_escape_markup(text):
            return text
        return strip_escapes(text)
