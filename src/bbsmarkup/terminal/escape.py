# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Escape-sequence lexing for BBS text.

BBS message editors often store the control byte as the two characters
``^[``. Everything here first folds that notation into a real ESC so the
scanner only has one form to recognize.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

from bbsmarkup.constants import CARET_ESCAPE, CSI, ESC

# Final byte of a control sequence: the first ASCII letter after the CSI
_FINAL_BYTE_RE = re.compile(r"[A-Za-z]")


class Token(NamedTuple):
    """A lexical unit of normalized text.

    kind is ``"text"`` for a run of literal characters (value holds them) or
    ``"csi"`` for a terminated control sequence (value holds the parameter
    bytes, final holds the final byte).
    """

    kind: str
    value: str
    final: str = ""


def normalize_caret_escape(text: str) -> str:
    """Replace every ``^[`` with the ESC control byte."""
    return text.replace(CARET_ESCAPE, ESC)


def contains_escape_markup(text: str) -> bool:
    """Check whether text holds a control sequence introducer or ``^[``."""
    return CSI in text or CARET_ESCAPE in text


def tokenize(text: str) -> Iterator[Token]:
    """Split normalized text into literal runs and control sequences.

    A sequence runs from ``ESC [`` to the first ASCII letter. One that never
    reaches a letter swallows the rest of the input and yields nothing.
    """
    pos = 0
    length = len(text)
    while pos < length:
        start = text.find(CSI, pos)
        if start < 0:
            yield Token("text", text[pos:])
            return
        if start > pos:
            yield Token("text", text[pos:start])
        match = _FINAL_BYTE_RE.search(text, start + len(CSI))
        if match is None:
            return
        yield Token("csi", text[start + len(CSI) : match.start()], match.group())
        pos = match.end()


def strip_escapes(text: str) -> str:
    """Return the literal text with every control sequence removed.

    Same lexing as the HTML renderer, without escaping.
    """
    return "".join(token.value for token in tokenize(normalize_caret_escape(text)) if token.kind == "text")
