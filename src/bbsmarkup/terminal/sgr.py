# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Select Graphic Rendition state tracking.

An SGR sequence (``ESC [ ... m``) carries a ``;``-separated list of numeric
codes. Each code list is applied left to right to a running ``StyleState``;
the extended color forms ``38;5;n`` / ``38;2;r;g;b`` (and their ``48``
background twins) consume the fields that follow them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from bbsmarkup.terminal.palette import (
    BACKGROUND_COLORS,
    FOREGROUND_COLORS,
    Color,
    color_256,
    rgb,
)

_DIGITS_RE = re.compile(r"[0-9]+")

# Longer digit runs are not converted; they become UNKNOWN_CODE
MAX_CODE_DIGITS = 9
UNKNOWN_CODE = -1

# Attribute codes: code -> (attribute, value)
_ATTRIBUTE_CODES: dict[int, tuple[str, bool]] = {
    1: ("bold", True),
    3: ("italic", True),
    4: ("underline", True),
    5: ("blink", True),
    6: ("blink", True),
    7: ("reverse", True),
    22: ("bold", False),
    23: ("italic", False),
    24: ("underline", False),
    25: ("blink", False),
    27: ("reverse", False),
}

EXTENDED_FOREGROUND = 38
EXTENDED_BACKGROUND = 48
DEFAULT_FOREGROUND = 39
DEFAULT_BACKGROUND = 49


@dataclass(slots=True)
class StyleState:
    """Current text attributes and colors; ``None`` colors inherit the default."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    foreground: Color | None = None
    background: Color | None = None

    def reset(self) -> None:
        self.bold = False
        self.italic = False
        self.underline = False
        self.blink = False
        self.reverse = False
        self.foreground = None
        self.background = None

    def has_style(self) -> bool:
        """True when any attribute or color differs from the default."""
        return (
            self.bold
            or self.italic
            or self.underline
            or self.blink
            or self.reverse
            or self.foreground is not None
            or self.background is not None
        )

    def css(self) -> str:
        """Serialize the non-default parts of the state as inline CSS.

        Blink and reverse have no declaration.
        """
        declarations: list[str] = []
        if self.bold:
            declarations.append("font-weight: bold")
        if self.italic:
            declarations.append("font-style: italic")
        if self.underline:
            declarations.append("text-decoration: underline")
        if self.foreground is not None:
            declarations.append(f"color: {self.foreground.css()}")
        if self.background is not None:
            declarations.append(f"background-color: {self.background.css()}")
        return "; ".join(declarations)


def parse_sgr_params(params: str) -> list[int]:
    """Split raw SGR parameter text into codes.

    Empty fields mean ``0``; so do fields that are not plain decimal numbers.
    A number with more than MAX_CODE_DIGITS significant digits becomes
    UNKNOWN_CODE, which no rule matches.

    Example:
        parse_sgr_params("1;;31") -> [1, 0, 31]
    """
    codes = []
    for field in params.split(";"):
        field = field.strip()
        if not _DIGITS_RE.fullmatch(field):
            codes.append(0)
            continue
        digits = field.lstrip("0") or "0"
        codes.append(int(digits) if len(digits) <= MAX_CODE_DIGITS else UNKNOWN_CODE)
    return codes


def _extended_color(codes: Sequence[int], i: int) -> tuple[Color | None, int]:
    """Read a ``38``/``48`` color form starting at ``codes[i]``.

    Returns the color and the number of extra fields consumed. An incomplete
    form consumes nothing; a complete one holding an UNKNOWN_CODE consumes its
    fields but yields no color.
    """
    remaining = len(codes) - i - 1
    if remaining >= 2 and codes[i + 1] == 5:
        index = codes[i + 2]
        return (color_256(index) if index != UNKNOWN_CODE else None), 2
    if remaining >= 4 and codes[i + 1] == 2:
        channels = codes[i + 2 : i + 5]
        return (rgb(*channels) if UNKNOWN_CODE not in channels else None), 4
    return None, 0


def apply_sgr_codes(state: StyleState, codes: Sequence[int]) -> StyleState:
    """Apply an SGR code list to *state* in place and return it.

    Unknown codes are ignored, as is a ``38``/``48`` without enough following
    fields; processing then continues with the next field.
    """
    i = 0
    while i < len(codes):
        code = codes[i]
        if code == 0:
            state.reset()
        elif code in _ATTRIBUTE_CODES:
            name, value = _ATTRIBUTE_CODES[code]
            setattr(state, name, value)
        elif code in FOREGROUND_COLORS:
            state.foreground = FOREGROUND_COLORS[code]
        elif code in BACKGROUND_COLORS:
            state.background = BACKGROUND_COLORS[code]
        elif code in (EXTENDED_FOREGROUND, EXTENDED_BACKGROUND):
            color, consumed = _extended_color(codes, i)
            if color is not None:
                if code == EXTENDED_FOREGROUND:
                    state.foreground = color
                else:
                    state.background = color
            i += consumed
        elif code == DEFAULT_FOREGROUND:
            state.foreground = None
        elif code == DEFAULT_BACKGROUND:
            state.background = None
        i += 1
    return state
