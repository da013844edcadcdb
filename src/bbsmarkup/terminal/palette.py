# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Color tables for the 16-color, 256-color and 24-bit SGR color models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color.

    ``indexed`` marks entries of the fixed 16-color table; those serialize as a
    hex triple, everything else as an ``rgb(...)`` literal.
    """

    red: int
    green: int
    blue: int
    indexed: bool = False

    def css(self) -> str:
        """Return the CSS value for this color with channels clamped to 0-255."""
        r, g, b = (_clamp(c) for c in (self.red, self.green, self.blue))
        if self.indexed:
            return f"#{r:02x}{g:02x}{b:02x}"
        return f"rgb({r}, {g}, {b})"


def _clamp(channel: int) -> int:
    return max(0, min(int(channel), 255))


def _hex(value: str) -> Color:
    return Color(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16), indexed=True)


# Index 0-7 standard, 8-15 bright (black, red, green, yellow, blue, magenta, cyan, white)
BASE_COLORS: tuple[Color, ...] = tuple(
    _hex(v)
    for v in (
        "#000000",
        "#cc0000",
        "#00cc00",
        "#cccc00",
        "#0000cc",
        "#cc00cc",
        "#00cccc",
        "#cccccc",
        "#666666",
        "#ff0000",
        "#00ff00",
        "#ffff00",
        "#0000ff",
        "#ff00ff",
        "#00ffff",
        "#ffffff",
    )
)

# SGR code -> color, foreground and background ranges
FOREGROUND_COLORS: dict[int, Color] = {
    **{30 + i: BASE_COLORS[i] for i in range(8)},
    **{90 + i: BASE_COLORS[8 + i] for i in range(8)},
}
BACKGROUND_COLORS: dict[int, Color] = {code + 10: color for code, color in FOREGROUND_COLORS.items()}

CUBE_START = 16
GRAYSCALE_START = 232
CUBE_STEP = 51


def color_256(index: int) -> Color:
    """Resolve an index of the 256-color extended palette.

    0-15 come from the base table, 16-231 from the 6x6x6 cube and 232 and up
    from the grayscale ramp.
    """
    if index < CUBE_START:
        return BASE_COLORS[max(index, 0)]
    if index < GRAYSCALE_START:
        i = index - CUBE_START
        return Color((i // 36) * CUBE_STEP, ((i % 36) // 6) * CUBE_STEP, (i % 6) * CUBE_STEP)
    gray = (index - GRAYSCALE_START) * 10 + 8
    return Color(gray, gray, gray)


def rgb(red: int, green: int, blue: int) -> Color:
    """Build an explicit 24-bit color."""
    return Color(red, green, blue)
