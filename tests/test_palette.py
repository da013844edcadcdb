# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import pytest

from bbsmarkup.terminal.palette import (
    BACKGROUND_COLORS,
    BASE_COLORS,
    FOREGROUND_COLORS,
    Color,
    color_256,
    rgb,
)


@pytest.mark.parametrize(
    ("index", "css"),
    [
        (0, "#000000"),
        (1, "#cc0000"),
        (7, "#cccccc"),
        (8, "#666666"),
        (9, "#ff0000"),
        (15, "#ffffff"),
        (16, "rgb(0, 0, 0)"),
        (21, "rgb(0, 0, 255)"),
        (196, "rgb(255, 0, 0)"),
        (231, "rgb(255, 255, 255)"),
        (232, "rgb(8, 8, 8)"),
        (244, "rgb(128, 128, 128)"),
        (255, "rgb(238, 238, 238)"),
    ],
)
def test_color_256_boundaries(index: int, css: str) -> None:
    assert color_256(index).css() == css


def test_cube_coordinates() -> None:
    # 16 + 36*1 + 6*2 + 3
    assert color_256(67) == Color(51, 102, 153)


def test_out_of_range_index_is_clamped_when_serialized() -> None:
    assert color_256(300).css() == "rgb(255, 255, 255)"


def test_foreground_and_background_share_hues() -> None:
    for code, color in FOREGROUND_COLORS.items():
        assert BACKGROUND_COLORS[code + 10] == color
    assert FOREGROUND_COLORS[31].css() == "#cc0000"
    assert FOREGROUND_COLORS[97].css() == "#ffffff"
    assert BACKGROUND_COLORS[104].css() == "#0000ff"


def test_base_table_is_indexed() -> None:
    assert len(BASE_COLORS) == 16
    assert all(color.indexed for color in BASE_COLORS)


def test_rgb_serializes_as_rgb_literal() -> None:
    assert rgb(12, 34, 56).css() == "rgb(12, 34, 56)"
    assert rgb(999, 0, 256).css() == "rgb(255, 0, 255)"
