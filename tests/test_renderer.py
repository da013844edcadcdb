# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import pytest

from bbsmarkup.errors import InputTooLargeError, MarkupError
from bbsmarkup.renderer import MarkupRenderer
from bbsmarkup.settings import Settings

ESC = "\x1b"


def test_render_plain_text_fast_path(renderer: MarkupRenderer) -> None:
    assert renderer.render("a < b & c") == "a &lt; b &amp; c"


def test_render_markup(renderer: MarkupRenderer) -> None:
    assert renderer.render("^[[4mu^[[0m") == '<span style="text-decoration: underline">u</span>'


def test_render_block(renderer: MarkupRenderer) -> None:
    out = renderer.render("hi", block=True, css_class="text-gray-300")
    assert out == '<div class="text-gray-300" style="white-space: pre-wrap">hi</div>'


def test_css_class_ignored_without_block(renderer: MarkupRenderer) -> None:
    assert renderer.render("hi", css_class="x") == "hi"


def test_strip(renderer: MarkupRenderer) -> None:
    assert renderer.strip(f"{ESC}[1mtitle{ESC}[0m") == "title"
    assert renderer.strip("plain <text>") == "plain <text>"


def test_has_markup(renderer: MarkupRenderer) -> None:
    assert renderer.has_markup("^[[0m")
    assert not renderer.has_markup("nothing")


def test_size_limit(small_renderer: MarkupRenderer) -> None:
    assert small_renderer.render("x" * 16) == "x" * 16

    with pytest.raises(InputTooLargeError) as excinfo:
        small_renderer.render("x" * 17)
    assert excinfo.value.size == 17
    assert excinfo.value.limit == 16
    assert isinstance(excinfo.value, MarkupError)

    with pytest.raises(InputTooLargeError):
        small_renderer.strip("x" * 17)


def test_zero_limit_means_unlimited() -> None:
    assert MarkupRenderer(max_input_chars=0).max_input_chars is None


def test_from_settings(settings: Settings) -> None:
    settings.max_input_chars = 42
    assert MarkupRenderer.from_settings(settings).max_input_chars == 42
