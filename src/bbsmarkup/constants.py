# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for bbsmarkup."""

from __future__ import annotations

# Control byte and the caret notation BBS editors use for it
ESC = "\x1b"
CARET_ESCAPE = "^["
CSI = ESC + "["

# Final byte of Select Graphic Rendition sequences
SGR_FINAL = "m"

# Default service limits
DEFAULT_MAX_INPUT_CHARS = 1_000_000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
