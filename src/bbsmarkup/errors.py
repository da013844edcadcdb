# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for markup rendering."""


class MarkupError(Exception):
    """Base exception for markup rendering."""

    pass


class InputTooLargeError(MarkupError):
    """Input text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Input is {size} characters, limit is {limit}")
