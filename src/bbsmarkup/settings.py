# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bbsmarkup.constants import DEFAULT_HOST, DEFAULT_MAX_INPUT_CHARS, DEFAULT_PORT


class ServerConfig(BaseModel):
    """Configuration for the HTTP render service."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


class Settings(BaseSettings):
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    # None or 0 disables the limit
    max_input_chars: int | None = DEFAULT_MAX_INPUT_CHARS
    server: ServerConfig = Field(default_factory=ServerConfig)

    model_config = SettingsConfigDict(
        env_prefix="BBSMARKUP_",
        env_nested_delimiter="__",
        extra="ignore",
    )
