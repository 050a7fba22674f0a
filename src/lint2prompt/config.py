# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for prompt assembly and diagnostic filtering."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROMPT_PREFIX: Final[str] = "For the code present, we get these lints:"
DEFAULT_PROMPT_SUFFIX: Final[str] = "How can I resolve this? If you propose a fix, please make it concise."


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class Lint2PromptSettings(BaseModel):
    """User settings, accepted under camelCase or snake_case names."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="ignore")

    linter_ignored: list[str] = Field(default_factory=list, alias="linterIgnored")
    prompt_prefix: str | None = Field(default=None, alias="promptPrefix")
    prompt_suffix: str | None = Field(default=None, alias="promptSuffix")

    @field_validator("linter_ignored", mode="before")
    @classmethod
    def _coerce_ignored(cls, value: object) -> object:
        """Accept a single pattern string as a one-item list."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def effective_prefix(self) -> str:
        """Return the configured prefix or the built-in default when unset or empty."""
        return self.prompt_prefix or DEFAULT_PROMPT_PREFIX

    @property
    def effective_suffix(self) -> str:
        """Return the configured suffix or the built-in default when unset or empty."""
        return self.prompt_suffix or DEFAULT_PROMPT_SUFFIX


__all__ = [
    "DEFAULT_PROMPT_PREFIX",
    "DEFAULT_PROMPT_SUFFIX",
    "ConfigError",
    "Lint2PromptSettings",
]
