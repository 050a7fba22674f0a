# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence and traceability."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import ConfigError, Lint2PromptSettings

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".lint2prompt.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
SECTION_KEY: Final[str] = "lint2prompt"
_KEY_PREFIX: Final[str] = f"{SECTION_KEY}."


class ConfigSource(Protocol):
    """Provider of a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the fragment contributed by this source."""
        ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Lint2PromptSettings().model_dump()


class MappingConfigSource:
    """Configuration fragment supplied in memory, such as CLI overrides."""

    def __init__(self, data: Mapping[str, Any], *, name: str = "overrides") -> None:
        self.name = name
        self._data = dict(data)

    def load(self) -> Mapping[str, Any]:
        return {key: value for key, value in self._data.items() if value is not None}


class TomlConfigSource:
    """Load configuration keys from the top level of a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self._path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        section = data.get(SECTION_KEY)
        if isinstance(section, Mapping):
            return dict(section)
        return data

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            if self._required:
                raise ConfigError(f"Configuration file not found: {self._path}")
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self._path}: {exc}") from exc


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.lint2prompt]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{SECTION_KEY}] in {self.name} must be a table")
        return dict(section)


class ConfigLoadResult(BaseModel):
    """Container bundling resolved settings with the sources that contributed."""

    model_config = ConfigDict(validate_assignment=True)

    settings: Lint2PromptSettings
    sources: list[str] = Field(default_factory=list)


def _normalise_keys(fragment: Mapping[str, Any], *, source: str) -> dict[str, Any]:
    """Map camelCase, snake_case and ``lint2prompt.``-prefixed keys onto field names.

    Args:
        fragment: Raw configuration fragment.
        source: Source name used in error messages.

    Returns:
        dict[str, Any]: Fragment keyed by model field names. Unknown keys are dropped.
    """

    aliases = {
        (field.alias or name): name for name, field in Lint2PromptSettings.model_fields.items()
    }
    known = set(Lint2PromptSettings.model_fields)
    normalised: dict[str, Any] = {}
    for raw_key, value in fragment.items():
        key = str(raw_key).removeprefix(_KEY_PREFIX)
        field_name = aliases.get(key, key.replace("-", "_"))
        if field_name not in known:
            LOGGER.debug("Ignoring unknown configuration key %r from %s", raw_key, source)
            continue
        normalised[field_name] = value
    return normalised


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader; later sources override earlier ones.

        Args:
            sources: Ordered collection of configuration sources.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(
        cls,
        project_root: Path,
        *,
        config_path: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> ConfigLoader:
        """Return a loader using the standard source stack for ``project_root``.

        Precedence, lowest first: defaults, ``pyproject.toml``,
        ``.lint2prompt.toml``, ``config_path``, ``overrides``.
        """

        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            PyProjectConfigSource(project_root / PYPROJECT_FILENAME),
            TomlConfigSource(project_root / PROJECT_CONFIG_FILENAME),
        ]
        if config_path is not None:
            sources.append(TomlConfigSource(config_path, required=True))
        if overrides:
            sources.append(MappingConfigSource(overrides, name="cli"))
        return cls(sources)

    def load(self) -> ConfigLoadResult:
        """Merge every source and validate the result.

        Returns:
            ConfigLoadResult: Resolved settings and the names of contributing sources.

        Raises:
            ConfigError: If a source is unreadable or the merged values are invalid.
        """

        merged: dict[str, Any] = {}
        contributed: list[str] = []
        for source in self._sources:
            fragment = _normalise_keys(source.load(), source=source.name)
            if not fragment:
                continue
            LOGGER.debug("Applying configuration from %s: %s", source.name, sorted(fragment))
            merged.update(fragment)
            contributed.append(source.name)
        try:
            settings = Lint2PromptSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return ConfigLoadResult(settings=settings, sources=contributed)


def load_settings(
    project_root: Path,
    *,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Lint2PromptSettings:
    """Return settings resolved for ``project_root``; see :meth:`ConfigLoader.for_root`."""

    loader = ConfigLoader.for_root(project_root, config_path=config_path, overrides=overrides)
    return loader.load().settings


__all__ = [
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "MappingConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_settings",
]
