# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic code variants and the display-string extractor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Final, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

MISSING_CODE: Final[str] = "N/A"
_VALUE_KEY: Final[str] = "value"
_TARGET_KEY: Final[str] = "target"
_KIND_KEY: Final[str] = "kind"


class AbsentCode(BaseModel):
    """Diagnostic without any code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["absent"] = "absent"


class ScalarCode(BaseModel):
    """Plain code such as ``"E501"`` or ``2304``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    value: str


class StructuredCode(BaseModel):
    """Code object carrying a ``value`` and an optional documentation target."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    value: str
    target: str | None = None


DiagnosticCode: TypeAlias = Annotated[AbsentCode | ScalarCode | StructuredCode, Field(discriminator="kind")]
_CODE_VARIANTS: Final[tuple[type[BaseModel], ...]] = (AbsentCode, ScalarCode, StructuredCode)
_KNOWN_KINDS: Final[frozenset[str]] = frozenset({"absent", "scalar", "structured"})


def _stringify(value: object) -> str:
    return "" if value is None else str(value)


def coerce_code(raw: object) -> AbsentCode | ScalarCode | StructuredCode:
    """Resolve an arbitrary code payload into its tagged variant.

    Args:
        raw: Code as supplied by a diagnostic source. May be ``None``, a scalar,
            a mapping with a ``value`` key, or an object exposing ``value``.

    Returns:
        AbsentCode | ScalarCode | StructuredCode: Variant describing ``raw``.
    """

    if isinstance(raw, _CODE_VARIANTS):
        return raw  # type: ignore[return-value]
    if raw is None:
        return AbsentCode()
    if isinstance(raw, Mapping):
        if raw.get(_KIND_KEY) in _KNOWN_KINDS:
            return _rebuild_variant(raw)
        if _VALUE_KEY in raw:
            target = raw.get(_TARGET_KEY)
            return StructuredCode(
                value=_stringify(raw[_VALUE_KEY]),
                target=_stringify(target) if target is not None else None,
            )
        return ScalarCode(value=str(raw))
    if not isinstance(raw, (str, int, float)) and hasattr(raw, _VALUE_KEY):
        target = getattr(raw, _TARGET_KEY, None)
        return StructuredCode(
            value=_stringify(getattr(raw, _VALUE_KEY)),
            target=_stringify(target) if target is not None else None,
        )
    return ScalarCode(value=_stringify(raw))


def _rebuild_variant(payload: Mapping[object, object]) -> AbsentCode | ScalarCode | StructuredCode:
    kind = payload.get(_KIND_KEY)
    if kind == "absent":
        return AbsentCode()
    value = _stringify(payload.get(_VALUE_KEY))
    if kind == "scalar":
        return ScalarCode(value=value)
    target = payload.get(_TARGET_KEY)
    return StructuredCode(value=value, target=_stringify(target) if target is not None else None)


def extract_code_value(code: object) -> str:
    """Return the display string for a diagnostic code.

    ``None`` and empty codes render as ``"N/A"``; structured codes render their
    ``value``; anything else is converted with :func:`str`.

    Args:
        code: Tagged code variant or any raw code payload.

    Returns:
        str: Non-empty display string.
    """

    variant = coerce_code(code)
    if isinstance(variant, AbsentCode):
        return MISSING_CODE
    return variant.value or MISSING_CODE


__all__ = [
    "MISSING_CODE",
    "AbsentCode",
    "DiagnosticCode",
    "ScalarCode",
    "StructuredCode",
    "coerce_code",
    "extract_code_value",
]
