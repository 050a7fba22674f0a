# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load editor diagnostics dumped as JSON."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, TextIO, TypeAlias
from urllib.parse import unquote, urlparse

from pydantic import ValidationError

from ..models import DiagnosticRecord, FileDiagnostics, Range
from ..severity import SeverityLevel

__all__ = [
    "DiagnosticSource",
    "DiagnosticsImportError",
    "JsonDiagnosticSource",
    "StaticDiagnosticSource",
    "parse_diagnostics_payload",
]

LOGGER = logging.getLogger(__name__)

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

STDIN_MARKER: Final[str] = "-"
_FILE_SCHEME: Final[str] = "file"
_PATH_KEYS: Final[tuple[str, ...]] = ("uri", "file", "path", "resource")
_DIAGNOSTICS_KEY: Final[str] = "diagnostics"
_MARKER_LINE_KEY: Final[str] = "startLineNumber"
_UNKNOWN_LEVEL: Final[int] = -1

# Language Server Protocol numbering.
_LSP_SEVERITIES: Final[dict[int, SeverityLevel]] = {
    1: SeverityLevel.ERROR,
    2: SeverityLevel.WARNING,
    3: SeverityLevel.INFORMATION,
    4: SeverityLevel.HINT,
}
# Problems panel marker numbering.
_MARKER_SEVERITIES: Final[dict[int, SeverityLevel]] = {
    8: SeverityLevel.ERROR,
    4: SeverityLevel.WARNING,
    2: SeverityLevel.INFORMATION,
    1: SeverityLevel.HINT,
}
_NAMED_SEVERITIES: Final[dict[str, SeverityLevel]] = {
    "error": SeverityLevel.ERROR,
    "warning": SeverityLevel.WARNING,
    "information": SeverityLevel.INFORMATION,
    "info": SeverityLevel.INFORMATION,
    "hint": SeverityLevel.HINT,
}


class DiagnosticsImportError(RuntimeError):
    """Raised when a diagnostics dump cannot be read or understood."""


class DiagnosticSource(Protocol):
    """Supplier of the current workspace diagnostics."""

    def get_diagnostics(self) -> list[FileDiagnostics]:
        """Return ``(path, diagnostics)`` pairs for the whole workspace."""
        ...


@dataclass(slots=True)
class StaticDiagnosticSource:
    """Diagnostic source returning a fixed list of entries."""

    entries: Sequence[FileDiagnostics]

    def get_diagnostics(self) -> list[FileDiagnostics]:
        return [(path, list(diagnostics)) for path, diagnostics in self.entries]


@dataclass(slots=True)
class JsonDiagnosticSource:
    """Read diagnostics from a JSON file, or from stdin when ``path`` is ``-``.

    Attributes:
        path: JSON document location or ``"-"``.
        root: Optional directory used to resolve relative file paths.
        stream: Stream consulted when reading from stdin.
    """

    path: Path | str
    root: Path | None = None
    stream: TextIO | None = None

    def get_diagnostics(self) -> list[FileDiagnostics]:
        """Parse the configured document into ``(path, diagnostics)`` pairs.

        Returns:
            list[FileDiagnostics]: Entries in the order files first appear.

        Raises:
            DiagnosticsImportError: If the document is unreadable or malformed.
        """

        text = self._read_text()
        try:
            payload = json.loads(text) if text.strip() else []
        except json.JSONDecodeError as exc:
            raise DiagnosticsImportError(f"invalid diagnostics JSON in {self.path}: {exc}") from exc
        entries = parse_diagnostics_payload(payload, root=self.root)
        LOGGER.debug("Loaded diagnostics for %d file(s) from %s", len(entries), self.path)
        return entries

    def _read_text(self) -> str:
        if str(self.path) == STDIN_MARKER:
            return (self.stream or sys.stdin).read()
        path = Path(self.path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DiagnosticsImportError(f"unable to read diagnostics from {path}: {exc}") from exc


def parse_diagnostics_payload(payload: JSONValue, *, root: Path | None = None) -> list[FileDiagnostics]:
    """Convert a decoded JSON document into ``(path, diagnostics)`` pairs.

    Three layouts are understood: a mapping of path to diagnostic list, a list
    of ``{"uri": ..., "diagnostics": [...]}`` objects, and a flat list of
    Problems-panel markers carrying a ``resource`` and 1-based line numbers.

    Args:
        payload: Decoded JSON document.
        root: Optional directory used to resolve relative file paths.

    Returns:
        list[FileDiagnostics]: Entries grouped per file in first-seen order.

    Raises:
        DiagnosticsImportError: If the payload does not follow a known layout.
    """

    grouped: dict[str, list[DiagnosticRecord]] = {}
    for raw_path, item, is_marker in _iterate_items(payload):
        file_path = resolve_file_path(raw_path, root)
        bucket = grouped.setdefault(file_path, [])
        if item is None:
            continue
        bucket.append(_build_record(item, is_marker=is_marker))
    return list(grouped.items())


def _iterate_items(payload: JSONValue) -> Iterator[tuple[str, Mapping[str, JSONValue] | None, bool]]:
    """Yield ``(path, diagnostic, is_marker)`` triples from ``payload``."""

    if isinstance(payload, Mapping):
        if _DIAGNOSTICS_KEY in payload and _find_path(payload) is not None:
            yield from _iterate_file_entry(payload)
            return
        for path, diagnostics in payload.items():
            yield from _iterate_diagnostics(str(path), diagnostics)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, str):
        raise DiagnosticsImportError("diagnostics JSON must be an object or an array")
    for entry in payload:
        if not isinstance(entry, Mapping):
            raise DiagnosticsImportError(f"unsupported diagnostics entry: {entry!r}")
        if _DIAGNOSTICS_KEY in entry:
            yield from _iterate_file_entry(entry)
        elif _MARKER_LINE_KEY in entry:
            path = _find_path(entry)
            if path is None:
                raise DiagnosticsImportError(f"marker without resource: {entry!r}")
            yield path, entry, True
        else:
            raise DiagnosticsImportError(f"unsupported diagnostics entry: {entry!r}")


def _iterate_file_entry(
    entry: Mapping[str, JSONValue],
) -> Iterator[tuple[str, Mapping[str, JSONValue] | None, bool]]:
    path = _find_path(entry)
    if path is None:
        raise DiagnosticsImportError(f"diagnostics entry without a file: {entry!r}")
    yield from _iterate_diagnostics(path, entry[_DIAGNOSTICS_KEY])


def _iterate_diagnostics(
    path: str,
    diagnostics: JSONValue,
) -> Iterator[tuple[str, Mapping[str, JSONValue] | None, bool]]:
    if not isinstance(diagnostics, Sequence) or isinstance(diagnostics, str):
        raise DiagnosticsImportError(f"diagnostics for {path} must be an array")
    yield path, None, False
    for item in diagnostics:
        if not isinstance(item, Mapping):
            raise DiagnosticsImportError(f"diagnostic for {path} must be an object: {item!r}")
        yield path, item, _MARKER_LINE_KEY in item


def _find_path(entry: Mapping[str, JSONValue]) -> str | None:
    for key in _PATH_KEYS:
        value = entry.get(key)
        if isinstance(value, str) and value:
            return value
        if isinstance(value, Mapping):
            nested = value.get("fsPath") or value.get("path")
            if isinstance(nested, str) and nested:
                return nested
    return None


def resolve_file_path(raw: str, root: Path | None = None) -> str:
    """Return a filesystem path for ``raw``, decoding ``file://`` URIs.

    Args:
        raw: Path or URI reported by the editor.
        root: Optional directory used to anchor relative paths.

    Returns:
        str: Filesystem path as a string.
    """

    parsed = urlparse(raw)
    if parsed.scheme == _FILE_SCHEME:
        candidate = Path(unquote(parsed.path))
    else:
        candidate = Path(raw)
    if root is not None and not candidate.is_absolute():
        candidate = root / candidate
    return str(candidate)


def _build_record(item: Mapping[str, JSONValue], *, is_marker: bool) -> DiagnosticRecord:
    try:
        return DiagnosticRecord(
            severity=_coerce_severity(item.get("severity"), is_marker=is_marker),
            code=item.get("code"),
            message=str(item.get("message") or ""),
            range=_marker_range(item) if is_marker else _lsp_range(item),
            source=_coerce_source(item),
        )
    except ValidationError as exc:
        raise DiagnosticsImportError(f"invalid diagnostic {item!r}: {exc}") from exc


def _coerce_severity(value: JSONValue, *, is_marker: bool) -> SeverityLevel | int:
    """Map a serialized severity onto :class:`SeverityLevel`.

    Numbers use marker numbering for Problems-panel entries and LSP numbering
    otherwise. A missing severity is treated as an error.
    """

    if value is None:
        return SeverityLevel.ERROR
    if isinstance(value, str):
        return _NAMED_SEVERITIES.get(value.strip().lower(), _UNKNOWN_LEVEL)
    if isinstance(value, bool) or not isinstance(value, int):
        return _UNKNOWN_LEVEL
    table = _MARKER_SEVERITIES if is_marker else _LSP_SEVERITIES
    return table.get(value, _UNKNOWN_LEVEL)


def _coerce_source(item: Mapping[str, JSONValue]) -> str:
    source = item.get("source")
    if source is None and _MARKER_LINE_KEY in item:
        source = item.get("owner")
    return "" if source is None else str(source)


def _lsp_range(item: Mapping[str, JSONValue]) -> Range:
    raw = item.get("range")
    if raw is None:
        return Range()
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        # ``[start, end]`` as serialized by the editor API.
        if len(raw) != 2:
            raise DiagnosticsImportError(f"invalid range {raw!r}")
        start, end = raw
        return Range.model_validate({"start": start, "end": end})
    if not isinstance(raw, Mapping):
        raise DiagnosticsImportError(f"invalid range {raw!r}")
    return Range.model_validate(raw)


def _marker_range(item: Mapping[str, JSONValue]) -> Range:
    start_line = _as_int(item.get(_MARKER_LINE_KEY), 1)
    start_column = _as_int(item.get("startColumn"), 1)
    end_line = _as_int(item.get("endLineNumber"), start_line)
    end_column = _as_int(item.get("endColumn"), start_column)
    return Range.of(start_line - 1, start_column - 1, end_line - 1, end_column - 1)


def _as_int(value: JSONValue, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return default
