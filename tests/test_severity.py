# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity labels."""

from __future__ import annotations

import pytest

from lint2prompt.severity import Severity, SeverityLevel, capitalize_severity, severity_label


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (SeverityLevel.ERROR, Severity.ERROR),
        (SeverityLevel.WARNING, Severity.WARNING),
        (SeverityLevel.INFORMATION, Severity.INFO),
        (SeverityLevel.HINT, Severity.HINT),
        (0, Severity.ERROR),
        (3, Severity.HINT),
    ],
)
def test_severity_label_maps_known_levels(level: object, expected: Severity) -> None:
    assert severity_label(level) is expected


@pytest.mark.parametrize("level", [4, -1, 99, None, "error", 1.5, True, object()])
def test_severity_label_is_total(level: object) -> None:
    assert severity_label(level) is Severity.UNKNOWN


def test_labels_are_the_five_fixed_values() -> None:
    labels = {severity_label(value).value for value in range(-3, 10)}
    assert labels <= {"error", "warning", "info", "hint", "unknown"}
    assert {member.value for member in Severity} == {"error", "warning", "info", "hint", "unknown"}


def test_capitalize_severity() -> None:
    assert capitalize_severity(Severity.ERROR) == "Error"
    assert capitalize_severity(Severity.UNKNOWN) == "Unknown"
    assert capitalize_severity("info") == "Info"
