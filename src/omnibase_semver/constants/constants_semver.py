# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version part names and adjustment operator table.

These constants let callers validate arguments to the mutation operations
of ``ModelSemVer`` programmatically instead of hard-coding string literals.

Part Groups:
    - ALL_PARTS: major, minor, patch, prerelease, build
    - NUMERIC_PARTS: major, minor, patch (accepted by adjust_by / bump)
    - STRING_PARTS: prerelease, build

Operators:
    Each operator constant is a ``(symbol, function)`` pair. ``OPERATORS``
    maps the symbol to the function and cannot be modified.

Usage:
    >>> from omnibase_semver.constants import OPERATORS, PART_MINOR
    >>> OPERATORS["*"](2, 3)
    6
    >>> PART_MINOR
    'minor'
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Final

# ==============================================================================
# Part Names
# ==============================================================================

PART_MAJOR: Final[str] = "major"
PART_MINOR: Final[str] = "minor"
PART_PATCH: Final[str] = "patch"
PART_PRERELEASE: Final[str] = "prerelease"
PART_BUILD: Final[str] = "build"

ALL_PARTS: Final[tuple[str, ...]] = (
    PART_MAJOR,
    PART_MINOR,
    PART_PATCH,
    PART_PRERELEASE,
    PART_BUILD,
)
"""Every part of a semantic version, in rendering order."""

NUMERIC_PARTS: Final[tuple[str, ...]] = (PART_MAJOR, PART_MINOR, PART_PATCH)
"""Parts holding numbers; the only parts accepted by arithmetic adjustment."""

STRING_PARTS: Final[tuple[str, ...]] = (PART_PRERELEASE, PART_BUILD)
"""Parts holding optional text."""

# ==============================================================================
# Adjustment Operators
# ==============================================================================

BinaryOperator = Callable[[float, float], float]

OPERATOR_ADD: Final[tuple[str, BinaryOperator]] = ("+", operator.add)
OPERATOR_DIVIDE: Final[tuple[str, BinaryOperator]] = ("/", operator.truediv)
OPERATOR_MULTIPLY: Final[tuple[str, BinaryOperator]] = ("*", operator.mul)
OPERATOR_SUBTRACT: Final[tuple[str, BinaryOperator]] = ("-", operator.sub)

_OPERATOR_PAIRS: Final[tuple[tuple[str, BinaryOperator], ...]] = (
    OPERATOR_ADD,
    OPERATOR_DIVIDE,
    OPERATOR_MULTIPLY,
    OPERATOR_SUBTRACT,
)

OPERATOR_NAMES: Final[tuple[str, ...]] = tuple(
    symbol for symbol, _ in _OPERATOR_PAIRS
)
"""Supported operator symbols: '+', '/', '*', '-'."""

OPERATORS: Final[Mapping[str, BinaryOperator]] = MappingProxyType(
    dict(_OPERATOR_PAIRS)
)

# ==============================================================================
# Defaults
# ==============================================================================

DEFAULT_SEMVER_TEXT: Final[str] = "0.0.0"

# str(None) == "None"; a missing value stringifies to this text.
ABSENT_INPUT_TEXT: Final[str] = "None"

__all__ = [
    "ABSENT_INPUT_TEXT",
    "ALL_PARTS",
    "BinaryOperator",
    "DEFAULT_SEMVER_TEXT",
    "NUMERIC_PARTS",
    "OPERATORS",
    "OPERATOR_ADD",
    "OPERATOR_DIVIDE",
    "OPERATOR_MULTIPLY",
    "OPERATOR_NAMES",
    "OPERATOR_SUBTRACT",
    "PART_BUILD",
    "PART_MAJOR",
    "PART_MINOR",
    "PART_PATCH",
    "PART_PRERELEASE",
    "STRING_PARTS",
]
