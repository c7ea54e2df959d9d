# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Named constants for semantic version parts and adjustment operators.

Exports:
    PART_MAJOR, PART_MINOR, PART_PATCH, PART_PRERELEASE, PART_BUILD: Part names
    ALL_PARTS, NUMERIC_PARTS, STRING_PARTS: Ordered groups of part names
    OPERATOR_ADD, OPERATOR_SUBTRACT, OPERATOR_MULTIPLY, OPERATOR_DIVIDE: Operator pairs
    OPERATOR_NAMES: Supported operator symbols
    OPERATORS: Read-only mapping of operator symbol to binary function
    DEFAULT_SEMVER_TEXT: Version substituted for absent input
    ABSENT_INPUT_TEXT: Text produced by stringifying an absent value
"""

from omnibase_semver.constants.constants_semver import (
    ABSENT_INPUT_TEXT,
    ALL_PARTS,
    DEFAULT_SEMVER_TEXT,
    NUMERIC_PARTS,
    OPERATOR_ADD,
    OPERATOR_DIVIDE,
    OPERATOR_MULTIPLY,
    OPERATOR_NAMES,
    OPERATOR_SUBTRACT,
    OPERATORS,
    PART_BUILD,
    PART_MAJOR,
    PART_MINOR,
    PART_PATCH,
    PART_PRERELEASE,
    STRING_PARTS,
)

__all__: list[str] = [
    "ABSENT_INPUT_TEXT",
    "ALL_PARTS",
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
