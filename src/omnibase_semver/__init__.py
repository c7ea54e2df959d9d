# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Semantic Version Library - SemVer 2.0 parsing and mutable version values.

This package provides:

- A SemVer 2.0 grammar engine (pattern, safe parse, strict validator)
- ModelSemVer: a mutable version value with arithmetic adjustment, direct
  assignment and bumping of individual parts
- Named constants for part names and adjustment operators

Key Components:
    - ModelSemVer: Construct from any value; raises SemVerFormatError for
      non-conforming text
    - ModelSemVer.parse / parse_semver: Non-raising parse returning
      ModelParsedSemVer or None
    - constants: PART_*, ALL_PARTS, NUMERIC_PARTS, STRING_PARTS, OPERATOR_*,
      OPERATOR_NAMES, OPERATORS

Example:
    >>> from omnibase_semver import ModelSemVer
    >>> version = ModelSemVer("1.2.3")
    >>> version.adjust_by("major", 2)
    3
    >>> str(version)
    '3.2.3'
"""

from omnibase_semver.constants import (
    ALL_PARTS,
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
from omnibase_semver.enums import EnumSemVerOperator, EnumSemVerPart
from omnibase_semver.errors import (
    SemVerError,
    SemVerFormatError,
)
from omnibase_semver.models import (
    DEFAULT_SEMVER_CONFIG,
    ModelParsedSemVer,
    ModelSemVer,
    ModelSemVerConfig,
)
from omnibase_semver.utils import (
    is_valid_semver,
    parse_semver,
    semver_pattern,
    validate_semver,
)
from omnibase_semver.version import __version__

__all__: list[str] = [
    "ALL_PARTS",
    "DEFAULT_SEMVER_CONFIG",
    "EnumSemVerOperator",
    "EnumSemVerPart",
    "ModelParsedSemVer",
    "ModelSemVer",
    "ModelSemVerConfig",
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
    "SemVerError",
    "SemVerFormatError",
    "__version__",
    "is_valid_semver",
    "parse_semver",
    "semver_pattern",
    "validate_semver",
]
