# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for semantic versioning.

This package provides:
    - util_semver: SemVer 2.0 grammar pattern, safe parse and validators
    - util_numeric: Number coercion and normalization for version parts
"""

from omnibase_semver.utils.util_numeric import (
    coerce_number,
    is_finite_number,
    normalize_number,
)
from omnibase_semver.utils.util_semver import (
    SEMVER_PATTERN_SOURCE,
    is_valid_semver,
    parse_semver,
    semver_pattern,
    validate_semver,
)

__all__: list[str] = [
    "SEMVER_PATTERN_SOURCE",
    "coerce_number",
    "is_finite_number",
    "is_valid_semver",
    "normalize_number",
    "parse_semver",
    "semver_pattern",
    "validate_semver",
]
