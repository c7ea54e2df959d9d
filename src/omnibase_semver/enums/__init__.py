# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version enumerations.

Exports:
    EnumSemVerErrorCode: Error classification codes for semver errors
    EnumSemVerOperator: Arithmetic operators accepted by adjust_by
    EnumSemVerPart: Names of the five semantic version parts
"""

from omnibase_semver.enums.enum_semver_error_code import EnumSemVerErrorCode
from omnibase_semver.enums.enum_semver_operator import EnumSemVerOperator
from omnibase_semver.enums.enum_semver_part import EnumSemVerPart

__all__: list[str] = [
    "EnumSemVerErrorCode",
    "EnumSemVerOperator",
    "EnumSemVerPart",
]
