# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes carried by semantic version errors."""

from enum import Enum


class EnumSemVerErrorCode(str, Enum):
    """Classification codes for ``SemVerError`` and its subclasses."""

    INVALID_FORMAT = "SEMVER_001_INVALID_FORMAT"
    OPERATION_FAILED = "SEMVER_099_OPERATION_FAILED"
