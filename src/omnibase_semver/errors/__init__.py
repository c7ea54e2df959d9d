# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version error classes and error context models.

Error Hierarchy:
    SemVerError (base, carries ModelSemVerErrorDetail as ``.model``)
    └── SemVerFormatError (also a ValueError)
"""

from omnibase_semver.errors.error_semver import (
    SemVerError,
    SemVerFormatError,
)
from omnibase_semver.errors.model_semver_error_context import ModelSemVerErrorContext
from omnibase_semver.errors.model_semver_error_detail import ModelSemVerErrorDetail

__all__: list[str] = [
    "ModelSemVerErrorContext",
    "ModelSemVerErrorDetail",
    "SemVerError",
    "SemVerFormatError",
]
