# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version models.

Exports:
    ModelParsedSemVer: Immutable result of a successful parse
    ModelSemVer: Mutable semantic version value
    ModelSemVerConfig: Construction defaults (absent-input substitution)
    DEFAULT_SEMVER_CONFIG: Configuration used when none is given
"""

from omnibase_semver.models.model_parsed_semver import ModelParsedSemVer
from omnibase_semver.models.model_semver_config import (
    DEFAULT_SEMVER_CONFIG,
    ModelSemVerConfig,
)
from omnibase_semver.models.model_semver import ModelSemVer

__all__: list[str] = [
    "DEFAULT_SEMVER_CONFIG",
    "ModelParsedSemVer",
    "ModelSemVer",
    "ModelSemVerConfig",
]
