# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Configuration Model.

Controls the convenience default applied when ``ModelSemVer`` is constructed
from an absent value. Pass an instance through the ``config`` keyword of the
constructor; ``DEFAULT_SEMVER_CONFIG`` is used otherwise.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_semver.constants.constants_semver import (
    ABSENT_INPUT_TEXT,
    DEFAULT_SEMVER_TEXT,
)
from omnibase_semver.utils.util_semver import validate_semver


class ModelSemVerConfig(BaseModel):
    """Configuration for ``ModelSemVer`` construction.

    Attributes:
        default_version: Version used when the input text equals
            ``absent_input_text`` (default "0.0.0"). Must be valid SemVer.
        absent_input_text: Input text treated as "no value given"
            (default "None", the result of ``str(None)``).

    Example:
        >>> config = ModelSemVerConfig(default_version="1.0.0")
        >>> str(ModelSemVer(None, config=config))
        '1.0.0'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    default_version: str = Field(
        default=DEFAULT_SEMVER_TEXT,
        description="Version substituted for absent input",
    )
    absent_input_text: str = Field(
        default=ABSENT_INPUT_TEXT,
        min_length=1,
        description="Input text treated as absent",
    )

    @field_validator("default_version")
    @classmethod
    def validate_default_version(cls, v: str) -> str:
        return validate_semver(v, field_name="default_version")


DEFAULT_SEMVER_CONFIG: Final[ModelSemVerConfig] = ModelSemVerConfig()

__all__ = [
    "DEFAULT_SEMVER_CONFIG",
    "ModelSemVerConfig",
]
