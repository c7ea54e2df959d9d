# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsed semantic version result model.

``ModelParsedSemVer`` is the transient record produced by the grammar engine
(``parse_semver``). It is created fresh per parse call and never mutated;
callers either inspect it directly or copy its fields into a ``ModelSemVer``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ModelParsedSemVer(BaseModel):
    """Immutable result of a successful SemVer 2.0 parse.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Raw prerelease text after ``-``, or None when absent
        build: Raw build metadata text after ``+``, or None when absent

    Example:
        >>> parsed = parse_semver("1.0.0-alpha.1+build.5")
        >>> parsed.prerelease, parsed.build
        ('alpha.1', 'build.5')
        >>> parsed.type_tag
        'ParsedSemVer'
    """

    type_tag: ClassVar[str] = "ParsedSemVer"

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    major: int = Field(ge=0, description="Major version number")
    minor: int = Field(ge=0, description="Minor version number")
    patch: int = Field(ge=0, description="Patch version number")
    prerelease: str | None = Field(default=None, description="Prerelease identifier")
    build: str | None = Field(default=None, description="Build metadata")


__all__ = ["ModelParsedSemVer"]
