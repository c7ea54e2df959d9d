# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version part enumeration."""

from enum import Enum

from omnibase_semver.constants.constants_semver import (
    NUMERIC_PARTS,
    PART_BUILD,
    PART_MAJOR,
    PART_MINOR,
    PART_PATCH,
    PART_PRERELEASE,
)


class EnumSemVerPart(str, Enum):
    """Enumeration of the parts of a semantic version.

    Members compare equal to their raw string names, so either form can be
    passed to ``ModelSemVer.adjust_by``, ``adjust_to`` and ``bump``.
    """

    MAJOR = PART_MAJOR
    MINOR = PART_MINOR
    PATCH = PART_PATCH
    PRERELEASE = PART_PRERELEASE
    BUILD = PART_BUILD

    @property
    def is_numeric(self) -> bool:
        """Whether this part holds a number (major, minor or patch)."""
        return self.value in NUMERIC_PARTS
