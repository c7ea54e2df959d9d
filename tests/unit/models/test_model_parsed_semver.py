# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the immutable ModelParsedSemVer parse result."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omnibase_semver.models import ModelParsedSemVer
from omnibase_semver.utils import parse_semver


class TestModelParsedSemVer:
    """Test ModelParsedSemVer behavior."""

    def test_is_frozen(self) -> None:
        """Parse results cannot be mutated."""
        parsed = parse_semver("1.2.3")
        assert parsed is not None
        with pytest.raises(ValidationError):
            parsed.major = 2  # type: ignore[misc]

    def test_absent_groups_are_none_not_empty(self) -> None:
        parsed = parse_semver("1.2.3")
        assert parsed is not None
        assert parsed.prerelease is None
        assert parsed.build is None

    def test_negative_parts_rejected_on_direct_construction(self) -> None:
        with pytest.raises(ValidationError):
            ModelParsedSemVer(major=-1, minor=0, patch=0)

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelParsedSemVer(major=1, minor=0, patch=0, revision=4)  # type: ignore[call-arg]

    def test_model_dump(self) -> None:
        parsed = parse_semver("1.0.0-rc.1+sha.5114f85")
        assert parsed is not None
        assert parsed.model_dump() == {
            "major": 1,
            "minor": 0,
            "patch": 0,
            "prerelease": "rc.1",
            "build": "sha.5114f85",
        }

    def test_type_tag(self) -> None:
        assert ModelParsedSemVer.type_tag == "ParsedSemVer"
