# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the SemVer 2.0 grammar engine in util_semver."""

from __future__ import annotations

import logging
import re

import pytest

from omnibase_semver.errors import SemVerFormatError
from omnibase_semver.models import ModelParsedSemVer
from omnibase_semver.utils.util_semver import (
    is_valid_semver,
    parse_semver,
    semver_pattern,
    validate_semver,
)

VALID_VERSIONS = [
    "0.0.0",
    "1.2.3",
    "10.20.30",
    "999.888.777",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-0.3.7",
    "1.0.0-x.7.z.92",
    "1.0.0-x-y-z.--",
    "1.0.0-alpha.beta.1.2.3",
    "1.0.0-0a",
    "1.0.0+build.1",
    "1.0.0+001",
    "1.0.0+20130313144700",
    "1.0.0+exp.sha.5114f85",
    "1.0.0+20130313144700.git.abc123",
    "1.0.0-alpha+build.1",
    "1.2.3-beta.1+build.456",
    "10.20.30-alpha.1+build.123",
]

INVALID_VERSIONS = [
    "",
    "not.a.version",
    "1.2",
    "1",
    "v1.2.3",
    "1.2.3.4",
    "01.2.3",
    "1.02.3",
    "1.2.03",
    "1.2.3-",
    "1.2.3+",
    "1.2.3-01",
    "1.2.3-alpha..1",
    "1.2.3-alpha_1",
    "1.2.3+build..1",
    "1.2.3 ",
    " 1.2.3",
    "1.2.3\n",
    "-1.2.3",
    "1.2.3-beta!",
    "١.2.3",  # ARABIC-INDIC DIGIT ONE
]


class TestSemverPattern:
    """Test semver_pattern() construction and matching."""

    def test_returns_compiled_pattern(self) -> None:
        """semver_pattern() returns a compiled regular expression."""
        assert isinstance(semver_pattern(), re.Pattern)

    def test_exposes_named_groups(self) -> None:
        """The pattern names all five version parts."""
        assert set(semver_pattern().groupindex) == {
            "major",
            "minor",
            "patch",
            "prerelease",
            "build",
        }

    def test_repeated_use_has_no_carried_state(self) -> None:
        """Reusing one pattern and fetching new ones give identical results."""
        pattern = semver_pattern()
        first = [bool(pattern.match(v)) for v in VALID_VERSIONS + INVALID_VERSIONS]
        second = [
            bool(semver_pattern().match(v)) for v in VALID_VERSIONS + INVALID_VERSIONS
        ]
        assert first == second

    @pytest.mark.parametrize("version_str", VALID_VERSIONS)
    def test_matches_valid_versions(self, version_str: str) -> None:
        """Valid SemVer strings match."""
        assert semver_pattern().match(version_str) is not None

    @pytest.mark.parametrize("version_str", INVALID_VERSIONS)
    def test_rejects_invalid_versions(self, version_str: str) -> None:
        """Non-conforming strings do not match, including partial matches."""
        assert semver_pattern().match(version_str) is None


class TestParseSemver:
    """Test parse_semver()."""

    def test_parse_basic_version(self) -> None:
        """Basic version parses into integers with absent text parts."""
        parsed = parse_semver("1.2.3")
        assert isinstance(parsed, ModelParsedSemVer)
        assert (parsed.major, parsed.minor, parsed.patch) == (1, 2, 3)
        assert parsed.prerelease is None
        assert parsed.build is None

    def test_parse_all_components(self) -> None:
        """All five components are extracted."""
        parsed = parse_semver("10.20.30-alpha.1+build.123")
        assert parsed is not None
        assert parsed.major == 10
        assert parsed.minor == 20
        assert parsed.patch == 30
        assert parsed.prerelease == "alpha.1"
        assert parsed.build == "build.123"

    def test_numeric_parts_are_int(self) -> None:
        """Numeric parts are converted to int."""
        parsed = parse_semver("0.10.200")
        assert parsed is not None
        assert all(isinstance(n, int) for n in (parsed.major, parsed.minor, parsed.patch))

    def test_complex_prerelease_kept_verbatim(self) -> None:
        """Complex prerelease identifiers are kept exactly."""
        parsed = parse_semver("1.0.0-alpha.beta.1.2.3")
        assert parsed is not None
        assert parsed.prerelease == "alpha.beta.1.2.3"

    def test_complex_build_kept_verbatim(self) -> None:
        """Complex build identifiers, including leading zeros, are kept exactly."""
        parsed = parse_semver("1.0.0+20130313144700.git.abc123")
        assert parsed is not None
        assert parsed.build == "20130313144700.git.abc123"
        assert parse_semver("1.0.0+001").build == "001"  # type: ignore[union-attr]

    @pytest.mark.parametrize("version_str", INVALID_VERSIONS)
    def test_invalid_returns_none(self, version_str: str) -> None:
        """Non-conforming input returns None instead of raising."""
        assert parse_semver(version_str) is None

    @pytest.mark.parametrize("value", [123, 1.5, None, object(), ["1.2.3"]])
    def test_non_string_input_never_raises(self, value: object) -> None:
        """Any input type is stringified; non-conforming text gives None."""
        assert parse_semver(value) is None

    def test_stringified_input_is_parsed(self) -> None:
        """Objects whose text is valid SemVer parse successfully."""

        class VersionLike:
            def __str__(self) -> str:
                return "4.5.6-rc.1"

        parsed = parse_semver(VersionLike())
        assert parsed is not None
        assert parsed.prerelease == "rc.1"

    def test_fresh_result_per_call(self) -> None:
        """Each call produces a new, equal result."""
        first = parse_semver("1.2.3-beta")
        second = parse_semver("1.2.3-beta")
        assert first == second
        assert first is not second

    def test_oversized_numeric_part_returns_none(self) -> None:
        """Digit strings too long for int() are rejected instead of raising."""
        assert parse_semver("1" * 5000 + ".0.0") is None
        assert parse_semver("0." + "2" * 5000 + ".0") is None

    def test_oversized_numeric_part_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="omnibase_semver")
        parse_semver("0.0." + "3" * 5000)
        assert any(
            r.getMessage() == "Rejected semver input with oversized numeric part"
            for r in caplog.records
        )

    def test_rejection_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """A rejected input is logged with the offending text."""
        caplog.set_level(logging.DEBUG, logger="omnibase_semver")
        parse_semver("v1.2.3")
        records = [r for r in caplog.records if r.name == "omnibase_semver.utils.util_semver"]
        assert records
        assert records[-1].input_value == "v1.2.3"  # type: ignore[attr-defined]


class TestIsValidSemver:
    """Test is_valid_semver()."""

    @pytest.mark.parametrize("version_str", VALID_VERSIONS)
    def test_valid(self, version_str: str) -> None:
        assert is_valid_semver(version_str) is True

    @pytest.mark.parametrize("version_str", INVALID_VERSIONS)
    def test_invalid(self, version_str: str) -> None:
        assert is_valid_semver(version_str) is False

    def test_oversized_numeric_part_is_invalid(self) -> None:
        assert is_valid_semver("1" * 5000 + ".0.0") is False


class TestValidateSemver:
    """Test validate_semver() strict validator."""

    def test_returns_valid_input(self) -> None:
        """Valid versions are returned unchanged."""
        assert validate_semver("1.2.3-alpha") == "1.2.3-alpha"

    def test_invalid_raises_format_error(self) -> None:
        """Invalid versions raise SemVerFormatError carrying the input."""
        with pytest.raises(SemVerFormatError) as exc_info:
            validate_semver("1.0", field_name="min_version")

        error = exc_info.value
        assert error.input_value == "1.0"
        assert "min_version" in str(error)
        assert error.model.context["field_name"] == "min_version"
        assert error.model.context["operation"] == "validate"

    def test_format_error_is_value_error(self) -> None:
        """SemVerFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_semver("v1.0.0")
