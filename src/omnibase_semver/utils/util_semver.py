# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic versioning grammar engine.

Provides the official SemVer 2.0 matching pattern and the functions that run
it against arbitrary input. See https://semver.org/.

This module provides three entry points:
    - parse_semver: Safe parse returning ModelParsedSemVer or None, never raises
    - is_valid_semver: Boolean form of parse_semver
    - validate_semver: Strict validation raising SemVerFormatError

Grammar (anchored at both ends):
    major.minor.patch[-prerelease][+build]

    - major, minor, patch: ``0`` or a digit string not starting with ``0``
    - prerelease: dot-separated identifiers; numeric identifiers must not have
      a leading zero, alphanumeric identifiers contain at least one letter or
      hyphen
    - build: dot-separated alphanumeric-or-hyphen identifiers, leading zeros
      allowed

Pattern Instances:
    ``semver_pattern()`` compiles the pattern on every call and the module
    keeps no shared compiled instance. CPython's ``re`` module may hand back an
    object from its internal compile cache; compiled patterns hold no match
    position, so nothing carries over between uses either way.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from omnibase_semver.errors.error_semver import SemVerFormatError
from omnibase_semver.errors.model_semver_error_context import ModelSemVerErrorContext

if TYPE_CHECKING:
    from omnibase_semver.models.model_parsed_semver import ModelParsedSemVer

logger = logging.getLogger(__name__)

# Regular expression from the Semantic Versioning 2.0 specification, with
# named groups. [0-9] is used instead of \d so non-ASCII digits are rejected,
# and \Z instead of $ so a trailing newline is rejected.
_NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
_PRERELEASE_IDENTIFIER = rf"(?:{_NUMERIC_IDENTIFIER}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN_SOURCE: str = "".join(
    (
        rf"^(?P<major>{_NUMERIC_IDENTIFIER})",  # major
        rf"\.(?P<minor>{_NUMERIC_IDENTIFIER})",  # minor
        rf"\.(?P<patch>{_NUMERIC_IDENTIFIER})",  # patch
        rf"(?:-(?P<prerelease>{_PRERELEASE_IDENTIFIER}"  # dash-release
        rf"(?:\.{_PRERELEASE_IDENTIFIER})*))?",
        rf"(?:\+(?P<build>{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*))?\Z",  # plus-build
    )
)


def semver_pattern() -> re.Pattern[str]:
    """Return a compiled SemVer 2.0 pattern.

    The pattern is compiled on each call rather than held as a module-level
    constant. Keep a local reference if you match many strings.

    Returns:
        Compiled pattern with named groups ``major``, ``minor``, ``patch``,
        ``prerelease`` and ``build``.

    Example:
        >>> bool(semver_pattern().match("1.2.3-rc.1+build.7"))
        True
        >>> bool(semver_pattern().match("v1.2.3"))
        False
    """
    return re.compile(SEMVER_PATTERN_SOURCE)


def parse_semver(value: object) -> ModelParsedSemVer | None:
    """Parse a value as a SemVer 2.0 string.

    The value is converted with ``str()`` first, so any object is accepted.

    Args:
        value: The value to parse.

    Returns:
        A new ModelParsedSemVer with integer major/minor/patch and raw
        prerelease/build text (None for an absent group), or None when the
        text does not conform to the grammar.

    Example:
        >>> parse_semver("10.20.30-alpha.1+build.123").minor
        20
        >>> parse_semver("1.2") is None
        True
    """
    # Import here to avoid circular import at module level
    from omnibase_semver.models.model_parsed_semver import ModelParsedSemVer

    text = str(value)
    match = semver_pattern().match(text)
    if match is None:
        logger.debug(
            "Rejected non-conforming semver input",
            extra={"input_value": text},
        )
        return None

    try:
        major, minor, patch = (
            int(match.group(name), 10) for name in ("major", "minor", "patch")
        )
    except ValueError:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        logger.debug(
            "Rejected semver input with oversized numeric part",
            extra={"input_value": text},
        )
        return None

    return ModelParsedSemVer(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=match.group("prerelease"),
        build=match.group("build"),
    )


def is_valid_semver(value: object) -> bool:
    """Return True when ``str(value)`` parses as a SemVer 2.0 version."""
    return parse_semver(value) is not None


def validate_semver(v: str, field_name: str = "version") -> str:
    """Validate that a string follows strict semantic versioning format.

    Suitable for use inside Pydantic field validators.

    Args:
        v: The version string to validate.
        field_name: Name of the field for error messages (default: "version").

    Returns:
        The validated version string.

    Raises:
        SemVerFormatError: If the version string is not valid semver format.
            SemVerFormatError is a ValueError, so Pydantic reports it as a
            validation error.

    Example:
        >>> validate_semver("1.0.0")
        '1.0.0'
        >>> validate_semver("1.0")  # Raises SemVerFormatError - too few components
    """
    if not is_valid_semver(v):
        raise SemVerFormatError(
            f"Invalid semantic version for '{field_name}': {v!r}. "
            "Expected format: MAJOR.MINOR.PATCH[-prerelease][+build]",
            input_value=str(v),
            context=ModelSemVerErrorContext(operation="validate"),
            field_name=field_name,
        )
    return v


__all__ = [
    "SEMVER_PATTERN_SOURCE",
    "is_valid_semver",
    "parse_semver",
    "semver_pattern",
    "validate_semver",
]
