# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic version value model.

Provides a mutable Pydantic model wrapping the five parts of a SemVer 2.0
version string. Instances are built by running the grammar engine over an
input, can be adjusted part by part, and always re-render a canonical string
from their current field values.

Error Channels:
    - Construction from non-conforming text raises SemVerFormatError
    - ``parse()`` and the mutation operations never raise; they return None
      for invalid arguments and leave the instance unchanged

Caveats:
    Arithmetic adjustment does not re-validate the result, so parts may become
    negative or fractional. ``adjust_to`` on prerelease/build stores any text
    without checking the identifier grammar, so ``str(version)`` may produce a
    string that would not itself parse.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from omnibase_semver.constants.constants_semver import (
    ALL_PARTS,
    DEFAULT_SEMVER_TEXT,
    NUMERIC_PARTS,
    OPERATOR_ADD,
    OPERATOR_NAMES,
    OPERATORS,
)
from omnibase_semver.errors.error_semver import SemVerFormatError
from omnibase_semver.errors.model_semver_error_context import ModelSemVerErrorContext
from omnibase_semver.models.model_parsed_semver import ModelParsedSemVer
from omnibase_semver.models.model_semver_config import (
    DEFAULT_SEMVER_CONFIG,
    ModelSemVerConfig,
)
from omnibase_semver.utils.util_numeric import (
    coerce_number,
    is_finite_number,
    normalize_number,
)
from omnibase_semver.utils.util_semver import parse_semver, semver_pattern

logger = logging.getLogger(__name__)


def _enum_value(value: object) -> object:
    # str enums hash by member name, so unwrap before any dict/attribute lookup.
    return value.value if isinstance(value, Enum) else value


def _part_name(part: object, allowed: tuple[str, ...]) -> str | None:
    name = _enum_value(part)
    if isinstance(name, str) and name in allowed:
        return name
    return None


class ModelSemVer(BaseModel):
    """Mutable semantic version following the semver.org 2.0 grammar.

    The constructor accepts any object and converts it with ``str()``. An
    existing ModelSemVer is therefore copied from its current rendering, and
    ``None`` (whose text is "None") yields the configured default "0.0.0".

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Prerelease identifier, or None
        build: Build metadata, or None
        input: The text the instance was built from (after default
            substitution); kept for diagnostics only

    Example:
        >>> version = ModelSemVer("1.2.3-beta.1")
        >>> version.bump("minor")
        3
        >>> version.adjust_to("prerelease", "rc.1")
        'rc.1'
        >>> str(version)
        '1.3.3-rc.1'
        >>> ModelSemVer.parse("v1.2.3") is None
        True
    """

    type_tag: ClassVar[str] = "SemVer"

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=False,  # adjustments may leave valid-SemVer ranges
    )

    major: int | float = Field(default=0, description="Major version number")
    minor: int | float = Field(default=0, description="Minor version number")
    patch: int | float = Field(default=0, description="Patch version number")
    prerelease: str | None = Field(default=None, description="Prerelease identifier")
    build: str | None = Field(default=None, description="Build metadata")
    input: str = Field(
        default=DEFAULT_SEMVER_TEXT,
        description="Original input text, kept for diagnostics",
    )

    def __init__(
        self,
        version: object = None,
        /,
        *,
        config: ModelSemVerConfig | None = None,
    ) -> None:
        """Parse ``version`` into a new instance.

        Args:
            version: Any value; converted with ``str()`` before parsing.
            config: Optional configuration controlling the absent-input
                default. Defaults to DEFAULT_SEMVER_CONFIG.

        Raises:
            SemVerFormatError: If the text does not conform to SemVer 2.0.
                Wrong input types never raise on their own.
        """
        config = config or DEFAULT_SEMVER_CONFIG
        text = str(version)
        if text == config.absent_input_text:
            logger.debug(
                "Substituting default version for absent input",
                extra={"default_version": config.default_version},
            )
            text = config.default_version

        parsed = parse_semver(text)
        if parsed is None:
            raise SemVerFormatError(
                f"The supplied string is not a valid semver number: {text!r}",
                input_value=text,
                context=ModelSemVerErrorContext(operation="construct"),
            )

        super().__init__(
            major=parsed.major,
            minor=parsed.minor,
            patch=parsed.patch,
            prerelease=parsed.prerelease,
            build=parsed.build,
            input=text,
        )

    @classmethod
    def parse(cls, value: object) -> ModelParsedSemVer | None:
        """Parse a value without raising.

        Returns:
            ModelParsedSemVer for conforming text, otherwise None.
        """
        return parse_semver(value)

    @classmethod
    def grammar_pattern(cls) -> re.Pattern[str]:
        """Return a newly compiled SemVer 2.0 pattern (see ``semver_pattern``)."""
        return semver_pattern()

    def adjust_by(
        self,
        part: str,
        amount: int | float,
        operator: str = "+",
    ) -> int | float | None:
        """Adjust a numeric part arithmetically.

        Only ``major``, ``minor`` and ``patch`` are accepted. Supported
        operators are the symbols ``+``, ``-``, ``*`` and ``/``. Division is
        true division; an integral result is stored as ``int``.

        Args:
            part: Numeric part name (or EnumSemVerPart member).
            amount: Finite int or float operand.
            operator: Operator symbol (or EnumSemVerOperator member).

        Returns:
            The new value of the part, or None if the part, operator or amount
            is invalid (or the division is by zero). The instance is unchanged
            when None is returned.
        """
        name = _part_name(part, NUMERIC_PARTS)
        symbol = _enum_value(operator)
        if name is None:
            return self._reject("adjust_by", part, "not a numeric part")
        if not isinstance(symbol, str) or symbol not in OPERATOR_NAMES:
            return self._reject("adjust_by", part, f"unsupported operator {symbol!r}")
        if not is_finite_number(amount):
            return self._reject("adjust_by", part, f"non-finite amount {amount!r}")

        current = getattr(self, name)
        try:
            result = OPERATORS[symbol](current, amount)
        except (ZeroDivisionError, OverflowError) as e:
            return self._reject("adjust_by", part, str(e))

        return self._assign(name, normalize_number(result))

    def adjust_to(self, part: str, value: object) -> int | float | str | None:
        """Set any part to a new value.

        Numeric parts coerce ``value`` to a number (digit strings accepted);
        values that are not numbers are rejected. Prerelease and build accept
        any value converted with ``str()`` and are not re-validated against
        the identifier grammar.

        Args:
            part: Part name (or EnumSemVerPart member).
            value: The new value.

        Returns:
            The stored value, or None if the part name is unknown or a numeric
            part received a value that is not a number.
        """
        name = _part_name(part, ALL_PARTS)
        if name is None:
            return self._reject("adjust_to", part, "unknown part")

        if name in NUMERIC_PARTS:
            number = coerce_number(value)
            if number is None:
                return self._reject("adjust_to", part, f"not a number: {value!r}")
            return self._assign(name, number)

        return self._assign(name, str(value))

    def bump(self, part: str, amount: int | float = 1) -> int | float | None:
        """Increment a numeric part; shorthand for ``adjust_by(part, amount, "+")``.

        Example:
            >>> version.bump("minor")          # increments minor by 1
            >>> version.adjust_by("minor", 1)  # equivalent
        """
        return self.adjust_by(part, amount, OPERATOR_ADD[0])

    def to_string(self) -> str:
        """Render the canonical semver string from the current parts.

        Empty prerelease or build text is treated as absent.
        """
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result = f"{result}-{self.prerelease}"
        if self.build:
            result = f"{result}+{self.build}"
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        """Compare the five version parts; ``input`` is diagnostic and ignored."""
        if not isinstance(other, ModelSemVer):
            return NotImplemented
        return (
            self.major,
            self.minor,
            self.patch,
            self.prerelease,
            self.build,
        ) == (other.major, other.minor, other.patch, other.prerelease, other.build)

    __hash__ = None  # type: ignore[assignment]  # mutable

    def _assign(self, name: str, value: int | float | str) -> int | float | str:
        old = getattr(self, name)
        setattr(self, name, value)
        logger.debug(
            "Adjusted semver part",
            extra={"part": name, "old_value": old, "new_value": value},
        )
        return value

    def _reject(self, operation: str, part: object, reason: str) -> None:
        logger.debug(
            "Rejected semver adjustment",
            extra={"operation": operation, "part": str(part), "reason": reason},
        )
        return None


__all__ = ["ModelSemVer"]
