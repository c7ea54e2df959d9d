# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Arithmetic operator enumeration for numeric version adjustment."""

from enum import Enum

from omnibase_semver.constants.constants_semver import OPERATORS


class EnumSemVerOperator(str, Enum):
    """Operators accepted by ``ModelSemVer.adjust_by``.

    Values are the operator symbols, not words.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, left: float, right: float) -> float:
        """Apply this operator to two operands.

        Example:
            >>> EnumSemVerOperator.MULTIPLY.apply(2, 3)
            6
        """
        return OPERATORS[self.value](left, right)
