# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Number coercion helpers for semantic version parts.

Numeric version parts are plain Python numbers. Arithmetic adjustment may
produce floats (true division) or negative values; these helpers only decide
what counts as a usable number and keep integral results as ``int`` so they
render as ``5`` rather than ``5.0``. No clamping or rounding is performed.
"""

from __future__ import annotations

import math


def normalize_number(value: int | float) -> int | float:
    """Collapse an integral float to ``int``; leave everything else unchanged.

    Example:
        >>> normalize_number(5.0)
        5
        >>> normalize_number(0.5)
        0.5
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def is_finite_number(value: object) -> bool:
    """Return True for a finite ``int`` or ``float`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True  # ints are always finite; isfinite() overflows past 1e308
    return math.isfinite(value)


def coerce_number(value: object) -> int | float | None:
    """Convert a value to a number, or return None when it is not one.

    Conversion rules:
        - bool: converted to int (True -> 1)
        - int: returned as is
        - float: NaN rejected, integral values collapsed to int
        - str: surrounding whitespace stripped, parsed as a base-10 int,
          otherwise as a float (NaN and "_" digit separators rejected)
        - anything else, including None: rejected

    Example:
        >>> coerce_number("10")
        10
        >>> coerce_number(" 2.50 ")
        2.5
        >>> coerce_number("not-a-number") is None
        True
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else normalize_number(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if "_" in text:
        return None  # int() and float() accept digit-group underscores
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else normalize_number(number)


__all__ = [
    "coerce_number",
    "is_finite_number",
    "normalize_number",
]
