# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Error Context Model.

Bundles the optional structured fields shared by all semver errors so error
constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelSemVerErrorContext(BaseModel):
    """Optional context attached to a ``SemVerError``.

    Attributes:
        operation: Operation being performed (construct, validate)
        correlation_id: Caller-supplied correlation ID for tracing

    Example:
        >>> context = ModelSemVerErrorContext(operation="construct")
        >>> raise SemVerFormatError("bad version", input_value="1.2", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (construct, validate)",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Caller-supplied correlation ID for tracing",
    )


__all__ = ["ModelSemVerErrorContext"]
