# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structured detail carried by every ``SemVerError`` as ``error.model``."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnibase_semver.enums.enum_semver_error_code import EnumSemVerErrorCode


class ModelSemVerErrorDetail(BaseModel):
    """Immutable error payload.

    Attributes:
        error_code: Classification of the failure
        message: Human-readable error message
        correlation_id: Correlation ID copied from the error context, if any
        context: Flattened structured context (operation, input_value, ...)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    error_code: EnumSemVerErrorCode = Field(
        description="Classification of the failure",
    )
    message: str = Field(description="Human-readable error message")
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID copied from the error context",
    )
    context: dict[str, object] = Field(
        default_factory=dict,
        description="Structured context for debugging",
    )


__all__ = ["ModelSemVerErrorDetail"]
