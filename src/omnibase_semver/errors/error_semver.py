# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic Version Error Classes.

Only construction-time and configuration-time validation raise. The parse
check and the mutation operations of ``ModelSemVer`` report invalid
arguments by returning ``None`` instead.

All errors:
    - Carry a ``ModelSemVerErrorDetail`` on ``error.model``
    - Use EnumSemVerErrorCode for error classification
    - Accept ModelSemVerErrorContext for bundled context parameters
    - Support proper error chaining with ``raise ... from e``
"""

from __future__ import annotations

from omnibase_semver.enums.enum_semver_error_code import EnumSemVerErrorCode
from omnibase_semver.errors.model_semver_error_context import ModelSemVerErrorContext
from omnibase_semver.errors.model_semver_error_detail import ModelSemVerErrorDetail


class SemVerError(Exception):
    """Base error class for semantic version failures.

    Example:
        >>> try:
        ...     ModelSemVer("v1.2.3")
        ... except SemVerError as e:
        ...     print(e.model.error_code.value)
        SEMVER_001_INVALID_FORMAT
    """

    default_error_code: EnumSemVerErrorCode = EnumSemVerErrorCode.OPERATION_FAILED

    def __init__(
        self,
        message: str,
        error_code: EnumSemVerErrorCode | None = None,
        context: ModelSemVerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize SemVerError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default)
            context: Bundled context (operation, correlation_id)
            **extra_context: Additional context information
        """
        structured: dict[str, object] = {}
        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured["operation"] = context.operation
            correlation_id = context.correlation_id
        structured.update(extra_context)

        super().__init__(message)
        self.model = ModelSemVerErrorDetail(
            error_code=error_code or self.default_error_code,
            message=message,
            correlation_id=correlation_id,
            context=structured,
        )


class SemVerFormatError(SemVerError, ValueError):
    """Raised when text does not conform to the SemVer 2.0 grammar.

    The offending text is available as ``input_value`` and in
    ``error.model.context["input_value"]``.
    """

    default_error_code = EnumSemVerErrorCode.INVALID_FORMAT

    def __init__(
        self,
        message: str,
        *,
        input_value: str | None = None,
        context: ModelSemVerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        extra: dict[str, object] = dict(extra_context)
        if input_value is not None:
            extra["input_value"] = input_value
        self.input_value = input_value
        super().__init__(message, context=context, **extra)


__all__ = [
    "SemVerError",
    "SemVerFormatError",
]
