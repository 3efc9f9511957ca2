"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
whole library. All domain exceptions inherit from DomainException so that
callers (CLI, web handlers) can report them uniformly.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CONNECTION_OPTIONS = "INVALID_CONNECTION_OPTIONS"

    # Protocol Engine Errors
    PROTOCOL_ERROR = "PROTOCOL_ERROR"

    # Strong Authentication Errors
    CHALLENGE_DECODE_FAILED = "CHALLENGE_DECODE_FAILED"
    POLL_EXHAUSTED = "POLL_EXHAUSTED"
    UNSUPPORTED_AUTH_MODE = "UNSUPPORTED_AUTH_MODE"

    # Session Persistence Errors
    SESSION_STATE_INVALID = "SESSION_STATE_INVALID"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not shown to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
