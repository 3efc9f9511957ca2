"""Banking domain exceptions.

This module defines exceptions raised while talking to the bank through the
protocol engine and while driving strong customer authentication (TAN or
decoupled confirmation).
"""

from tanflow.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

# =============================================================================
# Base Banking Exception
# =============================================================================


class BankingDomainError(DomainException):
    """Base exception for banking domain errors."""


# =============================================================================
# Protocol Engine Exceptions
# =============================================================================


class ProtocolError(BankingDomainError):
    """Raised when the protocol engine reports a failure.

    Covers network problems, signing failures, server rejections and wrong
    TANs. The original exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "The bank rejected the request",
        operation: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.PROTOCOL_ERROR,
            details={"operation": operation} if operation else None,
        )


class InvalidConnectionOptionsError(ValidationError):
    """Raised when connection options are incomplete or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_CONNECTION_OPTIONS,
            details={"field": field} if field else None,
        )


class SessionStateError(BankingDomainError):
    """Raised when persisted session state cannot be read back."""

    def __init__(self, message: str = "Stored session state is unreadable") -> None:
        super().__init__(message=message, code=ErrorCode.SESSION_STATE_INVALID)


# =============================================================================
# Challenge Exceptions
# =============================================================================


class ChallengeDecodeError(BankingDomainError):
    """Raised when a challenge payload is neither a flicker code nor an image.

    This points at a defect in the protocol engine, there is no sensible
    fallback rendering.
    """

    def __init__(
        self,
        message: str = "Challenge payload could not be decoded",
        payload_length: int | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CHALLENGE_DECODE_FAILED,
            details=(
                {"payload_length": payload_length}
                if payload_length is not None
                else None
            ),
        )


# =============================================================================
# TAN Exceptions
# =============================================================================


class TanError(BankingDomainError):
    """Base exception for strong authentication errors."""


class PollExhaustedError(TanError):
    """Raised when automated polling hits the attempt limit without confirmation.

    Fatal to the current call. The application may restart the
    authentication flow or fall back to manual confirmation.
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(
            message=f"Not confirmed after {attempts} attempts, which is the limit.",
            code=ErrorCode.POLL_EXHAUSTED,
            details={"attempts": attempts},
        )
        self.attempts = attempts


class UnsupportedAuthModeError(TanError):
    """Raised when a decoupled mode allows neither polling nor manual confirmation."""

    def __init__(
        self,
        message: str = (
            "Server allows neither automated polling nor manual confirmation"
        ),
        mode_code: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.UNSUPPORTED_AUTH_MODE,
            details={"mode_code": mode_code} if mode_code else None,
        )
