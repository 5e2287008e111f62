"""
Schemas
File: errors.py

Purpose: Error taxonomy for signing and verification.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Key resolution
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    KEY_FORMAT_ERROR = "KEY_FORMAT_ERROR"
    KEY_SOURCE_UNAVAILABLE = "KEY_SOURCE_UNAVAILABLE"

    # Codec & envelope
    ENCODING_ERROR = "ENCODING_ERROR"
    MALFORMED_ENVELOPE = "MALFORMED_ENVELOPE"

    # Verification
    VERIFICATION_REJECTED = "VERIFICATION_REJECTED"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class EdsignError(BaseModel):
    """
    Structured form of an error, used when reporting failures as JSON
    instead of as a raised exception.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.KEY_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "EdsignException":
        """Convert this error model to a raisable exception."""
        return EdsignException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class EdsignException(Exception):
    """
    Base exception for all signing and verification errors.

    Every failure is terminal for the current invocation; nothing here
    is retried automatically.
    """

    def __init__(
        self,
        message: str,
        code: str = "EDSIGN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> EdsignError:
        """Convert this exception to an EdsignError model."""
        return EdsignError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class KeyNotFoundException(EdsignException):
    """Raised when a key file does not exist or cannot be read."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_NOT_FOUND,
            details=full_details,
        )


class KeyFormatException(EdsignException):
    """Raised when key bytes cannot be decoded into an ed25519 key."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_FORMAT_ERROR,
            details=full_details,
        )


class KeySourceUnavailableException(EdsignException):
    """Raised when a remote key listing cannot produce any usable key."""

    def __init__(
        self,
        message: str,
        github_user: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if github_user:
            full_details["github_user"] = github_user
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_SOURCE_UNAVAILABLE,
            details=full_details,
        )


class EncodingException(EdsignException):
    """Raised for invalid base64 signatures or non-UTF-8 messages."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODING_ERROR,
            details=details,
        )


class MalformedEnvelopeException(EdsignException):
    """Raised when envelope JSON is unparsable or missing required fields."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_ENVELOPE,
            details=full_details,
        )


class VerificationRejectedException(EdsignException):
    """Raised when no candidate key validates the envelope signature."""

    def __init__(
        self,
        message: str = "Verification failed!",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.VERIFICATION_REJECTED,
            details=details,
        )


__all__ = [
    "ErrorCodes",
    "EdsignError",
    "EdsignException",
    "KeyNotFoundException",
    "KeyFormatException",
    "KeySourceUnavailableException",
    "EncodingException",
    "MalformedEnvelopeException",
    "VerificationRejectedException",
]
