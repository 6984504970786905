"""
Exception hierarchy for web3-url.

All errors inherit from Web3UrlError, which carries a machine-readable
code and a details dictionary alongside the human-readable message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "Web3UrlError",
    "ValidationError",
    "AddressError",
    "InvalidAmountError",
    "DecodeError",
    "AccessError",
    "MissingAbiError",
]


class Web3UrlError(Exception):
    """
    Base exception for all URI construction errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g., "INVALID_ADDRESS").
        details: Optional dictionary with additional error context.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "WEB3_URL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(Web3UrlError):
    """Raised when transaction input fails validation."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class AddressError(ValidationError):
    """Raised when the "to" target is missing, empty or not a valid address / ENS name."""

    def __init__(self, to: Any) -> None:
        super().__init__(
            f'Expected valid "to" address, encountered "{to}".',
            code="INVALID_ADDRESS",
            details={"to": None if to is None else str(to)},
        )
        self.to = to


class InvalidAmountError(ValidationError):
    """Raised when a wei-denominated field is negative or not an integer."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid {field}: {reason}",
            code="INVALID_AMOUNT",
            details={"field": field, "value": str(value)},
        )
        self.field = field
        self.value = value


class DecodeError(Web3UrlError):
    """
    Raised when a call-data payload is well-formed but matches no function
    of the supplied contract, or its arguments do not decode.
    """

    def __init__(self, message: str, *, selector: Optional[str] = None) -> None:
        super().__init__(
            message,
            code="DECODE_ERROR",
            details={"selector": selector} if selector else None,
        )
        self.selector = selector


class AccessError(Web3UrlError):
    """Raised when a wrapped contract is accessed through an unsupported key."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "ACCESS_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class MissingAbiError(AccessError):
    """Raised in strict mode when a callable member has no matching ABI function."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'Unable to find an ABI entry for "{name}".',
            code="MISSING_ABI",
            details={"name": name},
        )
        self.name = name
