"""Library exception hierarchy.

All custom exceptions inherit from RetrievalModelError.
Each exception has an error code for structured error handling.

The core retrieval helpers are total and never raise; these exceptions
cover configuration and wire payload failures around them.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "RTM-1000"
    CONFIGURATION_ERROR = "RTM-1001"
    VALIDATION_ERROR = "RTM-1002"

    # Wire payload errors (2xxx)
    UNKNOWN_STATE = "RTM-2000"
    PAYLOAD_MISMATCH = "RTM-2001"


class RetrievalModelError(Exception):
    """Base exception for all retrieval model errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(RetrievalModelError):
    """Configuration or environment error."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class RetrievalValidationError(RetrievalModelError):
    """A serialized retrieval could not be validated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
