"""Custom exceptions for UsahaKu Navigator with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    NAVIGATOR_ERROR = "NAVIGATOR_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Auth provider errors
    AUTH_PROVIDER_ERROR = "AUTH_PROVIDER_ERROR"

    # Learning content store errors
    LEARNING_STORE_ERROR = "LEARNING_STORE_ERROR"
    LEARNING_STORE_API_ERROR = "LEARNING_STORE_API_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"


class NavigatorException(Exception):
    """Base exception for navigator errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.NAVIGATOR_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize navigator exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class AuthProviderException(NavigatorException):
    """The session/auth provider could not be reached or answered with a server error."""

    def __init__(
        self,
        message: str = "Auth provider request failed",
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.AUTH_PROVIDER_ERROR,
            status_code=status_code,
            details=details,
        )


class LearningStoreException(NavigatorException):
    """Learning content data-access errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LEARNING_STORE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LearningStoreAPIException(LearningStoreException):
    """Supabase data API request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.LEARNING_STORE_API_ERROR,
            status_code=status_code,
            details=details,
        )


class ConfigurationException(NavigatorException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
