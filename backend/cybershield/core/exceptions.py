"""
Custom exception hierarchy for structured error handling.

WHY: Custom exceptions provide:
1. Consistent JSON error bodies across the API
2. HTTP status code mapping for FastAPI
3. Internal detail kept apart from the client-facing message
4. Easier debugging with contextual data

Every error body carries the human-readable text under "error" because the
frontend reads that key to show form feedback.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    WHY: Centralizing exception handling in a base class ensures consistent
    error responses and HTTP status code mapping.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message shown to clients
            status_code: HTTP status code (overrides class default)
            detail: Internal reason, only echoed to clients in development
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.detail = detail
        self.context = context
        super().__init__(self.message)

    def to_dict(self, include_detail: bool = False) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Args:
            include_detail: Add the internal detail under "message"

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        # WHY: Filter out sensitive fields to prevent data leaks
        sensitive_fields = {"ip", "user_agent", "password", "token", "secret", "key"}
        filtered_context = {
            k: v for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        body: Dict[str, Any] = {
            "error": self.message,
            "code": self.__class__.__name__,
            "status_code": self.status_code,
            "details": filtered_context if filtered_context else None,
        }
        if include_detail and self.detail:
            body["message"] = self.detail
        return body


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when input validation fails.

    WHY: Validation errors return 400 Bad Request with a message naming
    what was wrong, so the contact form can show it to the visitor.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"


class MissingFieldsError(ValidationError):
    """Raised when one or more required fields are missing or empty."""

    default_message = "Missing required fields: name, email, and message are required"


class InvalidEmailError(ValidationError):
    """Raised when the email address does not have a local@domain.tld shape."""

    default_message = "Invalid email address"


# ============================================================================
# Resource Exceptions
# ============================================================================


class NotFoundError(AppException):
    """
    Raised when a requested resource or route doesn't exist.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Resource not found"


class ApiEndpointNotFoundError(NotFoundError):
    """Raised for paths under the API prefix that match no route."""

    default_message = "API endpoint not found"


# ============================================================================
# Storage Exceptions
# ============================================================================


class StorageError(AppException):
    """
    Raised when the contact store cannot be read, parsed, or written.

    WHY: Filesystem and JSON errors are wrapped so handlers can answer 500
    without leaking paths or parser output. The original error text is kept
    in `detail` and only shown in development mode.

    HTTP Status: 500 Internal Server Error
    """

    status_code = 500
    default_message = "Internal server error. Please try again later."
