"""
Exception hierarchy for idoitclient.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, protocol, retryable transport failures)
- Safe error message formatting (no credential leak into logs)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    PROTOCOL = "protocol"
    RETRYABLE = "retryable"
    FATAL = "fatal"


class IdoitClientError(Exception):
    """Base exception for all idoitclient errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class InvalidArgument(IdoitClientError, ValueError):
    """Misuse detected locally, before anything is sent."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="INVALID_ARGUMENT", category=ErrorCategory.VALIDATION, details=details)


class ProtocolError(IdoitClientError):
    """The service answered, but not with a usable result."""

    def __init__(self, message: str, request: Any = None, error: Any = None):
        details: dict[str, Any] = {}
        if request is not None:
            details["request"] = repr(request)
        if error is not None:
            details["error"] = error
        super().__init__(message, code="PROTOCOL_ERROR", category=ErrorCategory.PROTOCOL, details=details)
        self.request = request
        self.error = error


class TransportError(IdoitClientError):
    """HTTP layer failure talking to the JSON-RPC endpoint."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "TRANSPORT_ERROR",
        status_code: int | None = None,
        retryable: bool = False,
    ):
        category = ErrorCategory.RETRYABLE if retryable else ErrorCategory.FATAL
        super().__init__(
            message,
            code=code,
            category=category,
            details={"status_code": status_code, "retryable": retryable},
        )
        self.status_code = status_code
        self.retryable = retryable


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|session[_-]?id)(['\"]?\s*[=:]\s*)['\"]?([^\s'\",}]+)['\"]?", re.IGNORECASE),
    re.compile(r"(x-rpc-auth-(?:password|session)['\"]?\s*[=:]\s*)['\"]?([^\s'\",}]+)['\"]?", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials and session ids from messages before they are logged or shown."""
    sanitized = _SENSITIVE_PATTERNS[0].sub(lambda m: f"{m.group(1)}{m.group(2)}{replacement}", message)
    sanitized = _SENSITIVE_PATTERNS[1].sub(lambda m: f"{m.group(1)}{replacement}", sanitized)
    return sanitized
