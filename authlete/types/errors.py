"""
Error types and error codes for the Authlete SDK.
Every error raised by the SDK derives from AuthleteError.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes used across the SDK."""
    VALIDATION_FAILED = "validation_failed"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_JSON = "invalid_json"
    CONFIGURATION_ERROR = "configuration_error"
    API_ERROR = "api_error"
    TRANSPORT_ERROR = "transport_error"

    def __str__(self) -> str:
        return self.value


VALIDATION_FAILED = ErrorCode.VALIDATION_FAILED
TYPE_MISMATCH = ErrorCode.TYPE_MISMATCH
INVALID_JSON = ErrorCode.INVALID_JSON
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
API_ERROR = ErrorCode.API_ERROR
TRANSPORT_ERROR = ErrorCode.TRANSPORT_ERROR


class AuthleteError(Exception):
    """Base exception for all Authlete SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = API_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ValidationError(AuthleteError, ValueError):
    """Raised when a value is rejected by a setter or a coercion rule."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, VALIDATION_FAILED, details)
        self.field = field
        self.value = value

        if field:
            self.details['field'] = field
        if value is not None:
            self.details['value'] = repr(value)


class EnumValueError(ValidationError):
    """Raised when a string does not name any member of a closed enum."""

    def __init__(self, enum_type: type, value: str, field: Optional[str] = None):
        message = f"'{value}' is not a valid {enum_type.__name__} value."
        super().__init__(message, field, value, {'enum': enum_type.__name__})
        self.enum_type = enum_type


class TypeMismatchError(AuthleteError, TypeError):
    """Raised when a value has a structurally incompatible type."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None
    ):
        super().__init__(message, TYPE_MISMATCH)
        self.field = field
        self.expected = expected
        self.actual = actual

        if field:
            self.details['field'] = field
        if expected:
            self.details['expected'] = expected
        if actual is not None:
            self.details['actual'] = type(actual).__name__


class JsonParseError(AuthleteError, ValueError):
    """Raised when a JSON document cannot be decoded into a DTO."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, INVALID_JSON, cause=cause)


class ConfigurationError(AuthleteError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details, cause)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
