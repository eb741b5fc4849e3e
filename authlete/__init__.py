"""
Authlete Python Package

Client library of the Authlete OAuth 2.0 / OpenID Connect API
"""

__version__ = "1.5.0"
__author__ = "Authlete, Inc."

from .types.errors import (
    AuthleteError,
    ValidationError,
    EnumValueError,
    TypeMismatchError,
    JsonParseError,
    ConfigurationError,
)
from .conf import (
    AuthleteConfiguration,
    AuthleteEnvConfiguration,
    AuthleteFileConfiguration,
    AuthleteIniConfiguration,
    AuthleteSimpleConfiguration,
)
from .api import (
    AuthleteApi,
    AuthleteApiV3,
    AuthleteApiException,
    Settings,
    create_api,
)

__all__ = [
    "AuthleteError",
    "ValidationError",
    "EnumValueError",
    "TypeMismatchError",
    "JsonParseError",
    "ConfigurationError",
    "AuthleteConfiguration",
    "AuthleteEnvConfiguration",
    "AuthleteFileConfiguration",
    "AuthleteIniConfiguration",
    "AuthleteSimpleConfiguration",
    "AuthleteApi",
    "AuthleteApiV3",
    "AuthleteApiException",
    "Settings",
    "create_api",
]
