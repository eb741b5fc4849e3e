"""
Configuration built programmatically.
"""

from typing import Optional

from ..util.validation import ensure_null_or_string
from .configuration import AuthleteConfiguration


class AuthleteSimpleConfiguration(AuthleteConfiguration):
    """Configuration with chainable setters."""

    def set_base_url(self, base_url: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('base_url', base_url)
        self.base_url = base_url
        return self

    def set_service_owner_api_key(self, api_key: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('api_key', api_key)
        self.service_owner_api_key = api_key
        return self

    def set_service_owner_api_secret(self, api_secret: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('api_secret', api_secret)
        self.service_owner_api_secret = api_secret
        return self

    def set_service_api_key(self, api_key: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('api_key', api_key)
        self.service_api_key = api_key
        return self

    def set_service_api_secret(self, api_secret: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('api_secret', api_secret)
        self.service_api_secret = api_secret
        return self

    def set_service_access_token(self, access_token: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('access_token', access_token)
        self.service_access_token = access_token
        return self

    def set_api_version(self, api_version: Optional[str]) -> "AuthleteSimpleConfiguration":
        ensure_null_or_string('api_version', api_version)
        self.api_version = api_version
        return self
