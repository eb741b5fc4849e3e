"""
Configuration of the connection to the Authlete API.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..types.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.authlete.com"

# Keys used by INI, YAML and JSON configuration files.
FILE_KEYS = {
    'base_url': 'base_url',
    'service_owner.api_key': 'service_owner_api_key',
    'service_owner.api_secret': 'service_owner_api_secret',
    'service.api_key': 'service_api_key',
    'service.api_secret': 'service_api_secret',
    'service.access_token': 'service_access_token',
    'api_version': 'api_version',
}


@dataclass
class AuthleteConfiguration:
    """
    Credentials and location of the Authlete API.

    The legacy API authenticates with two Basic credential pairs: the
    service owner pair for ``/api/service/*`` and the service pair for
    everything else. Version 3 uses ``service_access_token`` as a Bearer
    token together with the numeric service ID held in ``service_api_key``.
    """
    base_url: Optional[str] = None
    service_owner_api_key: Optional[str] = None
    service_owner_api_secret: Optional[str] = None
    service_api_key: Optional[str] = None
    service_api_secret: Optional[str] = None
    service_access_token: Optional[str] = None
    api_version: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any],
                     default_base_url: Optional[str] = DEFAULT_BASE_URL):
        """Create a configuration from file-style keys (``service.api_key``)."""
        kwargs: Dict[str, Optional[str]] = {}
        for key, attribute in FILE_KEYS.items():
            value = values.get(key)
            kwargs[attribute] = None if value is None else str(value)

        if kwargs['base_url'] is None:
            kwargs['base_url'] = default_base_url

        return cls(**kwargs)

    def is_v3(self) -> bool:
        """Whether the configuration targets version 3 of the API."""
        if not self.api_version:
            return False
        return self.api_version.strip().upper().lstrip('V').startswith('3')

    def require_base_url(self) -> str:
        if not self.base_url:
            raise ConfigurationError(
                "The configuration does not have information about the base URL.",
                config_key='base_url')
        return self.base_url.rstrip('/')

    def validate(self) -> bool:
        """Validate the configuration"""
        self.require_base_url()

        if self.is_v3():
            if not self.service_access_token:
                raise ConfigurationError(
                    "service_access_token is required for API version 3",
                    config_key='service_access_token')
            if not self.service_api_key:
                raise ConfigurationError(
                    "service_api_key is required for API version 3",
                    config_key='service_api_key')
        elif not (self.service_api_key or self.service_owner_api_key):
            raise ConfigurationError(
                "Either service or service owner credentials are required",
                config_key='service_api_key')

        return True

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Configuration values with secrets masked, for logging."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and ('secret' in f.name or 'token' in f.name):
                value = '****'
            result[f.name] = value
        return result
