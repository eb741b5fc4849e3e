"""
Client of version 3 of the Authlete API.
"""

from typing import Any, Dict, Optional

import httpx

from ..conf.configuration import AuthleteConfiguration
from ..dto import IDTokenReissueRequest, IDTokenReissueResponse, Service
from ..types.errors import ConfigurationError
from .base import AuthleteApiBase
from .endpoints import ENDPOINTS_V3, Endpoint
from .settings import Settings


class AuthleteApiV3(AuthleteApiBase):
    """
    Authlete API client authenticating with a service access token.

    Every service scoped path carries the numeric service ID, taken from
    ``service_api_key`` of the configuration.
    """

    endpoints = ENDPOINTS_V3

    def __init__(self, configuration: AuthleteConfiguration,
                 settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        super().__init__(configuration, settings, transport)

        if not configuration.service_access_token:
            raise ConfigurationError(
                "The configuration does not have a service access token.",
                config_key='service_access_token')

        self.access_token = configuration.service_access_token
        self.service_id = self._parse_service_id(configuration.service_api_key)

    @staticmethod
    def _parse_service_id(api_key: Optional[str]) -> int:
        try:
            return int(str(api_key))
        except ValueError as e:
            raise ConfigurationError(
                "The service API key must be the numeric service ID for API version 3.",
                config_key='service_api_key', config_value=api_key, cause=e)

    def _authorization_header(self, endpoint: Endpoint) -> str:
        return f"Bearer {self.access_token}"

    def _common_path_params(self) -> Dict[str, Any]:
        return {'service_id': self.service_id}

    def get_service(self) -> Service:
        return self.call('get_service')

    def delete_service(self) -> None:
        self.call('delete_service')

    def update_service(self, service: Service) -> Service:
        return self.call('update_service', service)

    def id_token_reissue(self, request: IDTokenReissueRequest) -> IDTokenReissueResponse:
        return self.call('id_token_reissue', request)
