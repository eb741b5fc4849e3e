"""
Client of the legacy (version 2) Authlete API.
"""

from typing import Optional

import httpx

from ..conf.configuration import AuthleteConfiguration
from ..dto import Service
from ..util.validation import ensure_not_null, ensure_string_or_integer
from ..web.credentials import BasicCredentials
from .base import AuthleteApiBase
from .endpoints import ENDPOINTS, Endpoint
from .settings import Settings


class AuthleteApi(AuthleteApiBase):
    """
    Authlete API client authenticating with Basic credentials.

    Service management calls use the service owner API key and secret;
    all other calls use the service API key and secret.
    """

    endpoints = ENDPOINTS

    def __init__(self, configuration: AuthleteConfiguration,
                 settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        super().__init__(configuration, settings, transport)
        self.service_owner_credentials = BasicCredentials(
            configuration.service_owner_api_key,
            configuration.service_owner_api_secret)
        self.service_credentials = BasicCredentials(
            configuration.service_api_key,
            configuration.service_api_secret)

    def _authorization_header(self, endpoint: Endpoint) -> str:
        if endpoint.service_owner:
            return self.service_owner_credentials.header_value()
        return self.service_credentials.header_value()

    def get_service(self, api_key) -> Service:
        ensure_string_or_integer('api_key', api_key)
        return self.call('get_service', api_key=api_key)

    def delete_service(self, api_key) -> None:
        ensure_string_or_integer('api_key', api_key)
        self.call('delete_service', api_key=api_key)

    def update_service(self, service: Service) -> Service:
        ensure_not_null('service.api_key', service.api_key)
        return self.call('update_service', service, api_key=service.api_key)
