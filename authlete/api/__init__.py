# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package api provides the HTTP clients of the Authlete API.

- AuthleteApi: legacy API with Basic credentials
- AuthleteApiV3: version 3 API with a service access token
- create_api: pick the client matching a configuration
"""

from typing import Optional

import httpx

from ..conf.configuration import AuthleteConfiguration
from .base import AuthleteApiBase, USER_AGENT, build_query
from .endpoints import Endpoint, ENDPOINTS, ENDPOINTS_V3
from .exception import AuthleteApiException
from .legacy import AuthleteApi
from .settings import Settings
from .v3 import AuthleteApiV3


def create_api(configuration: AuthleteConfiguration,
               settings: Optional[Settings] = None,
               transport: Optional[httpx.BaseTransport] = None) -> AuthleteApiBase:
    """Create the API client matching the API version of ``configuration``."""
    if configuration.is_v3():
        return AuthleteApiV3(configuration, settings, transport)
    return AuthleteApi(configuration, settings, transport)


__all__ = [
    # Clients
    'AuthleteApiBase',
    'AuthleteApi',
    'AuthleteApiV3',
    'create_api',

    # Transport
    'Settings',
    'Endpoint',
    'ENDPOINTS',
    'ENDPOINTS_V3',
    'USER_AGENT',
    'build_query',

    # Errors
    'AuthleteApiException',
]
