# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package conf provides the configuration of the connection to Authlete.

Sources:
- Environment variables (AUTHLETE_BASE_URL, AUTHLETE_SERVICE_APIKEY, ...)
- INI files (authlete.ini)
- YAML or JSON files
- Programmatic construction with chainable setters
"""

from .configuration import AuthleteConfiguration, DEFAULT_BASE_URL
from .env import AuthleteEnvConfiguration
from .ini import AuthleteIniConfiguration
from .file import AuthleteFileConfiguration
from .simple import AuthleteSimpleConfiguration

__all__ = [
    'AuthleteConfiguration', 'DEFAULT_BASE_URL', 'AuthleteEnvConfiguration',
    'AuthleteIniConfiguration', 'AuthleteFileConfiguration',
    'AuthleteSimpleConfiguration',
]
