"""
Configuration read from an INI file.
"""

import configparser
import os
from typing import Dict, Optional

from ..types.errors import ConfigurationError
from .configuration import AuthleteConfiguration, logger

DEFAULT_FILE = "authlete.ini"
ENV_CONFIG_FILE = "AUTHLETE_CONFIGURATION_FILE"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


def _read_ini(path: str) -> Dict[str, str]:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    parser = _new_parser()
    try:
        parser.read_string(text, source=path)
    except configparser.MissingSectionHeaderError:
        # Plain "key = value" lines without any section.
        parser = _new_parser()
        parser.read_string("[DEFAULT]\n" + text, source=path)

    values = {key: _unquote(value) for key, value in parser.defaults().items()}
    for section in parser.sections():
        for key, value in parser.items(section, raw=True):
            if key not in parser.defaults():
                values[f"{section}.{key}"] = _unquote(value)

    return values


class AuthleteIniConfiguration(AuthleteConfiguration):
    """
    Reads the configuration from an INI file such as::

        base_url                 = https://api.authlete.com
        service_owner.api_key    = ...
        service_owner.api_secret = ...
        service.api_key          = ...
        service.api_secret       = ...

    ``[service]``/``[service_owner]`` sections may be used instead of the
    dotted prefixes. The file defaults to ``authlete.ini`` unless
    ``AUTHLETE_CONFIGURATION_FILE`` names another one.
    """

    @classmethod
    def load(cls, file: Optional[str] = None) -> "AuthleteIniConfiguration":
        if file is None:
            file = os.environ.get(ENV_CONFIG_FILE) or DEFAULT_FILE

        if not os.path.exists(file):
            raise ConfigurationError(
                f"Configuration file not found: {file}", config_key='file',
                config_value=file)

        try:
            values = _read_ini(file)
        except configparser.Error as e:
            raise ConfigurationError(
                f"Failed to parse '{file}'.", config_key='file',
                config_value=file, cause=e)

        config = cls.from_mapping(values)
        logger.debug(f"Loaded configuration from {file}: {config.to_dict()}")
        return config
