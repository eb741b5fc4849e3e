"""
Configuration read from a YAML or JSON file.
"""

from ..util.config import flatten_config, load_config_file
from .configuration import AuthleteConfiguration, logger


class AuthleteFileConfiguration(AuthleteConfiguration):
    """
    Reads the configuration from a YAML or JSON file. Keys are the same as
    for INI files and may be nested::

        base_url: https://api.authlete.com
        service:
          api_key: "..."
          api_secret: "..."
    """

    @classmethod
    def load(cls, path: str) -> "AuthleteFileConfiguration":
        values = flatten_config(load_config_file(path))
        config = cls.from_mapping(values)
        logger.debug(f"Loaded configuration from {path}: {config.to_dict()}")
        return config
