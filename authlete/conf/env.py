"""
Configuration read from environment variables.
"""

from ..util.language import get_from_env
from .configuration import AuthleteConfiguration, logger

ENV_BASE_URL = "AUTHLETE_BASE_URL"
ENV_SERVICE_OWNER_API_KEY = "AUTHLETE_SERVICEOWNER_APIKEY"
ENV_SERVICE_OWNER_API_SECRET = "AUTHLETE_SERVICEOWNER_APISECRET"
ENV_SERVICE_API_KEY = "AUTHLETE_SERVICE_APIKEY"
ENV_SERVICE_API_SECRET = "AUTHLETE_SERVICE_APISECRET"
ENV_SERVICE_ACCESS_TOKEN = "AUTHLETE_SERVICE_ACCESS_TOKEN"
ENV_API_VERSION = "AUTHLETE_API_VERSION"


class AuthleteEnvConfiguration(AuthleteConfiguration):
    """
    Reads the configuration from these environment variables:

    ================================  ==========================
    AUTHLETE_BASE_URL                 base_url
    AUTHLETE_SERVICEOWNER_APIKEY      service_owner_api_key
    AUTHLETE_SERVICEOWNER_APISECRET   service_owner_api_secret
    AUTHLETE_SERVICE_APIKEY           service_api_key
    AUTHLETE_SERVICE_APISECRET        service_api_secret
    AUTHLETE_SERVICE_ACCESS_TOKEN     service_access_token
    AUTHLETE_API_VERSION              api_version
    ================================  ==========================
    """

    @classmethod
    def load(cls) -> "AuthleteEnvConfiguration":
        config = cls(
            base_url=get_from_env(ENV_BASE_URL),
            service_owner_api_key=get_from_env(ENV_SERVICE_OWNER_API_KEY),
            service_owner_api_secret=get_from_env(ENV_SERVICE_OWNER_API_SECRET),
            service_api_key=get_from_env(ENV_SERVICE_API_KEY),
            service_api_secret=get_from_env(ENV_SERVICE_API_SECRET),
            service_access_token=get_from_env(ENV_SERVICE_ACCESS_TOKEN),
            api_version=get_from_env(ENV_API_VERSION),
        )
        logger.debug(f"Loaded configuration from environment: {config.to_dict()}")
        return config
