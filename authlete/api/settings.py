"""
Transport settings of an Authlete API client.
"""

from typing import Optional

from ..types.errors import ValidationError
from ..util.config import get_bool_config, get_config_value, get_int_config
from ..util.validation import (
    ensure_boolean, ensure_integer, ensure_null_or_string
)


class Settings:
    """
    Connection settings applied by the HTTP layer.

    ``connection_timeout`` is in seconds; ``0`` means no timeout. Proxy
    settings are read when the underlying HTTP client is created, i.e. on
    the first API call.
    """

    def __init__(self, connection_timeout: int = 0,
                 proxy_host: Optional[str] = None,
                 proxy_port: int = 0,
                 http_proxy_tunnel_used: bool = False):
        self.connection_timeout = connection_timeout
        self.proxy_host = proxy_host
        self.proxy_port = proxy_port
        self.http_proxy_tunnel_used = http_proxy_tunnel_used

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Settings from AUTHLETE_CONNECTION_TIMEOUT, AUTHLETE_PROXY_HOST,
        AUTHLETE_PROXY_PORT and AUTHLETE_HTTP_PROXY_TUNNEL_USED.
        """
        return cls(
            connection_timeout=get_int_config('connection_timeout', 0),
            proxy_host=get_config_value('proxy_host') or None,
            proxy_port=get_int_config('proxy_port', 0),
            http_proxy_tunnel_used=get_bool_config('http_proxy_tunnel_used', False),
        )

    @property
    def connection_timeout(self) -> int:
        return self._connection_timeout

    @connection_timeout.setter
    def connection_timeout(self, timeout: int) -> None:
        ensure_integer('timeout', timeout)
        if timeout < 0:
            raise ValidationError("The given timeout value is negative.", 'timeout', timeout)
        self._connection_timeout = timeout

    @property
    def proxy_host(self) -> Optional[str]:
        return self._proxy_host

    @proxy_host.setter
    def proxy_host(self, host: Optional[str]) -> None:
        ensure_null_or_string('host', host)
        self._proxy_host = host

    @property
    def proxy_port(self) -> int:
        return self._proxy_port

    @proxy_port.setter
    def proxy_port(self, port: int) -> None:
        ensure_integer('port', port)
        self._proxy_port = port

    @property
    def http_proxy_tunnel_used(self) -> bool:
        return self._http_proxy_tunnel_used

    @http_proxy_tunnel_used.setter
    def http_proxy_tunnel_used(self, used: bool) -> None:
        ensure_boolean('used', used)
        self._http_proxy_tunnel_used = used

    def proxy_url(self) -> Optional[str]:
        """Proxy URL for the HTTP client, ``None`` when no proxy is set."""
        if not self.proxy_host:
            return None

        url = self.proxy_host
        if '://' not in url:
            url = f"http://{url}"
        if self.proxy_port:
            url = f"{url}:{self.proxy_port}"
        return url

    def __repr__(self) -> str:
        return (f"Settings(connection_timeout={self.connection_timeout}, "
                f"proxy_host={self.proxy_host!r}, proxy_port={self.proxy_port}, "
                f"http_proxy_tunnel_used={self.http_proxy_tunnel_used})")
