"""
Shared dispatch of Authlete API calls.

Every operation is described by an entry of an endpoint table. ``call``
serializes the request DTO, sends it with ``httpx`` and converts the body of
a successful response with the endpoint's response DTO type. Failures are
reported as AuthleteApiException.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from .. import __version__
from ..conf.configuration import AuthleteConfiguration
from ..dto import (
    ApiResponse, AuthorizationFailRequest, AuthorizationFailResponse,
    AuthorizationIssueRequest, AuthorizationIssueResponse, AuthorizationRequest,
    AuthorizationResponse, AuthorizedClientListResponse,
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest, BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest, BackchannelAuthenticationIssueResponse,
    BackchannelAuthenticationRequest, BackchannelAuthenticationResponse, Client,
    ClientAuthorizationDeleteRequest, ClientAuthorizationGetListRequest,
    ClientAuthorizationUpdateRequest, ClientListResponse,
    ClientSecretUpdateRequest, ClientSecretUpdateResponse,
    DeviceAuthorizationRequest, DeviceAuthorizationResponse,
    DeviceCompleteRequest, DeviceCompleteResponse, DeviceVerificationRequest,
    DeviceVerificationResponse, Dto, GrantedScopesDeleteRequest,
    GrantedScopesGetRequest, GrantedScopesGetResponse, IntrospectionRequest,
    IntrospectionResponse, PushedAuthReqRequest, PushedAuthReqResponse,
    RevocationRequest, RevocationResponse, Service, ServiceListResponse,
    StandardIntrospectionRequest, StandardIntrospectionResponse,
    TokenCreateRequest, TokenCreateResponse, TokenFailRequest,
    TokenFailResponse, TokenIssueRequest, TokenIssueResponse, TokenRequest,
    TokenResponse, TokenUpdateRequest, TokenUpdateResponse,
    UserInfoIssueRequest, UserInfoIssueResponse, UserInfoRequest,
    UserInfoResponse
)
from ..util.encoding import extract_result_message
from ..util.language import or_empty, to_query_value
from ..util.validation import (
    ensure_boolean, ensure_integer, ensure_not_negative, ensure_not_null,
    ensure_null_or_string, ensure_string, ensure_string_or_integer
)
from ..web.headers import HttpHeaders
from .endpoints import Endpoint
from .exception import AuthleteApiException
from .settings import Settings

logger = logging.getLogger(__name__)

USER_AGENT = f"authlete-python/{__version__}"
CONTENT_TYPE = "application/json;charset=UTF-8"

QueryParams = Optional[Mapping[str, Any]]


def build_query(params: QueryParams) -> List[Tuple[str, str]]:
    """
    Query parameters in wire form. Entries with an empty name are dropped,
    ``None`` becomes an empty value and booleans become ``true``/``false``.
    """
    if not params:
        return []
    return [(str(key), to_query_value(value))
            for key, value in params.items()
            if key is not None and str(key) != '']


def ensure_range(start: int, end: int) -> None:
    ensure_integer('start', start)
    ensure_not_negative('start', start)
    ensure_integer('end', end)
    ensure_not_negative('end', end)


class AuthleteApiBase(ABC):
    """
    Common part of the Authlete API clients.

    Subclasses provide the endpoint table, the ``Authorization`` header and
    any path parameter shared by every call.
    """

    endpoints: Dict[str, Endpoint] = {}

    def __init__(self, configuration: AuthleteConfiguration,
                 settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.configuration = configuration
        self.base_url = configuration.require_base_url()
        self.settings = settings or Settings()
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def _authorization_header(self, endpoint: Endpoint) -> str:
        """Value of the ``Authorization`` header for ``endpoint``."""

    def _common_path_params(self) -> Dict[str, Any]:
        return {}

    # -- HTTP plumbing ---------------------------------------------------

    def _timeout(self) -> httpx.Timeout:
        connect = self.settings.connection_timeout or None
        return httpx.Timeout(None, connect=connect)

    def _http_client(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(
                    transport=self._transport,
                    proxy=self.settings.proxy_url(),
                    timeout=self._timeout(),
                    headers={'User-Agent': USER_AGENT},
                )
            return self._client

    def close(self) -> None:
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def call(self, name: str, request: Optional[Dto] = None,
             query: QueryParams = None, **path_params) -> Any:
        """
        Call the operation ``name`` of the endpoint table.

        Returns the response DTO, or the raw body when the endpoint has no
        response type.
        """
        endpoint = self.endpoints.get(name)
        if endpoint is None:
            raise ValueError(f"Unknown Authlete API operation: {name}")

        path = endpoint.format_path(**self._common_path_params(), **path_params)
        body = None if request is None else request.to_json()
        text = self._send(endpoint, path, query, body)

        if endpoint.response_type is None:
            return text
        return endpoint.response_type.from_json(text)

    def _send(self, endpoint: Endpoint, path: str, query: QueryParams,
              body: Optional[str]) -> str:
        headers = {
            'Authorization': self._authorization_header(endpoint),
            'Content-Type': CONTENT_TYPE,
            'Accept': 'application/json',
        }

        self.logger.debug(f"{endpoint.method.value} {path}")

        try:
            response = self._http_client().request(
                endpoint.method.value,
                self.base_url + path,
                params=build_query(query),
                content=None if body is None else body.encode('utf-8'),
                headers=headers,
                timeout=self._timeout(),
            )
        except httpx.HTTPError as e:
            self.logger.warning(f"Failed to call the Authlete API: path={path}, error={e}")
            raise AuthleteApiException(
                f"Failed to call the Authlete API: path={path}, error={e}", cause=e)

        status_code = response.status_code
        self.logger.debug(f"{endpoint.method.value} {path} -> {status_code}")

        if 200 <= status_code < 300:
            return response.text

        result_message = or_empty(extract_result_message(response.text))
        self.logger.warning(
            f"Unexpected response: path={path}, statusCode={status_code}, "
            f"resultMessage={result_message}")
        raise AuthleteApiException(
            f"Unexpected response: path={path}, statusCode={status_code}, "
            f"resultMessage={result_message}",
            status_code,
            HttpHeaders(response.headers),
            response.text)

    # -- Authorization endpoint -------------------------------------------

    def authorization(self, request: AuthorizationRequest) -> AuthorizationResponse:
        return self.call('authorization', request)

    def authorization_fail(self, request: AuthorizationFailRequest) -> AuthorizationFailResponse:
        return self.call('authorization_fail', request)

    def authorization_issue(self, request: AuthorizationIssueRequest) -> AuthorizationIssueResponse:
        return self.call('authorization_issue', request)

    def push_authorization_request(self, request: PushedAuthReqRequest) -> PushedAuthReqResponse:
        return self.call('push_authorization_request', request)

    # -- Token endpoint -----------------------------------------------------

    def token(self, request: TokenRequest) -> TokenResponse:
        return self.call('token', request)

    def token_create(self, request: TokenCreateRequest) -> TokenCreateResponse:
        return self.call('token_create', request)

    def token_delete(self, token: str) -> None:
        ensure_string('token', token)
        self.call('token_delete', token=token)

    def token_fail(self, request: TokenFailRequest) -> TokenFailResponse:
        return self.call('token_fail', request)

    def token_issue(self, request: TokenIssueRequest) -> TokenIssueResponse:
        return self.call('token_issue', request)

    def token_update(self, request: TokenUpdateRequest) -> TokenUpdateResponse:
        return self.call('token_update', request)

    # -- Revocation, userinfo and introspection ------------------------------

    def revocation(self, request: RevocationRequest) -> RevocationResponse:
        return self.call('revocation', request)

    def user_info(self, request: UserInfoRequest) -> UserInfoResponse:
        return self.call('user_info', request)

    def user_info_issue(self, request: UserInfoIssueRequest) -> UserInfoIssueResponse:
        return self.call('user_info_issue', request)

    def introspection(self, request: IntrospectionRequest) -> IntrospectionResponse:
        return self.call('introspection', request)

    def standard_introspection(
            self, request: StandardIntrospectionRequest) -> StandardIntrospectionResponse:
        return self.call('standard_introspection', request)

    # -- Services -------------------------------------------------------------

    def create_service(self, service: Service) -> Service:
        return self.call('create_service', service)

    def get_service_list(self, start: int = 0, end: int = 5) -> ServiceListResponse:
        """Services in the range ``[start, end)``."""
        ensure_range(start, end)
        return self.call('get_service_list', query={'start': start, 'end': end})

    def get_service_jwks(self, pretty: bool = False,
                         include_private_keys: bool = False) -> str:
        """The JWK Set of the service, as JSON text."""
        ensure_boolean('pretty', pretty)
        ensure_boolean('include_private_keys', include_private_keys)
        return self.call('get_service_jwks', query={
            'pretty': pretty,
            'includePrivateKeys': include_private_keys,
        })

    def get_service_configuration(self, pretty: bool = True) -> str:
        """The OpenID Provider metadata of the service, as JSON text."""
        ensure_boolean('pretty', pretty)
        return self.call('get_service_configuration', query={'pretty': pretty})

    # -- Clients --------------------------------------------------------------

    def create_client(self, client: Client) -> Client:
        return self.call('create_client', client)

    def delete_client(self, client_id: Union[int, str]) -> None:
        ensure_string_or_integer('client_id', client_id)
        self.call('delete_client', client_id=client_id)

    def get_client(self, client_id: Union[int, str]) -> Client:
        ensure_string_or_integer('client_id', client_id)
        return self.call('get_client', client_id=client_id)

    def get_client_list(self, developer: Optional[str] = None,
                        start: int = 0, end: int = 5) -> ClientListResponse:
        """
        Clients in the range ``[start, end)``, optionally limited to those of
        ``developer``. ``total_count`` of the result is the number of all
        matching clients.
        """
        ensure_null_or_string('developer', developer)
        ensure_range(start, end)
        return self.call('get_client_list', query={
            'developer': developer,
            'start': start,
            'end': end,
        })

    def update_client(self, client: Client) -> Client:
        ensure_not_null('client.client_id', client.client_id)
        return self.call('update_client', client, client_id=client.client_id)

    def refresh_client_secret(self, client_id: Union[int, str]) -> ClientSecretUpdateResponse:
        ensure_string_or_integer('client_id', client_id)
        return self.call('refresh_client_secret', client_id=client_id)

    def update_client_secret(self, client_id: Union[int, str],
                             client_secret: str) -> ClientSecretUpdateResponse:
        ensure_string_or_integer('client_id', client_id)
        ensure_string('client_secret', client_secret)
        request = ClientSecretUpdateRequest(client_secret=client_secret)
        return self.call('update_client_secret', request, client_id=client_id)

    def get_granted_scopes(self, client_id: Union[int, str],
                           subject: str) -> GrantedScopesGetResponse:
        ensure_string_or_integer('client_id', client_id)
        ensure_string('subject', subject)
        request = GrantedScopesGetRequest(subject=subject)
        return self.call('get_granted_scopes', request, client_id=client_id)

    def delete_granted_scopes(self, client_id: Union[int, str], subject: str) -> ApiResponse:
        ensure_string_or_integer('client_id', client_id)
        ensure_string('subject', subject)
        request = GrantedScopesDeleteRequest(subject=subject)
        return self.call('delete_granted_scopes', request, client_id=client_id)

    def delete_client_authorization(self, client_id: Union[int, str],
                                    subject: str) -> ApiResponse:
        ensure_string_or_integer('client_id', client_id)
        ensure_string('subject', subject)
        request = ClientAuthorizationDeleteRequest(subject=subject)
        return self.call('delete_client_authorization', request, client_id=client_id)

    def get_client_authorization_list(
            self, request: ClientAuthorizationGetListRequest) -> AuthorizedClientListResponse:
        return self.call('get_client_authorization_list', request)

    def update_client_authorization(
            self, client_id: Union[int, str],
            request: ClientAuthorizationUpdateRequest) -> ApiResponse:
        ensure_string_or_integer('client_id', client_id)
        return self.call('update_client_authorization', request, client_id=client_id)

    # -- Backchannel authentication (CIBA) --------------------------------------

    def backchannel_authentication(
            self, request: BackchannelAuthenticationRequest) -> BackchannelAuthenticationResponse:
        return self.call('backchannel_authentication', request)

    def backchannel_authentication_issue(
            self, request: BackchannelAuthenticationIssueRequest
    ) -> BackchannelAuthenticationIssueResponse:
        return self.call('backchannel_authentication_issue', request)

    def backchannel_authentication_fail(
            self, request: BackchannelAuthenticationFailRequest
    ) -> BackchannelAuthenticationFailResponse:
        return self.call('backchannel_authentication_fail', request)

    def backchannel_authentication_complete(
            self, request: BackchannelAuthenticationCompleteRequest
    ) -> BackchannelAuthenticationCompleteResponse:
        return self.call('backchannel_authentication_complete', request)

    # -- Device flow ----------------------------------------------------------

    def device_authorization(self, request: DeviceAuthorizationRequest) -> DeviceAuthorizationResponse:
        return self.call('device_authorization', request)

    def device_complete(self, request: DeviceCompleteRequest) -> DeviceCompleteResponse:
        return self.call('device_complete', request)

    def device_verification(self, request: DeviceVerificationRequest) -> DeviceVerificationResponse:
        return self.call('device_verification', request)
