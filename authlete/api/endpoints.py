"""
Endpoint table of the Authlete API.

Each entry maps an operation name to its HTTP method, path template and
request/response DTO types. Path templates use ``str.format`` placeholders;
``{service_id}`` only appears in the version 3 table.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Type
from urllib.parse import quote

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
    GrantedScopesGetRequest, GrantedScopesGetResponse, IDTokenReissueRequest,
    IDTokenReissueResponse, IntrospectionRequest, IntrospectionResponse,
    PushedAuthReqRequest, PushedAuthReqResponse, RevocationRequest,
    RevocationResponse, Service, ServiceListResponse,
    StandardIntrospectionRequest, StandardIntrospectionResponse,
    TokenCreateRequest, TokenCreateResponse, TokenFailRequest,
    TokenFailResponse, TokenIssueRequest, TokenIssueResponse, TokenRequest,
    TokenResponse, TokenUpdateRequest, TokenUpdateResponse,
    UserInfoIssueRequest, UserInfoIssueResponse, UserInfoRequest,
    UserInfoResponse
)
from ..web.method import HttpMethod

GET = HttpMethod.GET
POST = HttpMethod.POST
DELETE = HttpMethod.DELETE


@dataclass(frozen=True)
class Endpoint:
    """
    One Authlete API operation.

    ``response_type`` is None for operations whose body is returned as
    text (JWK sets, discovery documents) or ignored (deletions).
    ``service_owner`` selects the service owner credentials of the legacy
    API instead of the service credentials.
    """
    name: str
    method: HttpMethod
    path: str
    request_type: Optional[Type[Dto]] = None
    response_type: Optional[Type[Dto]] = None
    service_owner: bool = False

    def format_path(self, **params) -> str:
        quoted = {key: quote(str(value), safe='') for key, value in params.items()}
        try:
            return self.path.format(**quoted)
        except KeyError as e:
            raise ValueError(
                f"Missing path parameter {e} for endpoint '{self.name}'") from e


def _table(*endpoints: Endpoint) -> Dict[str, Endpoint]:
    return {endpoint.name: endpoint for endpoint in endpoints}


ENDPOINTS: Dict[str, Endpoint] = _table(
    # Authorization endpoint
    Endpoint('authorization', POST, '/api/auth/authorization',
             AuthorizationRequest, AuthorizationResponse),
    Endpoint('authorization_fail', POST, '/api/auth/authorization/fail',
             AuthorizationFailRequest, AuthorizationFailResponse),
    Endpoint('authorization_issue', POST, '/api/auth/authorization/issue',
             AuthorizationIssueRequest, AuthorizationIssueResponse),

    # Token endpoint
    Endpoint('token', POST, '/api/auth/token', TokenRequest, TokenResponse),
    Endpoint('token_create', POST, '/api/auth/token/create',
             TokenCreateRequest, TokenCreateResponse),
    Endpoint('token_delete', DELETE, '/api/auth/token/delete/{token}'),
    Endpoint('token_fail', POST, '/api/auth/token/fail',
             TokenFailRequest, TokenFailResponse),
    Endpoint('token_issue', POST, '/api/auth/token/issue',
             TokenIssueRequest, TokenIssueResponse),
    Endpoint('token_update', POST, '/api/auth/token/update',
             TokenUpdateRequest, TokenUpdateResponse),

    # Revocation, userinfo and introspection
    Endpoint('revocation', POST, '/api/auth/revocation',
             RevocationRequest, RevocationResponse),
    Endpoint('user_info', POST, '/api/auth/userinfo',
             UserInfoRequest, UserInfoResponse),
    Endpoint('user_info_issue', POST, '/api/auth/userinfo/issue',
             UserInfoIssueRequest, UserInfoIssueResponse),
    Endpoint('introspection', POST, '/api/auth/introspection',
             IntrospectionRequest, IntrospectionResponse),
    Endpoint('standard_introspection', POST, '/api/auth/introspection/standard',
             StandardIntrospectionRequest, StandardIntrospectionResponse),

    # Services
    Endpoint('get_service_configuration', GET, '/api/service/configuration'),
    Endpoint('create_service', POST, '/api/service/create',
             Service, Service, service_owner=True),
    Endpoint('delete_service', DELETE, '/api/service/delete/{api_key}',
             service_owner=True),
    Endpoint('get_service', GET, '/api/service/get/{api_key}',
             response_type=Service, service_owner=True),
    Endpoint('get_service_list', GET, '/api/service/get/list',
             response_type=ServiceListResponse, service_owner=True),
    Endpoint('get_service_jwks', GET, '/api/service/jwks/get'),
    Endpoint('update_service', POST, '/api/service/update/{api_key}',
             Service, Service, service_owner=True),

    # Clients
    Endpoint('create_client', POST, '/api/client/create', Client, Client),
    Endpoint('delete_client', DELETE, '/api/client/delete/{client_id}'),
    Endpoint('get_client', GET, '/api/client/get/{client_id}',
             response_type=Client),
    Endpoint('get_client_list', GET, '/api/client/get/list',
             response_type=ClientListResponse),
    Endpoint('refresh_client_secret', GET, '/api/client/secret/refresh/{client_id}',
             response_type=ClientSecretUpdateResponse),
    Endpoint('update_client_secret', POST, '/api/client/secret/update/{client_id}',
             ClientSecretUpdateRequest, ClientSecretUpdateResponse),
    Endpoint('update_client', POST, '/api/client/update/{client_id}',
             Client, Client),
    Endpoint('get_granted_scopes', POST, '/api/client/granted_scopes/get/{client_id}',
             GrantedScopesGetRequest, GrantedScopesGetResponse),
    Endpoint('delete_granted_scopes', POST,
             '/api/client/granted_scopes/delete/{client_id}',
             GrantedScopesDeleteRequest, ApiResponse),
    Endpoint('delete_client_authorization', POST,
             '/api/client/authorization/delete/{client_id}',
             ClientAuthorizationDeleteRequest, ApiResponse),
    Endpoint('get_client_authorization_list', POST,
             '/api/client/authorization/get/list',
             ClientAuthorizationGetListRequest, AuthorizedClientListResponse),
    Endpoint('update_client_authorization', POST,
             '/api/client/authorization/update/{client_id}',
             ClientAuthorizationUpdateRequest, ApiResponse),

    # Backchannel authentication (CIBA)
    Endpoint('backchannel_authentication', POST, '/api/backchannel/authentication',
             BackchannelAuthenticationRequest, BackchannelAuthenticationResponse),
    Endpoint('backchannel_authentication_complete', POST,
             '/api/backchannel/authentication/complete',
             BackchannelAuthenticationCompleteRequest,
             BackchannelAuthenticationCompleteResponse),
    Endpoint('backchannel_authentication_fail', POST,
             '/api/backchannel/authentication/fail',
             BackchannelAuthenticationFailRequest,
             BackchannelAuthenticationFailResponse),
    Endpoint('backchannel_authentication_issue', POST,
             '/api/backchannel/authentication/issue',
             BackchannelAuthenticationIssueRequest,
             BackchannelAuthenticationIssueResponse),

    # Device flow
    Endpoint('device_authorization', POST, '/api/device/authorization',
             DeviceAuthorizationRequest, DeviceAuthorizationResponse),
    Endpoint('device_complete', POST, '/api/device/complete',
             DeviceCompleteRequest, DeviceCompleteResponse),
    Endpoint('device_verification', POST, '/api/device/verification',
             DeviceVerificationRequest, DeviceVerificationResponse),

    # Pushed authorization requests
    Endpoint('push_authorization_request', POST, '/api/pushed_auth_req',
             PushedAuthReqRequest, PushedAuthReqResponse),
)


ENDPOINTS_V3: Dict[str, Endpoint] = _table(
    # Authorization endpoint
    Endpoint('authorization', POST, '/api/{service_id}/auth/authorization',
             AuthorizationRequest, AuthorizationResponse),
    Endpoint('authorization_fail', POST, '/api/{service_id}/auth/authorization/fail',
             AuthorizationFailRequest, AuthorizationFailResponse),
    Endpoint('authorization_issue', POST, '/api/{service_id}/auth/authorization/issue',
             AuthorizationIssueRequest, AuthorizationIssueResponse),

    # Token endpoint
    Endpoint('token', POST, '/api/{service_id}/auth/token',
             TokenRequest, TokenResponse),
    Endpoint('token_create', POST, '/api/{service_id}/auth/token/create',
             TokenCreateRequest, TokenCreateResponse),
    Endpoint('token_delete', DELETE, '/api/{service_id}/auth/token/delete/{token}'),
    Endpoint('token_fail', POST, '/api/{service_id}/auth/token/fail',
             TokenFailRequest, TokenFailResponse),
    Endpoint('token_issue', POST, '/api/{service_id}/auth/token/issue',
             TokenIssueRequest, TokenIssueResponse),
    Endpoint('token_update', POST, '/api/{service_id}/auth/token/update',
             TokenUpdateRequest, TokenUpdateResponse),

    # Revocation, userinfo and introspection
    Endpoint('revocation', POST, '/api/{service_id}/auth/revocation',
             RevocationRequest, RevocationResponse),
    Endpoint('user_info', POST, '/api/{service_id}/auth/userinfo',
             UserInfoRequest, UserInfoResponse),
    Endpoint('user_info_issue', POST, '/api/{service_id}/auth/userinfo/issue',
             UserInfoIssueRequest, UserInfoIssueResponse),
    Endpoint('introspection', POST, '/api/{service_id}/auth/introspection',
             IntrospectionRequest, IntrospectionResponse),
    Endpoint('standard_introspection', POST,
             '/api/{service_id}/auth/introspection/standard',
             StandardIntrospectionRequest, StandardIntrospectionResponse),

    # Services
    Endpoint('get_service_configuration', GET, '/api/{service_id}/service/configuration'),
    Endpoint('create_service', POST, '/api/service/create', Service, Service),
    Endpoint('delete_service', DELETE, '/api/{service_id}/service/delete'),
    Endpoint('get_service', GET, '/api/{service_id}/service/get',
             response_type=Service),
    Endpoint('get_service_list', GET, '/api/service/get/list',
             response_type=ServiceListResponse),
    Endpoint('get_service_jwks', GET, '/api/{service_id}/service/jwks/get'),
    Endpoint('update_service', POST, '/api/{service_id}/service/update',
             Service, Service),

    # Clients
    Endpoint('create_client', POST, '/api/{service_id}/client/create', Client, Client),
    Endpoint('delete_client', DELETE, '/api/{service_id}/client/delete/{client_id}'),
    Endpoint('get_client', GET, '/api/{service_id}/client/get/{client_id}',
             response_type=Client),
    Endpoint('get_client_list', GET, '/api/{service_id}/client/get/list',
             response_type=ClientListResponse),
    Endpoint('refresh_client_secret', GET,
             '/api/{service_id}/client/secret/refresh/{client_id}',
             response_type=ClientSecretUpdateResponse),
    Endpoint('update_client_secret', POST,
             '/api/{service_id}/client/secret/update/{client_id}',
             ClientSecretUpdateRequest, ClientSecretUpdateResponse),
    Endpoint('update_client', POST, '/api/{service_id}/client/update/{client_id}',
             Client, Client),
    Endpoint('get_granted_scopes', POST,
             '/api/{service_id}/client/granted_scopes/get/{client_id}',
             GrantedScopesGetRequest, GrantedScopesGetResponse),
    Endpoint('delete_granted_scopes', POST,
             '/api/{service_id}/client/granted_scopes/delete/{client_id}',
             GrantedScopesDeleteRequest, ApiResponse),
    Endpoint('delete_client_authorization', POST,
             '/api/{service_id}/client/authorization/delete/{client_id}',
             ClientAuthorizationDeleteRequest, ApiResponse),
    Endpoint('get_client_authorization_list', POST,
             '/api/{service_id}/client/authorization/get/list',
             ClientAuthorizationGetListRequest, AuthorizedClientListResponse),
    Endpoint('update_client_authorization', POST,
             '/api/{service_id}/client/authorization/update/{client_id}',
             ClientAuthorizationUpdateRequest, ApiResponse),

    # Backchannel authentication (CIBA)
    Endpoint('backchannel_authentication', POST,
             '/api/{service_id}/backchannel/authentication',
             BackchannelAuthenticationRequest, BackchannelAuthenticationResponse),
    Endpoint('backchannel_authentication_complete', POST,
             '/api/{service_id}/backchannel/authentication/complete',
             BackchannelAuthenticationCompleteRequest,
             BackchannelAuthenticationCompleteResponse),
    Endpoint('backchannel_authentication_fail', POST,
             '/api/{service_id}/backchannel/authentication/fail',
             BackchannelAuthenticationFailRequest,
             BackchannelAuthenticationFailResponse),
    Endpoint('backchannel_authentication_issue', POST,
             '/api/{service_id}/backchannel/authentication/issue',
             BackchannelAuthenticationIssueRequest,
             BackchannelAuthenticationIssueResponse),

    # Device flow
    Endpoint('device_authorization', POST, '/api/{service_id}/device/authorization',
             DeviceAuthorizationRequest, DeviceAuthorizationResponse),
    Endpoint('device_complete', POST, '/api/{service_id}/device/complete',
             DeviceCompleteRequest, DeviceCompleteResponse),
    Endpoint('device_verification', POST, '/api/{service_id}/device/verification',
             DeviceVerificationRequest, DeviceVerificationResponse),

    # Pushed authorization requests
    Endpoint('push_authorization_request', POST, '/api/{service_id}/pushed_auth_req',
             PushedAuthReqRequest, PushedAuthReqResponse),

    # ID token reissue
    Endpoint('id_token_reissue', POST, '/api/{service_id}/idtoken/reissue',
             IDTokenReissueRequest, IDTokenReissueResponse),
)
