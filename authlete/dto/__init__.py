# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package dto provides the request and response objects of the Authlete API.

Every DTO derives from ``Dto`` and supports:
- ``to_dict()`` / ``to_array()``: wire representation keyed by wire key
- ``from_dict()`` / ``from_array()``: build from a wire representation
- ``to_json()`` / ``from_json()``: the same through a JSON string
"""

from .base import (
    Dto, ApiResponse, to_json, to_camel_case,
    Field, StringField, StringOrIntegerField, IntegerField, BooleanField,
    NullableBooleanField, EnumField, StringListField, EnumListField,
    DtoField, DtoListField
)
from .common import (
    TaggedValue, Pair, Property, NamedUri, DynamicScope, Scope, Address,
    AuthzDetailsElement, AuthzDetails, GrantScope, Grant, ClientExtension,
    SnsCredentials, AuthorizationTicketInfo, CredentialOfferInfo, Hsk,
    TrustAnchor, AccessToken
)
from .client import (
    Client, ClientListResponse, AuthorizedClientListResponse,
    ClientAuthorizationDeleteRequest, ClientAuthorizationGetListRequest,
    ClientAuthorizationUpdateRequest, ClientSecretUpdateRequest,
    ClientSecretUpdateResponse, GrantedScopesGetRequest,
    GrantedScopesGetResponse, GrantedScopesDeleteRequest
)
from .service import Service, ServiceListResponse
from .authorization import (
    AuthorizationRequest, AuthorizationResponse, AuthorizationFailRequest,
    AuthorizationFailResponse, AuthorizationIssueRequest,
    AuthorizationIssueResponse, PushedAuthReqRequest, PushedAuthReqResponse
)
from .backchannel import (
    BackchannelAuthenticationRequest, BackchannelAuthenticationResponse,
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest, BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest, BackchannelAuthenticationIssueResponse
)
from .device import (
    DeviceAuthorizationRequest, DeviceAuthorizationResponse,
    DeviceCompleteRequest, DeviceCompleteResponse, DeviceVerificationRequest,
    DeviceVerificationResponse
)
from .introspection import (
    IntrospectionRequest, IntrospectionResponse, StandardIntrospectionRequest,
    StandardIntrospectionResponse, RevocationRequest, RevocationResponse
)
from .token import (
    TokenRequest, TokenResponse, TokenCreateRequest, TokenCreateResponse,
    TokenFailRequest, TokenFailResponse, TokenIssueRequest, TokenIssueResponse,
    TokenUpdateRequest, TokenUpdateResponse, IDTokenReissueRequest,
    IDTokenReissueResponse
)
from .userinfo import (
    UserInfoRequest, UserInfoResponse, UserInfoIssueRequest,
    UserInfoIssueResponse
)

__all__ = [
    # Base contract
    'Dto', 'ApiResponse', 'to_json', 'to_camel_case',
    'Field', 'StringField', 'StringOrIntegerField', 'IntegerField',
    'BooleanField', 'NullableBooleanField', 'EnumField', 'StringListField',
    'EnumListField', 'DtoField', 'DtoListField',

    # Shared value objects
    'TaggedValue', 'Pair', 'Property', 'NamedUri', 'DynamicScope', 'Scope',
    'Address', 'AuthzDetailsElement', 'AuthzDetails', 'GrantScope', 'Grant',
    'ClientExtension', 'SnsCredentials', 'AuthorizationTicketInfo',
    'CredentialOfferInfo', 'Hsk', 'TrustAnchor', 'AccessToken',

    # Clients and services
    'Client', 'ClientListResponse', 'AuthorizedClientListResponse',
    'ClientAuthorizationDeleteRequest', 'ClientAuthorizationGetListRequest',
    'ClientAuthorizationUpdateRequest', 'ClientSecretUpdateRequest',
    'ClientSecretUpdateResponse', 'GrantedScopesGetRequest',
    'GrantedScopesGetResponse', 'GrantedScopesDeleteRequest',
    'Service', 'ServiceListResponse',

    # Authorization
    'AuthorizationRequest', 'AuthorizationResponse', 'AuthorizationFailRequest',
    'AuthorizationFailResponse', 'AuthorizationIssueRequest',
    'AuthorizationIssueResponse', 'PushedAuthReqRequest', 'PushedAuthReqResponse',

    # Backchannel authentication
    'BackchannelAuthenticationRequest', 'BackchannelAuthenticationResponse',
    'BackchannelAuthenticationCompleteRequest',
    'BackchannelAuthenticationCompleteResponse',
    'BackchannelAuthenticationFailRequest',
    'BackchannelAuthenticationFailResponse',
    'BackchannelAuthenticationIssueRequest',
    'BackchannelAuthenticationIssueResponse',

    # Device flow
    'DeviceAuthorizationRequest', 'DeviceAuthorizationResponse',
    'DeviceCompleteRequest', 'DeviceCompleteResponse',
    'DeviceVerificationRequest', 'DeviceVerificationResponse',

    # Introspection and revocation
    'IntrospectionRequest', 'IntrospectionResponse',
    'StandardIntrospectionRequest', 'StandardIntrospectionResponse',
    'RevocationRequest', 'RevocationResponse',

    # Tokens
    'TokenRequest', 'TokenResponse', 'TokenCreateRequest', 'TokenCreateResponse',
    'TokenFailRequest', 'TokenFailResponse', 'TokenIssueRequest',
    'TokenIssueResponse', 'TokenUpdateRequest', 'TokenUpdateResponse',
    'IDTokenReissueRequest', 'IDTokenReissueResponse',

    # UserInfo
    'UserInfoRequest', 'UserInfoResponse', 'UserInfoIssueRequest',
    'UserInfoIssueResponse',
]
