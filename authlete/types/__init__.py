# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package types provides the shared type definitions of the Authlete SDK.

This package contains:
- The error hierarchy and error codes
- The closed-enum mechanism used for every wire vocabulary
- OAuth 2.0 / OpenID Connect vocabulary (grant types, algorithms, ...)
- Per-endpoint action, reason and result enums
- Standard claim names
"""

from .errors import (
    ErrorCode,
    AuthleteError,
    ValidationError,
    EnumValueError,
    TypeMismatchError,
    JsonParseError,
    ConfigurationError,
)

from .enum import AuthleteEnum

from .oauth import (
    ApplicationType,
    ClaimType,
    ClientAuthMethod,
    ClientRegistrationType,
    ClientType,
    CodeChallengeMethod,
    DeliveryMode,
    Display,
    FapiMode,
    GrantType,
    JWEAlg,
    JWEEnc,
    JWSAlg,
    Prompt,
    ResponseType,
    ServiceProfile,
    Sns,
    SubjectType,
    UserCodeCharset,
    UserIdentificationHintType,
)

from .actions import (
    AuthorizationAction,
    AuthorizationFailAction,
    AuthorizationFailReason,
    AuthorizationIssueAction,
    BackchannelAuthenticationAction,
    BackchannelAuthenticationCompleteAction,
    BackchannelAuthenticationCompleteResult,
    BackchannelAuthenticationFailAction,
    BackchannelAuthenticationFailReason,
    BackchannelAuthenticationIssueAction,
    DeviceAuthorizationAction,
    DeviceCompleteAction,
    DeviceCompleteResult,
    DeviceVerificationAction,
    IDTokenReissueAction,
    IntrospectionAction,
    PushedAuthReqAction,
    RevocationAction,
    StandardIntrospectionAction,
    TokenAction,
    TokenCreateAction,
    TokenFailAction,
    TokenFailReason,
    TokenIssueAction,
    TokenUpdateAction,
    UserInfoAction,
    UserInfoIssueAction,
)

from .claims import StandardClaims

__all__ = [
    # Errors
    'ErrorCode', 'AuthleteError', 'ValidationError', 'EnumValueError',
    'TypeMismatchError', 'JsonParseError', 'ConfigurationError',

    # Enum mechanism
    'AuthleteEnum',

    # Protocol vocabulary
    'ApplicationType', 'ClaimType', 'ClientAuthMethod', 'ClientRegistrationType',
    'ClientType', 'CodeChallengeMethod', 'DeliveryMode', 'Display', 'FapiMode',
    'GrantType', 'JWEAlg', 'JWEEnc', 'JWSAlg', 'Prompt', 'ResponseType',
    'ServiceProfile', 'Sns', 'SubjectType', 'UserCodeCharset',
    'UserIdentificationHintType',

    # Actions, reasons and results
    'AuthorizationAction', 'AuthorizationFailAction', 'AuthorizationFailReason',
    'AuthorizationIssueAction', 'BackchannelAuthenticationAction',
    'BackchannelAuthenticationCompleteAction',
    'BackchannelAuthenticationCompleteResult',
    'BackchannelAuthenticationFailAction', 'BackchannelAuthenticationFailReason',
    'BackchannelAuthenticationIssueAction', 'DeviceAuthorizationAction',
    'DeviceCompleteAction', 'DeviceCompleteResult', 'DeviceVerificationAction',
    'IDTokenReissueAction', 'IntrospectionAction', 'PushedAuthReqAction',
    'RevocationAction', 'StandardIntrospectionAction', 'TokenAction',
    'TokenCreateAction', 'TokenFailAction', 'TokenFailReason', 'TokenIssueAction',
    'TokenUpdateAction', 'UserInfoAction', 'UserInfoIssueAction',

    # Claims
    'StandardClaims',
]
