"""
DTOs of the token endpoint and token management APIs.
"""

from ..types.actions import (
    IDTokenReissueAction, TokenAction, TokenCreateAction, TokenFailAction,
    TokenFailReason, TokenIssueAction, TokenUpdateAction
)
from ..types.oauth import GrantType
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumField, StringField,
    StringListField, StringOrIntegerField
)
from .common import Property


class TokenRequest(Dto):
    """``parameters`` is the body of the token request."""
    parameters = StringField()
    client_id = StringField()
    client_secret = StringField()
    client_certificate = StringField()
    client_certificate_path = StringListField()
    properties = DtoListField(Property)
    dpop = StringField()
    htm = StringField()
    htu = StringField()


class TokenResponse(ApiResponse):
    """
    Result of processing a token request. For the resource owner password
    flow ``action`` is PASSWORD and ``username``/``password`` must be
    checked before calling the token issue or fail API with ``ticket``.
    """
    action = EnumField(TokenAction)
    response_content = StringField()
    username = StringField()
    password = StringField()
    ticket = StringField()
    access_token = StringField()
    access_token_expires_at = StringOrIntegerField()
    access_token_duration = StringOrIntegerField()
    refresh_token = StringField()
    refresh_token_expires_at = StringOrIntegerField()
    refresh_token_duration = StringOrIntegerField()
    id_token = StringField()
    grant_type = EnumField(GrantType)
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    subject = StringField()
    scopes = StringListField()
    properties = DtoListField(Property)
    jwt_access_token = StringField()
    resources = StringListField()
    access_token_resources = StringListField()


class TokenCreateRequest(Dto):
    grant_type = EnumField(GrantType)
    client_id = StringOrIntegerField()
    subject = StringField()
    scopes = StringListField()
    access_token_duration = StringOrIntegerField()
    refresh_token_duration = StringOrIntegerField()
    properties = DtoListField(Property)
    client_id_alias_used = BooleanField()
    access_token = StringField()
    refresh_token = StringField()
    access_token_persistent = BooleanField()
    certificate_thumbprint = StringField()
    dpop_key_thumbprint = StringField()


class TokenCreateResponse(ApiResponse):
    action = EnumField(TokenCreateAction)
    grant_type = EnumField(GrantType)
    client_id = StringOrIntegerField()
    subject = StringField()
    scopes = StringListField()
    access_token = StringField()
    token_type = StringField()
    expires_in = StringOrIntegerField()
    expires_at = StringOrIntegerField()
    refresh_token = StringField()
    properties = DtoListField(Property)


class TokenFailRequest(Dto):
    ticket = StringField()
    reason = EnumField(TokenFailReason)


class TokenFailResponse(ApiResponse):
    action = EnumField(TokenFailAction)
    response_content = StringField()


class TokenIssueRequest(Dto):
    ticket = StringField()
    subject = StringField()
    properties = DtoListField(Property)


class TokenIssueResponse(ApiResponse):
    action = EnumField(TokenIssueAction)
    response_content = StringField()
    access_token = StringField()
    access_token_expires_at = StringOrIntegerField()
    access_token_duration = StringOrIntegerField()
    refresh_token = StringField()
    refresh_token_expires_at = StringOrIntegerField()
    refresh_token_duration = StringOrIntegerField()
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    subject = StringField()
    scopes = StringListField()
    properties = DtoListField(Property)
    jwt_access_token = StringField()
    access_token_resources = StringListField()


class TokenUpdateRequest(Dto):
    access_token = StringField()
    access_token_expires_at = StringOrIntegerField()
    scopes = StringListField()
    properties = DtoListField(Property)


class TokenUpdateResponse(ApiResponse):
    action = EnumField(TokenUpdateAction)
    access_token = StringField()
    access_token_expires_at = StringOrIntegerField()
    scopes = StringListField()
    properties = DtoListField(Property)


class IDTokenReissueRequest(Dto):
    """Request to issue a new ID token for a refresh token."""
    access_token = StringField()
    refresh_token = StringField()
    sub = StringField()
    claims = StringField()
    idt_header_params = StringField()
    id_token_aud_type = StringField()


class IDTokenReissueResponse(ApiResponse):
    action = EnumField(IDTokenReissueAction)
    response_content = StringField()
    id_token = StringField()
