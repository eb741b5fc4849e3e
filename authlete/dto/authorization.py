"""
DTOs of the authorization endpoint APIs:
/auth/authorization, /auth/authorization/fail, /auth/authorization/issue
and /pushed_auth_req.
"""

from ..types.actions import (
    AuthorizationAction, AuthorizationFailAction, AuthorizationFailReason,
    AuthorizationIssueAction, PushedAuthReqAction
)
from ..types.oauth import Display, Prompt
from .base import (
    ApiResponse, BooleanField, Dto, DtoField, DtoListField, EnumField,
    EnumListField, StringField, StringListField, StringOrIntegerField
)
from .client import Client
from .common import Property, Scope
from .service import Service


class AuthorizationRequest(Dto):
    """``parameters`` is the query string of the authorization request."""
    parameters = StringField()


class AuthorizationResponse(ApiResponse):
    """
    Result of parsing an authorization request.

    When ``action`` is INTERACTION the authorization server shows a consent
    page, using ``client``, ``scopes`` and the other fields, and keeps
    ``ticket`` for the fail or issue call that follows.
    """
    action = EnumField(AuthorizationAction)
    service = DtoField(Service)
    client = DtoField(Client)
    client_id_alias_used = BooleanField()
    display = EnumField(Display)
    max_age = StringOrIntegerField()
    scopes = DtoListField(Scope)
    ui_locales = StringListField()
    claims_locales = StringListField()
    claims = StringListField()
    acr_essential = BooleanField()
    acrs = StringListField()
    subject = StringField()
    login_hint = StringField()
    prompts = EnumListField(Prompt)
    request_object_payload = StringField()
    id_token_claims = StringField()
    user_info_claims = StringField()
    resources = StringListField()
    purpose = StringField()
    response_content = StringField()
    ticket = StringField()


class AuthorizationFailRequest(Dto):
    ticket = StringField()
    reason = EnumField(AuthorizationFailReason)
    description = StringField()


class AuthorizationFailResponse(ApiResponse):
    action = EnumField(AuthorizationFailAction)
    response_content = StringField()


class AuthorizationIssueRequest(Dto):
    ticket = StringField()
    subject = StringField()
    sub = StringField()
    auth_time = StringOrIntegerField()
    acr = StringField()
    claims = StringField()
    properties = DtoListField(Property)
    scopes = StringListField()
    idt_header_params = StringField()
    consented_claims = StringListField()
    jwt_at_claims = StringField()
    access_token = StringField()
    id_token_aud_type = StringField()
    access_token_duration = StringOrIntegerField()


class AuthorizationIssueResponse(ApiResponse):
    action = EnumField(AuthorizationIssueAction)
    response_content = StringField()
    access_token = StringField()
    access_token_expires_at = StringOrIntegerField()
    access_token_duration = StringOrIntegerField()
    id_token = StringField()
    authorization_code = StringField()
    jwt_access_token = StringField()


class PushedAuthReqRequest(Dto):
    parameters = StringField()
    client_id = StringField()
    client_secret = StringField()
    client_certificate = StringField()
    client_certificate_path = StringListField()


class PushedAuthReqResponse(ApiResponse):
    action = EnumField(PushedAuthReqAction)
    response_content = StringField()
    request_uri = StringField()
