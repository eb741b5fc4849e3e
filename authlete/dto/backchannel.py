"""
DTOs of the CIBA (Client Initiated Backchannel Authentication) APIs.
"""

from ..types.actions import (
    BackchannelAuthenticationAction, BackchannelAuthenticationCompleteAction,
    BackchannelAuthenticationCompleteResult, BackchannelAuthenticationFailAction,
    BackchannelAuthenticationFailReason, BackchannelAuthenticationIssueAction
)
from ..types.oauth import DeliveryMode, UserIdentificationHintType
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumField, IntegerField,
    StringField, StringListField, StringOrIntegerField
)
from .common import Property, Scope


class BackchannelAuthenticationRequest(Dto):
    parameters = StringField()
    client_id = StringField()
    client_secret = StringField()
    client_certificate = StringField()
    client_certificate_path = StringListField()


class BackchannelAuthenticationResponse(ApiResponse):
    """
    Result of parsing a backchannel authentication request. When
    ``action`` is USER_IDENTIFICATION, ``hint_type`` and ``hint`` identify
    the end-user to authenticate.
    """
    action = EnumField(BackchannelAuthenticationAction)
    response_content = StringField()
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    client_name = StringField()
    delivery_mode = EnumField(DeliveryMode)
    scopes = DtoListField(Scope)
    claim_names = StringListField()
    client_notification_token = StringField()
    acrs = StringListField()
    hint_type = EnumField(UserIdentificationHintType)
    hint = StringField()
    sub = StringField()
    binding_message = StringField()
    user_code = StringField()
    user_code_required = BooleanField()
    requested_expiry = IntegerField()
    request_context = StringField()
    resources = StringListField()
    warnings = StringListField()
    ticket = StringField()


class BackchannelAuthenticationCompleteRequest(Dto):
    ticket = StringField()
    result = EnumField(BackchannelAuthenticationCompleteResult)
    subject = StringField()
    sub = StringField()
    auth_time = StringOrIntegerField()
    acr = StringField()
    claims = StringField()
    properties = DtoListField(Property)
    scopes = StringListField()
    error_description = StringField()
    error_uri = StringField()


class BackchannelAuthenticationCompleteResponse(ApiResponse):
    action = EnumField(BackchannelAuthenticationCompleteAction)
    response_content = StringField()
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    client_name = StringField()
    delivery_mode = EnumField(DeliveryMode)
    client_notification_endpoint = StringField()
    client_notification_token = StringField()
    auth_req_id = StringField()
    access_token = StringField()
    refresh_token = StringField()
    id_token = StringField()
    access_token_duration = StringOrIntegerField()
    refresh_token_duration = StringOrIntegerField()
    id_token_duration = StringOrIntegerField()
    jwt_access_token = StringField()
    resources = StringListField()


class BackchannelAuthenticationFailRequest(Dto):
    ticket = StringField()
    reason = EnumField(BackchannelAuthenticationFailReason)
    error_description = StringField()
    error_uri = StringField()


class BackchannelAuthenticationFailResponse(ApiResponse):
    action = EnumField(BackchannelAuthenticationFailAction)
    response_content = StringField()


class BackchannelAuthenticationIssueRequest(Dto):
    ticket = StringField()


class BackchannelAuthenticationIssueResponse(ApiResponse):
    action = EnumField(BackchannelAuthenticationIssueAction)
    response_content = StringField()
    auth_req_id = StringField()
    expires_in = StringOrIntegerField()
    interval = IntegerField()
