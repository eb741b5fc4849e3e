"""
DTOs of the device authorization grant APIs (RFC 8628).
"""

from ..types.actions import (
    DeviceAuthorizationAction, DeviceCompleteAction, DeviceCompleteResult,
    DeviceVerificationAction
)
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumField, IntegerField,
    StringField, StringListField, StringOrIntegerField
)
from .common import Property, Scope


class DeviceAuthorizationRequest(Dto):
    parameters = StringField()
    client_id = StringField()
    client_secret = StringField()
    client_certificate = StringField()
    client_certificate_path = StringListField()


class DeviceAuthorizationResponse(ApiResponse):
    action = EnumField(DeviceAuthorizationAction)
    response_content = StringField()
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    client_name = StringField()
    scopes = DtoListField(Scope)
    claim_names = StringListField()
    acrs = StringListField()
    device_code = StringField()
    user_code = StringField()
    verification_uri = StringField()
    verification_uri_complete = StringField()
    expires_in = StringOrIntegerField()
    interval = IntegerField()
    resources = StringListField()
    warnings = StringListField()


class DeviceCompleteRequest(Dto):
    user_code = StringField()
    result = EnumField(DeviceCompleteResult)
    subject = StringField()
    sub = StringField()
    auth_time = StringOrIntegerField()
    acr = StringField()
    claims = StringField()
    properties = DtoListField(Property)
    scopes = StringListField()
    idt_header_params = StringField()
    error_description = StringField()
    error_uri = StringField()


class DeviceCompleteResponse(ApiResponse):
    action = EnumField(DeviceCompleteAction)


class DeviceVerificationRequest(Dto):
    user_code = StringField()


class DeviceVerificationResponse(ApiResponse):
    action = EnumField(DeviceVerificationAction)
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    client_name = StringField()
    scopes = DtoListField(Scope)
    claim_names = StringListField()
    acrs = StringListField()
    expires_at = StringOrIntegerField()
    resources = StringListField()
