"""
DTOs of the userinfo endpoint APIs.
"""

from ..types.actions import UserInfoAction, UserInfoIssueAction
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumField, StringField,
    StringListField, StringOrIntegerField
)
from .common import Property


class UserInfoRequest(Dto):
    token = StringField()


class UserInfoResponse(ApiResponse):
    """``claims`` lists the claim names the client may receive."""
    action = EnumField(UserInfoAction)
    client_id = StringOrIntegerField()
    subject = StringField()
    scopes = StringListField()
    claims = StringListField()
    token = StringField()
    response_content = StringField()
    properties = DtoListField(Property)
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    user_info_claims = StringField()


class UserInfoIssueRequest(Dto):
    """``claims`` is a JSON object holding the claim values."""
    token = StringField()
    claims = StringField()
    sub = StringField()


class UserInfoIssueResponse(ApiResponse):
    action = EnumField(UserInfoIssueAction)
    response_content = StringField()
