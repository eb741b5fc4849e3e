"""
DTOs of the introspection and revocation APIs.
"""

from ..types.actions import (
    IntrospectionAction, RevocationAction, StandardIntrospectionAction
)
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumField,
    NullableBooleanField, StringField, StringListField, StringOrIntegerField
)
from .common import Pair, Property, Scope


class IntrospectionRequest(Dto):
    """
    Request to check an access token presented to a protected resource.
    ``scopes`` lists the scopes the resource requires.
    """
    token = StringField()
    scopes = StringListField()
    subject = StringField()
    client_certificate = StringField()
    dpop = StringField()
    htm = StringField()
    htu = StringField()


class IntrospectionResponse(ApiResponse):
    """
    ``usable`` means the token exists and has not expired; ``sufficient``
    means it also covers the requested scopes. ``active`` is only present
    when Authlete reports it.
    """
    action = EnumField(IntrospectionAction)
    client_id = StringOrIntegerField()
    subject = StringField()
    scopes = StringListField()
    scope_details = DtoListField(Scope)
    existent = BooleanField()
    usable = BooleanField()
    sufficient = BooleanField()
    refreshable = BooleanField()
    response_content = StringField()
    expires_at = StringOrIntegerField()
    properties = DtoListField(Property)
    client_id_alias = StringField()
    client_id_alias_used = BooleanField()
    certificate_thumbprint = StringField()
    resources = StringListField()
    access_token_resources = StringListField()
    grant_id = StringField()
    consented_claims = StringListField()
    service_attributes = DtoListField(Pair)
    client_attributes = DtoListField(Pair)
    for_external_attachment = BooleanField()
    active = NullableBooleanField()


class StandardIntrospectionRequest(Dto):
    """``parameters`` is the RFC 7662 request body."""
    parameters = StringField()


class StandardIntrospectionResponse(ApiResponse):
    action = EnumField(StandardIntrospectionAction)
    response_content = StringField()


class RevocationRequest(Dto):
    parameters = StringField()
    client_id = StringField()
    client_secret = StringField()


class RevocationResponse(ApiResponse):
    action = EnumField(RevocationAction)
    response_content = StringField()
