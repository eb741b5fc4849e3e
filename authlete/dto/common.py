"""
Small value objects shared by many requests and responses.
"""

from typing import Optional

from ..types.oauth import GrantType, Sns
from .base import (
    BooleanField, Dto, DtoField, DtoListField, EnumField, StringField,
    StringListField, StringOrIntegerField
)


class TaggedValue(Dto):
    """
    A string tagged with a language tag, e.g. one locale of a client name.
    """
    tag = StringField()
    value = StringField()

    def __init__(self, tag: Optional[str] = None, value: Optional[str] = None):
        super().__init__(tag=tag, value=value)


class Pair(Dto):
    """A key-value pair of strings, used for arbitrary attributes."""
    key = StringField()
    value = StringField()

    def __init__(self, key: Optional[str] = None, value: Optional[str] = None):
        super().__init__(key=key, value=value)


class Property(Dto):
    """
    An extra property associated with an access token or a grant.
    Hidden properties are not shown to client applications.
    """
    key = StringField()
    value = StringField()
    hidden = BooleanField()

    def __init__(self, key: Optional[str] = None, value: Optional[str] = None,
                 hidden: bool = False):
        super().__init__(key=key, value=value, hidden=hidden)


class NamedUri(Dto):
    name = StringField()
    uri = StringField()


class DynamicScope(Dto):
    """A scope matched by a pattern, such as ``consent:123``."""
    name = StringField()
    value = StringField()


class Scope(Dto):
    """
    A scope supported by a service. ``default_entry`` marks the scopes used
    when an authorization request has no ``scope`` parameter.
    """
    name = StringField()
    default_entry = BooleanField()
    description = StringField()
    descriptions = DtoListField(TaggedValue)
    attributes = DtoListField(Pair)


class Address(Dto):
    """The ``address`` claim (OIDC Core, 5.1.1). Keys are snake_case on the wire."""
    formatted = StringField()
    street_address = StringField(key='street_address')
    locality = StringField()
    region = StringField()
    postal_code = StringField(key='postal_code')
    country = StringField()


class AuthzDetailsElement(Dto):
    """An element of ``authorization_details`` (RFC 9396)."""
    type = StringField()
    locations = StringListField()
    actions = StringListField()
    data_types = StringListField()
    identifier = StringField()
    privileges = StringListField()
    other_fields = StringField()


class AuthzDetails(Dto):
    elements = DtoListField(AuthzDetailsElement)


class GrantScope(Dto):
    scope = StringField()
    resource = StringListField()


class Grant(Dto):
    """Permissions held by a grant (Grant Management for OAuth 2.0)."""
    scopes = DtoListField(GrantScope)
    claims = StringListField()
    authorization_details = DtoField(AuthzDetails)


class ClientExtension(Dto):
    """Client attributes that only an Authlete administrator can change."""
    requestable_scopes_enabled = BooleanField()
    requestable_scopes = StringListField()


class SnsCredentials(Dto):
    sns = EnumField(Sns)
    api_key = StringField()
    api_secret = StringField()


class AuthorizationTicketInfo(Dto):
    context = StringField()


class CredentialOfferInfo(Dto):
    """A credential offer (OpenID for Verifiable Credential Issuance)."""
    identifier = StringField()
    credential_offer = StringField()
    credential_issuer = StringField()
    credential_configuration_ids = StringListField()
    authorization_code_grant_included = BooleanField()
    issuer_state_included = BooleanField()
    issuer_state = StringField()
    pre_authorized_code_grant_included = BooleanField()
    pre_authorized_code = StringField()
    subject = StringField()
    expires_at = StringOrIntegerField()
    context = StringField()
    properties = DtoListField(Property)
    jwt_at_claims = StringField()
    auth_time = StringOrIntegerField()
    acr = StringField()
    tx_code = StringField()
    tx_code_input_mode = StringField()
    tx_code_description = StringField()


class Hsk(Dto):
    """A key managed by a hardware security module."""
    kty = StringField()
    use = StringField()
    alg = StringField()
    kid = StringField()
    hsm_name = StringField()
    handle = StringField()
    public_key = StringField()


class TrustAnchor(Dto):
    """An OpenID Federation trust anchor."""
    entity_id = StringField()
    jwks = StringField()


class AccessToken(Dto):
    """Information about an issued access token."""
    access_token_hash = StringField()
    refresh_token_hash = StringField()
    client_id = StringOrIntegerField()
    subject = StringField()
    grant_type = EnumField(GrantType)
    scopes = StringListField()
    access_token_expires_at = StringOrIntegerField()
    refresh_token_expires_at = StringOrIntegerField()
    created_at = StringOrIntegerField()
    last_refreshed_at = StringOrIntegerField()
    properties = DtoListField(Property)
    refresh_token_scopes = StringListField()
