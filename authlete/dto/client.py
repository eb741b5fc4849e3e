"""
Client application DTOs and the client management requests/responses.
"""

from typing import List, Optional

from ..types.oauth import (
    ApplicationType, ClientAuthMethod, ClientType, GrantType, JWEAlg, JWEEnc,
    JWSAlg, ResponseType, SubjectType
)
from .base import (
    ApiResponse, BooleanField, Dto, DtoField, DtoListField, EnumField,
    EnumListField, IntegerField, StringField, StringListField,
    StringOrIntegerField
)
from .common import ClientExtension, TaggedValue


def _find_tagged(values: Optional[List[TaggedValue]], tag: Optional[str]) -> Optional[str]:
    if not values:
        return None
    for tagged in values:
        if tagged.tag == tag:
            return tagged.value
    return None


class Client(Dto):
    """
    A client application registered to a service.

    Localized metadata (``client_names``, ``logo_uris`` and so on) are lists
    of TaggedValue, one per language tag.
    """
    developer = StringField()
    client_id = StringOrIntegerField()
    client_id_alias = StringField()
    client_id_alias_enabled = BooleanField()
    client_secret = StringField()
    client_type = EnumField(ClientType)
    redirect_uris = StringListField()
    response_types = EnumListField(ResponseType)
    grant_types = EnumListField(GrantType)
    application_type = EnumField(ApplicationType)
    contacts = StringListField()
    client_name = StringField()
    client_names = DtoListField(TaggedValue)
    logo_uri = StringField()
    logo_uris = DtoListField(TaggedValue)
    client_uri = StringField()
    client_uris = DtoListField(TaggedValue)
    policy_uri = StringField()
    policy_uris = DtoListField(TaggedValue)
    tos_uri = StringField()
    tos_uris = DtoListField(TaggedValue)
    jwks_uri = StringField()
    jwks = StringField()
    sector_identifier_uri = StringField(key='sectorIdentifier')
    subject_type = EnumField(SubjectType)
    id_token_sign_alg = EnumField(JWSAlg)
    id_token_encryption_alg = EnumField(JWEAlg)
    id_token_encryption_enc = EnumField(JWEEnc)
    user_info_sign_alg = EnumField(JWSAlg)
    user_info_encryption_alg = EnumField(JWEAlg)
    user_info_encryption_enc = EnumField(JWEEnc)
    request_sign_alg = EnumField(JWSAlg)
    request_encryption_alg = EnumField(JWEAlg)
    request_encryption_enc = EnumField(JWEEnc)
    token_auth_method = EnumField(ClientAuthMethod)
    token_auth_sign_alg = EnumField(JWSAlg)
    default_max_age = StringOrIntegerField()
    auth_time_required = BooleanField()
    default_acrs = StringListField()
    login_uri = StringField()
    request_uris = StringListField()
    description = StringField()
    descriptions = DtoListField(TaggedValue)
    created_at = StringOrIntegerField()
    modified_at = StringOrIntegerField()
    extension = DtoField(ClientExtension)
    tls_client_auth_subject_dn = StringField()
    mutual_tls_sender_constrained_access_tokens = BooleanField()

    def get_client_name(self, tag: Optional[str] = None) -> Optional[str]:
        """Client name for ``tag``; the untagged name when ``tag`` is None."""
        if tag is None:
            return self.client_name
        return _find_tagged(self.client_names, tag)

    def get_description(self, tag: Optional[str] = None) -> Optional[str]:
        if tag is None:
            return self.description
        return _find_tagged(self.descriptions, tag)


class ClientListResponse(ApiResponse):
    """
    A page of clients. ``total_count`` is the number of clients that exist,
    independent of the requested range.
    """
    start = IntegerField()
    end = IntegerField()
    developer = StringField()
    total_count = IntegerField()
    clients = DtoListField(Client)


class AuthorizedClientListResponse(ClientListResponse):
    """Clients that an end-user has authorized."""
    subject = StringField()


class ClientAuthorizationDeleteRequest(Dto):
    subject = StringField()


class ClientAuthorizationGetListRequest(Dto):
    subject = StringField()
    developer = StringField()
    start = IntegerField(non_negative=True)
    end = IntegerField(non_negative=True)


class ClientAuthorizationUpdateRequest(Dto):
    subject = StringField()
    scopes = StringListField()


class ClientSecretUpdateRequest(Dto):
    client_secret = StringField()


class ClientSecretUpdateResponse(ApiResponse):
    """Response of the client secret refresh and update APIs."""
    new_client_secret = StringField()
    old_client_secret = StringField()


class GrantedScopesGetRequest(Dto):
    subject = StringField()


class GrantedScopesGetResponse(ApiResponse):
    service_api_key = StringOrIntegerField()
    client_id = StringOrIntegerField()
    subject = StringField()
    latest_granted_scopes = StringListField()
    merged_granted_scopes = StringListField()
    modified_at = StringOrIntegerField()


class GrantedScopesDeleteRequest(Dto):
    subject = StringField()
