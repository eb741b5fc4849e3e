"""
Service (authorization server instance) DTOs.
"""

from ..types.oauth import (
    ClaimType, ClientAuthMethod, Display, GrantType, ResponseType,
    ServiceProfile, Sns
)
from .base import (
    ApiResponse, BooleanField, Dto, DtoListField, EnumListField, IntegerField,
    StringField, StringListField, StringOrIntegerField
)
from .common import Scope, SnsCredentials


class Service(Dto):
    """
    An authorization server managed by Authlete.

    ``api_key`` identifies the service and may arrive as a string when it
    does not fit in a 64-bit integer.
    """
    service_name = StringField()
    api_key = StringOrIntegerField()
    api_secret = StringField()
    issuer = StringField()
    authorization_endpoint = StringField()
    token_endpoint = StringField()
    revocation_endpoint = StringField()
    supported_revocation_auth_methods = EnumListField(ClientAuthMethod)
    user_info_endpoint = StringField()
    jwks_uri = StringField()
    jwks = StringField()
    registration_endpoint = StringField()
    supported_scopes = DtoListField(Scope)
    supported_response_types = EnumListField(ResponseType)
    supported_grant_types = EnumListField(GrantType)
    supported_acrs = StringListField()
    supported_token_auth_methods = EnumListField(ClientAuthMethod)
    supported_displays = EnumListField(Display)
    supported_claim_types = EnumListField(ClaimType)
    supported_claims = StringListField()
    service_documentation = StringField()
    supported_claim_locales = StringListField()
    supported_ui_locales = StringListField()
    policy_uri = StringField()
    tos_uri = StringField()
    description = StringField()
    access_token_type = StringField()
    access_token_duration = StringOrIntegerField()
    refresh_token_duration = StringOrIntegerField()
    id_token_duration = StringOrIntegerField()
    authorization_response_duration = StringOrIntegerField()
    authentication_callback_endpoint = StringField()
    authentication_callback_api_key = StringField()
    authentication_callback_api_secret = StringField()
    supported_snses = EnumListField(Sns)
    sns_credentials = DtoListField(SnsCredentials)
    created_at = StringOrIntegerField()
    modified_at = StringOrIntegerField()
    developer_authentication_callback_endpoint = StringField()
    developer_authentication_callback_api_key = StringField()
    developer_authentication_callback_api_secret = StringField()
    supported_developer_snses = EnumListField(Sns)
    developer_sns_credentials = DtoListField(SnsCredentials)
    clients_per_developer = IntegerField()
    direct_authorization_endpoint_enabled = BooleanField()
    direct_token_endpoint_enabled = BooleanField()
    direct_revocation_endpoint_enabled = BooleanField()
    direct_user_info_endpoint_enabled = BooleanField()
    direct_jwks_endpoint_enabled = BooleanField()
    direct_introspection_endpoint_enabled = BooleanField()
    single_access_token_per_subject = BooleanField()
    pkce_required = BooleanField()
    refresh_token_kept = BooleanField()
    error_description_omitted = BooleanField()
    error_uri_omitted = BooleanField()
    client_id_alias_enabled = BooleanField()
    supported_service_profiles = EnumListField(ServiceProfile)
    tls_client_certificate_bound_access_tokens = BooleanField()
    mutual_tls_validate_pki_cert_chain = BooleanField()
    introspection_endpoint = StringField()
    supported_introspection_auth_methods = EnumListField(ClientAuthMethod)
    trusted_root_certificates = StringListField()
    authorization_signature_key_id = StringField()
    id_token_signature_key_id = StringField()
    user_info_signature_key_id = StringField()


class ServiceListResponse(ApiResponse):
    start = IntegerField()
    end = IntegerField()
    total_count = IntegerField()
    services = DtoListField(Service)
