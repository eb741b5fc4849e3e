"""
OAuth 2.0 and OpenID Connect vocabulary used by clients and services.
"""

from .enum import AuthleteEnum


class ApplicationType(AuthleteEnum):
    """``application_type`` client metadata (OIDC Dynamic Client Registration)."""
    WEB = "WEB"
    NATIVE = "NATIVE"


class ClaimType(AuthleteEnum):
    """Claim types (OIDC Core, 5.6)."""
    NORMAL = "NORMAL"
    AGGREGATED = "AGGREGATED"
    DISTRIBUTED = "DISTRIBUTED"


class ClientAuthMethod(AuthleteEnum):
    """Client authentication methods at the token endpoint."""
    NONE = "NONE"
    CLIENT_SECRET_BASIC = "CLIENT_SECRET_BASIC"
    CLIENT_SECRET_POST = "CLIENT_SECRET_POST"
    CLIENT_SECRET_JWT = "CLIENT_SECRET_JWT"
    PRIVATE_KEY_JWT = "PRIVATE_KEY_JWT"
    TLS_CLIENT_AUTH = "TLS_CLIENT_AUTH"
    SELF_SIGNED_TLS_CLIENT_AUTH = "SELF_SIGNED_TLS_CLIENT_AUTH"


class ClientRegistrationType(AuthleteEnum):
    """OpenID Federation client registration types."""
    AUTOMATIC = "AUTOMATIC"
    EXPLICIT = "EXPLICIT"


class ClientType(AuthleteEnum):
    """Client types (RFC 6749, 2.1)."""
    PUBLIC = "PUBLIC"
    CONFIDENTIAL = "CONFIDENTIAL"


class CodeChallengeMethod(AuthleteEnum):
    """PKCE code challenge methods (RFC 7636)."""
    PLAIN = "PLAIN"
    S256 = "S256"


class DeliveryMode(AuthleteEnum):
    """CIBA token delivery modes."""
    POLL = "POLL"
    PING = "PING"
    PUSH = "PUSH"


class Display(AuthleteEnum):
    """Values of the ``display`` request parameter."""
    PAGE = "PAGE"
    POPUP = "POPUP"
    TOUCH = "TOUCH"
    WAP = "WAP"


class FapiMode(AuthleteEnum):
    FAPI1_BASELINE = "FAPI1_BASELINE"
    FAPI1_ADVANCED = "FAPI1_ADVANCED"
    FAPI2_SECURITY = "FAPI2_SECURITY"
    FAPI2_MESSAGE_SIGNING_AUTH_REQ = "FAPI2_MESSAGE_SIGNING_AUTH_REQ"
    FAPI2_MESSAGE_SIGNING_AUTH_RES = "FAPI2_MESSAGE_SIGNING_AUTH_RES"
    FAPI2_MESSAGE_SIGNING_INTROSPECTION_RES = "FAPI2_MESSAGE_SIGNING_INTROSPECTION_RES"


class GrantType(AuthleteEnum):
    """Grant types."""
    AUTHORIZATION_CODE = "AUTHORIZATION_CODE"
    IMPLICIT = "IMPLICIT"
    PASSWORD = "PASSWORD"
    CLIENT_CREDENTIALS = "CLIENT_CREDENTIALS"
    REFRESH_TOKEN = "REFRESH_TOKEN"
    CIBA = "CIBA"
    DEVICE_CODE = "DEVICE_CODE"


class JWEAlg(AuthleteEnum):
    """JWE ``alg`` values (RFC 7518, 4.1)."""
    RSA1_5 = "RSA1_5"
    RSA_OAEP = "RSA_OAEP"
    RSA_OAEP_256 = "RSA_OAEP_256"
    A128KW = "A128KW"
    A192KW = "A192KW"
    A256KW = "A256KW"
    DIR = "DIR"
    ECDH_ES = "ECDH_ES"
    ECDH_ES_A128KW = "ECDH_ES_A128KW"
    ECDH_ES_A192KW = "ECDH_ES_A192KW"
    ECDH_ES_A256KW = "ECDH_ES_A256KW"
    A128GCMKW = "A128GCMKW"
    A192GCMKW = "A192GCMKW"
    A256GCMKW = "A256GCMKW"
    PBES2_HS256_A128KW = "PBES2_HS256_A128KW"
    PBES2_HS384_A192KW = "PBES2_HS384_A192KW"
    PBES2_HS512_A256KW = "PBES2_HS512_A256KW"


class JWEEnc(AuthleteEnum):
    """JWE ``enc`` values (RFC 7518, 5.1)."""
    A128CBC_HS256 = "A128CBC_HS256"
    A192CBC_HS384 = "A192CBC_HS384"
    A256CBC_HS512 = "A256CBC_HS512"
    A128GCM = "A128GCM"
    A192GCM = "A192GCM"
    A256GCM = "A256GCM"


class JWSAlg(AuthleteEnum):
    """JWS ``alg`` values (RFC 7518, 3.1)."""
    NONE = "NONE"
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"


class Prompt(AuthleteEnum):
    """Values of the ``prompt`` request parameter."""
    NONE = "NONE"
    LOGIN = "LOGIN"
    CONSENT = "CONSENT"
    SELECT_ACCOUNT = "SELECT_ACCOUNT"


class ResponseType(AuthleteEnum):
    """Combinations of the ``response_type`` request parameter."""
    NONE = "NONE"
    CODE = "CODE"
    TOKEN = "TOKEN"
    ID_TOKEN = "ID_TOKEN"
    CODE_TOKEN = "CODE_TOKEN"
    CODE_ID_TOKEN = "CODE_ID_TOKEN"
    ID_TOKEN_TOKEN = "ID_TOKEN_TOKEN"
    CODE_ID_TOKEN_TOKEN = "CODE_ID_TOKEN_TOKEN"


class ServiceProfile(AuthleteEnum):
    FAPI = "FAPI"
    OPEN_BANKING = "OPEN_BANKING"


class Sns(AuthleteEnum):
    """Social networking services usable for authentication."""
    FACEBOOK = "FACEBOOK"


class SubjectType(AuthleteEnum):
    """Subject identifier types (OIDC Core, 8)."""
    PUBLIC = "PUBLIC"
    PAIRWISE = "PAIRWISE"


class UserCodeCharset(AuthleteEnum):
    """Character sets for device flow user codes."""
    BASE20 = "BASE20"
    NUMERIC = "NUMERIC"


class UserIdentificationHintType(AuthleteEnum):
    """Hints identifying the end-user in a CIBA request."""
    ID_TOKEN_HINT = "ID_TOKEN_HINT"
    LOGIN_HINT = "LOGIN_HINT"
    LOGIN_HINT_TOKEN = "LOGIN_HINT_TOKEN"
