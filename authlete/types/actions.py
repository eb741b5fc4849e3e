"""
Actions, reasons and results carried by Authlete API requests and responses.

An ``action`` tells the caller what to do next with ``responseContent``.
Reasons and results are sent by the caller to describe an outcome.
"""

from .enum import AuthleteEnum


class AuthorizationAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    LOCATION = "LOCATION"
    FORM = "FORM"
    NO_INTERACTION = "NO_INTERACTION"
    INTERACTION = "INTERACTION"


class AuthorizationFailAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    LOCATION = "LOCATION"
    FORM = "FORM"


class AuthorizationFailReason(AuthleteEnum):
    UNKNOWN = "UNKNOWN"
    NOT_LOGGED_IN = "NOT_LOGGED_IN"
    MAX_AGE_NOT_SUPPORTED = "MAX_AGE_NOT_SUPPORTED"
    EXCEEDS_MAX_AGE = "EXCEEDS_MAX_AGE"
    DIFFERENT_SUBJECT = "DIFFERENT_SUBJECT"
    ACR_NOT_SATISFIED = "ACR_NOT_SATISFIED"
    DENIED = "DENIED"
    SERVER_ERROR = "SERVER_ERROR"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    ACCOUNT_SELECTION_REQUIRED = "ACCOUNT_SELECTION_REQUIRED"
    CONSENT_REQUIRED = "CONSENT_REQUIRED"
    INTERACTION_REQUIRED = "INTERACTION_REQUIRED"
    INVALID_TARGET = "INVALID_TARGET"


class AuthorizationIssueAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    LOCATION = "LOCATION"
    FORM = "FORM"


class BackchannelAuthenticationAction(AuthleteEnum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    USER_IDENTIFICATION = "USER_IDENTIFICATION"


class BackchannelAuthenticationCompleteAction(AuthleteEnum):
    NOTIFICATION = "NOTIFICATION"
    NO_ACTION = "NO_ACTION"
    SERVER_ERROR = "SERVER_ERROR"


class BackchannelAuthenticationCompleteResult(AuthleteEnum):
    AUTHORIZED = "AUTHORIZED"
    ACCESS_DENIED = "ACCESS_DENIED"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"


class BackchannelAuthenticationFailAction(AuthleteEnum):
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class BackchannelAuthenticationFailReason(AuthleteEnum):
    EXPIRED_LOGIN_HINT_TOKEN = "EXPIRED_LOGIN_HINT_TOKEN"
    UNKNOWN_USER_ID = "UNKNOWN_USER_ID"
    UNAUTHORIZED_CLIENT = "UNAUTHORIZED_CLIENT"
    MISSING_USER_CODE = "MISSING_USER_CODE"
    INVALID_USER_CODE = "INVALID_USER_CODE"
    INVALID_BINDING_MESSAGE = "INVALID_BINDING_MESSAGE"
    INVALID_TARGET = "INVALID_TARGET"
    ACCESS_DENIED = "ACCESS_DENIED"
    SERVER_ERROR = "SERVER_ERROR"


class BackchannelAuthenticationIssueAction(AuthleteEnum):
    OK = "OK"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    INVALID_TICKET = "INVALID_TICKET"


class DeviceAuthorizationAction(AuthleteEnum):
    OK = "OK"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DeviceCompleteAction(AuthleteEnum):
    SUCCESS = "SUCCESS"
    INVALID_REQUEST = "INVALID_REQUEST"
    USER_CODE_EXPIRED = "USER_CODE_EXPIRED"
    USER_CODE_NOT_EXIST = "USER_CODE_NOT_EXIST"
    SERVER_ERROR = "SERVER_ERROR"


class DeviceCompleteResult(AuthleteEnum):
    AUTHORIZED = "AUTHORIZED"
    ACCESS_DENIED = "ACCESS_DENIED"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"


class DeviceVerificationAction(AuthleteEnum):
    VALID = "VALID"
    EXPIRED = "EXPIRED"
    NOT_EXIST = "NOT_EXIST"
    SERVER_ERROR = "SERVER_ERROR"


class IDTokenReissueAction(AuthleteEnum):
    OK = "OK"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    CALLER_ERROR = "CALLER_ERROR"


class IntrospectionAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    OK = "OK"


class PushedAuthReqAction(AuthleteEnum):
    CREATED = "CREATED"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class RevocationAction(AuthleteEnum):
    INVALID_CLIENT = "INVALID_CLIENT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    OK = "OK"


class StandardIntrospectionAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    OK = "OK"


class TokenAction(AuthleteEnum):
    INVALID_CLIENT = "INVALID_CLIENT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    PASSWORD = "PASSWORD"
    OK = "OK"


class TokenCreateAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    OK = "OK"


class TokenFailAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


class TokenFailReason(AuthleteEnum):
    UNKNOWN = "UNKNOWN"
    INVALID_RESOURCE_OWNER_CREDENTIALS = "INVALID_RESOURCE_OWNER_CREDENTIALS"


class TokenIssueAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    OK = "OK"


class TokenUpdateAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    OK = "OK"


class UserInfoAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    OK = "OK"


class UserInfoIssueAction(AuthleteEnum):
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    JSON = "JSON"
    JWT = "JWT"
