"""
Error raised when a call to the Authlete API fails.
"""

from typing import Any, Dict, Optional

from ..types.errors import API_ERROR, TRANSPORT_ERROR, AuthleteError
from ..util.encoding import extract_result_message
from ..web.headers import HttpHeaders


class AuthleteApiException(AuthleteError):
    """
    Raised for non-2xx responses and for network failures.

    ``status_code`` is 0 when no response was received; ``cause`` then
    holds the underlying HTTP library error.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_headers: Optional[HttpHeaders] = None,
        response_body: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        error_code = API_ERROR if status_code else TRANSPORT_ERROR
        super().__init__(message, error_code, cause=cause)
        self.status_code = status_code
        self.response_headers = response_headers or HttpHeaders()
        self.response_body = response_body
        self.result_message = extract_result_message(response_body)

        if status_code:
            self.details['status_code'] = status_code
        if self.result_message:
            self.details['result_message'] = self.result_message

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['response_body'] = self.response_body
        return result
