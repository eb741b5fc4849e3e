"""
Tests for the web helpers and the max_age check.
"""

import time

import httpx
import pytest

from authlete.types import ValidationError
from authlete.util import MaxAgeValidator
from authlete.web import BasicCredentials, HttpHeaders, HttpMethod


class TestBasicCredentials:
    """Test Basic credentials"""

    def test_header_value(self):
        """Test encoding of the Authorization header"""
        credentials = BasicCredentials("Aladdin", "open sesame")
        assert credentials.credentials == "Aladdin:open sesame"
        assert credentials.header_value() == "Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="

    def test_missing_parts(self):
        """Test that missing parts render as empty"""
        assert BasicCredentials().credentials == ":"
        assert BasicCredentials("user").credentials == "user:"

    def test_parse(self):
        """Test parsing of an Authorization header"""
        credentials = BasicCredentials.parse("basic  QWxhZGRpbjpvcGVuIHNlc2FtZQ==")
        assert credentials == BasicCredentials("Aladdin", "open sesame")

    def test_parse_password_with_colon(self):
        """Test that only the first colon separates user and password"""
        header = BasicCredentials("user", "pa:ss").header_value()
        assert BasicCredentials.parse(header).password == "pa:ss"

    @pytest.mark.parametrize("header", [
        None,
        "",
        "Bearer abc",
        "Basic",
        "Basic !!!not-base64!!!",
    ])
    def test_parse_malformed(self, header):
        """Test that malformed headers yield empty credentials"""
        credentials = BasicCredentials.parse(header)
        assert credentials.user_id is None
        assert credentials.password is None

    def test_rejects_non_strings(self):
        """Test argument validation"""
        with pytest.raises(ValidationError):
            BasicCredentials(123, "secret")

    def test_repr_hides_password(self):
        """Test that the password is not part of the repr"""
        assert "secret" not in repr(BasicCredentials("user", "secret"))


class TestHttpHeaders:
    """Test the header map"""

    def test_case_insensitive_multi_valued(self):
        """Test lookups ignore case and keep every value"""
        headers = HttpHeaders()
        headers.add("Set-Cookie", "a=1").add("set-cookie", "b=2")
        assert headers.get("SET-COOKIE") == ["a=1", "b=2"]
        assert headers.get_first("set-cookie") == "a=1"
        assert "Set-Cookie" in headers
        assert len(headers) == 1
        assert headers.as_dict() == {"Set-Cookie": ["a=1", "b=2"]}

    def test_missing(self):
        """Test missing headers"""
        headers = HttpHeaders()
        assert headers.get("X-Missing") is None
        assert headers.get_first("X-Missing") is None
        assert headers.get(None) is None
        assert "X-Missing" not in headers

    def test_parse(self):
        """Test parsing raw header lines"""
        headers = HttpHeaders.parse(
            "HTTP/1.1 400 Bad Request\r\n"
            "Content-Type: application/json\r\n"
            "WWW-Authenticate: Basic realm=\"authlete\"\r\n")
        assert headers.get_first("content-type") == "application/json"
        assert headers.get_first("www-authenticate") == 'Basic realm="authlete"'
        assert HttpHeaders.parse(None).as_dict() == {}

    def test_from_pairs(self):
        """Test building from name/value pairs"""
        headers = HttpHeaders.from_pairs([("A", "1"), ("a", "2"), ("B", "3")])
        assert headers.get("a") == ["1", "2"]
        assert len(headers) == 2

    def test_from_httpx_headers(self):
        """Test wrapping the headers of an httpx response"""
        response = httpx.Response(400, headers=[
            ("X-Request-Id", "abc"),
            ("Set-Cookie", "a=1"),
            ("set-cookie", "b=2"),
        ])
        headers = HttpHeaders(response.headers)
        assert headers.get_first("x-request-id") == "abc"
        assert headers.get("SET-COOKIE") == ["a=1", "b=2"]
        assert headers.as_dict()["Set-Cookie"] == ["a=1", "b=2"]
        assert isinstance(headers.headers, httpx.Headers)


class TestHttpMethod:
    """Test HTTP methods"""

    def test_values(self):
        """Test method names"""
        assert [m.value for m in HttpMethod] == ["GET", "POST", "PUT", "DELETE"]


class TestMaxAgeValidator:
    """Test the max_age check"""

    def test_no_max_age(self):
        """Test that a missing max_age always passes"""
        assert MaxAgeValidator().validate()
        assert MaxAgeValidator(max_age=None, auth_time=0).validate()
        assert MaxAgeValidator(max_age="0", auth_time=0).validate()

    def test_fresh_and_expired(self):
        """Test the boundary of the check"""
        validator = MaxAgeValidator(max_age=600, auth_time=1000)
        assert validator.set_current_time(1599).validate()
        assert not validator.set_current_time(1600).validate()

    def test_string_values(self):
        """Test numeric strings"""
        validator = (MaxAgeValidator()
                     .set_max_age("600")
                     .set_authentication_time("1000")
                     .set_current_time("1001"))
        assert validator.validate()

    def test_default_current_time(self):
        """Test that the current time defaults to now"""
        now = int(time.time())
        assert MaxAgeValidator(max_age=3600, auth_time=now).validate()
        assert not MaxAgeValidator(max_age=60, auth_time=now - 3600).validate()
