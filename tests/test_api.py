"""
Tests for the Authlete API clients, run against httpx.MockTransport.
"""

import base64
import json
import threading
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from authlete.api import (
    USER_AGENT, AuthleteApi, AuthleteApiException, AuthleteApiV3, Settings,
    build_query, create_api
)
from authlete.conf import AuthleteConfiguration
from authlete.dto import (
    AuthorizationIssueRequest, AuthorizationRequest, Client,
    ClientAuthorizationGetListRequest, IDTokenReissueRequest, Service,
    TokenRequest
)
from authlete.types import (
    AuthorizationAction, ConfigurationError, ErrorCode, IDTokenReissueAction,
    JsonParseError, TokenAction, ValidationError
)


class Recorder:
    """Mock transport handler that records requests and replays a response"""

    def __init__(self, status_code=200, body=None, headers=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.headers = headers or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        content = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return httpx.Response(self.status_code, text=content, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def basic(user, password):
    return "Basic " + base64.b64encode(f"{user}:{password}".encode()).decode()


@pytest.fixture
def configuration():
    """Legacy configuration with both credential pairs"""
    return AuthleteConfiguration(
        base_url="https://api.authlete.com/",
        service_owner_api_key="owner-key",
        service_owner_api_secret="owner-secret",
        service_api_key="service-key",
        service_api_secret="service-secret",
    )


@pytest.fixture
def v3_configuration():
    """Version 3 configuration"""
    return AuthleteConfiguration(
        base_url="https://us.authlete.com",
        service_api_key="715948317",
        service_access_token="access-token",
        api_version="V3",
    )


def make_api(configuration, recorder, settings=None):
    return create_api(configuration, settings, transport=httpx.MockTransport(recorder))


class TestBuildQuery:
    """Test query parameter rendering"""

    def test_values(self):
        """Test None, booleans and numbers"""
        assert build_query({"developer": None, "pretty": True, "start": 5}) == [
            ("developer", ""), ("pretty", "true"), ("start", "5"),
        ]

    def test_empty(self):
        """Test no parameters and empty names"""
        assert build_query(None) == []
        assert build_query({"": "x"}) == []


class TestFactory:
    """Test client selection"""

    def test_legacy(self, configuration):
        """Test the legacy client is the default"""
        assert isinstance(create_api(configuration), AuthleteApi)

    def test_v3(self, v3_configuration):
        """Test version 3 selection"""
        api = create_api(v3_configuration)
        assert isinstance(api, AuthleteApiV3)
        assert api.service_id == 715948317

    def test_missing_base_url(self):
        """Test that a client needs a base URL"""
        with pytest.raises(ConfigurationError):
            AuthleteApi(AuthleteConfiguration())

    def test_v3_requires_numeric_service_id(self, v3_configuration):
        """Test version 3 credentials"""
        v3_configuration.service_api_key = "not-a-number"
        with pytest.raises(ConfigurationError):
            AuthleteApiV3(v3_configuration)

        v3_configuration.service_api_key = "715948317"
        v3_configuration.service_access_token = None
        with pytest.raises(ConfigurationError):
            AuthleteApiV3(v3_configuration)


class TestLegacyApi:
    """Test the legacy client"""

    def test_authorization(self, configuration):
        """Test a POST call end to end"""
        recorder = Recorder(body={
            "resultCode": "A004001",
            "action": "INTERACTION",
            "ticket": "ticket-1",
            "client": {"clientId": 5899463614448063, "clientName": "demo"},
        })
        api = make_api(configuration, recorder)

        response = api.authorization(AuthorizationRequest(parameters="response_type=code"))

        request = recorder.last
        assert request.method == "POST"
        assert str(request.url) == "https://api.authlete.com/api/auth/authorization"
        assert request.headers["Authorization"] == basic("service-key", "service-secret")
        assert request.headers["Content-Type"] == "application/json;charset=UTF-8"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == USER_AGENT
        assert recorder.last_json() == {"parameters": "response_type=code"}

        assert response.action is AuthorizationAction.INTERACTION
        assert response.ticket == "ticket-1"
        assert response.client.client_id == 5899463614448063

    def test_service_owner_credentials(self, configuration):
        """Test that service management uses the owner pair"""
        recorder = Recorder(body={"start": 0, "end": 5, "totalCount": 1,
                                  "services": [{"apiKey": 1}]})
        api = make_api(configuration, recorder)

        response = api.get_service_list()

        assert recorder.last.url.path == "/api/service/get/list"
        assert recorder.last.headers["Authorization"] == basic("owner-key", "owner-secret")
        assert response.services[0].api_key == 1

    def test_service_configuration_uses_service_pair(self, configuration):
        """Test that discovery and JWKS use the service pair and return text"""
        recorder = Recorder(body='{"issuer": "https://as.example.com"}')
        api = make_api(configuration, recorder)

        text = api.get_service_configuration()
        assert text == '{"issuer": "https://as.example.com"}'
        assert recorder.last.url.path == "/api/service/configuration"
        assert recorder.last.url.params["pretty"] == "true"
        assert recorder.last.headers["Authorization"] == basic("service-key", "service-secret")

        api.get_service_jwks(include_private_keys=True)
        assert recorder.last.url.path == "/api/service/jwks/get"
        assert recorder.last.url.params["pretty"] == "false"
        assert recorder.last.url.params["includePrivateKeys"] == "true"

    def test_get_service_and_delete(self, configuration):
        """Test service paths with an API key"""
        recorder = Recorder(body={"apiKey": 21653835348762, "serviceName": "demo"})
        api = make_api(configuration, recorder)

        service = api.get_service(21653835348762)
        assert recorder.last.url.path == "/api/service/get/21653835348762"
        assert service.service_name == "demo"

        api.delete_service("21653835348762")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/service/delete/21653835348762"

    def test_update_service_requires_api_key(self, configuration):
        """Test update_service argument check"""
        api = make_api(configuration, Recorder())
        with pytest.raises(ValidationError):
            api.update_service(Service(service_name="demo"))

        recorder = Recorder(body={"apiKey": 7})
        api = make_api(configuration, recorder)
        api.update_service(Service(api_key=7))
        assert recorder.last.url.path == "/api/service/update/7"

    def test_client_list_pagination(self, configuration):
        """Test start and end reach the query"""
        recorder = Recorder(body={"start": 5, "end": 7, "totalCount": 12,
                                  "clients": [{"clientId": 6}, {"clientId": 7}]})
        api = make_api(configuration, recorder)

        response = api.get_client_list(start=5, end=7)

        params = recorder.last.url.params
        assert params["start"] == "5"
        assert params["end"] == "7"
        assert params["developer"] == ""
        assert len(response.clients) == 2
        assert response.total_count == 12

    def test_client_list_empty_range(self, configuration):
        """Test an empty range still reports the total count"""
        recorder = Recorder(body={"start": 7, "end": 5, "totalCount": 12})
        api = make_api(configuration, recorder)

        response = api.get_client_list(developer="john", start=7, end=5)

        assert recorder.last.url.params["developer"] == "john"
        assert response.clients is None
        assert response.total_count == 12

    @pytest.mark.parametrize("start,end", [(-1, 5), (0, -1), ("0", 5), (True, 5)])
    def test_client_list_rejects_bad_range(self, configuration, start, end):
        """Test pagination argument checks"""
        recorder = Recorder()
        api = make_api(configuration, recorder)
        with pytest.raises(ValidationError):
            api.get_client_list(start=start, end=end)
        assert recorder.requests == []

    def test_client_paths(self, configuration):
        """Test client calls with path parameters"""
        recorder = Recorder(body={"clientId": 57, "newClientSecret": "s2"})
        api = make_api(configuration, recorder)

        assert api.get_client(57).client_id == 57
        assert recorder.last.url.path == "/api/client/get/57"

        api.delete_client("57")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/client/delete/57"

        assert api.refresh_client_secret(57).new_client_secret == "s2"
        assert recorder.last.url.path == "/api/client/secret/refresh/57"

        api.update_client_secret(57, "new-secret")
        assert recorder.last.url.path == "/api/client/secret/update/57"
        assert recorder.last_json() == {"clientSecret": "new-secret"}

    def test_client_id_checks(self, configuration):
        """Test client ID argument checks"""
        api = make_api(configuration, Recorder())
        with pytest.raises(ValidationError):
            api.get_client(True)
        with pytest.raises(ValidationError):
            api.delete_client(None)
        with pytest.raises(ValidationError):
            api.update_client(Client(client_name="no id"))

    def test_update_client(self, configuration):
        """Test update_client sends the client"""
        recorder = Recorder(body={"clientId": 57, "clientName": "renamed"})
        api = make_api(configuration, recorder)

        client = api.update_client(Client(client_id=57, client_name="renamed"))

        assert recorder.last.url.path == "/api/client/update/57"
        assert recorder.last_json()["clientName"] == "renamed"
        assert client.client_name == "renamed"

    def test_granted_scopes(self, configuration):
        """Test the granted scopes calls build their requests"""
        recorder = Recorder(body={"resultCode": "A001", "latestGrantedScopes": ["openid"]})
        api = make_api(configuration, recorder)

        response = api.get_granted_scopes(57, "john")
        assert recorder.last.url.path == "/api/client/granted_scopes/get/57"
        assert recorder.last_json() == {"subject": "john"}
        assert response.latest_granted_scopes == ["openid"]

        api.delete_granted_scopes(57, "john")
        assert recorder.last.url.path == "/api/client/granted_scopes/delete/57"

        api.delete_client_authorization(57, "john")
        assert recorder.last.url.path == "/api/client/authorization/delete/57"
        assert recorder.last_json() == {"subject": "john"}

    def test_client_authorization_list(self, configuration):
        """Test the authorized client list"""
        recorder = Recorder(body={"subject": "john", "totalCount": 1,
                                  "clients": [{"clientId": 1}]})
        api = make_api(configuration, recorder)

        response = api.get_client_authorization_list(
            ClientAuthorizationGetListRequest(subject="john", start=0, end=10))

        assert recorder.last_json()["end"] == 10
        assert response.subject == "john"

    def test_token_delete(self, configuration):
        """Test a DELETE call with the token in the path"""
        recorder = Recorder(status_code=204, body="")
        api = make_api(configuration, recorder)

        assert api.token_delete("a/b") is None
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.raw_path == b"/api/auth/token/delete/a%2Fb"

    def test_settings_applied(self, configuration):
        """Test that settings reach the HTTP client"""
        recorder = Recorder(body={"action": "OK"})
        api = make_api(configuration, recorder, Settings(connection_timeout=7))

        api.token(TokenRequest(parameters="grant_type=client_credentials"))

        assert recorder.last.extensions["timeout"]["connect"] == 7

    def test_context_manager(self, configuration):
        """Test that the client closes its HTTP connection pool"""
        recorder = Recorder(body={"action": "OK"})
        with make_api(configuration, recorder) as api:
            response = api.token(TokenRequest(parameters="grant_type=refresh_token"))
            assert response.action is TokenAction.OK
            assert api._client is not None
        assert api._client is None

    def test_concurrent_first_calls_share_client(self, configuration):
        """Test that threads racing on the first call get one HTTP client"""
        api = make_api(configuration, Recorder())
        barrier = threading.Barrier(8)

        def first_call():
            barrier.wait()
            return api._http_client()

        with ThreadPoolExecutor(max_workers=8) as executor:
            clients = list(executor.map(lambda _: first_call(), range(8)))

        assert len({id(client) for client in clients}) == 1
        assert clients[0] is api._client
        api.close()


class TestErrors:
    """Test error mapping"""

    def test_unexpected_status(self, configuration):
        """Test non-2xx responses"""
        recorder = Recorder(
            status_code=400,
            body={"resultCode": "A001201", "resultMessage": "[A001201] Bad ticket."},
            headers={"X-Request-Id": "abc"})
        api = make_api(configuration, recorder)

        with pytest.raises(AuthleteApiException) as exc_info:
            api.authorization_issue(AuthorizationIssueRequest(ticket="t", subject="john"))

        error = exc_info.value
        assert error.status_code == 400
        assert error.error_code == ErrorCode.API_ERROR
        assert error.result_message == "[A001201] Bad ticket."
        assert error.response_headers.get_first("x-request-id") == "abc"
        assert "A001201" in error.response_body
        assert error.message == (
            "Unexpected response: path=/api/auth/authorization/issue, "
            "statusCode=400, resultMessage=[A001201] Bad ticket.")

    def test_unexpected_status_without_json(self, configuration):
        """Test a non-JSON error body"""
        api = make_api(configuration, Recorder(status_code=502, body="Bad Gateway"))

        with pytest.raises(AuthleteApiException) as exc_info:
            api.get_client(1)

        assert exc_info.value.status_code == 502
        assert exc_info.value.result_message is None
        assert exc_info.value.response_body == "Bad Gateway"

    def test_transport_failure(self, configuration):
        """Test that httpx errors are wrapped"""
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        api = create_api(configuration, transport=httpx.MockTransport(refuse))

        with pytest.raises(AuthleteApiException) as exc_info:
            api.get_client(1)

        error = exc_info.value
        assert error.status_code == 0
        assert error.error_code == ErrorCode.TRANSPORT_ERROR
        assert isinstance(error.cause, httpx.ConnectError)

    def test_malformed_success_body(self, configuration):
        """Test that a broken success body raises JsonParseError"""
        api = make_api(configuration, Recorder(body="{not json"))
        with pytest.raises(JsonParseError):
            api.get_client(1)


class TestV3Api:
    """Test the version 3 client"""

    def test_bearer_and_service_path(self, v3_configuration):
        """Test the token and the service ID in the path"""
        recorder = Recorder(body={"action": "INTERACTION"})
        api = make_api(v3_configuration, recorder)

        api.authorization(AuthorizationRequest(parameters="response_type=code"))

        assert str(recorder.last.url) == "https://us.authlete.com/api/715948317/auth/authorization"
        assert recorder.last.headers["Authorization"] == "Bearer access-token"

    def test_service_calls(self, v3_configuration):
        """Test service paths"""
        recorder = Recorder(body={"apiKey": 715948317, "services": []})
        api = make_api(v3_configuration, recorder)

        assert api.get_service().api_key == 715948317
        assert recorder.last.url.path == "/api/715948317/service/get"

        api.get_service_list(0, 10)
        assert recorder.last.url.path == "/api/service/get/list"
        assert recorder.last.headers["Authorization"] == "Bearer access-token"

        api.create_service(Service(service_name="new"))
        assert recorder.last.url.path == "/api/service/create"

        api.delete_service()
        assert recorder.last.url.path == "/api/715948317/service/delete"

    def test_client_path(self, v3_configuration):
        """Test client paths carry both identifiers"""
        recorder = Recorder(body={"clientId": 57})
        api = make_api(v3_configuration, recorder)

        api.get_client(57)

        assert recorder.last.url.path == "/api/715948317/client/get/57"

    def test_id_token_reissue(self, v3_configuration):
        """Test the ID token reissue call"""
        recorder = Recorder(body={"action": "OK", "idToken": "eyJ..."})
        api = make_api(v3_configuration, recorder)

        response = api.id_token_reissue(IDTokenReissueRequest(refresh_token="rt"))

        assert recorder.last.url.path == "/api/715948317/idtoken/reissue"
        assert recorder.last_json()["refreshToken"] == "rt"
        assert response.action is IDTokenReissueAction.OK
        assert response.id_token == "eyJ..."
