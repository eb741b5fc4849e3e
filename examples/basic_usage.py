"""
Basic Authlete usage example.

This example walks through the authorization endpoint of an
authorization server built on Authlete:
- Loading the configuration from the environment
- Parsing an authorization request
- Issuing an authorization code after the end-user consents
- Handling API errors
"""

import logging

from authlete import AuthleteApiException, AuthleteEnvConfiguration, create_api
from authlete.dto import AuthorizationIssueRequest, AuthorizationRequest
from authlete.types import AuthorizationAction, AuthorizationIssueAction


def basic_example():
    """Demonstrate basic Authlete usage"""
    print("Basic Authlete Example")
    print("=" * 30)

    # 1. Read AUTHLETE_BASE_URL, AUTHLETE_SERVICE_APIKEY, ...
    configuration = AuthleteEnvConfiguration.load()

    with create_api(configuration) as api:
        # 2. Forward the query string received at the authorization endpoint
        request = AuthorizationRequest(
            parameters="response_type=code&client_id=5899463614448063&scope=openid")
        response = api.authorization(request)
        print(f"✓ Authorization request parsed: {response.action}")

        if response.action != AuthorizationAction.INTERACTION:
            print(f"✗ Nothing to show to the end-user: {response.response_content}")
            return

        print(f"  client: {response.client.client_name}")
        print(f"  scopes: {[scope.name for scope in response.scopes or []]}")

        # 3. The end-user has authenticated and approved the request
        issue = api.authorization_issue(
            AuthorizationIssueRequest(ticket=response.ticket, subject="john"))

        if issue.action == AuthorizationIssueAction.LOCATION:
            print(f"✓ Redirect to: {issue.response_content}")
        else:
            print(f"✗ Issue failed: {issue.action}")


def main():
    logging.basicConfig(level=logging.DEBUG)

    try:
        basic_example()
    except AuthleteApiException as e:
        print(f"✗ Authlete API error ({e.status_code}): {e.result_message or e.message}")


if __name__ == "__main__":
    main()
