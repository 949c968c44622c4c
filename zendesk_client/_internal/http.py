"""Shared HTTP client configuration."""

import httpx

from zendesk_client._version import __version__
from zendesk_client.config import ZendeskOptions


def build_auth(options: ZendeskOptions) -> httpx.Auth:
    """Pick the auth scheme for the configured credentials."""
    if options.oauth_token:
        return BearerAuth(options.oauth_token)
    return httpx.BasicAuth(f"{options.username}/token", options.token or "")


class BearerAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def create_http_client(options: ZendeskOptions) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        options: Account URL, credentials, timeout and retry settings.

    Returns:
        Configured httpx.Client instance rooted at the account's /api/v2/.
    """
    return httpx.Client(
        base_url=options.api_url,
        auth=build_auth(options),
        timeout=options.timeout,
        transport=httpx.HTTPTransport(retries=options.max_retries),
        headers={
            "User-Agent": f"zendesk-client/{__version__}",
            "Accept": "application/json",
        },
    )
