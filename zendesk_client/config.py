"""Connection settings for the Zendesk client."""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from zendesk_client.exceptions import ZendeskConfigError

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 0
API_PATH = "/api/v2"


class ZendeskOptions(BaseModel):
    """Settings needed to talk to one Zendesk account.

    Required fields:
        endpoint: Account URL, e.g. https://acme.zendesk.com

    Credentials (one of):
        username + token: API token auth, sent as "{username}/token"
        oauth_token: OAuth access token, sent as a Bearer token

    Optional fields:
        timeout: Request timeout in seconds (default: 30)
        max_retries: Connection retries performed by the transport (default: 0)
    """

    endpoint: str
    username: str | None = None
    token: str | None = None
    oauth_token: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)

    @field_validator("endpoint")
    @classmethod
    def normalize_endpoint(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        if v.endswith(API_PATH):
            v = v[: -len(API_PATH)]
        return v

    @model_validator(mode="after")
    def credentials_present(self) -> "ZendeskOptions":
        if self.oauth_token:
            return self
        if not (self.username and self.token):
            raise ValueError("either username and token, or oauth_token, must be set")
        return self

    @property
    def api_url(self) -> str:
        """Base URL every relative resource path is joined to."""
        return f"{self.endpoint}{API_PATH}/"

    @classmethod
    def from_env(cls) -> "ZendeskOptions":
        """Build options from environment variables.

        Required environment variables:
            ZENDESK_URL: The account URL.
            ZENDESK_USERNAME and ZENDESK_TOKEN, or ZENDESK_OAUTH_TOKEN.

        Optional environment variables:
            ZENDESK_TIMEOUT: Request timeout in seconds.
            ZENDESK_MAX_RETRIES: Transport connection retries.

        Raises:
            ZendeskConfigError: If a variable is missing or malformed.
        """
        endpoint = os.environ.get("ZENDESK_URL")
        if not endpoint:
            raise ZendeskConfigError("ZENDESK_URL is not set")

        try:
            timeout = float(os.environ.get("ZENDESK_TIMEOUT", str(DEFAULT_TIMEOUT)))
            max_retries = int(os.environ.get("ZENDESK_MAX_RETRIES", str(DEFAULT_MAX_RETRIES)))
        except ValueError as e:
            raise ZendeskConfigError(f"Invalid numeric setting: {e}") from e

        try:
            return cls(
                endpoint=endpoint,
                username=os.environ.get("ZENDESK_USERNAME"),
                token=os.environ.get("ZENDESK_TOKEN"),
                oauth_token=os.environ.get("ZENDESK_OAUTH_TOKEN"),
                timeout=timeout,
                max_retries=max_retries,
            )
        except ValidationError as e:
            raise ZendeskConfigError(str(e)) from e
