"""Public exceptions for the Zendesk client."""

from typing import Any


class ZendeskError(Exception):
    """Base exception for all Zendesk client errors."""


class ZendeskConfigError(ZendeskError):
    """Configuration error (missing env vars, invalid config)."""


class ZendeskValidationError(ZendeskError):
    """Validation error for request/response data."""


class ZendeskConnectionError(ZendeskError):
    """The request never produced an HTTP response."""


class ZendeskTimeoutError(ZendeskConnectionError):
    """The request timed out."""


class ZendeskRequestError(ZendeskError):
    """Zendesk answered with a status code the operation did not expect."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        error: str | None = None,
        description: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: str | None = None,
        help_docs_url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.description = description
        self.details = details
        self.response_body = response_body
        self.help_docs_url = help_docs_url


class ZendeskBadRequestError(ZendeskRequestError):
    """400 Bad Request."""


class ZendeskAuthenticationError(ZendeskRequestError):
    """401 Unauthorized: bad or missing credentials."""


class ZendeskForbiddenError(ZendeskRequestError):
    """403 Forbidden."""


class ZendeskNotFoundError(ZendeskRequestError):
    """404 Not Found."""


class ZendeskConflictError(ZendeskRequestError):
    """409 Conflict."""


class ZendeskUnprocessableEntityError(ZendeskRequestError):
    """422 Unprocessable Entity, usually a RecordInvalid with field details."""


class ZendeskRateLimitError(ZendeskRequestError):
    """429 Too Many Requests."""

    def __init__(self, message: str, status_code: int | None = None, *, retry_after: float | None = None, **kwargs: Any) -> None:
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


class ZendeskServerError(ZendeskRequestError):
    """5xx from Zendesk."""
