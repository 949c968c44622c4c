"""Translate unexpected HTTP responses into typed exceptions."""

from collections.abc import Collection
from typing import Any

import httpx

from zendesk_client.exceptions import (
    ZendeskAuthenticationError,
    ZendeskBadRequestError,
    ZendeskConflictError,
    ZendeskForbiddenError,
    ZendeskNotFoundError,
    ZendeskRateLimitError,
    ZendeskRequestError,
    ZendeskServerError,
    ZendeskUnprocessableEntityError,
)

HELP_DOCS_BASE_URL = "https://developer.zendesk.com/api-reference/"

STATUS_ERRORS: dict[int, type[ZendeskRequestError]] = {
    400: ZendeskBadRequestError,
    401: ZendeskAuthenticationError,
    403: ZendeskForbiddenError,
    404: ZendeskNotFoundError,
    409: ZendeskConflictError,
    422: ZendeskUnprocessableEntityError,
    429: ZendeskRateLimitError,
}


def help_docs_url(doc: str | None) -> str | None:
    if not doc:
        return None
    return HELP_DOCS_BASE_URL + doc.lstrip("/")


def error_class_for(status_code: int) -> type[ZendeskRequestError]:
    """Pick the exception type for a status code."""
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if status_code >= 500:
        return ZendeskServerError
    return ZendeskRequestError


def parse_retry_after(response: httpx.Response) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _error_fields(response: httpx.Response) -> dict[str, Any]:
    """Pull Zendesk's error/description/details out of a JSON error body.

    Zendesk sends either {"error": "RecordNotFound", "description": ...}
    or {"error": {"title": ..., "message": ...}} depending on the endpoint.
    """
    try:
        body = response.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}

    error = body.get("error")
    description = body.get("description")
    if isinstance(error, dict):
        description = description or error.get("message")
        error = error.get("title")
    details = body.get("details")
    return {
        "error": error if isinstance(error, str) else None,
        "description": description if isinstance(description, str) else None,
        "details": details if isinstance(details, dict) else None,
    }


def build_request_error(
    response: httpx.Response,
    *,
    expected: Collection[int],
    doc: str | None = None,
) -> ZendeskRequestError:
    """Build the exception describing an unexpected response.

    Args:
        response: The response that failed the status check.
        expected: Status codes the operation accepts.
        doc: Path of the operation's page under the API reference.

    Returns:
        A ZendeskRequestError subclass matching the status code.
    """
    status = response.status_code
    fields = _error_fields(response)
    docs = help_docs_url(doc)

    expected_text = ",".join(str(code) for code in expected)
    message = f"Status code retrieved was {status} and not a {expected_text} as expected"
    if fields.get("error"):
        message += f": {fields['error']}"
        if fields.get("description"):
            message += f" - {fields['description']}"
    if docs:
        message += f" See: {docs}"

    error_class = error_class_for(status) if status not in range(200, 300) else ZendeskRequestError
    kwargs: dict[str, Any] = {
        **fields,
        "response_body": response.text,
        "help_docs_url": docs,
    }
    if error_class is ZendeskRateLimitError:
        kwargs["retry_after"] = parse_retry_after(response)
    return error_class(message, status, **kwargs)


def raise_for_status(
    response: httpx.Response,
    *,
    expected: Collection[int] = (200,),
    doc: str | None = None,
) -> None:
    """Raise a typed error unless the response status is one of `expected`."""
    if response.status_code not in expected:
        raise build_request_error(response, expected=expected, doc=doc)
