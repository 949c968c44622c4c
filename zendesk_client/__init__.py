"""Typed Python client for the Zendesk Support API.

Public API:
    ZendeskClient - Entry point; one attribute per resource
    ZendeskOptions - Connection settings
    ZendeskQuery - Search query builder
    PagerParameters, CursorPager, Page - Pagination
    zendesk_client.models - Resource models
    zendesk_client.exceptions - Error hierarchy
"""

from zendesk_client._version import __version__
from zendesk_client.client import ZendeskClient
from zendesk_client.config import ZendeskOptions
from zendesk_client.exceptions import (
    ZendeskAuthenticationError,
    ZendeskBadRequestError,
    ZendeskConfigError,
    ZendeskConflictError,
    ZendeskConnectionError,
    ZendeskError,
    ZendeskForbiddenError,
    ZendeskNotFoundError,
    ZendeskRateLimitError,
    ZendeskRequestError,
    ZendeskServerError,
    ZendeskTimeoutError,
    ZendeskUnprocessableEntityError,
    ZendeskValidationError,
)
from zendesk_client.pagination import CursorPager, Page, PagerParameters
from zendesk_client.query import ZendeskQuery

__all__ = [
    "__version__",
    "ZendeskClient",
    "ZendeskOptions",
    "ZendeskQuery",
    "PagerParameters",
    "CursorPager",
    "Page",
    "ZendeskError",
    "ZendeskConfigError",
    "ZendeskValidationError",
    "ZendeskConnectionError",
    "ZendeskTimeoutError",
    "ZendeskRequestError",
    "ZendeskBadRequestError",
    "ZendeskAuthenticationError",
    "ZendeskForbiddenError",
    "ZendeskNotFoundError",
    "ZendeskConflictError",
    "ZendeskUnprocessableEntityError",
    "ZendeskRateLimitError",
    "ZendeskServerError",
]
