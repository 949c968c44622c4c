"""User-facing client for the Zendesk Support API.

Example usage:
    from zendesk_client import ZendeskClient
    from zendesk_client.models import TicketCommentRequest, TicketCreateRequest

    with ZendeskClient(
        endpoint="https://acme.zendesk.com",
        username="agent@acme.com",
        token="api-token",
    ) as client:
        ticket = client.tickets.create(
            TicketCreateRequest(
                subject="Printer on fire",
                comment=TicketCommentRequest(body="Third floor, near the kitchen"),
            )
        )

        for user in client.users.iter_all():
            print(user.name)
"""

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from zendesk_client._internal.http import create_http_client
from zendesk_client.config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ZendeskOptions
from zendesk_client.exceptions import ZendeskConfigError
from zendesk_client.resources import (
    AttachmentsResource,
    GroupMembershipsResource,
    GroupsResource,
    HelpCenter,
    HelpCenterArticlesResource,
    HelpCenterCategoriesResource,
    HelpCenterSectionsResource,
    JobStatusesResource,
    LocalesResource,
    OrganizationFieldsResource,
    OrganizationMembershipsResource,
    OrganizationsResource,
    SatisfactionRatingsResource,
    SearchResource,
    SupportRequestsResource,
    TicketAuditsResource,
    TicketCommentsResource,
    TicketFieldsResource,
    TicketFormsResource,
    TicketsResource,
    UserFieldsResource,
    UserIdentitiesResource,
    UsersResource,
)


class ZendeskClient:
    """Entry point exposing every resource over one shared HTTP connection pool.

    Pass `http_client` to supply your own configured httpx.Client (it is then
    not closed by this client). It must already carry the base URL and auth,
    so it cannot be combined with `endpoint`, credentials or `options`, and
    `self.options` is None. Otherwise one is created from the options and
    closed by `close()` or on leaving the `with` block.
    """

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        username: str | None = None,
        token: str | None = None,
        oauth_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        options: ZendeskOptions | None = None,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: Account URL, e.g. https://acme.zendesk.com
            username: Agent email, used with `token`.
            token: API token.
            oauth_token: OAuth access token, instead of username/token.
            timeout: Request timeout in seconds.
            max_retries: Connection retries performed by the transport.
            options: Prebuilt options; replaces all of the above.
            http_client: Preconfigured httpx.Client to use instead of building one.
            logger: Logger for request tracing (default: "zendesk_client").

        Raises:
            ZendeskConfigError: If the settings are invalid, or if `http_client`
                is combined with `endpoint`, credentials or `options`.
        """
        if http_client is not None and (options is not None or any([endpoint, username, token, oauth_token])):
            raise ZendeskConfigError(
                "http_client already carries the endpoint and auth; do not pass endpoint, credentials or options"
            )
        if options is None and http_client is None:
            try:
                options = ZendeskOptions(
                    endpoint=endpoint or "",
                    username=username,
                    token=token,
                    oauth_token=oauth_token,
                    timeout=timeout,
                    max_retries=max_retries,
                )
            except ValidationError as e:
                raise ZendeskConfigError(str(e)) from e
        self.options = options
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client(options)  # type: ignore[arg-type]

        def build(resource_class):
            return resource_class(self._http, logger=logger)

        self.tickets: TicketsResource = build(TicketsResource)
        self.ticket_comments: TicketCommentsResource = build(TicketCommentsResource)
        self.ticket_audits: TicketAuditsResource = build(TicketAuditsResource)
        self.ticket_fields: TicketFieldsResource = build(TicketFieldsResource)
        self.ticket_forms: TicketFormsResource = build(TicketFormsResource)
        self.satisfaction_ratings: SatisfactionRatingsResource = build(SatisfactionRatingsResource)
        self.users: UsersResource = build(UsersResource)
        self.user_fields: UserFieldsResource = build(UserFieldsResource)
        self.user_identities: UserIdentitiesResource = build(UserIdentitiesResource)
        self.organizations: OrganizationsResource = build(OrganizationsResource)
        self.organization_fields: OrganizationFieldsResource = build(OrganizationFieldsResource)
        self.organization_memberships: OrganizationMembershipsResource = build(OrganizationMembershipsResource)
        self.groups: GroupsResource = build(GroupsResource)
        self.group_memberships: GroupMembershipsResource = build(GroupMembershipsResource)
        self.search: SearchResource = build(SearchResource)
        self.requests: SupportRequestsResource = build(SupportRequestsResource)
        self.attachments: AttachmentsResource = build(AttachmentsResource)
        self.job_statuses: JobStatusesResource = build(JobStatusesResource)
        self.locales: LocalesResource = build(LocalesResource)
        self.help_center = HelpCenter(
            categories=build(HelpCenterCategoriesResource),
            sections=build(HelpCenterSectionsResource),
            articles=build(HelpCenterArticlesResource),
        )

    @classmethod
    def from_options(cls, options: ZendeskOptions, *, logger: logging.Logger | None = None) -> "ZendeskClient":
        return cls(options=options, logger=logger)

    @classmethod
    def from_env(cls, *, logger: logging.Logger | None = None) -> "ZendeskClient":
        """Create a client from ZENDESK_* environment variables.

        See ZendeskOptions.from_env for the variables read.

        Raises:
            ZendeskConfigError: If required variables are missing or malformed.
        """
        return cls(options=ZendeskOptions.from_env(), logger=logger)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ZendeskClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
