"""End-user requests: the requester's view of their tickets."""

from collections.abc import Collection, Iterator

from zendesk_client._internal.resource import Payload, Resource
from zendesk_client.models.support_requests import SupportRequest, SupportRequestCreate, SupportRequestUpdate
from zendesk_client.models.tickets import TicketComment, TicketStatus
from zendesk_client.pagination import Page, Pager

DOCS = "ticketing/tickets/ticket-requests/"


class SupportRequestsResource(Resource):
    def get_all(
        self,
        pager: Pager | None = None,
        *,
        statuses: Collection[TicketStatus] | None = None,
    ) -> Page[SupportRequest]:
        """List one page of the authenticated user's requests.

        Args:
            pager: Page to fetch.
            statuses: Only list requests in these statuses.
        """
        params = {"status": ",".join(statuses)} if statuses else None
        return self._fetch_page(
            "requests.json", "requests", SupportRequest, doc=DOCS + "#list-requests", pager=pager, params=params
        )

    def iter_all(
        self,
        pager: Pager | None = None,
        *,
        statuses: Collection[TicketStatus] | None = None,
    ) -> Iterator[SupportRequest]:
        """Iterate over every request of the authenticated user.

        Args:
            pager: Where to start; later pages follow `next_page`.
            statuses: Only list requests in these statuses.
        """
        params = {"status": ",".join(statuses)} if statuses else None
        return self._iterate(
            "requests.json", "requests", SupportRequest, doc=DOCS + "#list-requests", pager=pager, params=params
        )

    def search(self, query: str, pager: Pager | None = None) -> Page[SupportRequest]:
        """Search the authenticated user's requests.

        Args:
            query: Search text.
            pager: Page to fetch.
        """
        return self._fetch_page(
            "requests/search.json",
            "requests",
            SupportRequest,
            doc=DOCS + "#search-requests",
            pager=pager,
            params={"query": query},
        )

    def iter_search(self, query: str, pager: Pager | None = None) -> Iterator[SupportRequest]:
        """Iterate over every request matching a search.

        Args:
            query: Search text.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            "requests/search.json",
            "requests",
            SupportRequest,
            doc=DOCS + "#search-requests",
            pager=pager,
            params={"query": query},
        )

    def get(self, request_id: int) -> SupportRequest | None:
        """Fetch a request, or None if it does not exist."""
        return self._fetch(f"requests/{request_id}.json", "request", SupportRequest, doc=DOCS + "#show-request")

    def create(self, request: SupportRequestCreate | Payload) -> SupportRequest:
        """Open a request as the authenticated end user.

        Args:
            request: Subject and first comment.

        Returns:
            The created request.
        """
        return self._create("requests.json", "request", request, SupportRequest, doc=DOCS + "#create-request")

    def update(self, request_id: int, changes: SupportRequestUpdate | Payload) -> SupportRequest | None:
        """Add a comment to a request or mark it solved.

        Args:
            request_id: Request to update.
            changes: The comment and/or `solved`.

        Returns:
            The updated request, or None if it does not exist.
        """
        return self._update(
            f"requests/{request_id}.json", "request", changes, SupportRequest, doc=DOCS + "#update-request"
        )

    def get_comments(self, request_id: int, pager: Pager | None = None) -> Page[TicketComment]:
        """List one page of a request's public comments.

        Args:
            request_id: Request whose comments to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"requests/{request_id}/comments.json",
            "comments",
            TicketComment,
            doc=DOCS + "#listing-comments",
            pager=pager,
        )

    def iter_comments(self, request_id: int, pager: Pager | None = None) -> Iterator[TicketComment]:
        """Iterate over every public comment of a request.

        Args:
            request_id: Request whose comments to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"requests/{request_id}/comments.json",
            "comments",
            TicketComment,
            doc=DOCS + "#listing-comments",
            pager=pager,
        )
