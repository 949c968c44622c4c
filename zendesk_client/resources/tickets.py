"""Ticket resources: tickets, comments, audits, fields, forms and ratings."""

from collections.abc import Collection, Iterator, Sequence

from zendesk_client._internal.resource import CrudResource, Payload, Resource, dump_payload, join_ids
from zendesk_client.models.jobs import JobStatus
from zendesk_client.models.tickets import (
    SatisfactionRating,
    Ticket,
    TicketAudit,
    TicketComment,
    TicketCommentRequest,
    TicketCreateRequest,
    TicketField,
    TicketForm,
    TicketUpdateRequest,
)
from zendesk_client.pagination import CursorPager, Page, Pager

TICKETS_DOCS = "ticketing/tickets/tickets/"
COMMENTS_DOCS = "ticketing/tickets/ticket_comments/"
AUDITS_DOCS = "ticketing/tickets/ticket_audits/"
RATINGS_DOCS = "ticketing/ticket-management/satisfaction_ratings/"


class TicketsResource(Resource):
    """Tickets: /api/v2/tickets."""

    def get_all(self, pager: Pager | None = None) -> Page[Ticket]:
        """List one page of tickets.

        Args:
            pager: Offset or cursor paging; Zendesk defaults apply when omitted.

        Returns:
            The page, with `next_page` set while more tickets remain.
        """
        return self._fetch_page("tickets.json", "tickets", Ticket, doc=TICKETS_DOCS + "#list-tickets", pager=pager)

    def iter_all(self, pager: Pager | None = None) -> Iterator[Ticket]:
        """Iterate over every ticket, fetching pages lazily."""
        return self._iterate("tickets.json", "tickets", Ticket, doc=TICKETS_DOCS + "#list-tickets", pager=pager)

    def get_all_for_organization(self, organization_id: int, pager: Pager | None = None) -> Page[Ticket]:
        """List one page of an organization's tickets.

        Args:
            organization_id: Organization whose tickets to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"organizations/{organization_id}/tickets.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def iter_all_for_organization(self, organization_id: int, pager: Pager | None = None) -> Iterator[Ticket]:
        """Iterate over every ticket of an organization.

        Args:
            organization_id: Organization whose tickets to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"organizations/{organization_id}/tickets.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def get_all_requested_by(self, user_id: int, pager: Pager | None = None) -> Page[Ticket]:
        """List one page of the tickets a user requested.

        Args:
            user_id: Requester.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/tickets/requested.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def iter_all_requested_by(self, user_id: int, pager: Pager | None = None) -> Iterator[Ticket]:
        """Iterate over every ticket a user requested.

        Args:
            user_id: Requester.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/tickets/requested.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def get_all_ccd(self, user_id: int, pager: Pager | None = None) -> Page[Ticket]:
        """List one page of the tickets a user is copied on.

        Args:
            user_id: CC'd user.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/tickets/ccd.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def iter_all_ccd(self, user_id: int, pager: Pager | None = None) -> Iterator[Ticket]:
        """Iterate over every ticket a user is copied on.

        Args:
            user_id: CC'd user.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/tickets/ccd.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def get_all_assigned_to(self, user_id: int, pager: Pager | None = None) -> Page[Ticket]:
        """List one page of the tickets assigned to an agent.

        Args:
            user_id: Assignee.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/tickets/assigned.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def iter_all_assigned_to(self, user_id: int, pager: Pager | None = None) -> Iterator[Ticket]:
        """Iterate over every ticket assigned to an agent.

        Args:
            user_id: Assignee.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/tickets/assigned.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#list-tickets",
            pager=pager,
        )

    def get(self, ticket_id: int) -> Ticket | None:
        """Fetch one ticket, or None if it does not exist."""
        return self._fetch(f"tickets/{ticket_id}.json", "ticket", Ticket, doc=TICKETS_DOCS + "#show-ticket")

    def get_many(self, ticket_ids: Collection[int]) -> list[Ticket]:
        """Fetch up to 100 tickets by id; unknown ids are silently skipped by Zendesk."""
        page = self._fetch_page(
            "tickets/show_many.json",
            "tickets",
            Ticket,
            doc=TICKETS_DOCS + "#show-multiple-tickets",
            params={"ids": join_ids(ticket_ids)},
        )
        return page.items

    def create(self, ticket: TicketCreateRequest | Payload) -> Ticket:
        """Create a ticket.

        Args:
            ticket: The new ticket; its `comment` becomes the description.

        Returns:
            The created ticket.

        Raises:
            ZendeskUnprocessableEntityError: If Zendesk rejects the record.
        """
        return self._create("tickets.json", "ticket", ticket, Ticket, doc=TICKETS_DOCS + "#create-ticket")

    def create_many(self, tickets: Sequence[TicketCreateRequest | Payload]) -> JobStatus:
        """Queue creation of up to 100 tickets.

        Returns:
            The queued job; poll it with `client.job_statuses.get`.
        """
        return self._job(
            "POST",
            "tickets/create_many.json",
            doc=TICKETS_DOCS + "#create-many-tickets",
            json={"tickets": [dump_payload(t) for t in tickets]},
        )

    def update(self, ticket_id: int, changes: TicketUpdateRequest | Payload) -> Ticket | None:
        """Apply changes to a ticket.

        Args:
            ticket_id: Ticket to change.
            changes: Only fields set on the request are sent. A field set to
                None is sent as null, e.g. `assignee_id=None` unassigns.

        Returns:
            The updated ticket, or None if it does not exist.
        """
        return self._update(
            f"tickets/{ticket_id}.json", "ticket", changes, Ticket, doc=TICKETS_DOCS + "#update-ticket"
        )

    def update_many(
        self,
        changes: TicketUpdateRequest | Payload | Sequence[TicketUpdateRequest | Payload],
        ticket_ids: Collection[int] | None = None,
    ) -> JobStatus:
        """Bulk update.

        With `ticket_ids`, the same `changes` are applied to every ticket.
        Without, `changes` must be a sequence of updates that each carry an id.
        """
        doc = TICKETS_DOCS + "#update-many-tickets"
        if ticket_ids is not None:
            return self._job(
                "PUT",
                "tickets/update_many.json",
                doc=doc,
                params={"ids": join_ids(ticket_ids)},
                json={"ticket": dump_payload(changes)},  # type: ignore[arg-type]
            )
        return self._job(
            "PUT",
            "tickets/update_many.json",
            doc=doc,
            json={"tickets": [dump_payload(c) for c in changes]},  # type: ignore[union-attr]
        )

    def delete(self, ticket_id: int) -> None:
        """Delete a ticket.

        Args:
            ticket_id: Ticket to delete.

        Raises:
            ZendeskNotFoundError: If the ticket does not exist.
        """
        self._remove(f"tickets/{ticket_id}.json", doc=TICKETS_DOCS + "#delete-ticket")

    def delete_many(self, ticket_ids: Collection[int]) -> JobStatus:
        """Queue deletion of up to 100 tickets. Returns the queued job."""
        return self._job(
            "DELETE",
            "tickets/destroy_many.json",
            doc=TICKETS_DOCS + "#bulk-delete-tickets",
            params={"ids": join_ids(ticket_ids)},
        )

    def mark_as_spam(self, ticket_id: int) -> None:
        """Mark a ticket as spam and suspend its requester."""
        self._action(
            "PUT",
            f"tickets/{ticket_id}/mark_as_spam.json",
            doc=TICKETS_DOCS + "#mark-ticket-as-spam-and-suspend-requester",
        )


class TicketCommentsResource(Resource):
    """Comments on a ticket. Comments are added through a ticket update."""

    def get_all(self, ticket_id: int, pager: Pager | None = None) -> Page[TicketComment]:
        """List one page of a ticket's comments, oldest first.

        Args:
            ticket_id: Ticket whose comments to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"tickets/{ticket_id}/comments.json",
            "comments",
            TicketComment,
            doc=COMMENTS_DOCS + "#list-comments",
            pager=pager,
        )

    def iter_all(self, ticket_id: int, pager: Pager | None = None) -> Iterator[TicketComment]:
        """Iterate over every comment of a ticket.

        Args:
            ticket_id: Ticket whose comments to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"tickets/{ticket_id}/comments.json",
            "comments",
            TicketComment,
            doc=COMMENTS_DOCS + "#list-comments",
            pager=pager,
        )

    def add(self, ticket_id: int, comment: TicketCommentRequest) -> Ticket | None:
        """Add a comment to a ticket. Returns the updated ticket, or None if it does not exist."""
        return self._update(
            f"tickets/{ticket_id}.json",
            "ticket",
            TicketUpdateRequest(comment=comment),
            Ticket,
            doc=TICKETS_DOCS + "#update-ticket",
        )

    def make_private(self, ticket_id: int, comment_id: int) -> None:
        """Turn a public comment into an internal note.

        Args:
            ticket_id: Ticket holding the comment.
            comment_id: Comment to make private.
        """
        self._action(
            "PUT",
            f"tickets/{ticket_id}/comments/{comment_id}/make_private.json",
            doc=COMMENTS_DOCS + "#make-comment-private",
        )


class TicketAuditsResource(Resource):
    def get_all(self, pager: CursorPager | None = None) -> Page[TicketAudit]:
        """List audits across all tickets. This endpoint only supports cursor pagination."""
        return self._fetch_page(
            "ticket_audits.json",
            "audits",
            TicketAudit,
            doc=AUDITS_DOCS + "#list-all-ticket-audits",
            pager=pager or CursorPager(),
        )

    def iter_all(self, pager: CursorPager | None = None) -> Iterator[TicketAudit]:
        """Iterate over the audits of every ticket, following cursor links.

        Args:
            pager: Cursor and page size to start from.
        """
        return self._iterate(
            "ticket_audits.json",
            "audits",
            TicketAudit,
            doc=AUDITS_DOCS + "#list-all-ticket-audits",
            pager=pager or CursorPager(),
        )

    def get_all_for_ticket(self, ticket_id: int, pager: Pager | None = None) -> Page[TicketAudit]:
        """List one page of a ticket's audits.

        Args:
            ticket_id: Audited ticket.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"tickets/{ticket_id}/audits.json",
            "audits",
            TicketAudit,
            doc=AUDITS_DOCS + "#list-audits-for-a-ticket",
            pager=pager,
        )

    def iter_all_for_ticket(self, ticket_id: int, pager: Pager | None = None) -> Iterator[TicketAudit]:
        """Iterate over every audit of a ticket.

        Args:
            ticket_id: Audited ticket.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"tickets/{ticket_id}/audits.json",
            "audits",
            TicketAudit,
            doc=AUDITS_DOCS + "#list-audits-for-a-ticket",
            pager=pager,
        )

    def get(self, ticket_id: int, audit_id: int) -> TicketAudit | None:
        """Fetch one audit of a ticket.

        Args:
            ticket_id: Audited ticket.
            audit_id: Audit to fetch.

        Returns:
            The audit, or None if either id is unknown.
        """
        return self._fetch(
            f"tickets/{ticket_id}/audits/{audit_id}.json",
            "audit",
            TicketAudit,
            doc=AUDITS_DOCS + "#show-audit",
        )


class TicketFieldsResource(CrudResource[TicketField]):
    path = "ticket_fields"
    singular = "ticket_field"
    plural = "ticket_fields"
    model = TicketField
    docs = "ticketing/tickets/ticket_fields/"


class TicketFormsResource(CrudResource[TicketForm]):
    path = "ticket_forms"
    singular = "ticket_form"
    plural = "ticket_forms"
    model = TicketForm
    docs = "ticketing/tickets/ticket_forms/"


class SatisfactionRatingsResource(Resource):
    def get_all(self, pager: Pager | None = None) -> Page[SatisfactionRating]:
        """List one page of satisfaction ratings."""
        return self._fetch_page(
            "satisfaction_ratings.json",
            "satisfaction_ratings",
            SatisfactionRating,
            doc=RATINGS_DOCS + "#list-satisfaction-ratings",
            pager=pager,
        )

    def iter_all(self, pager: Pager | None = None) -> Iterator[SatisfactionRating]:
        """Iterate over every satisfaction rating.

        Args:
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            "satisfaction_ratings.json",
            "satisfaction_ratings",
            SatisfactionRating,
            doc=RATINGS_DOCS + "#list-satisfaction-ratings",
            pager=pager,
        )

    def get(self, rating_id: int) -> SatisfactionRating | None:
        """Fetch a satisfaction rating, or None if it does not exist."""
        return self._fetch(
            f"satisfaction_ratings/{rating_id}.json",
            "satisfaction_rating",
            SatisfactionRating,
            doc=RATINGS_DOCS + "#show-satisfaction-rating",
        )

    def create(self, ticket_id: int, rating: SatisfactionRating | Payload) -> SatisfactionRating:
        """Rate a solved ticket. Only the ticket's requester may do this."""
        return self._create(
            f"tickets/{ticket_id}/satisfaction_rating.json",
            "satisfaction_rating",
            rating,
            SatisfactionRating,
            doc=RATINGS_DOCS + "#create-a-satisfaction-rating",
            expected=(200, 201),
        )
