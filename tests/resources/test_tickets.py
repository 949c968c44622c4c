"""Tests for ticket resources."""

import json

import httpx
import pytest
import respx

from zendesk_client.exceptions import (
    ZendeskForbiddenError,
    ZendeskNotFoundError,
    ZendeskUnprocessableEntityError,
    ZendeskValidationError,
)
from zendesk_client.models import TicketCommentRequest, TicketCreateRequest, TicketUpdateRequest
from zendesk_client.pagination import CursorPager

API = "https://acme.zendesk.com/api/v2"

TICKET = {
    "id": 35436,
    "subject": "Help, my printer is on fire!",
    "status": "open",
    "priority": "high",
    "requester_id": 20978392,
    "tags": ["enterprise", "printer"],
    "custom_fields": [{"id": 27642, "value": "745"}],
    "created_at": "2024-07-20T22:55:29Z",
}
JOB = {"job_status": {"id": "8b726e606741012ffc2d782bcb7848fe", "status": "queued", "total": 2, "progress": 0}}


def body(route):
    return json.loads(route.calls.last.request.content)


class TestTickets:
    """Tests for the tickets resource."""

    @respx.mock
    def test_get(self, client):
        """Should return the ticket with its custom fields and timestamps."""
        respx.get(f"{API}/tickets/35436.json").mock(return_value=httpx.Response(200, json={"ticket": TICKET}))

        ticket = client.tickets.get(35436)

        assert ticket.subject == "Help, my printer is on fire!"
        assert ticket.status == "open"
        assert ticket.custom_fields[0].value == "745"
        assert ticket.created_at.year == 2024

    @respx.mock
    def test_get_missing(self, client):
        """Should return None for an unknown ticket."""
        respx.get(f"{API}/tickets/1.json").mock(return_value=httpx.Response(404))
        assert client.tickets.get(1) is None

    @respx.mock
    def test_get_all(self, client):
        """Should return one page of tickets."""
        respx.get(f"{API}/tickets.json").mock(
            return_value=httpx.Response(200, json={"tickets": [TICKET], "count": 1, "next_page": None})
        )

        page = client.tickets.get_all()

        assert page.count == 1
        assert page[0].id == 35436

    @respx.mock
    def test_get_all_for_organization(self, client):
        """Should list an organization's tickets."""
        route = respx.get(f"{API}/organizations/42/tickets.json").mock(
            return_value=httpx.Response(200, json={"tickets": [TICKET]})
        )
        assert len(client.tickets.get_all_for_organization(42)) == 1
        assert route.called

    @respx.mock
    def test_user_ticket_lists(self, client):
        """Should list tickets requested by, cc'ing and assigned to a user."""
        requested = respx.get(f"{API}/users/7/tickets/requested.json").mock(
            return_value=httpx.Response(200, json={"tickets": []})
        )
        ccd = respx.get(f"{API}/users/7/tickets/ccd.json").mock(return_value=httpx.Response(200, json={"tickets": []}))
        assigned = respx.get(f"{API}/users/7/tickets/assigned.json").mock(
            return_value=httpx.Response(200, json={"tickets": [TICKET]})
        )

        client.tickets.get_all_requested_by(7)
        client.tickets.get_all_ccd(7)
        page = client.tickets.get_all_assigned_to(7)

        assert requested.called and ccd.called and assigned.called
        assert page[0].id == 35436

    @respx.mock
    def test_get_many(self, client):
        """Should send the ids as a comma-separated list."""
        route = respx.get(f"{API}/tickets/show_many.json").mock(
            return_value=httpx.Response(200, json={"tickets": [TICKET, {**TICKET, "id": 35437}]})
        )

        tickets = client.tickets.get_many([35436, 35437])

        assert [t.id for t in tickets] == [35436, 35437]
        assert route.calls.last.request.url.params["ids"] == "35436,35437"

    def test_get_many_requires_ids(self, client):
        """Should reject an empty id list."""
        with pytest.raises(ZendeskValidationError):
            client.tickets.get_many([])

    @respx.mock
    def test_create(self, client):
        """Should send only the fields that were set."""
        route = respx.post(f"{API}/tickets.json").mock(return_value=httpx.Response(201, json={"ticket": TICKET}))

        ticket = client.tickets.create(
            TicketCreateRequest(
                subject="Help, my printer is on fire!",
                priority="high",
                comment=TicketCommentRequest(body="The smoke is very colorful."),
            )
        )

        assert ticket.id == 35436
        assert body(route) == {
            "ticket": {
                "comment": {"body": "The smoke is very colorful."},
                "subject": "Help, my printer is on fire!",
                "priority": "high",
            }
        }

    @respx.mock
    def test_create_invalid(self, client):
        """Should raise with Zendesk's validation message on 422."""
        respx.post(f"{API}/tickets.json").mock(
            return_value=httpx.Response(
                422,
                json={
                    "error": "RecordInvalid",
                    "description": "Record validation errors",
                    "details": {"requester": [{"description": "Requester: Name is too short"}]},
                },
            )
        )

        with pytest.raises(ZendeskUnprocessableEntityError) as exc_info:
            client.tickets.create({"comment": {"body": "hi"}})

        assert "RecordInvalid - Record validation errors" in str(exc_info.value)
        assert "#create-ticket" in str(exc_info.value)

    @respx.mock
    def test_create_many(self, client):
        """Should queue a bulk create and return the job status."""
        route = respx.post(f"{API}/tickets/create_many.json").mock(return_value=httpx.Response(200, json=JOB))

        job = client.tickets.create_many([{"comment": {"body": "one"}}, {"comment": {"body": "two"}}])

        assert job.status == "queued"
        assert job.done is False
        assert len(body(route)["tickets"]) == 2

    @respx.mock
    def test_update(self, client):
        """Should send only the changed fields."""
        route = respx.put(f"{API}/tickets/35436.json").mock(
            return_value=httpx.Response(200, json={"ticket": {**TICKET, "status": "solved"}})
        )

        ticket = client.tickets.update(35436, TicketUpdateRequest(status="solved"))

        assert ticket.status == "solved"
        assert body(route) == {"ticket": {"status": "solved"}}

    @respx.mock
    def test_update_many_same_changes(self, client):
        """Should apply one change set to every listed id."""
        route = respx.put(f"{API}/tickets/update_many.json").mock(return_value=httpx.Response(200, json=JOB))

        client.tickets.update_many(TicketUpdateRequest(status="solved"), ticket_ids=[1, 2])

        assert route.calls.last.request.url.params["ids"] == "1,2"
        assert body(route) == {"ticket": {"status": "solved"}}

    @respx.mock
    def test_update_many_individual_changes(self, client):
        """Should send a change set per ticket."""
        route = respx.put(f"{API}/tickets/update_many.json").mock(return_value=httpx.Response(200, json=JOB))

        client.tickets.update_many([TicketUpdateRequest(id=1, status="open"), TicketUpdateRequest(id=2, status="hold")])

        assert body(route) == {"tickets": [{"id": 1, "status": "open"}, {"id": 2, "status": "hold"}]}

    @respx.mock
    def test_delete(self, client):
        """Should delete the ticket."""
        route = respx.delete(f"{API}/tickets/35436.json").mock(return_value=httpx.Response(204))
        client.tickets.delete(35436)
        assert route.called

    @respx.mock
    def test_delete_missing_raises(self, client):
        """Should raise ZendeskNotFoundError when deleting an unknown ticket."""
        respx.delete(f"{API}/tickets/35436.json").mock(return_value=httpx.Response(404))
        with pytest.raises(ZendeskNotFoundError):
            client.tickets.delete(35436)

    @respx.mock
    def test_delete_many(self, client):
        """Should queue a bulk delete for the listed ids."""
        route = respx.delete(f"{API}/tickets/destroy_many.json").mock(return_value=httpx.Response(200, json=JOB))

        job = client.tickets.delete_many([1, 2])

        assert job.id == "8b726e606741012ffc2d782bcb7848fe"
        assert route.calls.last.request.url.params["ids"] == "1,2"

    @respx.mock
    def test_mark_as_spam(self, client):
        """Should mark the ticket as spam."""
        route = respx.put(f"{API}/tickets/35436/mark_as_spam.json").mock(return_value=httpx.Response(200))
        client.tickets.mark_as_spam(35436)
        assert route.called


class TestTicketComments:
    """Tests for ticket comments."""

    @respx.mock
    def test_get_all(self, client):
        """Should list the comments of a ticket."""
        respx.get(f"{API}/tickets/35436/comments.json").mock(
            return_value=httpx.Response(
                200,
                json={
                    "comments": [
                        {
                            "id": 1274,
                            "body": "Thanks for your help!",
                            "public": True,
                            "attachments": [{"id": 498483, "file_name": "crash.log", "size": 2532}],
                        }
                    ]
                },
            )
        )

        page = client.ticket_comments.get_all(35436)

        assert page[0].body == "Thanks for your help!"
        assert page[0].attachments[0].file_name == "crash.log"

    @respx.mock
    def test_add(self, client):
        """Should add a comment through a ticket update."""
        route = respx.put(f"{API}/tickets/35436.json").mock(return_value=httpx.Response(200, json={"ticket": TICKET}))

        client.ticket_comments.add(35436, TicketCommentRequest(body="Internal note", public=False, uploads=["tok"]))

        assert body(route) == {"ticket": {"comment": {"body": "Internal note", "public": False, "uploads": ["tok"]}}}

    @respx.mock
    def test_make_private(self, client):
        """Should make a public comment private."""
        route = respx.put(f"{API}/tickets/35436/comments/1274/make_private.json").mock(
            return_value=httpx.Response(200)
        )
        client.ticket_comments.make_private(35436, 1274)
        assert route.called


class TestTicketAudits:
    """Tests for ticket audits."""

    @respx.mock
    def test_get_all_uses_cursor(self, client):
        """Should page audits by cursor."""
        route = respx.get(f"{API}/ticket_audits.json").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audits": [{"id": 1, "ticket_id": 35436, "events": [{"id": 2, "type": "Create"}]}],
                    "meta": {"has_more": False, "after_cursor": None, "before_cursor": None},
                    "links": {"next": None, "prev": None},
                },
            )
        )

        page = client.ticket_audits.get_all()

        assert route.calls.last.request.url.params["page[size]"] == "100"
        assert page[0].events[0].type == "Create"
        assert page.is_last

    @respx.mock
    def test_iter_all_follows_cursor(self, client):
        """Should follow cursor links until has_more is false."""
        route = respx.get(f"{API}/ticket_audits.json").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "audits": [{"id": 1, "ticket_id": 10}],
                        "meta": {"has_more": True, "after_cursor": "c1"},
                        "links": {"next": f"{API}/ticket_audits.json?page[size]=1&page[after]=c1"},
                    },
                ),
                httpx.Response(
                    200,
                    json={
                        "audits": [{"id": 2, "ticket_id": 11}],
                        "meta": {"has_more": False, "after_cursor": "c2"},
                        "links": {"next": f"{API}/ticket_audits.json?page[size]=1&page[after]=c2"},
                    },
                ),
            ]
        )

        audits = list(client.ticket_audits.iter_all(CursorPager(size=1)))

        assert [a.id for a in audits] == [1, 2]
        assert route.call_count == 2
        assert route.calls.last.request.url.params["page[after]"] == "c1"

    @respx.mock
    def test_get(self, client):
        """Should return a single audit of a ticket."""
        respx.get(f"{API}/tickets/10/audits/3.json").mock(
            return_value=httpx.Response(200, json={"audit": {"id": 3, "ticket_id": 10}})
        )
        assert client.ticket_audits.get(10, 3).ticket_id == 10


class TestTicketFieldsAndForms:
    """Tests for ticket fields and ticket forms."""

    @respx.mock
    def test_ticket_field_options(self, client):
        """Should parse the options of a dropdown field."""
        respx.get(f"{API}/ticket_fields/5.json").mock(
            return_value=httpx.Response(
                200,
                json={
                    "ticket_field": {
                        "id": 5,
                        "type": "tagger",
                        "title": "Product",
                        "custom_field_options": [{"id": 1, "name": "Printer", "value": "printer"}],
                    }
                },
            )
        )

        field = client.ticket_fields.get(5)

        assert field.custom_field_options[0].value == "printer"

    @respx.mock
    def test_ticket_forms_list(self, client):
        """Should list ticket forms."""
        respx.get(f"{API}/ticket_forms.json").mock(
            return_value=httpx.Response(200, json={"ticket_forms": [{"id": 1, "name": "Default", "default": True}]})
        )
        assert client.ticket_forms.get_all()[0].default is True

    @respx.mock
    def test_ticket_form_error_links_docs(self, client):
        """Should link the delete-ticket-form docs on failure."""
        respx.delete(f"{API}/ticket_forms/1.json").mock(return_value=httpx.Response(403))

        with pytest.raises(ZendeskForbiddenError) as exc_info:
            client.ticket_forms.delete(1)

        assert exc_info.value.help_docs_url.endswith("ticketing/tickets/ticket_forms/#delete-ticket-form")


class TestSatisfactionRatings:
    """Tests for satisfaction ratings."""

    @respx.mock
    def test_create_accepts_200(self, client):
        """Should accept 200 when rating a ticket."""
        route = respx.post(f"{API}/tickets/35436/satisfaction_rating.json").mock(
            return_value=httpx.Response(200, json={"satisfaction_rating": {"id": 9, "score": "good", "ticket_id": 35436}})
        )

        rating = client.satisfaction_ratings.create(35436, {"score": "good", "comment": "Fast"})

        assert rating.score == "good"
        assert body(route) == {"satisfaction_rating": {"score": "good", "comment": "Fast"}}

    @respx.mock
    def test_get_all(self, client):
        """Should list satisfaction ratings."""
        respx.get(f"{API}/satisfaction_ratings.json").mock(
            return_value=httpx.Response(200, json={"satisfaction_ratings": [{"id": 1, "score": "bad"}]})
        )
        assert client.satisfaction_ratings.get_all()[0].score == "bad"


class TestScopedTicketIterators:
    """Tests for the per-organization and per-user ticket iterators."""

    @pytest.mark.parametrize(
        ("method", "arg", "path"),
        [
            ("iter_all_for_organization", 42, "organizations/42/tickets.json"),
            ("iter_all_requested_by", 7, "users/7/tickets/requested.json"),
            ("iter_all_ccd", 7, "users/7/tickets/ccd.json"),
            ("iter_all_assigned_to", 7, "users/7/tickets/assigned.json"),
        ],
    )
    @respx.mock
    def test_follows_next_page(self, client, method, arg, path):
        """Should yield tickets from every page."""
        route = respx.get(f"{API}/{path}").mock(
            side_effect=[
                httpx.Response(200, json={"tickets": [TICKET], "next_page": f"{API}/{path}?page=2"}),
                httpx.Response(200, json={"tickets": [{**TICKET, "id": 35437}], "next_page": None}),
            ]
        )

        tickets = list(getattr(client.tickets, method)(arg))

        assert [t.id for t in tickets] == [35436, 35437]
        assert route.call_count == 2

    @respx.mock
    def test_audits_for_ticket(self, client):
        """Should yield every audit of a ticket across pages."""
        respx.get(f"{API}/tickets/10/audits.json").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={"audits": [{"id": 1, "ticket_id": 10}], "next_page": f"{API}/tickets/10/audits.json?page=2"},
                ),
                httpx.Response(200, json={"audits": [{"id": 2, "ticket_id": 10}], "next_page": None}),
            ]
        )

        assert [a.id for a in client.ticket_audits.iter_all_for_ticket(10)] == [1, 2]
