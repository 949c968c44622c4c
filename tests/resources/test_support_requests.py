"""Tests for end-user requests."""

import json

import httpx
import respx

from zendesk_client.models import SupportRequestCreate, SupportRequestUpdate, TicketCommentRequest

API = "https://acme.zendesk.com/api/v2"

REQUEST = {"id": 33, "subject": "Help!", "status": "open", "requester_id": 1, "can_be_solved_by_me": True}


class TestSupportRequests:
    """Tests for end-user requests."""

    @respx.mock
    def test_get_all_filters_statuses(self, client):
        """Should send the status filter as a comma-separated list."""
        route = respx.get(f"{API}/requests.json").mock(return_value=httpx.Response(200, json={"requests": [REQUEST]}))

        page = client.requests.get_all(statuses=["open", "pending"])

        assert page[0].can_be_solved_by_me is True
        assert route.calls.last.request.url.params["status"] == "open,pending"

    @respx.mock
    def test_search(self, client):
        """Should send the search query."""
        route = respx.get(f"{API}/requests/search.json").mock(
            return_value=httpx.Response(200, json={"requests": [REQUEST]})
        )
        client.requests.search("printer")
        assert route.calls.last.request.url.params["query"] == "printer"

    @respx.mock
    def test_create(self, client):
        """Should create a request with its first comment."""
        route = respx.post(f"{API}/requests.json").mock(return_value=httpx.Response(201, json={"request": REQUEST}))

        created = client.requests.create(
            SupportRequestCreate(subject="Help!", comment=TicketCommentRequest(body="My printer is on fire"))
        )

        assert created.id == 33
        assert json.loads(route.calls.last.request.content) == {
            "request": {"subject": "Help!", "comment": {"body": "My printer is on fire"}}
        }

    @respx.mock
    def test_update(self, client):
        """Should mark a request as solved."""
        respx.put(f"{API}/requests/33.json").mock(
            return_value=httpx.Response(200, json={"request": {**REQUEST, "status": "solved"}})
        )
        updated = client.requests.update(33, SupportRequestUpdate(solved=True))
        assert updated.status == "solved"

    @respx.mock
    def test_get_and_comments(self, client):
        """Should return a request and its comments."""
        respx.get(f"{API}/requests/33.json").mock(return_value=httpx.Response(200, json={"request": REQUEST}))
        respx.get(f"{API}/requests/33/comments.json").mock(
            return_value=httpx.Response(200, json={"comments": [{"id": 1, "body": "My printer is on fire"}]})
        )

        assert client.requests.get(33).subject == "Help!"
        assert client.requests.get_comments(33)[0].body == "My printer is on fire"


class TestSupportRequestIterators:
    """Tests for the request iterators."""

    @respx.mock
    def test_iter_search(self, client):
        """Should yield search matches across pages."""
        route = respx.get(f"{API}/requests/search.json").mock(
            side_effect=[
                httpx.Response(
                    200, json={"requests": [REQUEST], "next_page": f"{API}/requests/search.json?query=printer&page=2"}
                ),
                httpx.Response(200, json={"requests": [{**REQUEST, "id": 34}], "next_page": None}),
            ]
        )

        assert [r.id for r in client.requests.iter_search("printer")] == [33, 34]
        assert route.call_count == 2

    @respx.mock
    def test_iter_comments(self, client):
        """Should yield every comment of a request across pages."""
        path = f"{API}/requests/33/comments.json"
        respx.get(path).mock(
            side_effect=[
                httpx.Response(200, json={"comments": [{"id": 1, "body": "first"}], "next_page": f"{path}?page=2"}),
                httpx.Response(200, json={"comments": [{"id": 2, "body": "second"}], "next_page": None}),
            ]
        )
        assert [c.body for c in client.requests.iter_comments(33)] == ["first", "second"]
