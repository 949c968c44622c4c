"""Tests for pagination parameters and page parsing."""

import pytest
from pydantic import ValidationError

from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models import User
from zendesk_client.pagination import CursorPager, Page, PagerParameters, parse_page


class TestPagerParameters:
    """Tests for offset pagination parameters."""

    def test_defaults(self):
        """Should request the first page of 100 records."""
        assert PagerParameters().to_params() == {"page": 1, "per_page": 100}

    def test_sorting(self):
        """Should pass sort_by and sort_order through."""
        pager = PagerParameters(page=3, page_size=25, sort_by="created_at", sort_order="desc")
        assert pager.to_params() == {"page": 3, "per_page": 25, "sort_by": "created_at", "sort_order": "desc"}

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_bounds(self, page_size):
        """Should reject page sizes outside 1-100."""
        with pytest.raises(ValidationError):
            PagerParameters(page_size=page_size)

    def test_page_must_be_positive(self):
        """Should reject page numbers below 1."""
        with pytest.raises(ValidationError):
            PagerParameters(page=0)


class TestCursorPager:
    """Tests for cursor pagination parameters."""

    def test_defaults(self):
        """Should request 100 records per page."""
        assert CursorPager().to_params() == {"page[size]": 100}

    def test_after(self):
        """Should send the after cursor."""
        assert CursorPager(size=10, after="abc").to_params() == {"page[size]": 10, "page[after]": "abc"}

    def test_before(self):
        """Should send the before cursor."""
        assert CursorPager(before="xyz").to_params() == {"page[size]": 100, "page[before]": "xyz"}

    def test_after_and_before_rejected(self):
        """Should reject paging in both directions at once."""
        with pytest.raises(ValidationError):
            CursorPager(after="abc", before="xyz")


class TestParsePage:
    """Tests for parse_page()."""

    def test_offset_page(self):
        """Should read count and next_page from an offset page."""
        data = {
            "users": [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}],
            "count": 5,
            "next_page": "https://acme.zendesk.com/api/v2/users.json?page=2",
            "previous_page": None,
        }

        page = parse_page(data, "users", User)

        assert [user.name for user in page] == ["Ada", "Grace"]
        assert len(page) == 2
        assert page[1].id == 2
        assert page.count == 5
        assert page.next_page == "https://acme.zendesk.com/api/v2/users.json?page=2"
        assert page.has_more is True
        assert page.is_last is False

    def test_last_offset_page(self):
        """Should mark a page without next_page as the last."""
        page = parse_page({"users": [], "count": 0, "next_page": None}, "users", User)
        assert page.is_last is True
        assert page.has_more is False

    def test_cursor_page(self):
        """Should read meta and links from a cursor page."""
        data = {
            "users": [{"id": 1}],
            "meta": {"has_more": True, "after_cursor": "a1", "before_cursor": "b1"},
            "links": {
                "next": "https://acme.zendesk.com/api/v2/users.json?page[after]=a1",
                "prev": "https://acme.zendesk.com/api/v2/users.json?page[before]=b1",
            },
        }

        page = parse_page(data, "users", User)

        assert page.has_more is True
        assert page.after_cursor == "a1"
        assert page.before_cursor == "b1"
        assert page.next_page == "https://acme.zendesk.com/api/v2/users.json?page[after]=a1"
        assert page.previous_page == "https://acme.zendesk.com/api/v2/users.json?page[before]=b1"

    def test_cursor_page_without_more_has_no_next(self):
        """links.next is still sent on the last page; it must not be followed."""
        data = {
            "users": [{"id": 1}],
            "meta": {"has_more": False, "after_cursor": "a1", "before_cursor": "b1"},
            "links": {"next": "https://acme.zendesk.com/api/v2/users.json?page[after]=a1", "prev": None},
        }

        page = parse_page(data, "users", User)

        assert page.next_page is None
        assert page.is_last is True

    def test_missing_collection_is_empty(self):
        """Should treat a missing collection key as no records."""
        page = parse_page({"count": 0}, "users", User)
        assert page.items == []

    def test_non_object_body(self):
        """Should raise ZendeskValidationError for a non-object body."""
        with pytest.raises(ZendeskValidationError):
            parse_page([{"id": 1}], "users", User)

    def test_collection_not_a_list(self):
        """Should raise ZendeskValidationError when the collection is not a list."""
        with pytest.raises(ZendeskValidationError):
            parse_page({"users": {"id": 1}}, "users", User)

    def test_invalid_entry(self):
        """Should raise ZendeskValidationError for a record that fails validation."""
        with pytest.raises(ZendeskValidationError):
            parse_page({"users": [{"id": "not-a-number"}]}, "users", User)


class TestPage:
    """Tests for Page."""

    def test_empty_page(self):
        """Should behave as an empty, final page by default."""
        page: Page[User] = Page()
        assert list(page) == []
        assert len(page) == 0
        assert page.is_last is True
