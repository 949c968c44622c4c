"""Unified search across tickets, users, organizations and groups."""

from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from zendesk_client._internal.errors import raise_for_status
from zendesk_client._internal.resource import Resource
from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models.base import ZendeskModel
from zendesk_client.models.groups import Group
from zendesk_client.models.organizations import Organization
from zendesk_client.models.tickets import Ticket
from zendesk_client.models.users import User
from zendesk_client.pagination import CursorPager, Page, PagerParameters, build_page, collection
from zendesk_client.query import ResultType, ZendeskQuery

SEARCH_DOCS = "ticketing/ticket-management/search/"

RESULT_MODELS: dict[str, type[ZendeskModel]] = {
    "ticket": Ticket,
    "user": User,
    "organization": Organization,
    "group": Group,
}

SearchResult = Ticket | User | Organization | Group | ZendeskModel


def parse_result(item: Any) -> SearchResult:
    """Validate one search row as the model named by its `result_type`.

    Rows of other types (articles, topics...) are kept as plain ZendeskModel.
    """
    if not isinstance(item, dict):
        raise ZendeskValidationError(f"Unexpected search result: {item!r}")
    model = RESULT_MODELS.get(item.get("result_type", ""), ZendeskModel)
    try:
        return model.model_validate(item)
    except ValidationError as e:
        raise ZendeskValidationError(f"Unexpected {model.__name__} search result: {e}") from e


def query_params(query: ZendeskQuery | str) -> dict[str, str]:
    if isinstance(query, ZendeskQuery):
        return query.to_params()
    return {"query": query}


class SearchResource(Resource):
    def _results_page(self, response_data: Any) -> Page[SearchResult]:
        items = [parse_result(item) for item in collection(response_data, "results")]
        return build_page(response_data, items)

    def search(self, query: ZendeskQuery | str, pager: PagerParameters | None = None) -> Page[SearchResult]:
        """Run a search across tickets, users, organizations and groups.

        Args:
            query: A ZendeskQuery, whose ordering is also sent, or a raw
                query string.
            pager: Offset paging. Zendesk caps offset search at 1000 results.

        Returns:
            A page whose rows are typed by their `result_type`.
        """
        params = query_params(query)
        if pager is not None:
            params = {**pager.to_params(), **params}
        response = self._send("GET", "search.json", params=params)
        raise_for_status(response, expected=(200,), doc=SEARCH_DOCS + "#list-search-results")
        return self._results_page(self._json(response))

    def _follow(self, page: Page[SearchResult], doc: str) -> Iterator[SearchResult]:
        yield from page
        while page.next_page:
            response = self._send("GET", page.next_page)
            raise_for_status(response, expected=(200,), doc=doc)
            page = self._results_page(self._json(response))
            yield from page

    def iter_search(self, query: ZendeskQuery | str, pager: PagerParameters | None = None) -> Iterator[SearchResult]:
        """Iterate over every search result, following `next_page`.

        Zendesk stops offset search at 1000 results; use `export` beyond that.

        Args:
            query: A ZendeskQuery or a raw query string.
            pager: Where to start.
        """
        return self._follow(self.search(query, pager), SEARCH_DOCS + "#list-search-results")

    def export(
        self,
        query: ZendeskQuery | str,
        result_type: ResultType,
        pager: CursorPager | None = None,
    ) -> Iterator[SearchResult]:
        """Iterate over every match of one type, without the 1000 result cap.

        The first page is requested immediately, so a bad query raises here
        rather than on the first iteration.

        Args:
            query: A ZendeskQuery or raw query string.
            result_type: The single record type to export.
            pager: Cursor paging; defaults to pages of 100.
        """
        doc = SEARCH_DOCS + "#export-search-results"
        params: dict[str, Any] = {
            **query_params(query),
            "filter[type]": result_type,
            **(pager or CursorPager()).to_params(),
        }
        response = self._send("GET", "search/export.json", params=params)
        raise_for_status(response, expected=(200,), doc=doc)
        return self._follow(self._results_page(self._json(response)), doc)

    def count(self, query: ZendeskQuery | str) -> int:
        """Number of records matching a query.

        Args:
            query: A ZendeskQuery or a raw query string.

        Raises:
            ZendeskValidationError: If the response carries no integer count.
        """
        response = self._send("GET", "search/count.json", params={"query": query_params(query)["query"]})
        raise_for_status(response, expected=(200,), doc=SEARCH_DOCS + "#show-results-count")
        data = self._json(response)
        if not isinstance(data, dict) or not isinstance(data.get("count"), int):
            raise ZendeskValidationError("Expected an integer 'count' in search count response")
        return data["count"]
