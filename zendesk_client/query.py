"""Builder for Zendesk search query strings.

Example:
    query = (
        ZendeskQuery("ticket")
        .with_filter("status", "open")
        .with_filter("priority", "normal", operator=">")
        .without("tags", "spam")
        .with_keyword("printer on fire")
        .order_by("created_at", "desc")
    )
    client.search.search(query)
    # query=type:ticket status:open priority>normal -tags:spam "printer on fire"
    # sort_by=created_at&sort_order=desc
"""

from typing import Any, Literal

from zendesk_client.pagination import SortOrder

ResultType = Literal["ticket", "user", "organization", "group"]

OPERATORS = {
    "=": ":",
    ":": ":",
    ">": ">",
    "<": "<",
    ">=": ">=",
    "<=": "<=",
}


def quote(value: Any) -> str:
    """Quote a search term when it contains whitespace.

    A term already wrapped in quotes is kept as is. Any other double quote is
    dropped, since Zendesk search has no escape for it.
    """
    text = str(value)
    if len(text) > 1 and text[0] == text[-1] == '"' and '"' not in text[1:-1]:
        return text
    text = text.replace('"', "")
    if any(ch.isspace() for ch in text):
        return f'"{text}"'
    return text


class ZendeskQuery:
    """Fluent builder; every `with_*` call returns the same query."""

    def __init__(self, result_type: ResultType | None = None) -> None:
        self._terms: list[str] = []
        self._sort_by: str | None = None
        self._sort_order: SortOrder | None = None
        if result_type:
            self.with_type(result_type)

    def with_type(self, result_type: ResultType) -> "ZendeskQuery":
        self._terms.append(f"type:{result_type}")
        return self

    def with_keyword(self, keyword: str) -> "ZendeskQuery":
        self._terms.append(quote(keyword))
        return self

    def with_filter(self, field: str, value: Any, *, operator: str = ":") -> "ZendeskQuery":
        """Add a `field<op>value` term. Operators: ':' or '=', '>', '<', '>=', '<='."""
        if operator not in OPERATORS:
            raise ValueError(f"Unsupported search operator: {operator!r}")
        self._terms.append(f"{field}{OPERATORS[operator]}{quote(value)}")
        return self

    def without(self, field: str, value: Any) -> "ZendeskQuery":
        """Exclude records where `field` matches `value`."""
        self._terms.append(f"-{field}:{quote(value)}")
        return self

    def order_by(self, field: str, direction: SortOrder = "desc") -> "ZendeskQuery":
        self._sort_by = field
        self._sort_order = direction
        return self

    def build(self) -> str:
        return " ".join(self._terms)

    def to_params(self) -> dict[str, str]:
        params = {"query": self.build()}
        if self._sort_by:
            params["sort_by"] = self._sort_by
        if self._sort_order:
            params["sort_order"] = self._sort_order
        return params

    def __str__(self) -> str:
        return self.build()
