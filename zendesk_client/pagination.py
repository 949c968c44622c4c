"""Pagination parameters and the generic page container.

Zendesk lists come in two flavours:

- offset pagination: ``?page=2&per_page=100``; the body carries ``count``,
  ``next_page`` and ``previous_page`` (absolute URLs or null).
- cursor pagination: ``?page[size]=100&page[after]=...``; the body carries
  ``meta.has_more``, ``meta.after_cursor``, ``meta.before_cursor`` and
  ``links.next`` / ``links.prev``.

Both are parsed into the same ``Page`` so callers only ever follow
``next_page``.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator

from zendesk_client.exceptions import ZendeskValidationError

MAX_PAGE_SIZE = 100

SortOrder = Literal["asc", "desc"]

T = TypeVar("T", bound=BaseModel)


class PagerParameters(BaseModel):
    """Offset pagination request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: str | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"page": self.page, "per_page": self.page_size}
        if self.sort_by:
            params["sort_by"] = self.sort_by
        if self.sort_order:
            params["sort_order"] = self.sort_order
        return params


class CursorPager(BaseModel):
    """Cursor pagination request. Only one of `after` / `before` may be set."""

    size: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    after: str | None = None
    before: str | None = None

    @model_validator(mode="after")
    def one_direction(self) -> "CursorPager":
        if self.after and self.before:
            raise ValueError("after and before cannot both be set")
        return self

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"page[size]": self.size}
        if self.after:
            params["page[after]"] = self.after
        if self.before:
            params["page[before]"] = self.before
        return params


Pager = PagerParameters | CursorPager


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a Zendesk collection."""

    items: list[T] = field(default_factory=list)
    count: int | None = None
    next_page: str | None = None
    previous_page: str | None = None
    has_more: bool = False
    after_cursor: str | None = None
    before_cursor: str | None = None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def is_last(self) -> bool:
        return self.next_page is None


def parse_items(items: Sequence[Any], model: type[T]) -> list[T]:
    """Validate raw list entries as `model`."""
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        raise ZendeskValidationError(f"Unexpected {model.__name__} data: {e}") from e


def collection(data: Any, key: str) -> list[Any]:
    """Return the raw entries stored under `key` in a list response body."""
    if not isinstance(data, dict):
        raise ZendeskValidationError(f"Expected a JSON object with '{key}', got {type(data).__name__}")
    raw_items = data.get(key) or []
    if not isinstance(raw_items, list):
        raise ZendeskValidationError(f"Expected '{key}' to be a list, got {type(raw_items).__name__}")
    return raw_items


def build_page(data: dict[str, Any], items: list[T]) -> Page[T]:
    """Attach the pagination metadata of a response body to already parsed items."""
    meta = data.get("meta")
    if isinstance(meta, dict) and "has_more" in meta:
        links = data.get("links") or {}
        has_more = bool(meta.get("has_more"))
        return Page(
            items=items,
            count=data.get("count"),
            next_page=links.get("next") if has_more else None,
            previous_page=links.get("prev"),
            has_more=has_more,
            after_cursor=meta.get("after_cursor"),
            before_cursor=meta.get("before_cursor"),
        )

    next_page = data.get("next_page")
    return Page(
        items=items,
        count=data.get("count"),
        next_page=next_page,
        previous_page=data.get("previous_page"),
        has_more=next_page is not None,
    )


def parse_page(data: Any, key: str, model: type[T]) -> Page[T]:
    """Build a Page from a list response body.

    Args:
        data: Decoded JSON body.
        key: Name of the collection inside the body (e.g. "tickets").
        model: Model each collection entry is validated as.

    Raises:
        ZendeskValidationError: If the body is not an object or the
            collection does not validate.
    """
    items = parse_items(collection(data, key), model)
    return build_page(data, items)
