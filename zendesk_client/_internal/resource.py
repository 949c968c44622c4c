"""Request/response pipeline shared by every Zendesk resource."""

import logging
from collections.abc import Collection, Iterator
from typing import Any, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from zendesk_client._internal.errors import raise_for_status
from zendesk_client._internal.redaction import loggable_body
from zendesk_client.exceptions import (
    ZendeskConnectionError,
    ZendeskTimeoutError,
    ZendeskValidationError,
)
from zendesk_client.models.jobs import JobStatus
from zendesk_client.pagination import Page, Pager, parse_page

DEFAULT_LOGGER = logging.getLogger("zendesk_client")

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = BaseModel | dict[str, Any]


def dump_payload(payload: Payload) -> dict[str, Any]:
    """Serialize a request model, leaving out fields the caller never set.

    Fields explicitly set to None are kept and sent as null, which is how
    Zendesk clears a value (e.g. unassigning a ticket).
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return payload


def join_ids(ids: Collection[int | str]) -> str:
    if not ids:
        raise ZendeskValidationError("at least one id is required")
    return ",".join(str(i) for i in ids)


class Resource:
    """Base class for resources.

    Every operation goes through the same steps: send the request, check
    the status against what the operation expects (404 on reads becomes
    None), then validate the body into the resource's model.
    """

    def __init__(self, http: httpx.Client, *, logger: logging.Logger | None = None) -> None:
        self._http = http
        self._logger = logger or DEFAULT_LOGGER

    # =========================================================================
    # Transport
    # =========================================================================

    def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        self._logger.debug("%s %s params=%s", method, url, params or {})
        if json is not None and self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("Request body: %s", loggable_body(json))

        try:
            response = self._http.request(
                method,
                url,
                params=params,
                json=json,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise ZendeskTimeoutError(f"{method} {url} timed out: {e}") from e
        except httpx.TransportError as e:
            raise ZendeskConnectionError(f"{method} {url} failed: {e}") from e

        self._logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ZendeskValidationError(
                f"Response from {response.request.url} is not valid JSON"
            ) from e

    def _decode(self, response: httpx.Response, key: str, model: type[ModelT]) -> ModelT:
        data = self._json(response)
        if not isinstance(data, dict) or key not in data:
            raise ZendeskValidationError(f"Expected '{key}' in response from {response.request.url}")
        try:
            return model.model_validate(data[key])
        except ValidationError as e:
            raise ZendeskValidationError(f"Unexpected {model.__name__} data: {e}") from e

    # =========================================================================
    # Operations
    # =========================================================================

    def _fetch(
        self,
        path: str,
        key: str,
        model: type[ModelT],
        *,
        doc: str,
        params: dict[str, Any] | None = None,
    ) -> ModelT | None:
        """GET a single record. A 404 yields None."""
        response = self._send("GET", path, params=params)
        if response.status_code == httpx.codes.NOT_FOUND:
            self._logger.warning("%s not found at %s", key, path)
            return None
        raise_for_status(response, expected=(200,), doc=doc)
        return self._decode(response, key, model)

    def _fetch_page(
        self,
        path: str,
        key: str,
        model: type[ModelT],
        *,
        doc: str,
        pager: Pager | None = None,
        params: dict[str, Any] | None = None,
    ) -> Page[ModelT]:
        """GET one page of a collection."""
        query = dict(params or {})
        if pager is not None:
            query.update(pager.to_params())
        response = self._send("GET", path, params=query or None)
        raise_for_status(response, expected=(200,), doc=doc)
        return parse_page(self._json(response), key, model)

    def _iterate(
        self,
        path: str,
        key: str,
        model: type[ModelT],
        *,
        doc: str,
        pager: Pager | None = None,
        params: dict[str, Any] | None = None,
    ) -> Iterator[ModelT]:
        """Yield every record of a collection, following next_page links."""
        page = self._fetch_page(path, key, model, doc=doc, pager=pager, params=params)
        yield from page
        while page.next_page:
            # next_page is absolute and already carries the query string
            response = self._send("GET", page.next_page)
            raise_for_status(response, expected=(200,), doc=doc)
            page = parse_page(self._json(response), key, model)
            yield from page

    def _create(
        self,
        path: str,
        key: str,
        payload: Payload,
        model: type[ModelT],
        *,
        doc: str,
        expected: Collection[int] = (201,),
        response_key: str | None = None,
    ) -> ModelT:
        response = self._send("POST", path, json={key: dump_payload(payload)})
        raise_for_status(response, expected=expected, doc=doc)
        return self._decode(response, response_key or key, model)

    def _update(
        self,
        path: str,
        key: str,
        payload: Payload,
        model: type[ModelT],
        *,
        doc: str,
        response_key: str | None = None,
    ) -> ModelT | None:
        """PUT changes to a record. A 404 yields None."""
        response = self._send("PUT", path, json={key: dump_payload(payload)})
        if response.status_code == httpx.codes.NOT_FOUND:
            self._logger.warning("%s not found at %s", key, path)
            return None
        raise_for_status(response, expected=(200,), doc=doc)
        return self._decode(response, response_key or key, model)

    def _remove(
        self,
        path: str,
        *,
        doc: str,
        expected: Collection[int] = (204,),
        params: dict[str, Any] | None = None,
    ) -> None:
        response = self._send("DELETE", path, params=params)
        raise_for_status(response, expected=expected, doc=doc)

    def _action(
        self,
        method: str,
        path: str,
        *,
        doc: str,
        expected: Collection[int] = (200,),
        json: Any = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Call an endpoint that acts on a record rather than returning it."""
        response = self._send(method, path, json=json, params=params, content=content, headers=headers)
        raise_for_status(response, expected=expected, doc=doc)
        return response

    def _job(
        self,
        method: str,
        path: str,
        *,
        doc: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> JobStatus:
        """Run a bulk endpoint that answers with a queued job status."""
        response = self._send(method, path, json=json, params=params)
        raise_for_status(response, expected=(200,), doc=doc)
        return self._decode(response, "job_status", JobStatus)


class CrudResource(Resource, Generic[ModelT]):
    """Resource whose endpoints follow the plain list/show/create/update/delete shape.

    Subclasses set the collection path, the singular and plural body keys,
    the model and the reference page. Help-doc anchors are derived from the
    keys ("#list-ticket-fields", "#show-ticket-field", ...).
    """

    path: ClassVar[str]
    singular: ClassVar[str]
    plural: ClassVar[str]
    model: ClassVar[type[BaseModel]]
    docs: ClassVar[str]
    delete_status: ClassVar[tuple[int, ...]] = (204,)

    def _doc(self, action: str, *, many: bool = False) -> str:
        noun = (self.plural if many else self.singular).replace("_", "-")
        return f"{self.docs}#{action}-{noun}"

    def _item_path(self, item_id: int | str) -> str:
        return f"{self.path}/{item_id}.json"

    def get_all(self, pager: Pager | None = None) -> Page[ModelT]:
        """List one page of records."""
        return self._fetch_page(
            f"{self.path}.json", self.plural, self.model, doc=self._doc("list", many=True), pager=pager
        )

    def iter_all(self, pager: Pager | None = None) -> Iterator[ModelT]:
        """Iterate over every record, page by page."""
        return self._iterate(
            f"{self.path}.json", self.plural, self.model, doc=self._doc("list", many=True), pager=pager
        )

    def get(self, item_id: int | str) -> ModelT | None:
        """Fetch one record, or None if it does not exist."""
        return self._fetch(self._item_path(item_id), self.singular, self.model, doc=self._doc("show"))

    def create(self, item: Payload) -> ModelT:
        """Create a record and return it as stored by Zendesk."""
        return self._create(f"{self.path}.json", self.singular, item, self.model, doc=self._doc("create"))

    def update(self, item: BaseModel) -> ModelT | None:
        """Save changes to a record identified by its `id`, or None if it does not exist."""
        item_id = getattr(item, "id", None)
        if item_id is None:
            raise ZendeskValidationError(f"{self.singular} must have an id to be updated")
        return self._update(self._item_path(item_id), self.singular, item, self.model, doc=self._doc("update"))

    def delete(self, item_id: int | str) -> None:
        """Delete a record by id."""
        self._remove(self._item_path(item_id), doc=self._doc("delete"), expected=self.delete_status)
