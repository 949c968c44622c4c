"""Locales enabled on the account."""

from collections.abc import Iterator

from zendesk_client._internal.resource import Resource
from zendesk_client.models.locales import Locale
from zendesk_client.pagination import Page

DOCS = "ticketing/account-configuration/locales/"


class LocalesResource(Resource):
    def get_all(self) -> Page[Locale]:
        """Locales enabled on the account. Zendesk returns them in a single page."""
        return self._fetch_page("locales.json", "locales", Locale, doc=DOCS + "#list-locales")

    def iter_all(self) -> Iterator[Locale]:
        """Iterate over the locales enabled on the account."""
        return self._iterate("locales.json", "locales", Locale, doc=DOCS + "#list-locales")

    def get(self, locale: int | str) -> Locale | None:
        """Look a locale up by id or by code (e.g. "en-US")."""
        return self._fetch(f"locales/{locale}.json", "locale", Locale, doc=DOCS + "#show-locale")

    def current(self) -> Locale | None:
        """Locale of the authenticated user."""
        return self._fetch("locales/current.json", "locale", Locale, doc=DOCS + "#show-current-locale")
