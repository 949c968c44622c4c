"""Tests for help center categories, sections and articles."""

import json

import httpx
import pytest
import respx

from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models import HelpCenterArticle, HelpCenterCategory, HelpCenterSection

API = "https://acme.zendesk.com/api/v2"


class TestCategories:
    """Tests for Help Center categories."""

    @respx.mock
    def test_get_all_with_locale(self, client):
        """Should put the locale in the path."""
        route = respx.get(f"{API}/help_center/en-us/categories.json").mock(
            return_value=httpx.Response(200, json={"categories": [{"id": 1, "name": "General", "locale": "en-us"}]})
        )

        page = client.help_center.categories.get_all(locale="en-us")

        assert page[0].name == "General"
        assert route.called

    @respx.mock
    def test_get_without_locale(self, client):
        """Should omit the locale from the path when not given."""
        respx.get(f"{API}/help_center/categories/1.json").mock(
            return_value=httpx.Response(200, json={"category": {"id": 1, "name": "General"}})
        )
        assert client.help_center.categories.get(1).id == 1

    @respx.mock
    def test_create_update_delete(self, client):
        """Should create, update and delete a category."""
        respx.post(f"{API}/help_center/categories.json").mock(
            return_value=httpx.Response(201, json={"category": {"id": 1, "name": "General"}})
        )
        respx.put(f"{API}/help_center/categories/1.json").mock(
            return_value=httpx.Response(200, json={"category": {"id": 1, "name": "FAQ"}})
        )
        delete = respx.delete(f"{API}/help_center/categories/1.json").mock(return_value=httpx.Response(204))

        created = client.help_center.categories.create(HelpCenterCategory(name="General", locale="en-us"))
        updated = client.help_center.categories.update(HelpCenterCategory(id=created.id, name="FAQ"))
        client.help_center.categories.delete(1)

        assert updated.name == "FAQ"
        assert delete.called

    def test_update_requires_id(self, client):
        """Should require an id before sending an update."""
        with pytest.raises(ZendeskValidationError):
            client.help_center.categories.update(HelpCenterCategory(name="No id"))


class TestSections:
    """Tests for Help Center sections."""

    SECTION = {"id": 10, "category_id": 1, "name": "Printers", "position": 0}

    @respx.mock
    def test_get_all_in_category(self, client):
        """Should list the sections of a category."""
        respx.get(f"{API}/help_center/categories/1/sections.json").mock(
            return_value=httpx.Response(
                200,
                json={"sections": [self.SECTION], "page": 1, "per_page": 30, "page_count": 1, "count": 1, "next_page": None},
            )
        )

        page = client.help_center.sections.get_all_in_category(1)

        assert page[0].category_id == 1
        assert page.is_last

    @respx.mock
    def test_iter_all(self, client):
        """Should yield sections across pages."""
        respx.get(f"{API}/help_center/sections.json").mock(
            side_effect=[
                httpx.Response(
                    200, json={"sections": [self.SECTION], "next_page": f"{API}/help_center/sections.json?page=2"}
                ),
                httpx.Response(200, json={"sections": [{**self.SECTION, "id": 11}], "next_page": None}),
            ]
        )
        assert [s.id for s in client.help_center.sections.iter_all()] == [10, 11]

    @respx.mock
    def test_create_in_category(self, client):
        """Should create a section inside a category."""
        route = respx.post(f"{API}/help_center/categories/1/sections.json").mock(
            return_value=httpx.Response(201, json={"section": self.SECTION})
        )

        client.help_center.sections.create(1, HelpCenterSection(name="Printers", locale="en-us"))

        assert json.loads(route.calls.last.request.content) == {"section": {"name": "Printers", "locale": "en-us"}}

    @respx.mock
    def test_get_missing(self, client):
        """Should return None for a missing translation."""
        respx.get(f"{API}/help_center/de/sections/10.json").mock(return_value=httpx.Response(404))
        assert client.help_center.sections.get(10, locale="de") is None


class TestArticles:
    """Tests for Help Center articles."""

    ARTICLE = {"id": 100, "section_id": 10, "title": "Reset", "body": "<p>Turn it off</p>", "label_names": ["printer"]}

    @respx.mock
    def test_lists(self, client):
        """Should list articles per section and per category."""
        in_section = respx.get(f"{API}/help_center/en-us/sections/10/articles.json").mock(
            return_value=httpx.Response(200, json={"articles": [self.ARTICLE]})
        )
        in_category = respx.get(f"{API}/help_center/categories/1/articles.json").mock(
            return_value=httpx.Response(200, json={"articles": [self.ARTICLE]})
        )

        assert client.help_center.articles.get_all_in_section(10, locale="en-us")[0].title == "Reset"
        assert client.help_center.articles.get_all_in_category(1)[0].label_names == ["printer"]
        assert in_section.called and in_category.called

    @respx.mock
    def test_create_in_section(self, client):
        """Should create an article inside a section."""
        respx.post(f"{API}/help_center/sections/10/articles.json").mock(
            return_value=httpx.Response(201, json={"article": self.ARTICLE})
        )
        article = client.help_center.articles.create(10, HelpCenterArticle(title="Reset", body="<p>Turn it off</p>"))
        assert article.id == 100

    @respx.mock
    def test_archive(self, client):
        """Should archive an article on delete."""
        route = respx.delete(f"{API}/help_center/articles/100.json").mock(return_value=httpx.Response(204))
        client.help_center.articles.delete(100)
        assert route.called


class TestScopedIterators:
    """Tests for the per-category and per-section Help Center iterators."""

    @respx.mock
    def test_sections_in_category(self, client):
        """Should yield every section of a category in the given locale."""
        path = f"{API}/help_center/en-us/categories/1/sections.json"
        respx.get(path).mock(
            side_effect=[
                httpx.Response(200, json={"sections": [{"id": 10}], "next_page": f"{path}?page=2"}),
                httpx.Response(200, json={"sections": [{"id": 11}], "next_page": None}),
            ]
        )
        assert [s.id for s in client.help_center.sections.iter_all_in_category(1, locale="en-us")] == [10, 11]

    @respx.mock
    def test_articles_in_section(self, client):
        """Should yield every article of a section across pages."""
        path = f"{API}/help_center/sections/10/articles.json"
        respx.get(path).mock(
            side_effect=[
                httpx.Response(200, json={"articles": [{"id": 100}], "next_page": f"{path}?page=2"}),
                httpx.Response(200, json={"articles": [{"id": 101}], "next_page": None}),
            ]
        )
        assert [a.id for a in client.help_center.articles.iter_all_in_section(10)] == [100, 101]

    @respx.mock
    def test_articles_in_category(self, client):
        """Should yield the articles of a category."""
        respx.get(f"{API}/help_center/categories/1/articles.json").mock(
            return_value=httpx.Response(200, json={"articles": [{"id": 100}], "next_page": None})
        )
        assert [a.id for a in client.help_center.articles.iter_all_in_category(1)] == [100]
