"""Help center resources: categories, sections and articles.

Reads accept an optional `locale` (e.g. "en-us"); without it Zendesk picks
the account's default locale.
"""

from collections.abc import Iterator

from zendesk_client._internal.resource import Payload, Resource
from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models.help_center import HelpCenterArticle, HelpCenterCategory, HelpCenterSection
from zendesk_client.pagination import Page, Pager

DOCS = "help_center/help-center-api/"


def hc_path(path: str, locale: str | None = None) -> str:
    if locale:
        return f"help_center/{locale}/{path}"
    return f"help_center/{path}"


class HelpCenterCategoriesResource(Resource):
    def get_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Page[HelpCenterCategory]:
        """List one page of categories.

        Args:
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path("categories.json", locale),
            "categories",
            HelpCenterCategory,
            doc=DOCS + "categories/#list-categories",
            pager=pager,
        )

    def iter_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Iterator[HelpCenterCategory]:
        """Iterate over every category.

        Args:
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path("categories.json", locale),
            "categories",
            HelpCenterCategory,
            doc=DOCS + "categories/#list-categories",
            pager=pager,
        )

    def get(self, category_id: int, *, locale: str | None = None) -> HelpCenterCategory | None:
        """Fetch a category, or None if it does not exist in that locale."""
        return self._fetch(
            hc_path(f"categories/{category_id}.json", locale),
            "category",
            HelpCenterCategory,
            doc=DOCS + "categories/#show-category",
        )

    def create(self, category: HelpCenterCategory | Payload) -> HelpCenterCategory:
        """Create a category.

        Args:
            category: At least `name`; `locale` defaults to the Help Center's.

        Returns:
            The created category.
        """
        return self._create(
            "help_center/categories.json",
            "category",
            category,
            HelpCenterCategory,
            doc=DOCS + "categories/#create-category",
        )

    def update(self, category: HelpCenterCategory) -> HelpCenterCategory | None:
        """Save changes to a category.

        Args:
            category: Category carrying its `id` and the fields to change.

        Returns:
            The updated category, or None if it no longer exists.

        Raises:
            ZendeskValidationError: If `category` has no id.
        """
        if category.id is None:
            raise ZendeskValidationError("category must have an id to be updated")
        return self._update(
            f"help_center/categories/{category.id}.json",
            "category",
            category,
            HelpCenterCategory,
            doc=DOCS + "categories/#update-category",
        )

    def delete(self, category_id: int) -> None:
        """Delete a category along with all its sections and articles."""
        self._remove(f"help_center/categories/{category_id}.json", doc=DOCS + "categories/#delete-category")


class HelpCenterSectionsResource(Resource):
    def get_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Page[HelpCenterSection]:
        """List one page of sections.

        Args:
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path("sections.json", locale),
            "sections",
            HelpCenterSection,
            doc=DOCS + "sections/#list-sections",
            pager=pager,
        )

    def iter_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Iterator[HelpCenterSection]:
        """Iterate over every section.

        Args:
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path("sections.json", locale),
            "sections",
            HelpCenterSection,
            doc=DOCS + "sections/#list-sections",
            pager=pager,
        )

    def get_all_in_category(
        self, category_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Page[HelpCenterSection]:
        """List one page of a category's sections.

        Args:
            category_id: Parent category.
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path(f"categories/{category_id}/sections.json", locale),
            "sections",
            HelpCenterSection,
            doc=DOCS + "sections/#list-sections",
            pager=pager,
        )

    def iter_all_in_category(
        self, category_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Iterator[HelpCenterSection]:
        """Iterate over every section of a category.

        Args:
            category_id: Parent category.
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path(f"categories/{category_id}/sections.json", locale),
            "sections",
            HelpCenterSection,
            doc=DOCS + "sections/#list-sections",
            pager=pager,
        )

    def get(self, section_id: int, *, locale: str | None = None) -> HelpCenterSection | None:
        """Fetch a section, or None if it does not exist in that locale."""
        return self._fetch(
            hc_path(f"sections/{section_id}.json", locale),
            "section",
            HelpCenterSection,
            doc=DOCS + "sections/#show-section",
        )

    def create(self, category_id: int, section: HelpCenterSection | Payload) -> HelpCenterSection:
        """Create a section inside a category.

        Args:
            category_id: Parent category.
            section: At least `name`.

        Returns:
            The created section.
        """
        return self._create(
            f"help_center/categories/{category_id}/sections.json",
            "section",
            section,
            HelpCenterSection,
            doc=DOCS + "sections/#create-section",
        )

    def update(self, section: HelpCenterSection) -> HelpCenterSection | None:
        """Save changes to a section.

        Args:
            section: Section carrying its `id` and the fields to change.

        Returns:
            The updated section, or None if it no longer exists.

        Raises:
            ZendeskValidationError: If `section` has no id.
        """
        if section.id is None:
            raise ZendeskValidationError("section must have an id to be updated")
        return self._update(
            f"help_center/sections/{section.id}.json",
            "section",
            section,
            HelpCenterSection,
            doc=DOCS + "sections/#update-section",
        )

    def delete(self, section_id: int) -> None:
        """Delete a section along with its articles."""
        self._remove(f"help_center/sections/{section_id}.json", doc=DOCS + "sections/#delete-section")


class HelpCenterArticlesResource(Resource):
    def get_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Page[HelpCenterArticle]:
        """List one page of articles.

        Args:
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path("articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def iter_all(self, pager: Pager | None = None, *, locale: str | None = None) -> Iterator[HelpCenterArticle]:
        """Iterate over every article.

        Args:
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path("articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def get_all_in_section(
        self, section_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Page[HelpCenterArticle]:
        """List one page of a section's articles.

        Args:
            section_id: Parent section.
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path(f"sections/{section_id}/articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def iter_all_in_section(
        self, section_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Iterator[HelpCenterArticle]:
        """Iterate over every article of a section.

        Args:
            section_id: Parent section.
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path(f"sections/{section_id}/articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def get_all_in_category(
        self, category_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Page[HelpCenterArticle]:
        """List one page of the articles in a category's sections.

        Args:
            category_id: Category to list.
            pager: Page to fetch.
            locale: Return translations in this locale instead of the default.
        """
        return self._fetch_page(
            hc_path(f"categories/{category_id}/articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def iter_all_in_category(
        self, category_id: int, pager: Pager | None = None, *, locale: str | None = None
    ) -> Iterator[HelpCenterArticle]:
        """Iterate over every article in a category's sections.

        Args:
            category_id: Category to list.
            pager: Where to start; later pages follow `next_page`.
            locale: Return translations in this locale instead of the default.
        """
        return self._iterate(
            hc_path(f"categories/{category_id}/articles.json", locale),
            "articles",
            HelpCenterArticle,
            doc=DOCS + "articles/#list-articles",
            pager=pager,
        )

    def get(self, article_id: int, *, locale: str | None = None) -> HelpCenterArticle | None:
        """Fetch an article, or None if it does not exist in that locale."""
        return self._fetch(
            hc_path(f"articles/{article_id}.json", locale),
            "article",
            HelpCenterArticle,
            doc=DOCS + "articles/#show-article",
        )

    def create(self, section_id: int, article: HelpCenterArticle | Payload) -> HelpCenterArticle:
        """Create an article inside a section.

        Args:
            section_id: Parent section.
            article: At least `title`.

        Returns:
            The created article.
        """
        return self._create(
            f"help_center/sections/{section_id}/articles.json",
            "article",
            article,
            HelpCenterArticle,
            doc=DOCS + "articles/#create-article",
        )

    def update(self, article: HelpCenterArticle) -> HelpCenterArticle | None:
        """Update article metadata. Title and body live on translations, not here."""
        if article.id is None:
            raise ZendeskValidationError("article must have an id to be updated")
        return self._update(
            f"help_center/articles/{article.id}.json",
            "article",
            article,
            HelpCenterArticle,
            doc=DOCS + "articles/#update-article",
        )

    def delete(self, article_id: int) -> None:
        """Archive an article."""
        self._remove(f"help_center/articles/{article_id}.json", doc=DOCS + "articles/#archive-article")


class HelpCenter:
    """Groups the help center resources under `client.help_center`."""

    def __init__(
        self,
        categories: HelpCenterCategoriesResource,
        sections: HelpCenterSectionsResource,
        articles: HelpCenterArticlesResource,
    ) -> None:
        self.categories = categories
        self.sections = sections
        self.articles = articles
