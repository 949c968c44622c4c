"""Pydantic models for help center content."""

from datetime import datetime

from zendesk_client.models.base import ZendeskModel


class HelpCenterCategory(ZendeskModel):
    id: int | None = None
    url: str | None = None
    html_url: str | None = None
    name: str | None = None
    description: str | None = None
    locale: str | None = None
    source_locale: str | None = None
    position: int | None = None
    outdated: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class HelpCenterSection(ZendeskModel):
    id: int | None = None
    url: str | None = None
    html_url: str | None = None
    category_id: int | None = None
    parent_section_id: int | None = None
    name: str | None = None
    description: str | None = None
    locale: str | None = None
    source_locale: str | None = None
    position: int | None = None
    sorting: str | None = None
    outdated: bool | None = None
    theme_template: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class HelpCenterArticle(ZendeskModel):
    id: int | None = None
    url: str | None = None
    html_url: str | None = None
    section_id: int | None = None
    author_id: int | None = None
    permission_group_id: int | None = None
    user_segment_id: int | None = None
    title: str | None = None
    body: str | None = None
    locale: str | None = None
    source_locale: str | None = None
    draft: bool | None = None
    promoted: bool | None = None
    outdated: bool | None = None
    comments_disabled: bool | None = None
    position: int | None = None
    vote_sum: int | None = None
    vote_count: int | None = None
    label_names: list[str] | None = None
    edited_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
