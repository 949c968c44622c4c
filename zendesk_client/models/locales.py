"""Locale model."""

from datetime import datetime

from zendesk_client.models.base import ZendeskModel


class Locale(ZendeskModel):
    id: int
    url: str | None = None
    locale: str
    name: str | None = None
    native_name: str | None = None
    presentation_name: str | None = None
    rtl: bool | None = None
    default: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
