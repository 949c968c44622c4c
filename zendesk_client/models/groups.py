"""Group models."""

from datetime import datetime

from zendesk_client.models.base import ZendeskModel


class Group(ZendeskModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    description: str | None = None
    default: bool | None = None
    deleted: bool | None = None
    is_public: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GroupMembership(ZendeskModel):
    id: int | None = None
    url: str | None = None
    user_id: int
    group_id: int
    default: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
