"""Pydantic models for users, user fields and identities."""

from datetime import datetime
from typing import Any, Literal

from zendesk_client.models.base import ZendeskModel
from zendesk_client.models.tickets import CustomFieldOption

UserRole = Literal["end-user", "agent", "admin"]
IdentityType = Literal["email", "twitter", "facebook", "google", "phone_number", "agent_forwarding", "sdk"]


class User(ZendeskModel):
    """User record. `id` is absent until the user has been created."""

    id: int | None = None
    url: str | None = None
    name: str | None = None
    email: str | None = None
    external_id: str | None = None
    alias: str | None = None
    phone: str | None = None
    role: UserRole | None = None
    role_type: int | None = None
    custom_role_id: int | None = None
    organization_id: int | None = None
    default_group_id: int | None = None
    locale: str | None = None
    locale_id: int | None = None
    time_zone: str | None = None
    details: str | None = None
    notes: str | None = None
    signature: str | None = None
    active: bool | None = None
    verified: bool | None = None
    suspended: bool | None = None
    moderator: bool | None = None
    restricted_agent: bool | None = None
    only_private_comments: bool | None = None
    shared: bool | None = None
    shared_agent: bool | None = None
    ticket_restriction: str | None = None
    tags: list[str] | None = None
    user_fields: dict[str, Any] | None = None
    photo: dict[str, Any] | None = None
    last_login_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserField(ZendeskModel):
    id: int | None = None
    url: str | None = None
    key: str | None = None
    type: str | None = None
    title: str | None = None
    raw_title: str | None = None
    description: str | None = None
    raw_description: str | None = None
    position: int | None = None
    active: bool | None = None
    system: bool | None = None
    regexp_for_validation: str | None = None
    tag: str | None = None
    custom_field_options: list[CustomFieldOption] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserIdentity(ZendeskModel):
    id: int | None = None
    url: str | None = None
    user_id: int | None = None
    type: IdentityType | str
    value: str
    verified: bool | None = None
    primary: bool | None = None
    undeliverable_count: int | None = None
    deliverable_state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserRelated(ZendeskModel):
    """Counts returned by users/{id}/related."""

    assigned_tickets: int | None = None
    requested_tickets: int | None = None
    ccd_tickets: int | None = None
    organization_subscriptions: int | None = None
    topics: int | None = None
