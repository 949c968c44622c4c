"""Pydantic models for organizations and their memberships."""

from datetime import datetime
from typing import Any

from zendesk_client.models.base import ZendeskModel
from zendesk_client.models.tickets import CustomFieldOption


class Organization(ZendeskModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    external_id: str | None = None
    details: str | None = None
    notes: str | None = None
    group_id: int | None = None
    shared_tickets: bool | None = None
    shared_comments: bool | None = None
    domain_names: list[str] | None = None
    tags: list[str] | None = None
    organization_fields: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrganizationField(ZendeskModel):
    id: int | None = None
    url: str | None = None
    key: str | None = None
    type: str | None = None
    title: str | None = None
    raw_title: str | None = None
    description: str | None = None
    position: int | None = None
    active: bool | None = None
    system: bool | None = None
    regexp_for_validation: str | None = None
    tag: str | None = None
    custom_field_options: list[CustomFieldOption] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrganizationMembership(ZendeskModel):
    id: int | None = None
    url: str | None = None
    user_id: int
    organization_id: int
    organization_name: str | None = None
    default: bool | None = None
    view_tickets: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
