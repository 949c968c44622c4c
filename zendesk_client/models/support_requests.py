"""Models for end-user requests (the requester's view of a ticket)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from zendesk_client.models.base import CustomFieldValue, ZendeskModel
from zendesk_client.models.tickets import TicketCommentRequest, TicketPriority, TicketStatus, TicketType


class SupportRequest(ZendeskModel):
    id: int
    url: str | None = None
    subject: str | None = None
    description: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    type: TicketType | None = None
    requester_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None
    collaborator_ids: list[int] = Field(default_factory=list)
    email_cc_ids: list[int] = Field(default_factory=list)
    custom_fields: list[CustomFieldValue] = Field(default_factory=list)
    can_be_solved_by_me: bool | None = None
    solved: bool | None = None
    is_public: bool | None = None
    due_at: datetime | None = None
    via: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SupportRequestCreate(BaseModel):
    """Payload for an end user opening a request."""

    subject: str
    comment: TicketCommentRequest
    priority: TicketPriority | None = None
    type: TicketType | None = None
    collaborators: list[int | str] | None = None
    custom_fields: list[CustomFieldValue] | None = None


class SupportRequestUpdate(BaseModel):
    """Payload for an end user commenting on or solving a request."""

    comment: TicketCommentRequest | None = None
    solved: bool | None = None
    additional_collaborators: list[int | str] | None = None
