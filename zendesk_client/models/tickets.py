"""Pydantic models for tickets and the records hanging off them."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from zendesk_client.models.attachments import Attachment
from zendesk_client.models.base import CustomFieldValue, ZendeskModel

TicketStatus = Literal["new", "open", "pending", "hold", "solved", "closed"]
TicketPriority = Literal["low", "normal", "high", "urgent"]
TicketType = Literal["problem", "incident", "question", "task"]

# =============================================================================
# Response Models
# =============================================================================


class Via(ZendeskModel):
    channel: str | int | None = None
    source: dict[str, Any] | None = None


class TicketSatisfaction(ZendeskModel):
    id: int | None = None
    score: str | None = None
    comment: str | None = None


class Ticket(ZendeskModel):
    """Ticket record returned from the API."""

    id: int
    url: str | None = None
    external_id: str | None = None
    type: TicketType | None = None
    subject: str | None = None
    raw_subject: str | None = None
    description: str | None = None
    priority: TicketPriority | None = None
    status: TicketStatus | None = None
    recipient: str | None = None
    requester_id: int | None = None
    submitter_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None
    brand_id: int | None = None
    ticket_form_id: int | None = None
    problem_id: int | None = None
    collaborator_ids: list[int] = Field(default_factory=list)
    follower_ids: list[int] = Field(default_factory=list)
    email_cc_ids: list[int] = Field(default_factory=list)
    sharing_agreement_ids: list[int] = Field(default_factory=list)
    has_incidents: bool | None = None
    is_public: bool | None = None
    due_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    custom_fields: list[CustomFieldValue] = Field(default_factory=list)
    satisfaction_rating: TicketSatisfaction | None = None
    via: Via | None = None
    allow_channelback: bool | None = None
    allow_attachments: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TicketComment(ZendeskModel):
    id: int
    type: str | None = None
    author_id: int | None = None
    body: str | None = None
    html_body: str | None = None
    plain_body: str | None = None
    public: bool | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    audit_id: int | None = None
    via: Via | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime | None = None


class AuditEvent(ZendeskModel):
    id: int
    type: str
    field_name: str | None = None
    value: Any = None
    previous_value: Any = None


class TicketAudit(ZendeskModel):
    id: int
    ticket_id: int
    author_id: int | None = None
    events: list[AuditEvent] = Field(default_factory=list)
    metadata: dict[str, Any] | None = None
    via: Via | None = None
    created_at: datetime | None = None


class CustomFieldOption(ZendeskModel):
    id: int | None = None
    name: str
    value: str
    default: bool | None = None


class TicketField(ZendeskModel):
    id: int | None = None
    url: str | None = None
    type: str | None = None
    title: str | None = None
    raw_title: str | None = None
    description: str | None = None
    position: int | None = None
    active: bool | None = None
    required: bool | None = None
    visible_in_portal: bool | None = None
    editable_in_portal: bool | None = None
    required_in_portal: bool | None = None
    tag: str | None = None
    custom_field_options: list[CustomFieldOption] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TicketForm(ZendeskModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    raw_name: str | None = None
    display_name: str | None = None
    position: int | None = None
    active: bool | None = None
    default: bool | None = None
    end_user_visible: bool | None = None
    in_all_brands: bool | None = None
    restricted_brand_ids: list[int] | None = None
    ticket_field_ids: list[int] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


SatisfactionScore = Literal["offered", "unoffered", "good", "bad"]


class SatisfactionRating(ZendeskModel):
    id: int | None = None
    url: str | None = None
    score: SatisfactionScore
    comment: str | None = None
    reason: str | None = None
    reason_id: int | None = None
    ticket_id: int | None = None
    assignee_id: int | None = None
    group_id: int | None = None
    requester_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class TicketCommentRequest(BaseModel):
    """Comment added when creating or updating a ticket.

    Required fields:
        body or html_body

    Optional fields:
        public: False makes an internal note
        author_id: Defaults to the authenticated user
        uploads: Tokens returned by the attachments upload endpoint
    """

    body: str | None = None
    html_body: str | None = None
    public: bool | None = None
    author_id: int | None = None
    uploads: list[str] | None = None


class Requester(BaseModel):
    """Inline requester, created on the fly if the email is unknown."""

    email: str
    name: str | None = None
    locale_id: int | None = None


class TicketCreateRequest(BaseModel):
    """Payload for creating a new ticket.

    Required fields:
        comment: First comment; becomes the ticket description

    Everything else is optional and defaults server-side.
    """

    comment: TicketCommentRequest
    subject: str | None = None
    type: TicketType | None = None
    priority: TicketPriority | None = None
    status: TicketStatus | None = None
    external_id: str | None = None
    requester_id: int | None = None
    requester: Requester | None = None
    submitter_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None
    brand_id: int | None = None
    ticket_form_id: int | None = None
    problem_id: int | None = None
    collaborator_ids: list[int] | None = None
    email_cc_ids: list[int] | None = None
    follower_ids: list[int] | None = None
    due_at: datetime | None = None
    tags: list[str] | None = None
    custom_fields: list[CustomFieldValue] | None = None


class TicketUpdateRequest(BaseModel):
    """Payload for updating a ticket.

    All fields are optional - only provided fields are updated. `id` is
    only needed for bulk updates.
    """

    id: int | None = None
    comment: TicketCommentRequest | None = None
    subject: str | None = None
    type: TicketType | None = None
    priority: TicketPriority | None = None
    status: TicketStatus | None = None
    external_id: str | None = None
    requester_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None
    ticket_form_id: int | None = None
    problem_id: int | None = None
    due_at: datetime | None = None
    tags: list[str] | None = None
    additional_tags: list[str] | None = None
    remove_tags: list[str] | None = None
    custom_fields: list[CustomFieldValue] | None = None
    safe_update: bool | None = None
    updated_stamp: datetime | None = None
