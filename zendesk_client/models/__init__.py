"""Public models for Zendesk resources."""

from zendesk_client.models.attachments import Attachment, Thumbnail, Upload
from zendesk_client.models.base import CustomFieldValue, ZendeskModel
from zendesk_client.models.groups import Group, GroupMembership
from zendesk_client.models.help_center import (
    HelpCenterArticle,
    HelpCenterCategory,
    HelpCenterSection,
)
from zendesk_client.models.jobs import JobResult, JobStatus
from zendesk_client.models.locales import Locale
from zendesk_client.models.organizations import (
    Organization,
    OrganizationField,
    OrganizationMembership,
)
from zendesk_client.models.support_requests import (
    SupportRequest,
    SupportRequestCreate,
    SupportRequestUpdate,
)
from zendesk_client.models.tickets import (
    AuditEvent,
    CustomFieldOption,
    Requester,
    SatisfactionRating,
    Ticket,
    TicketAudit,
    TicketComment,
    TicketCommentRequest,
    TicketCreateRequest,
    TicketField,
    TicketForm,
    TicketUpdateRequest,
    Via,
)
from zendesk_client.models.users import User, UserField, UserIdentity, UserRelated

__all__ = [
    "Attachment",
    "AuditEvent",
    "CustomFieldOption",
    "CustomFieldValue",
    "Group",
    "GroupMembership",
    "HelpCenterArticle",
    "HelpCenterCategory",
    "HelpCenterSection",
    "JobResult",
    "JobStatus",
    "Locale",
    "Organization",
    "OrganizationField",
    "OrganizationMembership",
    "Requester",
    "SatisfactionRating",
    "SupportRequest",
    "SupportRequestCreate",
    "SupportRequestUpdate",
    "Thumbnail",
    "Ticket",
    "TicketAudit",
    "TicketComment",
    "TicketCommentRequest",
    "TicketCreateRequest",
    "TicketField",
    "TicketForm",
    "TicketUpdateRequest",
    "Upload",
    "User",
    "UserField",
    "UserIdentity",
    "UserRelated",
    "Via",
    "ZendeskModel",
]
