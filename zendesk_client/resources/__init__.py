"""Resource classes exposed as attributes of ZendeskClient."""

from zendesk_client.resources.attachments import AttachmentsResource
from zendesk_client.resources.groups import GroupMembershipsResource, GroupsResource
from zendesk_client.resources.help_center import (
    HelpCenter,
    HelpCenterArticlesResource,
    HelpCenterCategoriesResource,
    HelpCenterSectionsResource,
)
from zendesk_client.resources.jobs import JobStatusesResource
from zendesk_client.resources.locales import LocalesResource
from zendesk_client.resources.organizations import (
    OrganizationFieldsResource,
    OrganizationMembershipsResource,
    OrganizationsResource,
)
from zendesk_client.resources.search import SearchResource, SearchResult
from zendesk_client.resources.support_requests import SupportRequestsResource
from zendesk_client.resources.tickets import (
    SatisfactionRatingsResource,
    TicketAuditsResource,
    TicketCommentsResource,
    TicketFieldsResource,
    TicketFormsResource,
    TicketsResource,
)
from zendesk_client.resources.users import UserFieldsResource, UserIdentitiesResource, UsersResource

__all__ = [
    "AttachmentsResource",
    "GroupMembershipsResource",
    "GroupsResource",
    "HelpCenter",
    "HelpCenterArticlesResource",
    "HelpCenterCategoriesResource",
    "HelpCenterSectionsResource",
    "JobStatusesResource",
    "LocalesResource",
    "OrganizationFieldsResource",
    "OrganizationMembershipsResource",
    "OrganizationsResource",
    "SatisfactionRatingsResource",
    "SearchResource",
    "SearchResult",
    "SupportRequestsResource",
    "TicketAuditsResource",
    "TicketCommentsResource",
    "TicketFieldsResource",
    "TicketFormsResource",
    "TicketsResource",
    "UserFieldsResource",
    "UserIdentitiesResource",
    "UsersResource",
]
