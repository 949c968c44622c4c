"""Common base for Zendesk models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ZendeskModel(BaseModel):
    """Base for records returned by Zendesk.

    Unknown fields are kept so newer API fields survive a round trip.
    """

    model_config = ConfigDict(extra="allow")


class CustomFieldValue(BaseModel):
    """Value of a custom field on a ticket, user or organization."""

    id: int
    value: Any = None
