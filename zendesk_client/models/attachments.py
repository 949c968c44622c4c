"""Attachment and upload models."""

from pydantic import Field

from zendesk_client.models.base import ZendeskModel


class Thumbnail(ZendeskModel):
    id: int
    file_name: str | None = None
    content_url: str | None = None
    content_type: str | None = None
    size: int | None = None


class Attachment(ZendeskModel):
    id: int
    url: str | None = None
    file_name: str | None = None
    content_url: str | None = None
    mapped_content_url: str | None = None
    content_type: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None
    inline: bool | None = None
    deleted: bool | None = None
    malware_scan_result: str | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)


class Upload(ZendeskModel):
    """Result of an upload; pass `token` in a comment's `uploads` list."""

    token: str
    expires_at: str | None = None
    attachment: Attachment | None = None
    attachments: list[Attachment] = Field(default_factory=list)
