"""Models for background job statuses returned by bulk endpoints."""

from typing import Literal

from zendesk_client.models.base import ZendeskModel

JobState = Literal["queued", "working", "failed", "completed", "killed"]


class JobResult(ZendeskModel):
    id: int | None = None
    index: int | None = None
    action: str | None = None
    success: bool | None = None
    status: str | None = None
    error: str | None = None
    details: str | None = None


class JobStatus(ZendeskModel):
    """Progress of a queued bulk job (create_many, update_many, destroy_many...)."""

    id: str
    url: str | None = None
    status: JobState
    total: int | None = None
    progress: int | None = None
    message: str | None = None
    results: list[JobResult] | None = None

    @property
    def done(self) -> bool:
        return self.status in ("failed", "completed", "killed")
