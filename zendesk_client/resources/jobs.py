"""Status of queued bulk jobs."""

from collections.abc import Collection, Iterator

from zendesk_client._internal.resource import Resource, join_ids
from zendesk_client.models.jobs import JobStatus
from zendesk_client.pagination import Page, Pager

DOCS = "ticketing/ticket-management/job_statuses/"


class JobStatusesResource(Resource):
    def get_all(self, pager: Pager | None = None) -> Page[JobStatus]:
        """List recent jobs of the account."""
        return self._fetch_page(
            "job_statuses.json", "job_statuses", JobStatus, doc=DOCS + "#list-job-statuses", pager=pager
        )

    def iter_all(self, pager: Pager | None = None) -> Iterator[JobStatus]:
        """Iterate over the account's recent jobs.

        Args:
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            "job_statuses.json", "job_statuses", JobStatus, doc=DOCS + "#list-job-statuses", pager=pager
        )

    def get(self, job_id: str) -> JobStatus | None:
        """Poll one job, e.g. until `JobStatus.done` is true."""
        return self._fetch(f"job_statuses/{job_id}.json", "job_status", JobStatus, doc=DOCS + "#show-job-status")

    def get_many(self, job_ids: Collection[str]) -> list[JobStatus]:
        """Fetch several jobs at once.

        Args:
            job_ids: Ids of the jobs to fetch.

        Raises:
            ZendeskValidationError: If `job_ids` is empty.
        """
        return self._fetch_page(
            "job_statuses/show_many.json",
            "job_statuses",
            JobStatus,
            doc=DOCS + "#show-many-job-statuses",
            params={"ids": join_ids(job_ids)},
        ).items
