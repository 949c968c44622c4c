"""Organization resources: organizations, organization fields and memberships."""

from collections.abc import Collection, Iterator, Sequence

from zendesk_client._internal.resource import CrudResource, Payload, Resource, dump_payload, join_ids
from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models.jobs import JobStatus
from zendesk_client.models.organizations import Organization, OrganizationField, OrganizationMembership
from zendesk_client.pagination import Page, Pager, parse_page

ORGANIZATIONS_DOCS = "ticketing/organizations/organizations/"
MEMBERSHIPS_DOCS = "ticketing/organizations/organization_memberships/"


class OrganizationsResource(CrudResource[Organization]):
    path = "organizations"
    singular = "organization"
    plural = "organizations"
    model = Organization
    docs = ORGANIZATIONS_DOCS

    def get_all_for_user(self, user_id: int, pager: Pager | None = None) -> Page[Organization]:
        """List one page of the organizations a user belongs to.

        Args:
            user_id: Member.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/organizations.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#list-organizations",
            pager=pager,
        )

    def iter_all_for_user(self, user_id: int, pager: Pager | None = None) -> Iterator[Organization]:
        """Iterate over every organization a user belongs to.

        Args:
            user_id: Member.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/organizations.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#list-organizations",
            pager=pager,
        )

    def get_many(
        self,
        organization_ids: Collection[int] | None = None,
        *,
        external_ids: Collection[str] | None = None,
    ) -> list[Organization]:
        """Fetch up to 100 organizations by id or by external id.

        Raises:
            ZendeskValidationError: If neither list is given.
        """
        if organization_ids:
            params = {"ids": join_ids(organization_ids)}
        elif external_ids:
            params = {"external_ids": join_ids(external_ids)}
        else:
            raise ZendeskValidationError("organization_ids or external_ids is required")
        return self._fetch_page(
            "organizations/show_many.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#show-many-organizations",
            params=params,
        ).items

    def search(self, *, external_id: str | None = None, name: str | None = None) -> list[Organization]:
        """Exact lookup by external id or by name."""
        if external_id:
            params = {"external_id": external_id}
        elif name:
            params = {"name": name}
        else:
            raise ZendeskValidationError("external_id or name is required")
        return self._fetch_page(
            "organizations/search.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#search-organizations",
            params=params,
        ).items

    def autocomplete(self, name: str, pager: Pager | None = None) -> Page[Organization]:
        """Organizations whose name starts with `name` (at least 2 characters)."""
        if len(name) < 2:
            raise ZendeskValidationError("name must be at least 2 characters")
        return self._fetch_page(
            "organizations/autocomplete.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#autocomplete-organizations",
            pager=pager,
            params={"name": name},
        )

    def iter_autocomplete(self, name: str, pager: Pager | None = None) -> Iterator[Organization]:
        """Iterate over every organization whose name starts with `name`.

        Args:
            name: Name prefix, at least 2 characters.
            pager: Where to start; later pages follow `next_page`.

        Raises:
            ZendeskValidationError: If `name` is shorter than 2 characters.
        """
        if len(name) < 2:
            raise ZendeskValidationError("name must be at least 2 characters")
        return self._iterate(
            "organizations/autocomplete.json",
            "organizations",
            Organization,
            doc=ORGANIZATIONS_DOCS + "#autocomplete-organizations",
            pager=pager,
            params={"name": name},
        )

    def create_many(self, organizations: Sequence[Organization | Payload]) -> JobStatus:
        """Queue the creation of up to 100 organizations.

        Args:
            organizations: Organizations to create.

        Returns:
            The queued job; poll it through `job_statuses`.
        """
        return self._job(
            "POST",
            "organizations/create_many.json",
            doc=ORGANIZATIONS_DOCS + "#create-many-organizations",
            json={"organizations": [dump_payload(o) for o in organizations]},
        )


class OrganizationFieldsResource(CrudResource[OrganizationField]):
    path = "organization_fields"
    singular = "organization_field"
    plural = "organization_fields"
    model = OrganizationField
    docs = "ticketing/organizations/organization_fields/"


class OrganizationMembershipsResource(Resource):
    def get_all(self, pager: Pager | None = None) -> Page[OrganizationMembership]:
        """List one page of all organization memberships."""
        return self._fetch_page(
            "organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def iter_all(self, pager: Pager | None = None) -> Iterator[OrganizationMembership]:
        """Iterate over every organization membership on the account.

        Args:
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            "organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def get_all_for_user(self, user_id: int, pager: Pager | None = None) -> Page[OrganizationMembership]:
        """List one page of a user's organization memberships.

        Args:
            user_id: Member.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def iter_all_for_user(self, user_id: int, pager: Pager | None = None) -> Iterator[OrganizationMembership]:
        """Iterate over every organization membership of a user.

        Args:
            user_id: Member.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def get_all_for_organization(
        self, organization_id: int, pager: Pager | None = None
    ) -> Page[OrganizationMembership]:
        """List one page of an organization's memberships.

        Args:
            organization_id: Organization whose memberships to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"organizations/{organization_id}/organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def iter_all_for_organization(
        self, organization_id: int, pager: Pager | None = None
    ) -> Iterator[OrganizationMembership]:
        """Iterate over every membership of an organization.

        Args:
            organization_id: Organization whose memberships to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"organizations/{organization_id}/organization_memberships.json",
            "organization_memberships",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#list-memberships",
            pager=pager,
        )

    def get(self, membership_id: int) -> OrganizationMembership | None:
        """Fetch a membership, or None if it does not exist."""
        return self._fetch(
            f"organization_memberships/{membership_id}.json",
            "organization_membership",
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#show-membership",
        )

    def create(self, membership: OrganizationMembership | Payload) -> OrganizationMembership:
        """Add a user to an organization.

        Args:
            membership: At least `user_id` and `organization_id`.

        Returns:
            The created membership.
        """
        return self._create(
            "organization_memberships.json",
            "organization_membership",
            membership,
            OrganizationMembership,
            doc=MEMBERSHIPS_DOCS + "#create-membership",
        )

    def delete(self, membership_id: int) -> None:
        """Remove a user from an organization."""
        self._remove(f"organization_memberships/{membership_id}.json", doc=MEMBERSHIPS_DOCS + "#delete-membership")

    def make_default(self, user_id: int, membership_id: int) -> list[OrganizationMembership]:
        """Make a membership the user's default. Returns the user's memberships afterwards."""
        response = self._action(
            "PUT",
            f"users/{user_id}/organization_memberships/{membership_id}/make_default.json",
            doc=MEMBERSHIPS_DOCS + "#set-membership-as-default",
        )
        return parse_page(self._json(response), "organization_memberships", OrganizationMembership).items
