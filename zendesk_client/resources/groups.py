"""Group resources."""

from collections.abc import Iterator

from zendesk_client._internal.resource import CrudResource, Payload, Resource
from zendesk_client.models.groups import Group, GroupMembership
from zendesk_client.pagination import Page, Pager

MEMBERSHIPS_DOCS = "ticketing/groups/group_memberships/"


class GroupsResource(CrudResource[Group]):
    path = "groups"
    singular = "group"
    plural = "groups"
    model = Group
    docs = "ticketing/groups/groups/"

    def get_assignable(self, pager: Pager | None = None) -> Page[Group]:
        """Groups tickets can be assigned to."""
        return self._fetch_page(
            "groups/assignable.json", "groups", Group, doc=self.docs + "#list-assignable-groups", pager=pager
        )

    def iter_assignable(self, pager: Pager | None = None) -> Iterator[Group]:
        """Iterate over every group tickets can be assigned to.

        Args:
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            "groups/assignable.json", "groups", Group, doc=self.docs + "#list-assignable-groups", pager=pager
        )


class GroupMembershipsResource(Resource):
    """Which agents belong to which groups."""

    def _list(self, path: str, pager: Pager | None) -> Page[GroupMembership]:
        return self._fetch_page(
            path, "group_memberships", GroupMembership, doc=MEMBERSHIPS_DOCS + "#list-memberships", pager=pager
        )

    def _iter(self, path: str, pager: Pager | None) -> Iterator[GroupMembership]:
        return self._iterate(
            path, "group_memberships", GroupMembership, doc=MEMBERSHIPS_DOCS + "#list-memberships", pager=pager
        )

    def get_all(self, pager: Pager | None = None) -> Page[GroupMembership]:
        """List one page of all group memberships."""
        return self._list("group_memberships.json", pager)

    def iter_all(self, pager: Pager | None = None) -> Iterator[GroupMembership]:
        """Iterate over every group membership on the account.

        Args:
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iter("group_memberships.json", pager)

    def get_all_for_user(self, user_id: int, pager: Pager | None = None) -> Page[GroupMembership]:
        """List one page of an agent's group memberships.

        Args:
            user_id: Agent whose memberships to list.
            pager: Page to fetch.
        """
        return self._list(f"users/{user_id}/group_memberships.json", pager)

    def iter_all_for_user(self, user_id: int, pager: Pager | None = None) -> Iterator[GroupMembership]:
        """Iterate over every group membership of an agent.

        Args:
            user_id: Agent whose memberships to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iter(f"users/{user_id}/group_memberships.json", pager)

    def get_all_for_group(self, group_id: int, pager: Pager | None = None) -> Page[GroupMembership]:
        """List one page of a group's memberships.

        Args:
            group_id: Group whose memberships to list.
            pager: Page to fetch.
        """
        return self._list(f"groups/{group_id}/memberships.json", pager)

    def iter_all_for_group(self, group_id: int, pager: Pager | None = None) -> Iterator[GroupMembership]:
        """Iterate over every membership of a group.

        Args:
            group_id: Group whose memberships to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iter(f"groups/{group_id}/memberships.json", pager)

    def get(self, membership_id: int) -> GroupMembership | None:
        """Fetch a membership, or None if it does not exist."""
        return self._fetch(
            f"group_memberships/{membership_id}.json",
            "group_membership",
            GroupMembership,
            doc=MEMBERSHIPS_DOCS + "#show-membership",
        )

    def create(self, membership: GroupMembership | Payload) -> GroupMembership:
        """Add an agent to a group.

        Args:
            membership: Must carry `user_id` and `group_id`.

        Returns:
            The created membership.
        """
        return self._create(
            "group_memberships.json",
            "group_membership",
            membership,
            GroupMembership,
            doc=MEMBERSHIPS_DOCS + "#create-membership",
        )

    def delete(self, membership_id: int) -> None:
        """Remove an agent from a group."""
        self._remove(f"group_memberships/{membership_id}.json", doc=MEMBERSHIPS_DOCS + "#delete-membership")
