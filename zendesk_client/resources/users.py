"""User resources: users, user fields and identities."""

from collections.abc import Collection, Iterator, Sequence
from typing import Any

from zendesk_client._internal.resource import CrudResource, Payload, Resource, dump_payload, join_ids
from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models.jobs import JobStatus
from zendesk_client.models.users import User, UserField, UserIdentity, UserRelated, UserRole
from zendesk_client.pagination import Page, Pager, parse_page

USERS_DOCS = "ticketing/users/users/"
IDENTITIES_DOCS = "ticketing/users/user_identities/"


def search_params(query: str | None, external_id: str | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if query:
        params["query"] = query
    if external_id:
        params["external_id"] = external_id
    if not params:
        raise ZendeskValidationError("query or external_id is required")
    return params


class UsersResource(Resource):
    """Users: /api/v2/users."""

    def get_all(self, pager: Pager | None = None, *, role: UserRole | None = None) -> Page[User]:
        """List one page of users.

        Args:
            pager: Page to fetch.
            role: Only list users with this role.
        """
        params = {"role": role} if role else None
        return self._fetch_page("users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager, params=params)

    def iter_all(self, pager: Pager | None = None, *, role: UserRole | None = None) -> Iterator[User]:
        """Iterate over every user.

        Args:
            pager: Where to start; later pages follow `next_page`.
            role: Only list users with this role.
        """
        params = {"role": role} if role else None
        return self._iterate("users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager, params=params)

    def get_all_in_group(self, group_id: int, pager: Pager | None = None) -> Page[User]:
        """List one page of a group's agents.

        Args:
            group_id: Group whose members to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"groups/{group_id}/users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager
        )

    def iter_all_in_group(self, group_id: int, pager: Pager | None = None) -> Iterator[User]:
        """Iterate over every agent of a group.

        Args:
            group_id: Group whose members to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(f"groups/{group_id}/users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager)

    def get_all_in_organization(self, organization_id: int, pager: Pager | None = None) -> Page[User]:
        """List one page of an organization's users.

        Args:
            organization_id: Organization whose users to list.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"organizations/{organization_id}/users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager
        )

    def iter_all_in_organization(self, organization_id: int, pager: Pager | None = None) -> Iterator[User]:
        """Iterate over every user of an organization.

        Args:
            organization_id: Organization whose users to list.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"organizations/{organization_id}/users.json", "users", User, doc=USERS_DOCS + "#list-users", pager=pager
        )

    def get(self, user_id: int) -> User | None:
        """Fetch a user, or None if it does not exist."""
        return self._fetch(f"users/{user_id}.json", "user", User, doc=USERS_DOCS + "#show-user")

    def get_many(
        self,
        user_ids: Collection[int] | None = None,
        *,
        external_ids: Collection[str] | None = None,
    ) -> list[User]:
        """Fetch up to 100 users by id or by external id.

        Args:
            user_ids: Zendesk ids; take precedence over `external_ids`.
            external_ids: Ids assigned by your own system.

        Raises:
            ZendeskValidationError: If neither list is given.
        """
        if user_ids:
            params = {"ids": join_ids(user_ids)}
        elif external_ids:
            params = {"external_ids": join_ids(external_ids)}
        else:
            raise ZendeskValidationError("user_ids or external_ids is required")
        page = self._fetch_page(
            "users/show_many.json", "users", User, doc=USERS_DOCS + "#show-many-users", params=params
        )
        return page.items

    def me(self) -> User | None:
        """The authenticated user."""
        return self._fetch("users/me.json", "user", User, doc=USERS_DOCS + "#show-the-currently-authenticated-user")

    def related(self, user_id: int) -> UserRelated | None:
        """Ticket and membership counts for a user.

        Args:
            user_id: User to look up.

        Returns:
            The counts, or None if the user does not exist.
        """
        return self._fetch(
            f"users/{user_id}/related.json", "user_related", UserRelated, doc=USERS_DOCS + "#show-user-related-information"
        )

    def search(
        self,
        query: str | None = None,
        *,
        external_id: str | None = None,
        pager: Pager | None = None,
    ) -> Page[User]:
        """Search users by name/email fragment, or look one up by external id.

        Args:
            query: Fragment of a name or email, or a search expression.
            external_id: Exact external id to look up instead.
            pager: Page to fetch.

        Raises:
            ZendeskValidationError: If neither `query` nor `external_id` is given.
        """
        return self._fetch_page(
            "users/search.json",
            "users",
            User,
            doc=USERS_DOCS + "#search-users",
            pager=pager,
            params=search_params(query, external_id),
        )

    def iter_search(
        self,
        query: str | None = None,
        *,
        external_id: str | None = None,
        pager: Pager | None = None,
    ) -> Iterator[User]:
        """Iterate over every user matching a search.

        Args:
            query: Fragment of a name or email, or a search expression.
            external_id: Exact external id to look up instead.
            pager: Where to start; later pages follow `next_page`.

        Raises:
            ZendeskValidationError: If neither `query` nor `external_id` is given.
        """
        params = search_params(query, external_id)
        return self._iterate(
            "users/search.json", "users", User, doc=USERS_DOCS + "#search-users", pager=pager, params=params
        )

    def create(self, user: User | Payload) -> User:
        """Create a user.

        Args:
            user: At least `name`; `email` adds an email identity.

        Returns:
            The created user.

        Raises:
            ZendeskUnprocessableEntityError: If e.g. the email is already taken.
        """
        return self._create("users.json", "user", user, User, doc=USERS_DOCS + "#create-user")

    def create_or_update(self, user: User | Payload) -> User:
        """Create a user, or update the one matching its email or external_id."""
        return self._create(
            "users/create_or_update.json",
            "user",
            user,
            User,
            doc=USERS_DOCS + "#create-or-update-user",
            expected=(200, 201),
        )

    def create_many(self, users: Sequence[User | Payload]) -> JobStatus:
        """Queue the creation of up to 100 users.

        Args:
            users: Users to create.

        Returns:
            The queued job; poll it through `job_statuses`.
        """
        return self._job(
            "POST",
            "users/create_many.json",
            doc=USERS_DOCS + "#create-many-users",
            json={"users": [dump_payload(u) for u in users]},
        )

    def update(self, user: User) -> User | None:
        """Save changes to a user.

        Args:
            user: User carrying its `id` and the fields to change.

        Returns:
            The updated user, or None if it no longer exists.

        Raises:
            ZendeskValidationError: If `user` has no id.
        """
        if user.id is None:
            raise ZendeskValidationError("user must have an id to be updated")
        return self._update(f"users/{user.id}.json", "user", user, User, doc=USERS_DOCS + "#update-user")

    def delete(self, user_id: int) -> None:
        """Soft-delete a user. Zendesk answers 200 with the deleted record."""
        self._remove(f"users/{user_id}.json", doc=USERS_DOCS + "#delete-user", expected=(200,))

    def set_password(self, user_id: int, password: str) -> None:
        """Set an end user's or agent's password (admins only)."""
        self._action(
            "POST",
            f"users/{user_id}/password.json",
            doc="ticketing/users/user_passwords/#set-a-users-password",
            json={"password": password},
        )


class UserFieldsResource(CrudResource[UserField]):
    path = "user_fields"
    singular = "user_field"
    plural = "user_fields"
    model = UserField
    docs = "ticketing/users/user_fields/"


class UserIdentitiesResource(Resource):
    """Email addresses, phone numbers and social accounts of a user."""

    def get_all(self, user_id: int, pager: Pager | None = None) -> Page[UserIdentity]:
        """List one page of a user's identities.

        Args:
            user_id: Owner of the identities.
            pager: Page to fetch.
        """
        return self._fetch_page(
            f"users/{user_id}/identities.json",
            "identities",
            UserIdentity,
            doc=IDENTITIES_DOCS + "#list-identities",
            pager=pager,
        )

    def iter_all(self, user_id: int, pager: Pager | None = None) -> Iterator[UserIdentity]:
        """Iterate over every identity of a user.

        Args:
            user_id: Owner of the identities.
            pager: Where to start; later pages follow `next_page`.
        """
        return self._iterate(
            f"users/{user_id}/identities.json",
            "identities",
            UserIdentity,
            doc=IDENTITIES_DOCS + "#list-identities",
            pager=pager,
        )

    def get(self, user_id: int, identity_id: int) -> UserIdentity | None:
        """Fetch one identity of a user, or None if it does not exist."""
        return self._fetch(
            f"users/{user_id}/identities/{identity_id}.json",
            "identity",
            UserIdentity,
            doc=IDENTITIES_DOCS + "#show-identity",
        )

    def create(self, user_id: int, identity: UserIdentity | Payload) -> UserIdentity:
        """Add an identity to a user.

        Args:
            user_id: Owner of the new identity.
            identity: At least `type` and `value`.

        Returns:
            The created identity.
        """
        return self._create(
            f"users/{user_id}/identities.json",
            "identity",
            identity,
            UserIdentity,
            doc=IDENTITIES_DOCS + "#create-identity",
        )

    def update(self, user_id: int, identity: UserIdentity) -> UserIdentity | None:
        """Save changes to an identity.

        Args:
            user_id: Owner of the identity.
            identity: Identity carrying its `id` and the fields to change.

        Returns:
            The updated identity, or None if it no longer exists.

        Raises:
            ZendeskValidationError: If `identity` has no id.
        """
        if identity.id is None:
            raise ZendeskValidationError("identity must have an id to be updated")
        return self._update(
            f"users/{user_id}/identities/{identity.id}.json",
            "identity",
            identity,
            UserIdentity,
            doc=IDENTITIES_DOCS + "#update-identity",
        )

    def make_primary(self, user_id: int, identity_id: int) -> list[UserIdentity]:
        """Promote an identity to primary. Returns the user's identities afterwards."""
        response = self._action(
            "PUT",
            f"users/{user_id}/identities/{identity_id}/make_primary.json",
            doc=IDENTITIES_DOCS + "#make-identity-primary",
        )
        return parse_page(self._json(response), "identities", UserIdentity).items

    def delete(self, user_id: int, identity_id: int) -> None:
        """Remove an identity from a user."""
        self._remove(f"users/{user_id}/identities/{identity_id}.json", doc=IDENTITIES_DOCS + "#delete-identity")
