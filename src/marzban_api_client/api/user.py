"""User endpoints."""

from datetime import datetime

from ..client import BaseClient
from ..dispatch import (
    Endpoint,
    conflict,
    error_table,
    json_as,
    json_body,
    not_found,
    query_params,
    text,
)
from ..models.user import (
    UserCreate,
    UserModify,
    UserResponse,
    UsersQuery,
    UsersResponse,
    UsersUsagesResponse,
    UserUsagesResponse,
)

USER_NOT_FOUND = not_found("User")
USER_CONFLICT = conflict("User already exists")

_USER_ERRORS = error_table(
    forbidden=True,
    not_found=USER_NOT_FOUND,
    unprocessable=True,
)
_EXPIRED_ERRORS = error_table(unprocessable=True)

ADD_USER = Endpoint(
    "POST",
    "/api/user",
    json_as(UserResponse),
    error_table(conflict=USER_CONFLICT, unprocessable=True),
)
GET_USER = Endpoint("GET", "/api/user/{username}", json_as(UserResponse), _USER_ERRORS)
MODIFY_USER = Endpoint(
    "PUT", "/api/user/{username}", json_as(UserResponse), _USER_ERRORS
)
DELETE_USER = Endpoint("DELETE", "/api/user/{username}", text, _USER_ERRORS)
RESET_USER_DATA_USAGE = Endpoint(
    "POST",
    "/api/user/{username}/reset",
    json_as(UserResponse),
    error_table(
        forbidden=True,
        not_found=USER_NOT_FOUND,
        conflict=USER_CONFLICT,
        unprocessable=True,
    ),
)
REVOKE_USER_SUBSCRIPTION = Endpoint(
    "POST",
    "/api/user/{username}/revoke_sub",
    json_as(UserResponse),
    _USER_ERRORS,
)
GET_USERS = Endpoint(
    "GET",
    "/api/users",
    json_as(UsersResponse),
    error_table(unprocessable=True),
)
RESET_ALL_USERS_DATA_USAGE = Endpoint(
    "POST",
    "/api/users/reset",
    text,
    error_table(forbidden=True),
)
GET_USER_USAGE = Endpoint(
    "GET",
    "/api/user/{username}/usage",
    json_as(UserUsagesResponse),
    _USER_ERRORS,
)
GET_ALL_USERS_USAGE = Endpoint(
    "GET",
    "/api/users/usage",
    json_as(UsersUsagesResponse),
    error_table(forbidden=True),
)
SET_OWNER_OF_USER = Endpoint(
    "PUT",
    "/api/user/{username}/set-owner",
    json_as(UserResponse),
    _USER_ERRORS,
)
GET_EXPIRED_USERS = Endpoint(
    "GET",
    "/api/users/expired",
    json_as(list[str]),
    _EXPIRED_ERRORS,
)
DELETE_EXPIRED_USERS = Endpoint(
    "DELETE",
    "/api/users/expired",
    json_as(list[str]),
    _EXPIRED_ERRORS,
)


class UserAPI(BaseClient):
    """``/api/user`` and ``/api/users`` operations.

    Non-sudo admins only see and manage the users they own.
    """

    async def add_user(self, body: UserCreate) -> UserResponse:
        """Create a user.

        ``expire`` is a UTC timestamp and ``data_limit`` is in bytes; ``0``
        means unlimited for both. ``on_hold_timeout`` and
        ``on_hold_expire_duration`` only apply to ``on_hold`` users.
        """
        return await self._call(ADD_USER, json=json_body(body))

    async def get_user(self, username: str) -> UserResponse:
        return await self._call(GET_USER, path_params={"username": username})

    async def modify_user(self, username: str, body: UserModify) -> UserResponse:
        """Modify a user. Fields left as None are not changed."""
        return await self._call(
            MODIFY_USER,
            path_params={"username": username},
            json=json_body(body),
        )

    async def delete_user(self, username: str) -> str:
        return await self._call(DELETE_USER, path_params={"username": username})

    async def reset_user_data_usage(self, username: str) -> UserResponse:
        return await self._call(
            RESET_USER_DATA_USAGE,
            path_params={"username": username},
        )

    async def revoke_user_subscription(self, username: str) -> UserResponse:
        """Invalidate the user's subscription link and proxy credentials."""
        return await self._call(
            REVOKE_USER_SUBSCRIPTION,
            path_params={"username": username},
        )

    async def get_users(self, query: UsersQuery | None = None) -> UsersResponse:
        """List users matching ``query``, or all users."""
        params = query.to_params() if query is not None else None
        return await self._call(GET_USERS, params=params)

    async def reset_all_users_data_usage(self) -> str:
        return await self._call(RESET_ALL_USERS_DATA_USAGE)

    async def get_user_usage(
        self,
        username: str,
        start: str | None = None,
        end: str | None = None,
    ) -> UserUsagesResponse:
        """Return a user's per-node traffic between ``start`` and ``end``."""
        return await self._call(
            GET_USER_USAGE,
            path_params={"username": username},
            params=query_params(start=start, end=end),
        )

    async def get_all_users_usage(
        self,
        start: str | None = None,
        end: str | None = None,
        admin: list[str] | None = None,
    ) -> UsersUsagesResponse:
        """Return per-node traffic of all users.

        Args:
            start: Start of the range.
            end: End of the range.
            admin: Only count users owned by these admins.
        """
        return await self._call(
            GET_ALL_USERS_USAGE,
            params=query_params(
                start=start,
                end=end,
                admin=",".join(admin) if admin is not None else None,
            ),
        )

    async def set_owner_of_user(
        self,
        username: str,
        admin_username: str,
    ) -> UserResponse:
        """Transfer a user to another admin."""
        return await self._call(
            SET_OWNER_OF_USER,
            path_params={"username": username},
            params=query_params(admin_username=admin_username),
        )

    async def get_expired_users(
        self,
        expired_before: datetime | None = None,
        expired_after: datetime | None = None,
    ) -> list[str]:
        """Return usernames of users that expired within the range.

        With neither bound set, every expired user is returned.
        """
        return await self._call(
            GET_EXPIRED_USERS,
            params=query_params(
                expired_before=expired_before,
                expired_after=expired_after,
            ),
        )

    async def delete_expired_users(
        self,
        expired_before: datetime | None = None,
        expired_after: datetime | None = None,
    ) -> list[str]:
        """Delete users that expired within the range and return their names."""
        return await self._call(
            DELETE_EXPIRED_USERS,
            params=query_params(
                expired_before=expired_before,
                expired_after=expired_after,
            ),
        )
