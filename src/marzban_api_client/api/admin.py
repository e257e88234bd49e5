"""Admin endpoints, including token issuance and authentication."""

import structlog

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
from ..models.admin import Admin, AdminCreate, AdminModify
from ..models.auth import AdminCredentials
from ..models.token import Token

logger = structlog.get_logger(__name__)

ADMIN_NOT_FOUND = not_found("Admin")

ADMIN_TOKEN = Endpoint(
    "POST",
    "/api/admin/token",
    json_as(Token),
    error_table(unprocessable=True),
)
GET_CURRENT_ADMIN = Endpoint(
    "GET",
    "/api/admin",
    json_as(Admin),
    error_table(unauthorized=True),
)
CREATE_ADMIN = Endpoint(
    "POST",
    "/api/admin",
    json_as(Admin),
    error_table(
        unauthorized=True,
        forbidden=True,
        conflict=conflict("Admin already exists"),
        unprocessable=True,
    ),
)
MODIFY_ADMIN = Endpoint(
    "PUT",
    "/api/admin/{username}",
    json_as(Admin),
    error_table(
        unauthorized=True,
        forbidden=True,
        not_found=ADMIN_NOT_FOUND,
        unprocessable=True,
    ),
)
DELETE_ADMIN = Endpoint(
    "DELETE",
    "/api/admin/{username}",
    text,
    error_table(
        unauthorized=True,
        forbidden=True,
        not_found=ADMIN_NOT_FOUND,
        unprocessable=True,
    ),
)
GET_ADMINS = Endpoint(
    "GET",
    "/api/admins",
    json_as(list[Admin]),
    error_table(unauthorized=True, forbidden=True, unprocessable=True),
)


class AdminAPI(BaseClient):
    """``/api/admin`` and ``/api/admins`` operations."""

    async def admin_token(self, credentials: AdminCredentials) -> Token:
        """Exchange admin credentials for a token without storing it.

        Use :meth:`authenticate` to also send the token with later requests.
        """
        return await self._call(
            ADMIN_TOKEN,
            data=credentials.model_dump(exclude_none=True),
        )

    async def authenticate(self, credentials: AdminCredentials) -> None:
        """Obtain a token and use it for every subsequent request.

        The stored token is replaced only after the panel issues a new one;
        on any failure the previous token is kept. Concurrent calls to this
        method are not ordered against each other.

        Raises:
            NetworkError: If the token request fails.
            ApiResponseError: If the panel rejects the credentials.
            UnexpectedResponseError: If the panel answers with another status.
        """
        token = await self.admin_token(credentials)
        await self._state.token.replace(token.access_token)
        logger.info("Authenticated", username=credentials.username)

    async def get_current_admin(self) -> Admin:
        """Return the admin the current token belongs to."""
        return await self._call(GET_CURRENT_ADMIN)

    async def create_admin(self, body: AdminCreate) -> Admin:
        """Create an admin. Requires sudo privileges."""
        return await self._call(CREATE_ADMIN, json=json_body(body))

    async def modify_admin(self, username: str, body: AdminModify) -> Admin:
        return await self._call(
            MODIFY_ADMIN,
            path_params={"username": username},
            json=json_body(body),
        )

    async def delete_admin(self, username: str) -> str:
        return await self._call(DELETE_ADMIN, path_params={"username": username})

    async def get_admins(
        self,
        offset: int | None = None,
        limit: int | None = None,
        username: str | None = None,
    ) -> list[Admin]:
        """List admins, optionally paginated and filtered by username."""
        return await self._call(
            GET_ADMINS,
            params=query_params(offset=offset, limit=limit, username=username),
        )
