"""Subscription endpoints, authenticated by the user's subscription token.

These routes live under ``/sub`` rather than ``/api`` and are meant for
end users. The admin bearer token is still attached when one is set.
"""

from ..client import BaseClient
from ..dispatch import Endpoint, error_table, json_as, query_params, text
from ..models.subscription import ClientType
from ..models.user import UserResponse, UserUsagesResponse

_SUBSCRIPTION_ERRORS = error_table(unprocessable=True)

USER_SUBSCRIPTION = Endpoint("GET", "/sub/{token}", text, _SUBSCRIPTION_ERRORS)
USER_SUBSCRIPTION_INFO = Endpoint(
    "GET",
    "/sub/{token}/info",
    json_as(UserResponse),
    _SUBSCRIPTION_ERRORS,
)
USER_GET_USAGE = Endpoint(
    "GET",
    "/sub/{token}/usage",
    json_as(UserUsagesResponse),
    _SUBSCRIPTION_ERRORS,
)
USER_SUBSCRIPTION_WITH_CLIENT_TYPE = Endpoint(
    "GET",
    "/sub/{token}/{client_type}",
    text,
    _SUBSCRIPTION_ERRORS,
)


class SubscriptionAPI(BaseClient):
    """``/sub/{token}`` operations."""

    async def user_subscription(self, user_token: str) -> str:
        """Fetch the subscription content.

        The panel picks the format from the request's User-Agent; a browser
        gets an HTML page.
        """
        return await self._call(USER_SUBSCRIPTION, path_params={"token": user_token})

    async def user_subscription_info(self, user_token: str) -> UserResponse:
        return await self._call(
            USER_SUBSCRIPTION_INFO,
            path_params={"token": user_token},
        )

    async def user_get_usage(
        self,
        user_token: str,
        start: str | None = None,
        end: str | None = None,
    ) -> UserUsagesResponse:
        return await self._call(
            USER_GET_USAGE,
            path_params={"token": user_token},
            params=query_params(start=start, end=end),
        )

    async def user_subscription_with_client_type(
        self,
        user_token: str,
        client_type: ClientType,
    ) -> str:
        """Fetch the subscription in the format of a specific client."""
        return await self._call(
            USER_SUBSCRIPTION_WITH_CLIENT_TYPE,
            path_params={"token": user_token, "client_type": client_type},
        )
