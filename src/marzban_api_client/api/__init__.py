"""Endpoint categories of the Marzban panel API.

Each module declares its endpoint table and a mixin exposing the
operations as async methods. :class:`MarzbanAPIClient` combines them.
"""

from .admin import AdminAPI
from .core import CoreAPI
from .default import DefaultAPI
from .node import NodeAPI
from .subscription import SubscriptionAPI
from .system import SystemAPI
from .user import UserAPI
from .user_template import UserTemplateAPI


class MarzbanAPIClient(
    AdminAPI,
    CoreAPI,
    DefaultAPI,
    NodeAPI,
    SubscriptionAPI,
    SystemAPI,
    UserAPI,
    UserTemplateAPI,
):
    """Async client for the Marzban panel REST API.

    Example::

        async with MarzbanAPIClient("http://localhost:8000") as client:
            await client.authenticate(
                AdminCredentials(username="admin", password="secret")
            )
            users = await client.get_users()
    """


__all__ = [
    "AdminAPI",
    "CoreAPI",
    "DefaultAPI",
    "MarzbanAPIClient",
    "NodeAPI",
    "SubscriptionAPI",
    "SystemAPI",
    "UserAPI",
    "UserTemplateAPI",
]
