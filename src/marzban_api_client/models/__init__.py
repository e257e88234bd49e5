"""Pydantic models mirroring the Marzban panel's JSON shapes.

One module per API category. Models validate responses on decode and
serialize request bodies with absent optional fields omitted.
"""

from .admin import Admin, AdminCreate, AdminModify
from .auth import AdminCredentials
from .errors import HTTPValidationError, ValidationError
from .node import (
    NodeCreate,
    NodeModify,
    NodeResponse,
    NodeSettings,
    NodeStatus,
    NodesUsageResponse,
    NodeUsageResponse,
)
from .proxy import (
    ProxyHost,
    ProxyHostALPN,
    ProxyHostFingerprint,
    ProxyHostSecurity,
    ProxyInbound,
    ProxySettings,
    ProxyTypes,
)
from .subscription import ClientType
from .system import CoreStats, SystemStats
from .token import Token
from .user import (
    Inbounds,
    Proxies,
    Shadowsocks,
    Trojan,
    UserCreate,
    UserDataLimitResetStrategy,
    UserModify,
    UserResponse,
    UsersQuery,
    UsersResponse,
    UserStatus,
    UserStatusCreate,
    UserStatusModify,
    UsersUsagesResponse,
    UserUsageResponse,
    UserUsagesResponse,
    Vless,
    Vmess,
)
from .user_template import (
    UserTemplateCreate,
    UserTemplateModify,
    UserTemplateResponse,
)

__all__ = [
    "Admin",
    "AdminCreate",
    "AdminCredentials",
    "AdminModify",
    "ClientType",
    "CoreStats",
    "HTTPValidationError",
    "Inbounds",
    "NodeCreate",
    "NodeModify",
    "NodeResponse",
    "NodeSettings",
    "NodeStatus",
    "NodeUsageResponse",
    "NodesUsageResponse",
    "Proxies",
    "ProxyHost",
    "ProxyHostALPN",
    "ProxyHostFingerprint",
    "ProxyHostSecurity",
    "ProxyInbound",
    "ProxySettings",
    "ProxyTypes",
    "Shadowsocks",
    "SystemStats",
    "Token",
    "Trojan",
    "UserCreate",
    "UserDataLimitResetStrategy",
    "UserModify",
    "UserResponse",
    "UserStatus",
    "UserStatusCreate",
    "UserStatusModify",
    "UserTemplateCreate",
    "UserTemplateModify",
    "UserTemplateResponse",
    "UserUsageResponse",
    "UserUsagesResponse",
    "UsersQuery",
    "UsersResponse",
    "UsersUsagesResponse",
    "ValidationError",
    "Vless",
    "Vmess",
]
