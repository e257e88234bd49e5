"""User models.

Traffic and data limits are in bytes; ``expire`` is a UTC Unix timestamp
where ``0`` or ``None`` means no expiry.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .admin import Admin
from .base import OptionalUTCDateTime, UTCDateTime


class UserStatus(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"
    LIMITED = "limited"
    EXPIRED = "expired"
    ON_HOLD = "on_hold"


class UserStatusCreate(str, Enum):
    ACTIVE = "active"
    ON_HOLD = "on_hold"


class UserStatusModify(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"
    ON_HOLD = "on_hold"


class UserDataLimitResetStrategy(str, Enum):
    NO_RESET = "no_reset"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Vmess(BaseModel):
    id: str | None = None
    security: str | None = None


class Vless(BaseModel):
    id: str | None = None
    flow: str | None = None


class Trojan(BaseModel):
    password: str | None = None
    flow: str | None = None


class Shadowsocks(BaseModel):
    password: str | None = None
    method: str | None = None


class Proxies(BaseModel):
    """Per-protocol credentials. A missing protocol is disabled for the user."""

    vmess: Vmess | None = None
    vless: Vless | None = None
    trojan: Trojan | None = None
    shadowsocks: Shadowsocks | None = None


class Inbounds(BaseModel):
    """Inbound tags per protocol."""

    vmess: list[str] | None = None
    vless: list[str] | None = None
    trojan: list[str] | None = None
    shadowsocks: list[str] | None = None


class UserCreate(BaseModel):
    """Body for ``POST /api/user``.

    ``on_hold_expire_duration`` and ``on_hold_timeout`` only apply when
    ``status`` is ``on_hold``.
    """

    username: str = Field(min_length=3, max_length=32)
    status: UserStatusCreate = UserStatusCreate.ACTIVE
    proxies: Proxies = Field(default_factory=Proxies)
    inbounds: Inbounds = Field(default_factory=Inbounds)
    expire: int | None = None
    data_limit: int | None = Field(None, ge=0)
    data_limit_reset_strategy: UserDataLimitResetStrategy = (
        UserDataLimitResetStrategy.NO_RESET
    )
    note: str | None = None
    sub_updated_at: OptionalUTCDateTime = None
    sub_last_user_agent: str | None = None
    online_at: OptionalUTCDateTime = None
    on_hold_expire_duration: int | None = None
    on_hold_timeout: OptionalUTCDateTime = None
    auto_delete_in_days: int | None = None


class UserModify(BaseModel):
    """Body for ``PUT /api/user/{username}``. Omitted fields are left unchanged."""

    status: UserStatusModify | None = None
    proxies: Proxies | None = None
    inbounds: Inbounds | None = None
    expire: int | None = None
    data_limit: int | None = Field(None, ge=0)
    data_limit_reset_strategy: UserDataLimitResetStrategy | None = None
    note: str | None = None
    sub_updated_at: OptionalUTCDateTime = None
    sub_last_user_agent: str | None = None
    online_at: OptionalUTCDateTime = None
    on_hold_expire_duration: int | None = None
    on_hold_timeout: OptionalUTCDateTime = None
    auto_delete_in_days: int | None = None


class UserResponse(BaseModel):
    """User as returned by the panel."""

    username: str
    status: UserStatus
    proxies: Proxies
    inbounds: Inbounds = Field(default_factory=Inbounds)
    expire: int | None = None
    data_limit: int | None = Field(None, ge=0)
    data_limit_reset_strategy: UserDataLimitResetStrategy = (
        UserDataLimitResetStrategy.NO_RESET
    )
    note: str | None = None
    sub_updated_at: OptionalUTCDateTime = None
    sub_last_user_agent: str | None = None
    online_at: OptionalUTCDateTime = None
    on_hold_expire_duration: int | None = None
    on_hold_timeout: OptionalUTCDateTime = None
    auto_delete_in_days: int | None = None
    used_traffic: int
    lifetime_used_traffic: int = 0
    created_at: UTCDateTime
    links: list[str] = Field(default_factory=list)
    subscription_url: str = ""
    excluded_inbounds: Inbounds = Field(default_factory=Inbounds)
    admin: Admin | None = None


class UserUsageResponse(BaseModel):
    """Traffic used by a user on one node, in bytes."""

    node_id: int | None = None
    node_name: str
    used_traffic: int


class UserUsagesResponse(BaseModel):
    username: str
    usages: list[UserUsageResponse]


class UsersResponse(BaseModel):
    users: list[UserResponse]
    total: int


class UsersUsagesResponse(BaseModel):
    usages: list[UserUsageResponse]


class UsersQuery(BaseModel):
    """Filters for ``GET /api/users``."""

    offset: int | None = None
    limit: int | None = None
    username: list[str] | None = None
    status: UserStatus | None = None
    sort: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Build query pairs for the filters that are set.

        Each username becomes its own ``username`` pair, which is how the
        panel reads a multi-valued filter.
        """
        params: list[tuple[str, str]] = []
        if self.offset is not None:
            params.append(("offset", str(self.offset)))
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        for name in self.username or []:
            params.append(("username", name))
        if self.status is not None:
            params.append(("status", self.status.value))
        if self.sort is not None:
            params.append(("sort", self.sort))
        return params
