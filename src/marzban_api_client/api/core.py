"""Xray core endpoints."""

from typing import Any

from ..client import BaseClient
from ..dispatch import Endpoint, error_table, json_as, text
from ..models.system import CoreStats

GET_CORE_STATS = Endpoint(
    "GET",
    "/api/core",
    json_as(CoreStats),
    error_table(unprocessable=True),
)
RESTART_CORE = Endpoint(
    "POST",
    "/api/core/restart",
    text,
    error_table(forbidden=True, unprocessable=True),
)
GET_CORE_CONFIG = Endpoint(
    "GET",
    "/api/core/config",
    text,
    error_table(forbidden=True, unprocessable=True),
)
MODIFY_CORE_CONFIG = Endpoint(
    "PUT",
    "/api/core/config",
    text,
    error_table(forbidden=True, unprocessable=True),
)


class CoreAPI(BaseClient):
    """``/api/core`` operations."""

    async def get_core_stats(self) -> CoreStats:
        return await self._call(GET_CORE_STATS)

    async def restart_core(self) -> str:
        """Restart the Xray core and every connected node."""
        return await self._call(RESTART_CORE)

    async def get_core_config(self) -> str:
        """Return the Xray configuration as raw JSON text."""
        return await self._call(GET_CORE_CONFIG)

    async def modify_core_config(self, config: dict[str, Any]) -> str:
        """Replace the Xray configuration and restart the core.

        Args:
            config: Complete Xray configuration object.
        """
        return await self._call(MODIFY_CORE_CONFIG, json=config)
