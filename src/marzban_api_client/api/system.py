"""System statistics, inbound and host endpoints."""

from ..client import BaseClient
from ..dispatch import Endpoint, error_table, json_as, json_body
from ..models.proxy import ProxyHost, ProxyInbound, ProxyTypes
from ..models.system import SystemStats

HostsByTag = dict[str, list[ProxyHost]]

GET_SYSTEM_STATS = Endpoint(
    "GET",
    "/api/system",
    json_as(SystemStats),
    error_table(unprocessable=True),
)
GET_INBOUNDS = Endpoint(
    "GET",
    "/api/inbounds",
    json_as(dict[ProxyTypes, list[ProxyInbound]]),
    error_table(unprocessable=True),
)
GET_HOSTS = Endpoint(
    "GET",
    "/api/hosts",
    json_as(HostsByTag),
    error_table(forbidden=True, unprocessable=True),
)
MODIFY_HOSTS = Endpoint(
    "PUT",
    "/api/hosts",
    json_as(HostsByTag),
    error_table(forbidden=True, unprocessable=True),
)


class SystemAPI(BaseClient):
    """``/api/system``, ``/api/inbounds`` and ``/api/hosts`` operations."""

    async def get_system_stats(self) -> SystemStats:
        return await self._call(GET_SYSTEM_STATS)

    async def get_inbounds(self) -> dict[ProxyTypes, list[ProxyInbound]]:
        """Return the core's inbounds grouped by protocol."""
        return await self._call(GET_INBOUNDS)

    async def get_hosts(self) -> HostsByTag:
        """Return the hosts configured for each inbound tag."""
        return await self._call(GET_HOSTS)

    async def modify_hosts(self, hosts: HostsByTag) -> HostsByTag:
        """Replace hosts for the given inbound tags."""
        body = {
            tag: [json_body(host) for host in entries]
            for tag, entries in hosts.items()
        }
        return await self._call(MODIFY_HOSTS, json=body)
