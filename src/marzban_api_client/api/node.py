"""Node endpoints."""

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
from ..models.node import (
    NodeCreate,
    NodeModify,
    NodeResponse,
    NodeSettings,
    NodesUsageResponse,
)

NODE_NOT_FOUND = not_found("Node")

_NODE_ERRORS = error_table(
    forbidden=True,
    not_found=NODE_NOT_FOUND,
    unprocessable=True,
)

GET_NODE_SETTINGS = Endpoint(
    "GET",
    "/api/node/settings",
    json_as(NodeSettings),
    error_table(forbidden=True),
)
ADD_NODE = Endpoint(
    "POST",
    "/api/node",
    json_as(NodeResponse),
    error_table(
        forbidden=True,
        conflict=conflict("Node already exists"),
        unprocessable=True,
    ),
)
GET_NODE = Endpoint("GET", "/api/node/{node_id}", json_as(NodeResponse), _NODE_ERRORS)
MODIFY_NODE = Endpoint(
    "PUT", "/api/node/{node_id}", json_as(NodeResponse), _NODE_ERRORS
)
REMOVE_NODE = Endpoint("DELETE", "/api/node/{node_id}", text, _NODE_ERRORS)
GET_NODES = Endpoint(
    "GET",
    "/api/nodes",
    json_as(list[NodeResponse]),
    error_table(forbidden=True),
)
RECONNECT_NODE = Endpoint("POST", "/api/node/{node_id}/reconnect", text, _NODE_ERRORS)
GET_NODES_USAGE = Endpoint(
    "GET",
    "/api/nodes/usage",
    json_as(NodesUsageResponse),
    error_table(forbidden=True, not_found=NODE_NOT_FOUND, unprocessable=True),
)


class NodeAPI(BaseClient):
    """``/api/node`` and ``/api/nodes`` operations. All require sudo."""

    async def get_node_settings(self) -> NodeSettings:
        """Return the certificate and minimum version nodes need to connect."""
        return await self._call(GET_NODE_SETTINGS)

    async def add_node(self, body: NodeCreate) -> NodeResponse:
        return await self._call(ADD_NODE, json=json_body(body))

    async def get_node(self, node_id: int) -> NodeResponse:
        return await self._call(GET_NODE, path_params={"node_id": node_id})

    async def modify_node(self, node_id: int, body: NodeModify) -> NodeResponse:
        return await self._call(
            MODIFY_NODE,
            path_params={"node_id": node_id},
            json=json_body(body),
        )

    async def remove_node(self, node_id: int) -> str:
        return await self._call(REMOVE_NODE, path_params={"node_id": node_id})

    async def get_nodes(self) -> list[NodeResponse]:
        return await self._call(GET_NODES)

    async def reconnect_node(self, node_id: int) -> str:
        """Ask the panel to reconnect to a node."""
        return await self._call(RECONNECT_NODE, path_params={"node_id": node_id})

    async def get_nodes_usage(
        self,
        start: str | None = None,
        end: str | None = None,
    ) -> NodesUsageResponse:
        """Return per-node traffic between ``start`` and ``end``.

        Args:
            start: Start of the range, as accepted by the panel (ISO-8601).
            end: End of the range.
        """
        return await self._call(
            GET_NODES_USAGE,
            params=query_params(start=start, end=end),
        )
