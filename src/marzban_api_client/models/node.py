"""Node models."""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_NODE_PORT = 62050
DEFAULT_NODE_API_PORT = 62051


class NodeStatus(str, Enum):
    CONNECTED = "connected"
    CONNECTING = "connecting"
    ERROR = "error"
    DISABLED = "disabled"


class NodeCreate(BaseModel):
    """Body for registering a node."""

    name: str
    address: str
    port: int = DEFAULT_NODE_PORT
    api_port: int = DEFAULT_NODE_API_PORT
    usage_coefficient: float = Field(1.0, gt=0)
    add_as_new_host: bool = True


class NodeModify(BaseModel):
    """Body for modifying a node. Omitted fields are left unchanged."""

    name: str | None = None
    address: str | None = None
    port: int | None = None
    api_port: int | None = None
    usage_coefficient: float | None = Field(None, gt=0)
    status: NodeStatus | None = None


class NodeResponse(BaseModel):
    """Node as returned by the panel."""

    name: str
    address: str
    port: int = DEFAULT_NODE_PORT
    api_port: int = DEFAULT_NODE_API_PORT
    usage_coefficient: float = Field(1.0, gt=0)
    id: int
    xray_version: str | None = None
    status: NodeStatus
    message: str | None = None


class NodeSettings(BaseModel):
    """Settings a node needs to connect to the panel."""

    min_node_version: str = "v0.2.0"
    certificate: str


class NodeUsageResponse(BaseModel):
    """Traffic for one node, in bytes."""

    node_id: int | None = None
    node_name: str
    uplink: int
    downlink: int


class NodesUsageResponse(BaseModel):
    usages: list[NodeUsageResponse]
