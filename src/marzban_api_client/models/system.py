"""Core and system statistics."""

from pydantic import BaseModel


class CoreStats(BaseModel):
    """Xray core state."""

    version: str
    started: bool
    logs_websocket: str


class SystemStats(BaseModel):
    """Host resource usage and user totals.

    Memory is in bytes, bandwidth in bytes and speeds in bytes per second.
    """

    version: str
    mem_total: int
    mem_used: int
    cpu_cores: int
    cpu_usage: float
    total_user: int
    users_active: int
    incoming_bandwidth: int
    outgoing_bandwidth: int
    incoming_bandwidth_speed: int
    outgoing_bandwidth_speed: int
