"""Subscription client formats."""

from enum import Enum


class ClientType(str, Enum):
    """Subscription output formats selectable in ``/sub/{token}/{client_type}``."""

    SING_BOX = "sing-box"
    CLASH_META = "clash-meta"
    CLASH = "clash"
    OUTLINE = "outline"
    V2RAY = "v2ray"
    V2RAY_JSON = "v2ray-json"
