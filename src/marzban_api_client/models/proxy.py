"""Proxy protocol, inbound and host models."""

from enum import Enum

from pydantic import BaseModel


class ProxyTypes(str, Enum):
    """Proxy protocols supported by the panel."""

    VMESS = "vmess"
    VLESS = "vless"
    TROJAN = "trojan"
    SHADOWSOCKS = "shadowsocks"


class ProxyHostSecurity(str, Enum):
    INBOUND_DEFAULT = "inbound_default"
    NONE = "none"
    TLS = "tls"


class ProxyHostALPN(str, Enum):
    NONE = ""
    H2 = "h2"
    HTTP11 = "http/1.1"
    H2_HTTP11 = "h2,http/1.1"


class ProxyHostFingerprint(str, Enum):
    NONE = ""
    CHROME = "chrome"
    FIREFOX = "firefox"
    SAFARI = "safari"
    IOS = "ios"
    ANDROID = "android"
    EDGE = "edge"
    FINGERPRINT_360 = "360"
    QQ = "qq"
    RANDOM = "random"
    RANDOMIZED = "randomized"


class ProxyHost(BaseModel):
    """Host entry advertised to users for an inbound."""

    remark: str
    address: str
    port: int | None = None
    sni: str | None = None
    host: str | None = None
    path: str | None = None
    security: ProxyHostSecurity = ProxyHostSecurity.INBOUND_DEFAULT
    alpn: ProxyHostALPN | None = None
    fingerprint: ProxyHostFingerprint | None = None
    allow_insecure: bool | None = None
    is_disabled: bool | None = None


class ProxyInbound(BaseModel):
    """Inbound configured in the Xray core."""

    tag: str
    protocol: ProxyTypes
    network: str
    tls: str
    # Either a single port or a range such as "1000-2000"
    port: int | str


class ProxySettings(BaseModel):
    id: str | None = None
