"""Marzban API Client.

Typed async client for the Marzban panel REST API covering admin
authentication and user, node, template, system and subscription
management.
"""

from . import models
from .api import MarzbanAPIClient
from .client import DEFAULT_TIMEOUT, ClientState
from .config import ClientConfig, connect, create_client, load_config
from .errors import (
    ApiError,
    ApiResponseError,
    ErrorKind,
    NetworkError,
    UnexpectedResponseError,
)
from .models import AdminCredentials, ClientType, Token, UsersQuery

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "AdminCredentials",
    "ApiError",
    "ApiResponseError",
    "ClientConfig",
    "ClientState",
    "ClientType",
    "ErrorKind",
    "MarzbanAPIClient",
    "NetworkError",
    "Token",
    "UnexpectedResponseError",
    "UsersQuery",
    "connect",
    "create_client",
    "load_config",
    "models",
]
