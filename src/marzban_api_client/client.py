"""Shared client state and authenticated request construction.

Provides the HTTP plumbing every endpoint category builds on: the base
URL, the lock-guarded bearer token, request construction and dispatch.
"""

import time
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
import structlog

from .dispatch import Endpoint, handle_response
from .errors import NetworkError
from .token_store import TokenStore

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")

QueryParams = list[tuple[str, str]]


@dataclass(frozen=True)
class ClientState:
    """State shared by every handle cloned from one client.

    ``base_url`` never changes after construction; the token is replaced
    only through authentication.
    """

    base_url: str
    token: TokenStore = field(default_factory=TokenStore)


class BaseClient:
    """Async HTTP client core for the Marzban panel API.

    Builds requests against ``base_url``, attaches the bearer token when one
    is set and maps responses through the endpoint's status table. Endpoint
    categories are mixed in on top of this class.

    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Panel URL (e.g., "http://localhost:8000").
            token: Optional bearer token to start authenticated with.
            timeout: Request timeout in seconds (default: 30.0).
            verify_ssl: Verify TLS certificates (default: True).
            http_client: Transport to use instead of creating one. It is not
                closed by :meth:`aclose`.

        Raises:
            ValueError: If base_url is empty or timeout is not positive.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self._state = ClientState(
            base_url=base_url.rstrip("/"),
            token=TokenStore(token),
        )
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_state(cls, state: ClientState, http_client: httpx.AsyncClient):
        """Create a handle over existing shared state and transport."""
        client = cls.__new__(cls)
        client._state = state
        client._http = http_client
        client._owns_http = False
        return client

    def clone(self):
        """Return a handle sharing this client's state and transport.

        A token stored through any handle is seen by all of them. Only the
        original handle closes the transport.
        """
        return self.from_state(self._state, self._http)

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def base_url(self) -> str:
        return self._state.base_url

    async def current_token(self) -> str | None:
        """Return the bearer token requests are currently sent with."""
        return await self._state.token.get()

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and close the transport."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this handle created it."""
        if self._owns_http and not self._http.is_closed:
            await self._http.aclose()

    async def prepare_authorized_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Request:
        """Build a request, with a bearer token if one is currently set.

        The token is read once, under shared access that is released before
        the request is sent.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            **kwargs: Query params and body, passed to ``build_request``.

        Returns:
            Request ready to send.
        """
        headers = dict(kwargs.pop("headers", None) or {})
        token = await self._state.token.get()
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return self._http.build_request(method, url, headers=headers, **kwargs)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        start_time = time.time()
        logger.debug(
            "Making API request",
            method=request.method,
            path=request.url.path,
            authenticated="Authorization" in request.headers,
        )
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as exc:
            raise NetworkError(exc) from exc
        logger.debug(
            "API request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return response

    async def _call(
        self,
        endpoint: Endpoint[T],
        *,
        path_params: dict[str, Any] | None = None,
        params: QueryParams | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
    ) -> T:
        """Run one endpoint round trip.

        Args:
            endpoint: Endpoint descriptor.
            path_params: Values substituted into the path template.
            params: Present-only query pairs, in order.
            json: JSON body.
            data: Form-encoded body.

        Returns:
            Decoded success value.

        Raises:
            NetworkError: If the transport fails or decoding fails.
            ApiResponseError: If the panel reports a recognized failure.
            UnexpectedResponseError: If the status is not recognized.
        """
        url = endpoint.url(self._state.base_url, **(path_params or {}))
        request = await self.prepare_authorized_request(
            endpoint.method,
            url,
            params=params or None,
            json=json,
            data=data,
        )
        response = await self._send(request)
        return handle_response(endpoint, response)
