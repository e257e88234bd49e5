"""Endpoint descriptors and response-to-result mapping.

Every public operation is described by an :class:`Endpoint`: an HTTP
method, a path template, a decoder for the 200 body and the error
branches the route can produce. :func:`handle_response` applies the same
status-code table to every endpoint:

- 200 decodes the body with the endpoint's decoder.
- A status listed in ``errors`` raises :class:`ApiResponseError`, either
  with a fixed message or with the decoded validation envelope.
- Anything else raises :class:`UnexpectedResponseError`.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeAlias, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from .errors import (
    NOT_ALLOWED_MESSAGE,
    ApiResponseError,
    ErrorKind,
    NetworkError,
    UnexpectedResponseError,
)
from .models.errors import HTTPValidationError

T = TypeVar("T")

Decoder: TypeAlias = Callable[[httpx.Response], T]


def json_as(type_: Any) -> Decoder[Any]:
    """Build a decoder validating the JSON body against ``type_``.

    ``type_`` may be a model or any type pydantic understands, such as
    ``list[Admin]`` or ``dict[ProxyTypes, list[ProxyInbound]]``.
    """
    adapter = TypeAdapter(type_)

    def decode(response: httpx.Response) -> Any:
        return adapter.validate_json(response.content)

    return decode


def text(response: httpx.Response) -> str:
    """Decoder returning the body as text."""
    return response.text


@dataclass(frozen=True)
class ErrorBranch:
    """How one non-200 status is reported.

    A branch without a message decodes the body as a validation envelope.
    """

    kind: ErrorKind
    message: str | None = None


UNAUTHORIZED = ErrorBranch(ErrorKind.UNAUTHORIZED)
FORBIDDEN = ErrorBranch(ErrorKind.FORBIDDEN, NOT_ALLOWED_MESSAGE)
UNPROCESSABLE = ErrorBranch(ErrorKind.VALIDATION)


def not_found(resource: str) -> ErrorBranch:
    return ErrorBranch(ErrorKind.NOT_FOUND, f"{resource} not found")


def conflict(message: str) -> ErrorBranch:
    return ErrorBranch(ErrorKind.CONFLICT, message)


def error_table(
    *,
    unauthorized: bool = False,
    forbidden: bool = False,
    not_found: ErrorBranch | None = None,
    conflict: ErrorBranch | None = None,
    unprocessable: bool = False,
) -> dict[int, ErrorBranch]:
    """Assemble an endpoint's status-to-branch table."""
    table: dict[int, ErrorBranch] = {}
    if unauthorized:
        table[httpx.codes.UNAUTHORIZED] = UNAUTHORIZED
    if forbidden:
        table[httpx.codes.FORBIDDEN] = FORBIDDEN
    if not_found is not None:
        table[httpx.codes.NOT_FOUND] = not_found
    if conflict is not None:
        table[httpx.codes.CONFLICT] = conflict
    if unprocessable:
        table[httpx.codes.UNPROCESSABLE_ENTITY] = UNPROCESSABLE
    return table


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """One fixed method and path template exposed by the panel."""

    method: str
    path: str
    decode: Decoder[T]
    errors: Mapping[int, ErrorBranch] = field(default_factory=dict)

    def url(self, base_url: str, **path_params: Any) -> str:
        """Substitute path parameters, each quoted as a single segment."""
        quoted = {
            name: quote(str(_wire_value(value)), safe="")
            for name, value in path_params.items()
        }
        return base_url + self.path.format(**quoted)


def _wire_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


_decode_envelope: Decoder[HTTPValidationError] = json_as(HTTPValidationError)


def _decode(decoder: Decoder[T], response: httpx.Response) -> T:
    # ValueError covers malformed JSON and pydantic schema mismatches
    try:
        return decoder(response)
    except ValueError as exc:
        raise NetworkError(exc) from exc


def handle_response(endpoint: Endpoint[T], response: httpx.Response) -> T:
    """Map a response to the endpoint's success value or raise.

    Args:
        endpoint: Endpoint the request was sent to.
        response: Fully read response.

    Returns:
        Decoded success value for a 200 response.

    Raises:
        NetworkError: If a body cannot be decoded into the expected shape.
        ApiResponseError: If the status is one of the endpoint's error branches.
        UnexpectedResponseError: For any other status.
    """
    status = response.status_code
    if status == httpx.codes.OK:
        return _decode(endpoint.decode, response)

    branch = endpoint.errors.get(status)
    if branch is None:
        raise UnexpectedResponseError(status)
    if branch.message is not None:
        raise ApiResponseError(branch.kind, status, branch.message)

    envelope = _decode(_decode_envelope, response)
    raise ApiResponseError(
        branch.kind,
        status,
        f"Validation Error: {envelope.model_dump_json()}",
        detail=envelope,
    )


def query_params(**values: Any) -> list[tuple[str, str]]:
    """Build ordered query pairs, skipping parameters that are None.

    Datetimes are sent as ISO-8601 and enums as their wire value.
    """
    params: list[tuple[str, str]] = []
    for name, value in values.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        params.append((name, str(_wire_value(value))))
    return params


def json_body(model: BaseModel) -> Any:
    """Serialize a request model, omitting fields that are None."""
    return model.model_dump(mode="json", exclude_none=True)
