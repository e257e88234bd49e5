"""Validation error envelope returned by the panel on 401 and 422."""

from pydantic import BaseModel


class ValidationError(BaseModel):
    """One failed field: where it is, what went wrong, and the error type."""

    loc: list[str | int]
    msg: str
    type: str


class HTTPValidationError(BaseModel):
    """Envelope wrapping validation failures.

    FastAPI sends a list of :class:`ValidationError` for body and query
    problems and a plain string for authentication failures.
    """

    detail: list[ValidationError] | str | None = None
