"""Shared field types for panel models.

The panel serializes datetimes as naive ISO-8601 strings in UTC and
sometimes sends an empty string for an unset timestamp.
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator


def _empty_to_none(value: Any) -> Any:
    if value == "":
        return None
    return value


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]
OptionalUTCDateTime = Annotated[
    datetime | None,
    BeforeValidator(_empty_to_none),
    AfterValidator(_as_utc),
]
