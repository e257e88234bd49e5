"""User template models.

``data_limit`` is in bytes and ``expire_duration`` in seconds; ``0`` means
unlimited for both.
"""

from pydantic import BaseModel, Field


class UserTemplateCreate(BaseModel):
    """Body for ``POST /api/user_template``."""

    name: str | None = None
    data_limit: int = Field(0, ge=0)
    expire_duration: int = Field(0, ge=0)
    username_prefix: str | None = Field(None, min_length=1, max_length=20)
    username_suffix: str | None = Field(None, min_length=1, max_length=20)
    # Protocol name to inbound tags
    inbounds: dict[str, list[str]] = Field(default_factory=dict)


class UserTemplateModify(UserTemplateCreate):
    """Body for ``PUT /api/user_template/{id}``."""


class UserTemplateResponse(UserTemplateCreate):
    """User template as returned by the panel."""

    id: int
