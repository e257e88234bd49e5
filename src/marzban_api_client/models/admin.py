"""Admin account models."""

from pydantic import BaseModel


class Admin(BaseModel):
    """Admin account as returned by the panel."""

    username: str
    is_sudo: bool
    telegram_id: int | None = None
    discord_webhook: str | None = None


class AdminCreate(Admin):
    """Body for creating an admin."""

    password: str


class AdminModify(BaseModel):
    """Body for modifying an admin. Omitted fields are left unchanged."""

    password: str | None = None
    is_sudo: bool
    telegram_id: int | None = None
    discord_webhook: str | None = None
