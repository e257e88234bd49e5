"""Credentials posted to the token endpoint."""

from pydantic import BaseModel


class AdminCredentials(BaseModel):
    """OAuth2 password-grant form for ``POST /api/admin/token``.

    Sent form-encoded and never retained by the client.
    """

    grant_type: str | None = None
    username: str
    password: str
    scope: str = ""
    client_id: str | None = None
    client_secret: str | None = None
