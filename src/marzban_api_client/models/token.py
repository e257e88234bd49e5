"""Token issued by the panel."""

from pydantic import BaseModel


class Token(BaseModel):
    """Bearer token returned by ``POST /api/admin/token``."""

    access_token: str
    token_type: str | None = "bearer"
