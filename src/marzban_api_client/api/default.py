"""Panel root endpoint."""

from ..client import BaseClient
from ..dispatch import Endpoint, text

GET_BASE = Endpoint("GET", "/", text)


class DefaultAPI(BaseClient):
    async def get_base(self) -> str:
        """Fetch the panel's root page."""
        return await self._call(GET_BASE)
