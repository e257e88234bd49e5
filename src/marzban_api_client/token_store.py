"""Lock-guarded storage for the admin bearer token.

Provides an asyncio readers-writer lock and a store holding a single
optional token value. Any number of request builders may read the token
concurrently; authentication replaces it under exclusive access.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog

logger = structlog.get_logger(__name__)


class AsyncReadWriteLock:
    """Readers-writer lock for asyncio tasks.

    Admits unboundedly many concurrent readers or a single writer, never
    both. A waiting writer blocks new readers so that a stream of reads
    cannot starve token replacement.
    """

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold shared access for the duration of the block."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            await self._release(reader=True)

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold exclusive access for the duration of the block."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            finally:
                self._writers_waiting -= 1
                # Readers parked behind this writer must re-check on cancellation.
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            await self._release(reader=False)

    async def _release(self, *, reader: bool) -> None:
        """Give up shared or exclusive access.

        The bookkeeping always completes. A cancellation received while
        waiting for the condition's lock is re-raised once it has.
        """
        cancelled = False
        while True:
            try:
                await self._cond.acquire()
                break
            except asyncio.CancelledError:
                cancelled = True
        try:
            if reader:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()
            else:
                self._writer = False
                self._cond.notify_all()
        finally:
            self._cond.release()
        if cancelled:
            raise asyncio.CancelledError


class TokenStore:
    """Single optional bearer token behind a readers-writer lock.

    The value is only ever replaced as a whole. Readers get a snapshot and
    must not hold the lock across network I/O.
    """

    def __init__(self, token: str | None = None):
        """Initialize the store.

        Args:
            token: Optional token to pre-seed the store with.
        """
        self._lock = AsyncReadWriteLock()
        self._token = token

    async def get(self) -> str | None:
        """Return the current token, or None when unauthenticated."""
        async with self._lock.read():
            return self._token

    async def replace(self, token: str) -> None:
        """Atomically replace the stored token.

        Args:
            token: Newly issued bearer token.
        """
        async with self._lock.write():
            had_token = self._token is not None
            self._token = token
        logger.info("Stored admin token", replaced_previous=had_token)
