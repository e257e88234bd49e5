"""Tests for the readers-writer lock and the token store."""

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from marzban_api_client import token_store


@pytest.mark.asyncio
async def test_store_starts_empty():
    store = token_store.TokenStore()
    assert await store.get() is None


@pytest.mark.asyncio
async def test_store_can_be_pre_seeded():
    store = token_store.TokenStore("seed")
    assert await store.get() == "seed"


@pytest.mark.asyncio
async def test_replace_overwrites_previous_token():
    store = token_store.TokenStore("old")
    await store.replace("new")
    assert await store.get() == "new"


@pytest.mark.asyncio
async def test_readers_share_the_lock():
    """Several readers hold the lock at the same time."""
    lock = token_store.AsyncReadWriteLock()
    inside = 0
    peak = 0
    release = asyncio.Event()

    async def reader():
        nonlocal inside, peak
        async with lock.read():
            inside += 1
            peak = max(peak, inside)
            await release.wait()
            inside -= 1

    tasks = [asyncio.create_task(reader()) for _ in range(5)]
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    release.set()
    await asyncio.gather(*tasks)

    assert peak == 5


@pytest.mark.asyncio
async def test_writer_waits_for_readers():
    """A writer is admitted only after active readers leave."""
    lock = token_store.AsyncReadWriteLock()
    events: list[str] = []
    release_reader = asyncio.Event()

    async def reader():
        async with lock.read():
            events.append("read-start")
            await release_reader.wait()
            events.append("read-end")

    async def writer():
        async with lock.write():
            events.append("write")

    reader_task = asyncio.create_task(reader())
    await asyncio.sleep(0)
    writer_task = asyncio.create_task(writer())
    await asyncio.sleep(0)
    assert events == ["read-start"]

    release_reader.set()
    await asyncio.gather(reader_task, writer_task)
    assert events == ["read-start", "read-end", "write"]


@pytest.mark.asyncio
async def test_waiting_writer_blocks_new_readers():
    """Readers arriving after a waiting writer run after it."""
    lock = token_store.AsyncReadWriteLock()
    events: list[str] = []
    release_first = asyncio.Event()

    async def first_reader():
        async with lock.read():
            await release_first.wait()
            events.append("first-read")

    async def writer():
        async with lock.write():
            events.append("write")

    async def late_reader():
        async with lock.read():
            events.append("late-read")

    tasks = [asyncio.create_task(first_reader())]
    await asyncio.sleep(0)
    tasks.append(asyncio.create_task(writer()))
    await asyncio.sleep(0)
    tasks.append(asyncio.create_task(late_reader()))
    await asyncio.sleep(0)

    release_first.set()
    await asyncio.gather(*tasks)
    assert events == ["first-read", "write", "late-read"]


@pytest.mark.asyncio
async def test_cancelled_writer_releases_waiting_readers():
    """Cancelling a queued writer lets readers behind it proceed."""
    lock = token_store.AsyncReadWriteLock()
    release_first = asyncio.Event()
    late_done = asyncio.Event()

    async def first_reader():
        async with lock.read():
            await release_first.wait()

    async def writer():
        async with lock.write():
            pass

    async def late_reader():
        async with lock.read():
            late_done.set()

    first = asyncio.create_task(first_reader())
    await asyncio.sleep(0)
    blocked_writer = asyncio.create_task(writer())
    await asyncio.sleep(0)
    late = asyncio.create_task(late_reader())
    await asyncio.sleep(0)
    assert not late_done.is_set()

    blocked_writer.cancel()
    await asyncio.wait_for(late_done.wait(), timeout=1)

    release_first.set()
    await asyncio.gather(first, late)
    with pytest.raises(asyncio.CancelledError):
        await blocked_writer


@pytest.mark.asyncio
async def test_reader_cancelled_during_release_still_leaves():
    """A reader cancelled while waiting to release still drops its count."""
    lock = token_store.AsyncReadWriteLock()
    inside = asyncio.Event()
    leave = asyncio.Event()

    async def reader():
        async with lock.read():
            inside.set()
            await leave.wait()

    async def writer():
        async with lock.write():
            pass

    task = asyncio.create_task(reader())
    await inside.wait()

    # Hold the condition so the reader blocks on its way out
    await lock._cond.acquire()
    leave.set()
    await asyncio.sleep(0)
    await asyncio.sleep(0)

    task.cancel()
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    assert lock._readers == 1

    lock._cond.release()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert lock._readers == 0
    await asyncio.wait_for(writer(), timeout=1)


@pytest.mark.asyncio
async def test_replace_never_logs_token():
    store = token_store.TokenStore("old")
    with patch.object(token_store, "logger", MagicMock()) as mock_logger:
        await store.replace("secret-token")

    mock_logger.info.assert_called_once_with(
        "Stored admin token",
        replaced_previous=True,
    )
    assert "secret-token" not in repr(mock_logger.mock_calls)
