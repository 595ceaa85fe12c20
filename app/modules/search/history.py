"""Recent search queries, persisted under one fixed key."""

from __future__ import annotations

import asyncio
import weakref
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db_services import KeyValueService
from app.core.logging import get_logger

logger = get_logger(__name__)

SEARCH_HISTORY_KEY = "semantic_search_history"
MAX_HISTORY = 10

# keyed by event loop, an asyncio.Lock is bound to one loop
_record_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def _record_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _record_locks.get(loop)
    if lock is None:
        lock = _record_locks[loop] = asyncio.Lock()
    return lock


def push_query(history: Sequence[str], query: str) -> list[str]:
    """Put ``query`` first, dropping any entry equal to it ignoring case."""
    query = query.strip()
    if not query:
        return list(history)[:MAX_HISTORY]
    rest = [item for item in history if item.lower() != query.lower()]
    return [query, *rest][:MAX_HISTORY]


class SearchHistoryStore:
    def __init__(self, session: AsyncSession):
        self.kv = KeyValueService(session)

    async def load(self, *, for_update: bool = False) -> list[str]:
        stored = await self.kv.get(SEARCH_HISTORY_KEY, for_update=for_update)
        if not isinstance(stored, list):
            if stored is not None:
                logger.error("Ignoring unreadable search history: %r", stored)
            return []
        return [str(item) for item in stored][:MAX_HISTORY]

    async def record(self, query: str) -> list[str]:
        """Read, update and write the history as one step.

        Concurrent calls in this process run one at a time, and the stored row
        is locked for the transaction on databases that support it, so no
        query is lost to an interleaved write.
        """
        async with _record_lock():
            updated = push_query(await self.load(for_update=True), query)
            await self.kv.put(SEARCH_HISTORY_KEY, updated)
        return updated

    async def clear(self) -> None:
        await self.kv.delete(SEARCH_HISTORY_KEY)
