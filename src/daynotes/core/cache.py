"""Per-date memoizing cache for day metadata."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from daynotes.core.types import DayMetadata

logger = logging.getLogger(__name__)


class DayMetadataCache:
    """Maps a date key to a computed DayMetadata record.

    Entries are filled lazily and never evicted, so memory grows with the
    number of distinct dates requested. Concurrent misses for the same key
    are not deduplicated: each caller computes independently and the last
    write wins. Records are pure functions of the same inputs, so only the
    work is duplicated.

    A computation runs to completion and fills its entry even when the
    caller that started it is cancelled.
    """

    def __init__(self):
        self._entries: dict[str, DayMetadata] = {}
        self._pending: set[asyncio.Task] = set()

    async def get(
        self, key: str, compute: Callable[[], Awaitable[DayMetadata]]
    ) -> DayMetadata:
        """
        Return the cached record for key, computing it on a miss.

        Nothing is stored when compute raises.

        Args:
            key: Canonical date key
            compute: Coroutine factory producing the record

        Returns:
            Cached or freshly computed DayMetadata
        """
        cached = self._entries.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached

        logger.debug(f"Cache miss for {key}")
        task = asyncio.ensure_future(self._fill(key, compute))
        self._pending.add(task)
        task.add_done_callback(self._finished)
        return await asyncio.shield(task)

    async def _fill(
        self, key: str, compute: Callable[[], Awaitable[DayMetadata]]
    ) -> DayMetadata:
        metadata = await compute()
        self._entries[key] = metadata
        return metadata

    def _finished(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Metadata computation failed: {task.exception()!r}")

    def peek(self, key: str) -> DayMetadata | None:
        """Return the cached record without computing."""
        return self._entries.get(key)

    def invalidate(self, key: str) -> bool:
        """Drop one entry. Returns True if it was cached."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
