"""
Process-wide memo of dynamically detected embedding dimensions.

Entries are asyncio tasks keyed by "kind:endpoint:model". The first caller for a
key starts the probe; concurrent callers await the same task and share its
result or its failure. A failed probe is dropped so the next call retries; a
successful one is never replaced.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class DimensionCache:
    def __init__(self) -> None:
        self._entries: dict[str, asyncio.Task] = {}

    async def resolve(self, key: str, probe: Callable[[], Awaitable[int]]) -> int:
        """Return the dimension for *key*, running *probe* at most once at a time per key."""
        task = self._entries.get(key)
        if task is None:
            task = asyncio.ensure_future(probe())
            self._entries[key] = task
            task.add_done_callback(lambda done: self._forget_failure(key, done))
        return await asyncio.shield(task)

    def _forget_failure(self, key: str, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is not None:
            if self._entries.get(key) is task:
                del self._entries[key]
            logger.debug("Dimension probe for %s failed; entry dropped", key)


DEFAULT_DIMENSION_CACHE = DimensionCache()
