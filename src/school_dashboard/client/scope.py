from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Set, TypeVar

from .query_cache import QueryClient, QueryKey

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ViewScopeClosed(RuntimeError):
    """Work was submitted to a scope that has already been closed."""


class ViewScope:
    """Lifetime of one view.

    Requests started through the scope hand their result to ``apply`` only
    while the scope is open. Leaving the ``async with`` block cancels whatever
    is still pending, so a response that arrives after teardown is dropped.
    """

    def __init__(self, queries: QueryClient):
        self._queries = queries
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def __aenter__(self) -> "ViewScope":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def spawn(self, work: Awaitable[T], apply: Callable[[T], Any]) -> "asyncio.Task[T]":
        if self._closed:
            if asyncio.iscoroutine(work):
                work.close()
            raise ViewScopeClosed("view scope is closed")

        task = asyncio.ensure_future(self._run(work, apply))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def query(self, key: QueryKey, apply: Callable[[Any], Any]) -> "asyncio.Task[Any]":
        return self.spawn(self._queries.fetch_query(key), apply)

    async def _run(self, work: Awaitable[T], apply: Callable[[T], Any]) -> T:
        result = await work
        if not self._closed:
            apply(result)
        return result

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        pending = [t for t in self._tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("View scope closed with %d pending request(s)", len(pending))
            await asyncio.gather(*pending, return_exceptions=True)
