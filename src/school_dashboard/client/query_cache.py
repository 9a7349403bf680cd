from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .api import ApiClient, clean_params

logger = logging.getLogger(__name__)

ATTENDANCE_PATHS = (
    "/api/attendance",
    "/api/dashboard/attendance-summary",
    "/api/dashboard/recent-activities",
    "/api/reports",
)
BEHAVIOR_PATHS = ("/api/behavior", "/api/dashboard/recent-activities")
ANNOUNCEMENT_PATHS = ("/api/announcements", "/api/dashboard/recent-announcements")
STUDENT_PATHS = (
    "/api/students",
    "/api/attendance",
    "/api/dashboard/attendance-summary",
    "/api/reports",
)


@dataclass(frozen=True)
class QueryKey:
    """Identity of a cached read: route plus its effective query parameters."""

    path: str
    params: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def of(cls, path: str, params: Optional[Mapping[str, Any]] = None) -> "QueryKey":
        return cls(path=path, params=tuple(sorted(clean_params(params).items())))

    def matches(self, path: str) -> bool:
        """True for the path itself and anything below it."""
        prefix = path.rstrip("/")
        return self.path == prefix or self.path.startswith(prefix + "/")


@dataclass
class _Entry:
    data: Any
    stale: bool = False


@dataclass
class QueryClient:
    """Read-through cache over :class:`ApiClient`.

    Reads are served from the cache until an entry is invalidated. Mutations
    go through the helpers below, which invalidate the affected paths once
    the server has accepted the change; a failed mutation leaves the cache
    untouched.
    """

    api: ApiClient
    _entries: Dict[QueryKey, _Entry] = field(default_factory=dict)
    # Bumped by every invalidation of a path, cached or not.
    _epochs: Dict[str, int] = field(default_factory=dict)

    async def fetch_query(self, key: QueryKey) -> Any:
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.data

        started = self._epoch_of(key)
        data = await self.api.get(key.path, dict(key.params))
        # An invalidation that landed while the request was in flight makes
        # this answer stale on arrival.
        self._entries[key] = _Entry(data=data, stale=self._epoch_of(key) != started)
        return data

    def _epoch_of(self, key: QueryKey) -> int:
        return sum(n for path, n in self._epochs.items() if key.matches(path))

    def get_query_data(self, key: QueryKey) -> Any:
        entry = self._entries.get(key)
        return entry.data if entry else None

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def invalidate_queries(self, path: str) -> int:
        self._epochs[path] = self._epochs.get(path, 0) + 1
        count = 0
        for key, entry in self._entries.items():
            if key.matches(path) and not entry.stale:
                entry.stale = True
                count += 1
        if count:
            logger.debug("Invalidated %d cached queries under %s", count, path)
        return count

    def _invalidate_all(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.invalidate_queries(path)

    # mutations

    async def create_student(self, **fields) -> dict:
        created = await self.api.create_student(**fields)
        self._invalidate_all(STUDENT_PATHS)
        return created

    async def save_attendance(self, **fields) -> dict:
        saved = await self.api.save_attendance(**fields)
        self._invalidate_all(ATTENDANCE_PATHS)
        return saved

    async def create_violation(self, **fields) -> dict:
        created = await self.api.create_violation(**fields)
        self._invalidate_all(BEHAVIOR_PATHS)
        return created

    async def delete_violation(self, violation_id: int) -> None:
        await self.api.delete_violation(violation_id)
        self._invalidate_all(BEHAVIOR_PATHS)

    async def create_announcement(self, **fields) -> dict:
        created = await self.api.create_announcement(**fields)
        self._invalidate_all(ANNOUNCEMENT_PATHS)
        return created

    async def delete_announcement(self, announcement_id: int) -> None:
        await self.api.delete_announcement(announcement_id)
        self._invalidate_all(ANNOUNCEMENT_PATHS)
