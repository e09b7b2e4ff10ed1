"""Simple cache abstractions."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for food search results."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryCache(Cache):
    """Process-local TTL cache."""

    _entries: dict[str, _CacheEntry]
    clock: Callable[[], datetime]

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._entries = {}
        self.clock = clock

    def get(self, key: str) -> object | None:
        """Return a cached value, evicting it once expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        self._entries[key] = _CacheEntry(
            value=value, expires_at=self.clock() + timedelta(seconds=ttl_seconds)
        )

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
