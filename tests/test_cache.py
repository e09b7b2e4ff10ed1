"""Tests for the in-memory cache."""

from datetime import UTC, datetime, timedelta

from nutri_balance.services.cache import InMemoryCache


def test_entries_expire_after_ttl() -> None:
    now = datetime(2026, 1, 1, tzinfo=UTC)
    cache = InMemoryCache(clock=lambda: now)
    cache.set("fdc:search:apple:10", ["apple"], ttl_seconds=60)

    assert cache.get("fdc:search:apple:10") == ["apple"]

    now += timedelta(seconds=60)

    assert cache.get("fdc:search:apple:10") is None


def test_clear_drops_entries() -> None:
    cache = InMemoryCache()
    cache.set("key", 1, ttl_seconds=60)

    cache.clear()

    assert cache.get("key") is None
