"""Tests for VerdictCache.

Tests:
- get_or_compute: miss then hit, producer called once per key
- clear: entries and counters reset
- concurrent access: one stored value per key
"""

import threading

import pytest

from shapebind.application.services.verdict_cache import VerdictCache


class TestGetOrCompute:
    """Tests for lazy population."""

    def test_miss_then_hit(self) -> None:
        cache = VerdictCache()
        calls: list[str] = []

        def producer() -> str:
            calls.append("called")
            return "value"

        assert cache.get_or_compute("key", producer) == "value"
        assert cache.get_or_compute("key", producer) == "value"
        assert calls == ["called"]
        assert cache.misses == 1
        assert cache.hits == 1
        assert cache.size == 1

    def test_keys_independent(self) -> None:
        cache = VerdictCache()
        assert cache.get_or_compute(("a", 1), lambda: 1) == 1
        assert cache.get_or_compute(("a", 2), lambda: 2) == 2
        assert cache.size == 2

    def test_none_is_cached(self) -> None:
        cache = VerdictCache()
        cache.get_or_compute("key", lambda: None)
        assert cache.get_or_compute("key", lambda: "other") is None

    def test_rejected_result_not_stored(self) -> None:
        cache = VerdictCache()
        assert cache.get_or_compute("key", lambda: "transient", keep=lambda v: v != "transient") == "transient"
        assert cache.size == 0
        assert cache.misses == 1
        assert cache.get_or_compute("key", lambda: "final", keep=lambda v: v != "transient") == "final"
        assert cache.get_or_compute("key", lambda: "other") == "final"

    def test_producer_error_not_cached(self) -> None:
        cache = VerdictCache()

        def failing() -> int:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            cache.get_or_compute("key", failing)
        assert cache.size == 0
        assert cache.get_or_compute("key", lambda: 1) == 1


class TestClear:
    """Tests for clear()."""

    def test_resets_entries_and_counters(self) -> None:
        cache = VerdictCache()
        cache.get_or_compute("key", lambda: 1)
        cache.get_or_compute("key", lambda: 1)
        cache.clear()
        assert cache.size == 0
        assert cache.hits == 0
        assert cache.misses == 0


class TestConcurrency:
    """Tests for thread safety."""

    def test_first_stored_value_wins(self) -> None:
        cache = VerdictCache()
        barrier = threading.Barrier(8)
        results: list[object] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            value = cache.get_or_compute("shared", object)
            with lock:
                results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)
        assert cache.size == 1
