"""Tests for the metrics collection module."""

import threading

import pytest

from patch_speller.utils.metrics import Counter, SpellMetrics


class TestCounter:
    """Tests for Counter metric."""

    def test_counter_initial_value(self) -> None:
        """Test counter starts at zero."""
        counter = Counter("test_counter", "Test counter")
        assert counter.get() == 0
        assert counter.total() == 0

    def test_counter_increment_by_one(self) -> None:
        """Test counter increment by default value."""
        counter = Counter("test_counter")
        counter.inc()
        assert counter.get() == 1

    def test_counter_increment_by_value(self) -> None:
        """Test counter increment by specific value."""
        counter = Counter("test_counter")
        counter.inc(5)
        assert counter.get() == 5

    def test_counter_with_labels(self) -> None:
        """Test counter with labels."""
        counter = Counter("test_counter")
        counter.inc(labels={"reason": "keywords"})
        counter.inc(labels={"reason": "files_to_lint"})
        counter.inc(labels={"reason": "keywords"})

        assert counter.get(labels={"reason": "keywords"}) == 2
        assert counter.get(labels={"reason": "files_to_lint"}) == 1
        assert counter.get(labels={"reason": "unknown"}) == 0
        assert counter.get() == 0

    def test_counter_total_sums_labels(self) -> None:
        """Test that total covers every label combination."""
        counter = Counter("test_counter")
        counter.inc()
        counter.inc(2, labels={"reason": "keywords"})
        counter.inc(3, labels={"reason": "no_additions"})
        assert counter.total() == 6

    def test_counter_cannot_decrease(self) -> None:
        """Test that counter rejects negative values."""
        counter = Counter("test_counter")
        with pytest.raises(ValueError, match="can only increase"):
            counter.inc(-1)

    def test_counter_reset(self) -> None:
        """Test resetting the counter."""
        counter = Counter("test_counter")
        counter.inc(4, labels={"a": "1"})
        counter.reset()
        assert counter.total() == 0

    def test_counter_thread_safe(self) -> None:
        """Test concurrent increments."""
        counter = Counter("test_counter")

        def work() -> None:
            for _ in range(1000):
                counter.inc()

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert counter.get() == 4000


class TestSpellMetrics:
    """Tests for the SpellMetrics registry."""

    def test_registry_has_expected_counters(self) -> None:
        """Test that the registry holds every run counter."""
        metrics = SpellMetrics()
        assert [c.name for c in metrics.counters()] == [
            "lines_scanned",
            "lines_skipped",
            "patches_skipped",
            "words_checked",
            "dictionary_lookups",
            "findings_emitted",
        ]

    def test_snapshot(self) -> None:
        """Test the totals snapshot."""
        metrics = SpellMetrics()
        metrics.lines_scanned.inc(3)
        metrics.lines_skipped.inc(labels={"reason": "keywords"})
        metrics.findings_emitted.inc()

        snapshot = metrics.snapshot()
        assert snapshot["lines_scanned"] == 3
        assert snapshot["lines_skipped"] == 1
        assert snapshot["findings_emitted"] == 1
        assert snapshot["words_checked"] == 0

    def test_reset(self) -> None:
        """Test that reset clears every counter."""
        metrics = SpellMetrics()
        metrics.words_checked.inc(10)
        metrics.dictionary_lookups.inc(12)
        metrics.reset()
        assert set(metrics.snapshot().values()) == {0}

    def test_instances_are_independent(self) -> None:
        """Test that registries don't share counters."""
        first = SpellMetrics()
        second = SpellMetrics()
        first.lines_scanned.inc()
        assert second.lines_scanned.get() == 0
