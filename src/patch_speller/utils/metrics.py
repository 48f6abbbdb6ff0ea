"""Run metrics for observability.

This module provides counters describing what a spell run did:
- lines scanned and skipped
- words handed to the dictionary
- dictionary lookups
- findings emitted

Counters are thread-safe so a host may share a registry across workers.
A snapshot is logged at the end of every run.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from threading import Lock


class Counter:
    """A monotonically increasing counter.

    Example:
        counter = Counter("lines_scanned", "Added lines inspected")
        counter.inc()  # Increment by 1
        counter.inc(5)  # Increment by 5
        counter.inc(labels={"reason": "keywords"})  # With labels
    """

    def __init__(self, name: str, help_text: str = "") -> None:
        """Initialize counter.

        Args:
            name: Metric name
            help_text: Description of the metric
        """
        self.name = name
        self.help_text = help_text
        self._values: dict[tuple[tuple[str, str], ...], int] = defaultdict(int)
        self._lock = Lock()

    def inc(self, value: int = 1, labels: dict[str, str] | None = None) -> None:
        """Increment the counter.

        Args:
            value: Amount to increment (default 1)
            labels: Optional labels for this observation
        """
        if value < 0:
            raise ValueError("Counter can only increase")

        label_key = tuple(sorted(labels.items())) if labels else ()
        with self._lock:
            self._values[label_key] += value

    def get(self, labels: dict[str, str] | None = None) -> int:
        """Get current counter value.

        Args:
            labels: Labels to filter by

        Returns:
            Current counter value
        """
        label_key = tuple(sorted(labels.items())) if labels else ()
        with self._lock:
            return self._values.get(label_key, 0)

    def total(self) -> int:
        """Sum over all label combinations."""
        with self._lock:
            return sum(self._values.values())

    def reset(self) -> None:
        """Reset all values to zero."""
        with self._lock:
            self._values.clear()


@dataclass
class SpellMetrics:
    """Counters for one spell runner."""

    lines_scanned: Counter = field(
        default_factory=lambda: Counter("lines_scanned", "Added lines inspected")
    )
    lines_skipped: Counter = field(
        default_factory=lambda: Counter("lines_skipped", "Added lines skipped by a gate")
    )
    patches_skipped: Counter = field(
        default_factory=lambda: Counter("patches_skipped", "Patches skipped by the file gate")
    )
    words_checked: Counter = field(
        default_factory=lambda: Counter("words_checked", "Words that passed every filter")
    )
    dictionary_lookups: Counter = field(
        default_factory=lambda: Counter("dictionary_lookups", "Dictionary correctness lookups")
    )
    findings_emitted: Counter = field(
        default_factory=lambda: Counter("findings_emitted", "Findings produced")
    )

    def counters(self) -> list[Counter]:
        """All counters of the registry."""
        return [
            self.lines_scanned,
            self.lines_skipped,
            self.patches_skipped,
            self.words_checked,
            self.dictionary_lookups,
            self.findings_emitted,
        ]

    def snapshot(self) -> dict[str, int]:
        """Totals of every counter, keyed by name."""
        return {counter.name: counter.total() for counter in self.counters()}

    def reset(self) -> None:
        """Reset every counter."""
        for counter in self.counters():
            counter.reset()
