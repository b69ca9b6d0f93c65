"""Wall-clock timers keyed by label."""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator


@dataclass
class TimerRecord:
    """Accumulates elapsed wall-clock time for a named section."""

    total: float = 0.0
    calls: int = 0
    last: float = 0.0

    def update(self, dt: float) -> None:
        self.total += dt
        self.calls += 1
        self.last = dt


@dataclass
class TimerRegistry:
    """Registry of timers keyed by string labels."""

    records: Dict[str, TimerRecord] = field(default_factory=dict)

    @contextlib.contextmanager
    def time(self, label: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            dt = time.perf_counter() - start
            self.records.setdefault(label, TimerRecord()).update(dt)

    def total(self) -> float:
        return sum(record.total for record in self.records.values())


__all__ = ["TimerRecord", "TimerRegistry"]
