"""Instrumented pipe that times and logs each stage."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .config import TraceConfig
from .functional import pipe
from .typing import Stage
from .utils.logging import resolve_level
from .utils.timers import TimerRegistry

LOGGER = logging.getLogger(__name__)


@dataclass
class StageRecord:
    """Outcome of a single stage call."""

    index: int
    name: str
    elapsed: float
    ok: bool


@dataclass
class PipeTrace:
    """Records collected by :func:`traced_pipe`."""

    records: List[StageRecord] = field(default_factory=list)
    timers: TimerRegistry = field(default_factory=TimerRegistry)

    @property
    def failed(self) -> Optional[StageRecord]:
        for record in self.records:
            if not record.ok:
                return record
        return None


def stage_name(fn: Callable[..., Any]) -> str:
    """Human-readable name of a stage for logs and timer labels."""

    while isinstance(fn, functools.partial):
        fn = fn.func
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return name if isinstance(name, str) else repr(fn)


def traced_pipe(
    value: Any,
    *fns: Stage,
    trace: Optional[PipeTrace] = None,
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> Any:
    """Behave like :func:`pipe` while recording a :class:`StageRecord` per stage.

    A failing stage is recorded with ``ok=False`` and its exception is
    re-raised unchanged; the remaining stages are skipped.
    """

    trace = trace if trace is not None else PipeTrace()
    log = logger or LOGGER

    acc = value
    for index, fn in enumerate(fns):
        name = stage_name(fn)
        label = f"{index}:{name}"
        try:
            with trace.timers.time(label):
                acc = fn(acc)
        except BaseException as exc:
            elapsed = trace.timers.records[label].last
            trace.records.append(StageRecord(index=index, name=name, elapsed=elapsed, ok=False))
            log.log(level, "stage %d (%s) raised %s after %.6fs", index, name, type(exc).__name__, elapsed)
            raise
        elapsed = trace.timers.records[label].last
        trace.records.append(StageRecord(index=index, name=name, elapsed=elapsed, ok=True))
        log.log(level, "stage %d (%s) finished in %.6fs", index, name, elapsed)
    return acc


def make_pipe(config: Optional[TraceConfig] = None) -> Callable[..., Any]:
    """Return :func:`pipe`, or a :func:`traced_pipe` wrapper when tracing is enabled."""

    if config is None or not config.enabled:
        return pipe
    return functools.partial(traced_pipe, level=resolve_level(config.level))


__all__ = ["StageRecord", "PipeTrace", "stage_name", "traced_pipe", "make_pipe"]
