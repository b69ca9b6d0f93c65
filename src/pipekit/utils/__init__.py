"""Utility helpers for the :mod:`pipekit` package."""

from .logging import resolve_level, setup_logging
from .timers import TimerRecord, TimerRegistry

__all__ = ["resolve_level", "setup_logging", "TimerRecord", "TimerRegistry"]
