"""Shared typing aliases for the pipekit package."""

from __future__ import annotations

from typing import Any, Callable

Stage = Callable[[Any], Any]

__all__ = ["Stage"]
