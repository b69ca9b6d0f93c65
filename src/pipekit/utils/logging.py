"""Logging setup shared by scripts and applications embedding pipekit."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(level: str | int) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, defaulting to INFO."""

    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Configure the root logger with optional rich tracebacks."""

    console = Console()
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks)
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


__all__ = ["resolve_level", "setup_logging"]
