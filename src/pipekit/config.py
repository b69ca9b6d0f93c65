"""Configuration loading for applications that run pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class TraceConfig:
    """Whether pipelines record per-stage timings, and the level stage logs use."""

    enabled: bool = False
    level: str = "DEBUG"


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    trace: TraceConfig = field(default_factory=TraceConfig)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def app_config_from_mapping(raw: Mapping[str, Any]) -> AppConfig:
    """Build :class:`AppConfig` from an already parsed mapping."""

    logging_cfg = raw.get("logging") or {}
    trace = raw.get("trace") or {}

    return AppConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        trace=TraceConfig(
            enabled=bool(trace.get("enabled", False)),
            level=str(trace.get("level", "DEBUG")),
        ),
    )


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``."""

    return app_config_from_mapping(load_yaml(Path(path)))


__all__ = [
    "LoggingConfig",
    "TraceConfig",
    "AppConfig",
    "load_yaml",
    "app_config_from_mapping",
    "load_app_config",
]
