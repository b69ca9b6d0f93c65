"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import yaml

from pipekit.config import (
    AppConfig,
    LoggingConfig,
    TraceConfig,
    app_config_from_mapping,
    load_app_config,
    load_yaml,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_file_loads():
    cfg = load_app_config(PROJECT_ROOT / "configs" / "defaults.yaml")
    assert cfg == AppConfig()


def test_load_app_config_reads_values(tmp_path):
    path = tmp_path / "app.yaml"
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(
            {
                "logging": {"level": "debug", "rich_tracebacks": False},
                "trace": {"enabled": True, "level": "INFO"},
            },
            handle,
        )

    cfg = load_app_config(path)
    assert cfg.logging == LoggingConfig(level="debug", rich_tracebacks=False)
    assert cfg.trace == TraceConfig(enabled=True, level="INFO")


def test_empty_document_yields_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_yaml(path) == {}
    assert load_app_config(path) == AppConfig()


def test_partial_mapping_keeps_other_defaults():
    cfg = app_config_from_mapping({"trace": {"enabled": 1}, "logging": None})
    assert cfg.trace.enabled is True
    assert cfg.trace.level == "DEBUG"
    assert cfg.logging == LoggingConfig()
