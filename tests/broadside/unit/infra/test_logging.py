from __future__ import annotations

import logging
from pathlib import Path

import orjson

from broadside.game.infra.app_data import resolve_app_data_root, resolve_logs_dir
from broadside.game.infra.logging import build_logging_config, setup_logging
from keel.api.logging import shutdown_logging


def test_logs_dir_follows_app_data_root(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("BROADSIDE_LOG_DIR", raising=False)
    assert resolve_app_data_root() == tmp_path
    assert resolve_logs_dir() == tmp_path / "logs"

    monkeypatch.setenv("BROADSIDE_LOG_DIR", "runs")
    assert resolve_logs_dir() == tmp_path / "runs"


def test_build_logging_config_reads_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("BROADSIDE_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_format == "json"
    file_path = Path(config.file_path)
    assert file_path.parent == tmp_path
    assert file_path.name.startswith("broadside_run_")
    assert file_path.suffix == ".jsonl"


def test_setup_logging_writes_json_lines(tmp_path, monkeypatch, restore_root_logging) -> None:
    monkeypatch.setenv("BROADSIDE_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("BROADSIDE_LOG_LEVEL", "INFO")
    setup_logging()
    logging.getLogger("broadside.test").info("turn_played", extra={"turn": 1})
    shutdown_logging()

    (log_file,) = tmp_path.glob("broadside_run_*.jsonl")
    records = [orjson.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert records[0]["msg"].startswith("logging_file=")
    assert records[-1]["msg"] == "turn_played"
    assert records[-1]["fields"]["turn"] == 1
