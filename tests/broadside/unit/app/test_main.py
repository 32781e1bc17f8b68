from __future__ import annotations

import pytest

from broadside.game.infra.config import AppConfig
from broadside.main import build_parser, main, resolve_config


def test_resolve_config_applies_only_given_flags() -> None:
    args = build_parser().parse_args(["--difficulty", "hard", "--seed", "9"])
    base = AppConfig(strategy="random", width=8)
    assert resolve_config(args, base) == AppConfig(
        difficulty="hard", strategy="random", seed=9, width=8
    )


def test_parser_rejects_unknown_choices() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "nightmare"])


@pytest.fixture
def isolated_app(tmp_path, monkeypatch, restore_root_logging):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BROADSIDE_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BROADSIDE_LOG_DIR", raising=False)
    return tmp_path


def test_main_plays_full_duel(isolated_app) -> None:
    assert main(["--difficulty", "hard", "--seed", "11"]) == 0
    assert list((isolated_app / "appdata" / "logs").glob("broadside_run_*.jsonl"))


def test_main_reports_unfinished_duel(isolated_app) -> None:
    assert main(["--seed", "11", "--max-turns", "5"]) == 1
