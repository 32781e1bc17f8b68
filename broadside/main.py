"""Application entry point: play a seeded headless duel and log the outcome."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import replace

from broadside.game.app.duel import STRATEGY_KINDS, create_duel
from broadside.game.config.difficulty import DIFFICULTIES
from broadside.game.infra.config import AppConfig, load_app_config, load_default_env_files
from broadside.game.infra.logging import setup_logging
from keel.api.logging import get_logger, shutdown_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="broadside", description=__doc__)
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default=None)
    parser.add_argument("--strategy", choices=STRATEGY_KINDS, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--max-turns", type=int, default=None)
    return parser


def resolve_config(args: argparse.Namespace, base: AppConfig) -> AppConfig:
    """Command-line flags override env-derived settings."""
    overrides = {
        key: value
        for key, value in (
            ("difficulty", args.difficulty),
            ("strategy", args.strategy),
            ("seed", args.seed),
            ("width", args.width),
            ("height", args.height),
        )
        if value is not None
    }
    return replace(base, **overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Broadside headless duel."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging()
    config = resolve_config(args, load_app_config())
    try:
        duel = create_duel(config)
        summary = duel.run(max_turns=args.max_turns)
        logger.info(
            "summary shots=%d hits=%d accuracy=%.3f sunk=%s won=%s",
            summary.shots,
            summary.hits,
            summary.accuracy,
            ",".join(ship.value for ship in summary.sunk),
            summary.won,
        )
        return 0 if summary.won else 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
