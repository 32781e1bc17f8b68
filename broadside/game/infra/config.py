"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from broadside.game.core.models import BOARD_HEIGHT, BOARD_WIDTH


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable settings for a headless session."""

    difficulty: str = "normal"
    strategy: str = "hunt"
    seed: int | None = None
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win.

    Default order: appdata/config/.env, appdata/config/.env.local, .env, .env.local.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_app_config() -> AppConfig:
    """Read session settings from BROADSIDE_* environment variables."""
    defaults = AppConfig()
    return AppConfig(
        difficulty=_str("BROADSIDE_DIFFICULTY", defaults.difficulty).lower(),
        strategy=_str("BROADSIDE_STRATEGY", defaults.strategy).lower(),
        seed=_optional_int("BROADSIDE_SEED"),
        width=max(1, _int("BROADSIDE_BOARD_WIDTH", defaults.width)),
        height=max(1, _int("BROADSIDE_BOARD_HEIGHT", defaults.height)),
    )


def _str(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip()
    return raw or default


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
