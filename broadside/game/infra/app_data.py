"""Broadside app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_game_root() -> Path:
    return Path(__file__).resolve().parents[3]


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("BROADSIDE_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_game_root() / candidate
    return resolve_game_root() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honoring an explicit BROADSIDE_LOG_DIR."""
    configured = os.getenv("BROADSIDE_LOG_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        return candidate if candidate.is_absolute() else resolve_app_data_root() / candidate
    return resolve_app_data_root() / "logs"
