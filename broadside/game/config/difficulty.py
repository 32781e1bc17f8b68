"""Computer-opponent difficulty profiles.

A profile groups three independent knobs:

- targeting: whether the opponent may follow up on hits, and how reliably;
- memory: whether hits are remembered and how many consecutive misses are
  tolerated before a lead is abandoned;
- timing: the bounds of the simulated thinking delay.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any


def _require_number(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise TypeError(f"{name} must be a number")
    return float(value)


@dataclass(frozen=True, slots=True)
class TargetingProfile:
    can_target: bool
    accuracy: float

    def __post_init__(self) -> None:
        accuracy = _require_number(self.accuracy, "accuracy")
        if not 0.0 <= accuracy <= 1.0:
            raise ValueError("accuracy must be within [0, 1]")


@dataclass(frozen=True, slots=True)
class MemoryProfile:
    remember_shots: bool
    max_miss_tolerance: float

    def __post_init__(self) -> None:
        tolerance = _require_number(self.max_miss_tolerance, "max_miss_tolerance")
        if tolerance < 0:
            raise ValueError("max_miss_tolerance must be >= 0")


@dataclass(frozen=True, slots=True)
class TimingProfile:
    min_delay_ms: float
    max_delay_ms: float

    def __post_init__(self) -> None:
        low = _require_number(self.min_delay_ms, "min_delay_ms")
        high = _require_number(self.max_delay_ms, "max_delay_ms")
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ValueError("delay bounds must be finite")
        if low <= 0:
            raise ValueError("min_delay_ms must be > 0")
        if low >= high:
            raise ValueError("min_delay_ms must be < max_delay_ms")


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    """Immutable difficulty configuration consumed by attack strategies."""

    id: str
    targeting: TargetingProfile
    memory: MemoryProfile
    timing: TimingProfile

    def with_overrides(
        self,
        *,
        targeting: TargetingProfile | None = None,
        memory: MemoryProfile | None = None,
        timing: TimingProfile | None = None,
    ) -> DifficultyProfile:
        """Return a copy with the given sections replaced."""
        return replace(
            self,
            targeting=targeting or self.targeting,
            memory=memory or self.memory,
            timing=timing or self.timing,
        )


EASY = DifficultyProfile(
    id="easy",
    targeting=TargetingProfile(can_target=False, accuracy=0.0),
    memory=MemoryProfile(remember_shots=False, max_miss_tolerance=0),
    timing=TimingProfile(min_delay_ms=300, max_delay_ms=600),
)

NORMAL = DifficultyProfile(
    id="normal",
    targeting=TargetingProfile(can_target=True, accuracy=0.75),
    memory=MemoryProfile(remember_shots=True, max_miss_tolerance=2),
    timing=TimingProfile(min_delay_ms=250, max_delay_ms=450),
)

HARD = DifficultyProfile(
    id="hard",
    targeting=TargetingProfile(can_target=True, accuracy=1.0),
    memory=MemoryProfile(remember_shots=True, max_miss_tolerance=math.inf),
    timing=TimingProfile(min_delay_ms=150, max_delay_ms=300),
)

DIFFICULTIES: dict[str, DifficultyProfile] = {
    profile.id: profile for profile in (EASY, NORMAL, HARD)
}


def resolve_difficulty(name: str) -> DifficultyProfile:
    """Look up a preset profile by id, case-insensitively."""
    key = name.strip().lower()
    try:
        return DIFFICULTIES[key]
    except KeyError:
        known = ", ".join(sorted(DIFFICULTIES))
        raise ValueError(f"unknown difficulty {name!r}; expected one of: {known}") from None


def difficulty_from_mapping(data: Mapping[str, Any]) -> DifficultyProfile:
    """Build a profile from nested mappings.

    Keys may be snake_case or camelCase. A missing, ``None`` or ``"inf"``
    miss tolerance means unbounded.
    """
    targeting = _section(data, "targeting")
    memory = _section(data, "memory")
    timing = _section(data, "timing")
    return DifficultyProfile(
        id=str(data.get("id", "custom")),
        targeting=TargetingProfile(
            can_target=bool(_field(targeting, "can_target", "canTarget")),
            accuracy=_field(targeting, "accuracy", "accuracy"),
        ),
        memory=MemoryProfile(
            remember_shots=bool(_field(memory, "remember_shots", "rememberShots")),
            max_miss_tolerance=_tolerance(
                memory.get("max_miss_tolerance", memory.get("maxMissTolerance"))
            ),
        ),
        timing=TimingProfile(
            min_delay_ms=_field(timing, "min_delay_ms", "minDelayMs"),
            max_delay_ms=_field(timing, "max_delay_ms", "maxDelayMs"),
        ),
    )


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    if not isinstance(section, Mapping):
        raise TypeError(f"difficulty section {name!r} must be a mapping")
    return section


def _field(section: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in section:
        return section[snake]
    if camel in section:
        return section[camel]
    raise KeyError(f"missing difficulty field: {snake}")


def _tolerance(value: object) -> float:
    if value is None:
        return math.inf
    if isinstance(value, str):
        if value.strip().lower() in {"inf", "infinity", "unbounded"}:
            return math.inf
        raise ValueError(f"invalid max_miss_tolerance: {value!r}")
    return _require_number(value, "max_miss_tolerance")
