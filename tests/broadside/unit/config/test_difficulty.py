from __future__ import annotations

import math

import pytest

from broadside.game.config.difficulty import (
    DIFFICULTIES,
    EASY,
    HARD,
    NORMAL,
    MemoryProfile,
    TargetingProfile,
    TimingProfile,
    difficulty_from_mapping,
    resolve_difficulty,
)


def test_presets() -> None:
    assert set(DIFFICULTIES) == {"easy", "normal", "hard"}
    assert not EASY.targeting.can_target
    assert not EASY.memory.remember_shots
    assert NORMAL.targeting.accuracy == 0.75
    assert NORMAL.memory.max_miss_tolerance == 2
    assert HARD.targeting.accuracy == 1.0
    assert math.isinf(HARD.memory.max_miss_tolerance)
    for profile in DIFFICULTIES.values():
        assert 0 < profile.timing.min_delay_ms < profile.timing.max_delay_ms


def test_resolve_difficulty_is_case_insensitive() -> None:
    assert resolve_difficulty(" Hard ") is HARD
    with pytest.raises(ValueError, match="unknown difficulty"):
        resolve_difficulty("nightmare")


@pytest.mark.parametrize("accuracy", [-0.1, 1.5])
def test_targeting_profile_rejects_out_of_range_accuracy(accuracy) -> None:
    with pytest.raises(ValueError):
        TargetingProfile(can_target=True, accuracy=accuracy)


def test_profiles_reject_non_numbers() -> None:
    with pytest.raises(TypeError):
        TargetingProfile(can_target=True, accuracy="high")
    with pytest.raises(TypeError):
        MemoryProfile(remember_shots=True, max_miss_tolerance=math.nan)
    with pytest.raises(ValueError):
        MemoryProfile(remember_shots=True, max_miss_tolerance=-1)


@pytest.mark.parametrize("low,high", [(0, 100), (200, 100), (100, 100), (100, math.inf)])
def test_timing_profile_rejects_bad_bounds(low, high) -> None:
    with pytest.raises(ValueError):
        TimingProfile(min_delay_ms=low, max_delay_ms=high)


def test_with_overrides_replaces_only_given_sections() -> None:
    custom = HARD.with_overrides(memory=MemoryProfile(remember_shots=True, max_miss_tolerance=1))
    assert custom.memory.max_miss_tolerance == 1
    assert custom.targeting is HARD.targeting
    assert custom.timing is HARD.timing
    assert math.isinf(HARD.memory.max_miss_tolerance)


def test_difficulty_from_mapping_accepts_camel_case() -> None:
    profile = difficulty_from_mapping(
        {
            "id": "custom",
            "targeting": {"canTarget": True, "accuracy": 0.5},
            "memory": {"rememberShots": True, "maxMissTolerance": "inf"},
            "timing": {"minDelayMs": 10, "maxDelayMs": 20},
        }
    )
    assert profile.id == "custom"
    assert profile.targeting.accuracy == 0.5
    assert math.isinf(profile.memory.max_miss_tolerance)
    assert profile.timing.max_delay_ms == 20


def test_difficulty_from_mapping_validates() -> None:
    base = {
        "targeting": {"can_target": True, "accuracy": 0.5},
        "memory": {"remember_shots": True, "max_miss_tolerance": 3},
        "timing": {"min_delay_ms": 10, "max_delay_ms": 20},
    }
    assert difficulty_from_mapping(base).memory.max_miss_tolerance == 3
    with pytest.raises(TypeError):
        difficulty_from_mapping({**base, "memory": None})
    with pytest.raises(KeyError):
        difficulty_from_mapping({**base, "timing": {"min_delay_ms": 10}})
    with pytest.raises(ValueError):
        difficulty_from_mapping({**base, "memory": {"remember_shots": True, "max_miss_tolerance": "lots"}})
