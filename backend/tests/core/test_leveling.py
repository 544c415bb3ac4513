"""Leveling Engine — tests for the experience → level/percentage curve.

Tests cover:
    - Cumulative XP thresholds for the first levels
    - Level boundaries (exactly at threshold, one below)
    - Monotonic level and bounded percentage over a range of XP
    - Percentage resets at each level boundary
    - Negative XP rejected
"""

import pytest

from xpd_slash.core.leveling import (
    LevelInfo,
    level_for_xp,
    xp_needed_for_level,
    xp_to_advance,
)


def test_xp_needed_for_first_levels():
    assert [xp_needed_for_level(n) for n in range(5)] == [0, 100, 255, 475, 770]


def test_xp_needed_is_cumulative_advance_cost():
    for level in range(50):
        assert xp_needed_for_level(level + 1) - xp_needed_for_level(level) == xp_to_advance(level)


def test_zero_xp_is_level_zero():
    info = LevelInfo.from_xp(0)
    assert info.level == 0
    assert info.percentage == 0
    assert info.next_level == 1


def test_exact_threshold_reaches_level():
    assert level_for_xp(99) == 0
    assert level_for_xp(100) == 1
    assert level_for_xp(254) == 1
    assert level_for_xp(255) == 2


def test_percentage_midway_through_level_one():
    # level 1 spans 100..255 (155 XP); 100 + 155 // 2 = 177 → 49%
    info = LevelInfo.from_xp(177)
    assert info.level == 1
    assert info.percentage == 49


def test_percentage_resets_after_boundary():
    just_below = LevelInfo.from_xp(254)
    at_boundary = LevelInfo.from_xp(255)
    assert just_below.percentage == 99
    assert at_boundary.level == just_below.level + 1
    assert at_boundary.percentage == 0


def test_level_monotonic_and_percentage_bounded():
    previous = 0
    for xp in range(0, 20_000, 7):
        info = LevelInfo.from_xp(xp)
        assert info.level >= previous
        assert 0 <= info.percentage <= 100
        previous = info.level


def test_large_xp_does_not_overflow():
    info = LevelInfo.from_xp(10**12)
    assert xp_needed_for_level(info.level) <= 10**12 < xp_needed_for_level(info.level + 1)


def test_negative_xp_rejected():
    with pytest.raises(ValueError):
        LevelInfo.from_xp(-1)
