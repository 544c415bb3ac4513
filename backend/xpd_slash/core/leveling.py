"""Leveling Engine — pure experience → level/percentage computation.

Invariants:
    - Experience is a non-negative integer (negative raises ValueError)
    - level(xp) is non-decreasing in xp
    - percentage is an integer in [0, 99] and drops back to 0 at every level boundary
    - No hidden state: LevelInfo is a pure function of xp

Design Decisions:
    - MEE6-compatible curve: going from level L to L+1 costs 5L² + 50L + 100 XP,
      so communities migrating from that bot keep their levels
    - Closed-form cumulative requirement; integer arithmetic only (no float rounding drift)
"""

from dataclasses import dataclass


def xp_to_advance(level: int) -> int:
    """XP needed to go from `level` to `level + 1`."""
    return 5 * level * level + 50 * level + 100


def xp_needed_for_level(level: int) -> int:
    """Total XP needed to reach `level` from zero."""
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    # sum over l in [0, level) of 5l² + 50l + 100
    squares = (level - 1) * level * (2 * level - 1) // 6
    linear = level * (level - 1) // 2
    return 5 * squares + 50 * linear + 100 * level


def level_for_xp(xp: int) -> int:
    if xp < 0:
        raise ValueError(f"xp must be non-negative, got {xp}")
    level = 0
    while xp_needed_for_level(level + 1) <= xp:
        level += 1
    return level


@dataclass(frozen=True)
class LevelInfo:
    """Level and progress-to-next-level for one experience value."""
    xp: int
    level: int
    percentage: int

    @classmethod
    def from_xp(cls, xp: int) -> "LevelInfo":
        level = level_for_xp(xp)
        floor = xp_needed_for_level(level)
        span = xp_to_advance(level)
        return cls(xp=xp, level=level, percentage=(xp - floor) * 100 // span)

    @property
    def next_level(self) -> int:
        return self.level + 1
