"""XP and level mechanics — pure math, no I/O."""
from __future__ import annotations

from types import MappingProxyType

MAX_LEVEL = 20

XP_THRESHOLDS = MappingProxyType({
    1: 0, 2: 300, 3: 900, 4: 2700, 5: 6500,
    6: 14000, 7: 23000, 8: 34000, 9: 48000, 10: 64000,
    11: 85000, 12: 100000, 13: 120000, 14: 140000, 15: 165000,
    16: 195000, 17: 225000, 18: 265000, 19: 305000, 20: 355000,
})

PROFICIENCY_BY_LEVEL = MappingProxyType({
    1: 2, 2: 2, 3: 2, 4: 2,
    5: 3, 6: 3, 7: 3, 8: 3,
    9: 4, 10: 4, 11: 4, 12: 4,
    13: 5, 14: 5, 15: 5, 16: 5,
    17: 6, 18: 6, 19: 6, 20: 6,
})

DEFAULT_PROFICIENCY_BONUS = 2


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a given level. Levels outside 1-20 get the default of 2."""
    return PROFICIENCY_BY_LEVEL.get(level, DEFAULT_PROFICIENCY_BONUS)


def xp_for_level(level: int) -> int:
    """XP required to reach the given level."""
    return XP_THRESHOLDS.get(level, 0)


def xp_threshold_for_next_level(level: int) -> int:
    """Cumulative XP needed for the level after `level`.

    At level 20 and above there is nothing further, so the level 20
    threshold is returned. Levels below 1 are treated as level 1.
    """
    if level >= MAX_LEVEL:
        return XP_THRESHOLDS[MAX_LEVEL]
    return XP_THRESHOLDS[max(level, 1) + 1]


def level_from_xp(xp: int) -> int:
    """Determine level from total XP."""
    level = 1
    for lvl in sorted(XP_THRESHOLDS):
        if xp >= XP_THRESHOLDS[lvl]:
            level = lvl
        else:
            break
    return level


def can_level_up(current_level: int, current_xp: int) -> bool:
    """Check if the character can level up."""
    if current_level >= MAX_LEVEL:
        return False
    return current_xp >= xp_threshold_for_next_level(current_level)
