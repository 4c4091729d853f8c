"""Ability score math — pure functions, no I/O."""
from __future__ import annotations

from roll_with_it.models.character import Ability, AbilityScores

ABILITY_NAMES = [a.value for a in Ability]


def ability_modifier(score: int) -> int:
    """Calculate ability modifier from score."""
    return (score - 10) // 2


def ability_modifiers(scores: AbilityScores) -> dict[str, int]:
    """Modifier for each of the six abilities."""
    return {name: ability_modifier(getattr(scores, name)) for name in ABILITY_NAMES}


def format_modifier(mod: int) -> str:
    """Signed display form: +2, +0, -1."""
    return f"+{mod}" if mod >= 0 else str(mod)


def initiative_bonus(scores: AbilityScores, override: int | None = None) -> int:
    """Initiative is the dexterity modifier unless the sheet overrides it."""
    if override is not None:
        return override
    return ability_modifier(scores.dexterity)
