"""Skill and saving throw bonuses — pure math, no I/O."""
from __future__ import annotations

from roll_with_it.mechanics.ability_scores import ability_modifier
from roll_with_it.models.character import Ability, AbilityScores
from roll_with_it.models.roll import DieType, RollMode, RollSpecification

SKILL_ABILITY_MAP: dict[str, Ability] = {
    "acrobatics": Ability.DEXTERITY,
    "animal_handling": Ability.WISDOM,
    "arcana": Ability.INTELLIGENCE,
    "athletics": Ability.STRENGTH,
    "deception": Ability.CHARISMA,
    "history": Ability.INTELLIGENCE,
    "insight": Ability.WISDOM,
    "intimidation": Ability.CHARISMA,
    "investigation": Ability.INTELLIGENCE,
    "medicine": Ability.WISDOM,
    "nature": Ability.INTELLIGENCE,
    "perception": Ability.WISDOM,
    "performance": Ability.CHARISMA,
    "persuasion": Ability.CHARISMA,
    "religion": Ability.INTELLIGENCE,
    "sleight_of_hand": Ability.DEXTERITY,
    "stealth": Ability.DEXTERITY,
    "survival": Ability.WISDOM,
}


def _skill_ability(skill: str) -> Ability:
    try:
        return SKILL_ABILITY_MAP[skill]
    except KeyError:
        raise ValueError(f"Unknown skill: {skill!r}") from None


def skill_display_name(skill: str) -> str:
    """'sleight_of_hand' -> 'Sleight of Hand'."""
    _skill_ability(skill)
    words = skill.split("_")
    return " ".join(w if w == "of" else w.capitalize() for w in words)


def skill_bonus(
    scores: AbilityScores,
    skill: str,
    proficiency_bonus: int,
    is_proficient: bool = False,
    has_expertise: bool = False,
) -> int:
    """Ability modifier plus proficiency; expertise doubles the proficiency."""
    bonus = ability_modifier(scores.score(_skill_ability(skill)))
    if has_expertise:
        bonus += proficiency_bonus * 2
    elif is_proficient:
        bonus += proficiency_bonus
    return bonus


def saving_throw_bonus(
    scores: AbilityScores,
    ability: Ability | str,
    proficiency_bonus: int,
    is_proficient: bool = False,
) -> int:
    bonus = ability_modifier(scores.score(ability))
    if is_proficient:
        bonus += proficiency_bonus
    return bonus


def passive_score(
    scores: AbilityScores,
    skill: str,
    proficiency_bonus: int,
    is_proficient: bool = False,
    has_expertise: bool = False,
) -> int:
    """Calculate passive skill score (e.g., passive Perception)."""
    return 10 + skill_bonus(scores, skill, proficiency_bonus, is_proficient, has_expertise)


# -- Ready-made d20 roll specifications --

def ability_check_spec(
    scores: AbilityScores, ability: Ability | str, mode: RollMode = RollMode.NORMAL
) -> RollSpecification:
    ability = Ability(ability)
    return RollSpecification(
        die_type=DieType.D20,
        modifier=ability_modifier(scores.score(ability)),
        mode=mode,
        label=f"{ability.value.capitalize()} Check",
    )


def saving_throw_spec(
    scores: AbilityScores,
    ability: Ability | str,
    proficiency_bonus: int,
    is_proficient: bool = False,
    mode: RollMode = RollMode.NORMAL,
) -> RollSpecification:
    ability = Ability(ability)
    return RollSpecification(
        die_type=DieType.D20,
        modifier=saving_throw_bonus(scores, ability, proficiency_bonus, is_proficient),
        mode=mode,
        label=f"{ability.value.capitalize()} Save",
    )


def skill_check_spec(
    scores: AbilityScores,
    skill: str,
    proficiency_bonus: int,
    is_proficient: bool = False,
    has_expertise: bool = False,
    mode: RollMode = RollMode.NORMAL,
) -> RollSpecification:
    return RollSpecification(
        die_type=DieType.D20,
        modifier=skill_bonus(scores, skill, proficiency_bonus, is_proficient, has_expertise),
        mode=mode,
        label=f"{skill_display_name(skill)} Check",
    )
