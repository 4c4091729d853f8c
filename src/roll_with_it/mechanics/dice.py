"""Dice rolling engine — pure math, no I/O."""
from __future__ import annotations

import random
import re

from roll_with_it.models.roll import DieType, RollMode, RollOutcome, RollSpecification

# Pattern: NdM or dM, optional +/-X
_DICE_RE = re.compile(
    r"^(\d*)d(\d+)"
    r"([+-]\d+)?$",
    re.IGNORECASE,
)


def die_max(die_type: DieType | int | str) -> int:
    """Highest face on the given die."""
    return int(DieType.parse(die_type))


def format_notation(die_type: DieType | int | str, count: int, modifier: int = 0) -> str:
    """Format a roll as notation, e.g. '2d6+3', '1d20', '1d8-1'."""
    text = f"{count}{DieType.parse(die_type).label}"
    if modifier > 0:
        text += f"+{modifier}"
    elif modifier < 0:
        text += str(modifier)
    return text


def parse_notation(
    expression: str,
    mode: RollMode = RollMode.NORMAL,
    label: str | None = None,
) -> RollSpecification:
    """Build a RollSpecification from notation like '2d6+3', 'd20', '1d8 - 1'."""
    expr = expression.replace(" ", "")
    m = _DICE_RE.match(expr)
    if not m:
        raise ValueError(f"Invalid dice expression: {expression}")

    count = int(m.group(1)) if m.group(1) else 1
    modifier = int(m.group(3)) if m.group(3) else 0
    return RollSpecification(
        die_type=DieType.parse(m.group(2)),
        count=count,
        modifier=modifier,
        mode=RollMode(mode),
        label=label,
    )


def roll_dice(die_type: DieType, count: int, rng: random.Random) -> list[int]:
    """Draw `count` independent values in [1, faces]."""
    return [rng.randint(1, int(die_type)) for _ in range(count)]


def _check_spec(spec: RollSpecification) -> None:
    # Specs built with model_construct() skip validation.
    if spec.count < 1:
        raise ValueError(f"Dice count must be at least 1, got {spec.count}")


def perform_roll(spec: RollSpecification, rng: random.Random | None = None) -> RollOutcome:
    """Evaluate a roll specification.

    Advantage and disadvantage only apply to d20 rolls: the whole set is rolled
    twice and the set with the higher (or lower) sum is kept. On a tie the
    first set is kept. Any other die ignores the mode.
    """
    _check_spec(spec)
    rng = rng or random.Random()
    die_type = DieType.parse(spec.die_type)
    mode = RollMode(spec.mode)

    discarded: list[int] = []
    if mode is not RollMode.NORMAL and die_type is DieType.D20:
        first = roll_dice(die_type, spec.count, rng)
        second = roll_dice(die_type, spec.count, rng)
        if mode is RollMode.ADVANTAGE:
            keep_first = sum(first) >= sum(second)
        else:
            keep_first = sum(first) <= sum(second)
        kept, discarded = (first, second) if keep_first else (second, first)
    else:
        kept = roll_dice(die_type, spec.count, rng)

    return RollOutcome(
        die_type=die_type,
        count=spec.count,
        modifier=spec.modifier,
        mode=mode,
        kept_values=tuple(kept),
        discarded_values=tuple(discarded),
        label=spec.label,
    )


def average_roll(spec: RollSpecification) -> float:
    """Expected total of a roll, ignoring advantage/disadvantage."""
    return spec.count * (int(spec.die_type) + 1) / 2 + spec.modifier
