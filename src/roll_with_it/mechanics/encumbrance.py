"""Carrying capacity and encumbrance — pure math, no I/O."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from roll_with_it.models.character import InventoryItem


class EncumbranceLevel(str, Enum):
    NORMAL = "normal"
    ENCUMBERED = "encumbered"
    HEAVILY_ENCUMBERED = "heavily_encumbered"
    OVER_CAPACITY = "over_capacity"


# Speed reduction in feet for each level; None means the character cannot move.
SPEED_PENALTIES: dict[EncumbranceLevel, int | None] = {
    EncumbranceLevel.NORMAL: 0,
    EncumbranceLevel.ENCUMBERED: 10,
    EncumbranceLevel.HEAVILY_ENCUMBERED: 20,
    EncumbranceLevel.OVER_CAPACITY: None,
}


@dataclass
class EncumbranceStatus:
    level: EncumbranceLevel
    carried: float
    capacity: int
    speed_penalty: int | None
    percent_carried: float


def carrying_capacity(strength: int) -> int:
    """Maximum weight in pounds."""
    return strength * 15


def encumbered_threshold(strength: int) -> int:
    return strength * 5


def heavily_encumbered_threshold(strength: int) -> int:
    return strength * 10


def total_carried_weight(items: Iterable[InventoryItem]) -> float:
    """Sum of weight x quantity. Items without a weight count as nothing."""
    return sum((item.weight or 0) * item.quantity for item in items)


def encumbrance_status(carried: float, strength: int) -> EncumbranceStatus:
    """Classify a carried weight against the strength-based thresholds.

    Each threshold must be exceeded, not merely reached.
    """
    capacity = carrying_capacity(strength)
    if carried > capacity:
        level = EncumbranceLevel.OVER_CAPACITY
    elif carried > heavily_encumbered_threshold(strength):
        level = EncumbranceLevel.HEAVILY_ENCUMBERED
    elif carried > encumbered_threshold(strength):
        level = EncumbranceLevel.ENCUMBERED
    else:
        level = EncumbranceLevel.NORMAL

    if capacity > 0:
        percent = min(carried / capacity * 100, 100.0)
    else:
        percent = 100.0 if carried > 0 else 0.0

    return EncumbranceStatus(
        level=level,
        carried=carried,
        capacity=capacity,
        speed_penalty=SPEED_PENALTIES[level],
        percent_carried=percent,
    )


def format_weight(weight: float) -> str:
    """'1 lb', '12 lbs', '2.5 lbs'."""
    return f"{weight:g} lb{'' if weight == 1 else 's'}"
