"""Shared fixtures for the roll_with_it test suite."""
from __future__ import annotations

import logging
import random

import pytest

from roll_with_it.models.character import AbilityScores


STANDARD_SCORES = {
    "strength": 15, "dexterity": 14, "constitution": 13,
    "intelligence": 12, "wisdom": 10, "charisma": 8,
}


class ScriptedRandom:
    """Stands in for random.Random; randint() returns a fixed sequence of values."""

    def __init__(self, values: list[int]):
        self._values = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def sample_ability_scores() -> AbilityScores:
    return AbilityScores(**STANDARD_SCORES)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
