"""Stateful roller that owns a bounded, most-recent-first roll history."""
from __future__ import annotations

import logging
import random
import threading

from roll_with_it.mechanics.dice import perform_roll
from roll_with_it.models.roll import RollOutcome, RollSpecification

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 50


class RollHistory:
    """Bounded log of roll outcomes, newest first.

    Appending and truncating happen under one lock so a history shared by
    several callers never drops an update.
    """

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"History size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._entries: list[RollOutcome] = []
        self._lock = threading.Lock()

    def record(self, outcome: RollOutcome) -> None:
        with self._lock:
            self._entries = [outcome, *self._entries][: self.max_size]

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    @property
    def entries(self) -> list[RollOutcome]:
        """Snapshot of the log, most recent first."""
        with self._lock:
            return list(self._entries)

    @property
    def latest(self) -> RollOutcome | None:
        with self._lock:
            return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self):
        return iter(self.entries)


class DiceRoller:
    """Evaluates roll specifications and records every outcome."""

    def __init__(self, history: RollHistory | None = None, rng: random.Random | None = None) -> None:
        self.history = history if history is not None else RollHistory()
        self.rng = rng or random.Random()

    def evaluate(self, spec: RollSpecification) -> RollOutcome:
        outcome = perform_roll(spec, self.rng)
        self.history.record(outcome)
        logger.debug(
            "Rolled %s (%s): kept=%s discarded=%s total=%d",
            outcome.notation, outcome.mode.value,
            list(outcome.kept_values), list(outcome.discarded_values), outcome.total,
        )
        return outcome

    def clear_history(self) -> None:
        self.history.clear()
        logger.info("Roll history cleared.")
