"""Tests for src/roll_with_it/mechanics/roller.py."""
from __future__ import annotations

import logging
import random
import threading

import pytest

from roll_with_it.mechanics.roller import DEFAULT_HISTORY_SIZE, DiceRoller, RollHistory
from roll_with_it.models.roll import DieType, RollMode, RollOutcome, RollSpecification


def _outcome(value: int) -> RollOutcome:
    return RollOutcome(die_type=DieType.D20, count=1, kept_values=(value,))


class TestRollHistory:
    def test_default_capacity(self):
        assert RollHistory().max_size == DEFAULT_HISTORY_SIZE == 50

    @pytest.mark.parametrize("size", [0, -3])
    def test_invalid_capacity(self, size):
        with pytest.raises(ValueError):
            RollHistory(max_size=size)

    def test_most_recent_first(self):
        history = RollHistory()
        for v in (1, 2, 3):
            history.record(_outcome(v))
        assert [o.kept_values[0] for o in history.entries] == [3, 2, 1]
        assert history.latest.kept_values == (3,)

    def test_evicts_oldest(self):
        history = RollHistory(max_size=3)
        for v in range(1, 6):
            history.record(_outcome(v))
        assert [o.kept_values[0] for o in history] == [5, 4, 3]

    def test_entries_is_a_snapshot(self):
        history = RollHistory()
        history.record(_outcome(4))
        snapshot = history.entries
        snapshot.clear()
        assert len(history) == 1

    def test_clear(self):
        history = RollHistory()
        history.record(_outcome(4))
        history.clear()
        assert len(history) == 0
        assert history.latest is None

    def test_concurrent_records_not_lost(self):
        history = RollHistory(max_size=1000)

        def worker():
            for _ in range(100):
                history.record(_outcome(7))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(history) == 800

    def test_len_while_recording_stays_within_capacity(self):
        history = RollHistory(max_size=10)
        seen: list[int] = []
        done = threading.Event()

        def writer():
            for _ in range(500):
                history.record(_outcome(3))
            done.set()

        def reader():
            while not done.is_set():
                seen.append(len(history))

        threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(0 <= n <= 10 for n in seen)
        assert len(history) == 10


class TestDiceRoller:
    @pytest.mark.parametrize("n, capacity", [(1, 50), (10, 50), (50, 50), (75, 50), (12, 5)])
    def test_history_length(self, n, capacity, seeded_rng):
        roller = DiceRoller(RollHistory(max_size=capacity), rng=seeded_rng)
        spec = RollSpecification(die_type=DieType.D6)
        outcomes = [roller.evaluate(spec) for _ in range(n)]
        assert len(roller.history) == min(n, capacity)
        assert roller.history.entries == list(reversed(outcomes))[:capacity]

    def test_evaluate_returns_recorded_outcome(self, scripted_rng):
        roller = DiceRoller(rng=scripted_rng([3, 17]))
        spec = RollSpecification(die_type=20, modifier=5, mode=RollMode.ADVANTAGE, label="Attack")
        outcome = roller.evaluate(spec)
        assert outcome.total == 22
        assert roller.history.latest is outcome

    def test_clear_history(self, seeded_rng):
        roller = DiceRoller(rng=seeded_rng)
        for _ in range(5):
            roller.evaluate(RollSpecification(die_type=DieType.D8))
        roller.clear_history()
        assert len(roller.history) == 0

    def test_clear_empty_history(self):
        roller = DiceRoller()
        roller.clear_history()
        assert len(roller.history) == 0

    def test_injected_history_is_used(self):
        history = RollHistory(max_size=2)
        roller = DiceRoller(history, rng=random.Random(1))
        roller.evaluate(RollSpecification(die_type=DieType.D4))
        assert roller.history is history
        assert len(history) == 1

    def test_separate_rollers_do_not_share_history(self):
        a, b = DiceRoller(), DiceRoller()
        a.evaluate(RollSpecification(die_type=DieType.D6))
        assert len(a.history) == 1
        assert len(b.history) == 0

    def test_failed_evaluate_leaves_history_alone(self):
        roller = DiceRoller()
        bad = RollSpecification.model_construct(
            die_type=DieType.D6, count=0, modifier=0, mode=RollMode.NORMAL, label=None
        )
        with pytest.raises(ValueError):
            roller.evaluate(bad)
        assert len(roller.history) == 0

    def test_logs_each_roll(self, caplog, seeded_rng):
        roller = DiceRoller(rng=seeded_rng)
        with caplog.at_level(logging.DEBUG, logger="roll_with_it.mechanics.roller"):
            roller.evaluate(RollSpecification(die_type=DieType.D6, count=2, modifier=1))
        assert any("2d6+1" in r.getMessage() for r in caplog.records)
