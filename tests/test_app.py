"""Tests for src/roll_with_it/app.py — config loading and sessions."""
from __future__ import annotations

import logging

import pytest

from roll_with_it.app import RollSession, configure_logging, load_config
from roll_with_it.models.roll import DieType, RollSpecification


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_reads_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[dice]\nhistory_size = 5\nseed = 9\n\n[display]\nshow_discarded = false\n')
        cfg = load_config(path)
        assert cfg["dice"] == {"history_size": 5, "seed": 9}
        assert cfg["display"]["show_discarded"] is False

    def test_project_config_loads(self):
        cfg = load_config()
        assert cfg.get("dice", {}).get("history_size", 50) == 50


class TestRollSession:
    def test_defaults(self):
        session = RollSession.from_config({})
        assert session.history.max_size == 50
        assert session.show_discarded is True
        assert session.roller.history is session.history

    def test_from_config(self):
        session = RollSession.from_config(
            {"dice": {"history_size": 3}, "display": {"show_discarded": False, "width": 60}}
        )
        assert session.history.max_size == 3
        assert session.display.show_discarded is False
        assert session.display.width == 60

    def test_seed_makes_rolls_repeatable(self):
        spec = RollSpecification(die_type=DieType.D20, count=5)
        a = RollSession.from_config({"dice": {"seed": 1234}}).roller.evaluate(spec)
        b = RollSession.from_config({"dice": {"seed": 1234}}).roller.evaluate(spec)
        assert a.kept_values == b.kept_values

    def test_explicit_seed_overrides_config(self):
        spec = RollSpecification(die_type=DieType.D100, count=5)
        a = RollSession.from_config({"dice": {"seed": 1}}, seed=2).roller.evaluate(spec)
        b = RollSession(seed=2).roller.evaluate(spec)
        assert a.kept_values == b.kept_values

    def test_invalid_history_size(self):
        with pytest.raises(ValueError):
            RollSession.from_config({"dice": {"history_size": 0}})


class TestConfigureLogging:
    def test_level_from_config(self, restore_root_logger):
        configure_logging({"logging": {"level": "info"}})
        assert restore_root_logger.level == logging.INFO
        assert len(restore_root_logger.handlers) == 1

    def test_verbose_forces_debug(self, restore_root_logger):
        configure_logging({"logging": {"level": "ERROR"}}, verbose=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back(self, restore_root_logger):
        configure_logging({"logging": {"level": "chatty"}})
        assert restore_root_logger.level == logging.WARNING
