"""Application bootstrap: config loading and the per-session roller."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

from roll_with_it.mechanics.roller import DEFAULT_HISTORY_SIZE, DiceRoller, RollHistory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config.toml from the project root, or from `path` if given."""
    import tomllib

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    logger.debug("No config at %s, using defaults.", config_path)
    return {}


def configure_logging(config: dict[str, Any], verbose: bool = False) -> None:
    """Install a RichHandler on the root logger."""
    from rich.logging import RichHandler

    level_name = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    root.setLevel(level)


class RollSession:
    """One user's dice session: a roller, its history, and display settings."""

    def __init__(
        self,
        history_size: int = DEFAULT_HISTORY_SIZE,
        seed: int | None = None,
        show_discarded: bool = True,
        width: int = 80,
    ) -> None:
        self.history = RollHistory(max_size=history_size)
        self.roller = DiceRoller(history=self.history, rng=random.Random(seed))
        self.show_discarded = show_discarded
        self.width = width
        self._display = None

    @classmethod
    def from_config(cls, config: dict[str, Any], seed: int | None = None) -> RollSession:
        dice_cfg = config.get("dice", {})
        disp_cfg = config.get("display", {})
        return cls(
            history_size=int(dice_cfg.get("history_size", DEFAULT_HISTORY_SIZE)),
            seed=seed if seed is not None else dice_cfg.get("seed"),
            show_discarded=bool(disp_cfg.get("show_discarded", True)),
            width=int(disp_cfg.get("width", 80)),
        )

    @property
    def display(self):
        if self._display is None:
            from roll_with_it.cli.display import Display

            self._display = Display(width=self.width, show_discarded=self.show_discarded)
        return self._display
