"""A compressed progression for fast playtesting: cheap prestige, low win threshold."""
from __future__ import annotations

from clickerengine.definition import GameConfig


def define_game() -> GameConfig:
    return GameConfig(
        name="Quick Clicker",
        timer_duration=0.5,
        multiplier_thresholds=(4, 8, 12, 16),
        cashout_costs=(300, 3_000),
        win_threshold=20_000,
        skip_welcome=True,
    )
