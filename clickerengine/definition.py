from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction


@dataclass
class GameConfig:
    """Every tunable constant of the progression engine."""

    name: str = "Clicker"
    timer_duration: float = 1.0

    finger_base_cost: int = 10
    # Kept exact so finger costs are floor(base * growth**n) to the unit
    finger_growth: Fraction | float = Fraction(26, 25)
    hand_base_cost: int = 10
    hand_cost_step: int = 10
    combine_cost: int = 30
    auto_cost: int = 60

    # Each threshold reached by total_fingers doubles the multiplier
    multiplier_thresholds: tuple[int, ...] = (40, 80, 100, 150, 200, 300, 400, 500)
    # Indexed by buildings - 1; past the end no further cashout is offered
    cashout_costs: tuple[int, ...] = (1_000, 25_000, 500_000, 10_000_000)
    win_threshold: int = 1_000_000_000
    win_message: str = "Congratulations! You built the clicker empire."

    cashout_zeroes_balance: bool = False
    skip_welcome: bool = False

    def validate(self) -> list[str]:
        """Check for configuration errors. Returns list of error messages."""
        errors: list[str] = []

        if not math.isfinite(self.timer_duration) or self.timer_duration <= 0:
            errors.append(f"timer_duration must be positive, got {self.timer_duration!r}")
        if self.finger_growth < 1:
            errors.append(f"finger_growth must be >= 1, got {self.finger_growth!r}")

        for attr in (
            "finger_base_cost",
            "hand_base_cost",
            "hand_cost_step",
            "combine_cost",
            "auto_cost",
        ):
            value = getattr(self, attr)
            if value < 0:
                errors.append(f"{attr} must not be negative, got {value!r}")

        for attr in ("multiplier_thresholds", "cashout_costs"):
            table = getattr(self, attr)
            if any(v < 0 for v in table):
                errors.append(f"{attr} contains a negative entry")
            if any(b <= a for a, b in zip(table, table[1:])):
                errors.append(f"{attr} must be strictly ascending, got {table!r}")

        if self.win_threshold <= 0:
            errors.append(f"win_threshold must be positive, got {self.win_threshold!r}")

        return errors
