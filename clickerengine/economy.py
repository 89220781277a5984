from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable

from clickerengine._types import (
    U32_MAX,
    U64_MAX,
    saturating_add,
    saturating_mul,
    saturating_pow,
)
from clickerengine.definition import GameConfig
from clickerengine.events import ClicksEmitted

_U64_DIGITS = math.log10(U64_MAX)


def _exact(value: Fraction | float) -> Fraction:
    """Read a float as the decimal it was written as (1.04 is 26/25)."""
    if isinstance(value, float):
        return Fraction(str(value))
    return Fraction(value)


@dataclass
class EconomyState:
    """Process-wide resource counters, written only by the controller."""

    stored_clicks: int = 0
    total_fingers: int = 1
    total_hands: int = 0
    buildings: int = 1

    def reset_cycle(self) -> None:
        """Reinitialize everything except the prestige level."""
        self.stored_clicks = 0
        self.total_fingers = 1
        self.total_hands = 0


@dataclass(frozen=True)
class EconomyStatus:
    """Read-only snapshot of the economy with all derived values."""

    stored_clicks: int
    total_fingers: int
    total_hands: int
    buildings: int
    multiplier: int
    next_multiplier_threshold: int | None
    finger_cost: int
    hand_cost: int
    combine_cost: int
    auto_cost: int
    cashout_cost: int | None


class EconomyModel:
    """Cost, multiplier and prestige formulas over an EconomyState.

    All queries are pure functions of the state passed in; only
    fold() mutates.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.growth = _exact(config.finger_growth)

    # ── Costs ────────────────────────────────────────────────────────

    def finger_cost(self, state: EconomyState) -> int:
        """floor(base * growth^total_fingers), saturating at U64_MAX."""
        base = self.config.finger_base_cost
        n = state.total_fingers
        if base == 0:
            return 0
        # Skip the exact power once the result is clearly past U64_MAX
        if math.log10(base) + n * math.log10(self.growth) > _U64_DIGITS + 1:
            return U64_MAX
        cost = base * self.growth.numerator**n // self.growth.denominator**n
        return min(cost, U64_MAX)

    def hand_cost(self, state: EconomyState) -> int:
        step = saturating_mul(state.total_hands, self.config.hand_cost_step)
        return saturating_add(step, self.config.hand_base_cost)

    def combine_cost(self) -> int:
        return self.config.combine_cost

    def auto_cost(self) -> int:
        return self.config.auto_cost

    def cashout_cost(self, state: EconomyState) -> int | None:
        """Cost of the next prestige, or None once the table is exhausted."""
        index = state.buildings - 1
        if 0 <= index < len(self.config.cashout_costs):
            return self.config.cashout_costs[index]
        return None

    # ── Multiplier ───────────────────────────────────────────────────

    def thresholds_reached(self, state: EconomyState) -> int:
        return sum(1 for t in self.config.multiplier_thresholds if state.total_fingers >= t)

    def multiplier(self, state: EconomyState) -> int:
        doublings = saturating_pow(2, self.thresholds_reached(state))
        prestige = saturating_pow(10, state.buildings - 1)
        return saturating_mul(doublings, prestige)

    def next_multiplier_threshold(self, state: EconomyState) -> int | None:
        for threshold in self.config.multiplier_thresholds:
            if state.total_fingers < threshold:
                return threshold
        return None

    # ── Accumulation ─────────────────────────────────────────────────

    def fold(self, state: EconomyState, events: Iterable[ClicksEmitted]) -> int:
        """Add every event into stored_clicks. Returns the total folded."""
        total = 0
        for event in events:
            total = saturating_add(total, event.amount)
        state.stored_clicks = saturating_add(state.stored_clicks, total)
        return total

    def has_won(self, state: EconomyState) -> bool:
        return state.stored_clicks >= self.config.win_threshold

    def next_building(self, state: EconomyState) -> int:
        return min(state.buildings + 1, U32_MAX)

    def status(self, state: EconomyState) -> EconomyStatus:
        return EconomyStatus(
            stored_clicks=state.stored_clicks,
            total_fingers=state.total_fingers,
            total_hands=state.total_hands,
            buildings=state.buildings,
            multiplier=self.multiplier(state),
            next_multiplier_threshold=self.next_multiplier_threshold(state),
            finger_cost=self.finger_cost(state),
            hand_cost=self.hand_cost(state),
            combine_cost=self.combine_cost(),
            auto_cost=self.auto_cost(),
            cashout_cost=self.cashout_cost(state),
        )
