from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickerengine.snapshot import Phase

if TYPE_CHECKING:
    from clickerengine.controller import TickResult
    from clickerengine.snapshot import GameSnapshot

# Intents that spend stored clicks
PURCHASE_ACTIONS = ("BuyFinger", "CombineHand", "MakeAuto", "BuyHand")


@dataclass
class EconomySample:
    time: float
    stored_clicks: int
    multiplier: int
    total_fingers: int
    total_hands: int
    buildings: int
    hands: int
    clickers: int


@dataclass
class PurchaseEvent:
    time: float
    action: str
    cost: int
    stored_end_of_tick: int


@dataclass
class PrestigeEvent:
    time: float
    buildings: int
    cost: int
    run_duration: float


class MetricsCollector:
    """Collects simulation metrics at configurable intervals."""

    def __init__(self, snapshot_interval: float = 1.0) -> None:
        self.snapshot_interval = snapshot_interval
        self._last_snapshot_time: float = -1.0
        self._run_started: float = 0.0

        self.samples: list[EconomySample] = []
        self.purchases: list[PurchaseEvent] = []
        self.prestiges: list[PrestigeEvent] = []
        self.rejections: dict[str, int] = {}
        self.clicks_emitted: int = 0
        self.finish_time: float | None = None

    def record_tick(self, snapshot: GameSnapshot, result: TickResult) -> None:
        """Record one tick's outcomes, plus a sample if enough time has passed."""
        for action in result.results:
            name = type(action.intent).__name__
            if not action.success:
                reason = action.reason.name
                self.rejections[reason] = self.rejections.get(reason, 0) + 1
            elif name in PURCHASE_ACTIONS:
                self.purchases.append(
                    PurchaseEvent(
                        time=snapshot.time_elapsed,
                        action=name,
                        cost=action.cost,
                        stored_end_of_tick=snapshot.economy.stored_clicks,
                    )
                )
            elif name == "Cashout":
                self.prestiges.append(
                    PrestigeEvent(
                        time=snapshot.time_elapsed,
                        buildings=snapshot.economy.buildings,
                        cost=action.cost,
                        run_duration=snapshot.time_elapsed - self._run_started,
                    )
                )
                self._run_started = snapshot.time_elapsed

        self.clicks_emitted += result.folded

        if self.finish_time is None and snapshot.phase is Phase.FINISHED:
            self.finish_time = snapshot.time_elapsed

        if snapshot.time_elapsed - self._last_snapshot_time >= self.snapshot_interval:
            self._take_sample(snapshot)
            self._last_snapshot_time = snapshot.time_elapsed

    def _take_sample(self, snapshot: GameSnapshot) -> None:
        eco = snapshot.economy
        self.samples.append(
            EconomySample(
                time=snapshot.time_elapsed,
                stored_clicks=eco.stored_clicks,
                multiplier=eco.multiplier,
                total_fingers=eco.total_fingers,
                total_hands=eco.total_hands,
                buildings=eco.buildings,
                hands=len(snapshot.hands),
                clickers=snapshot.clicker_count,
            )
        )
