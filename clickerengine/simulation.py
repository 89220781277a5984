from __future__ import annotations

import logging

from clickerengine.controller import ProgressionController
from clickerengine.definition import GameConfig
from clickerengine.metrics import PURCHASE_ACTIONS, MetricsCollector
from clickerengine.report import SimulationReport, build_report
from clickerengine.snapshot import Phase
from clickerengine.strategy import Strategy
from clickerengine.terminal import SimulationContext, TerminalCondition

logger = logging.getLogger(__name__)

MAX_TICKS = 10_000_000


class Simulation:
    """Orchestrates a headless run of the progression engine."""

    def __init__(
        self,
        config: GameConfig,
        strategy: Strategy,
        terminal: TerminalCondition,
        tick_resolution: float = 0.1,
        snapshot_interval: float = 1.0,
        max_ticks: int = MAX_TICKS,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be positive, got {tick_resolution!r}")
        self.config = config
        self.strategy = strategy
        self.terminal = terminal
        self.tick_resolution = tick_resolution
        self.max_ticks = max_ticks

        self.controller = ProgressionController(config)
        self.collector = MetricsCollector(snapshot_interval=snapshot_interval)
        self.context = SimulationContext()

    def run(self) -> SimulationReport:
        snapshot = self.controller.snapshot()
        tick_count = 0

        while not self.terminal.is_met(snapshot, self.context):
            if snapshot.phase is Phase.FINISHED:
                break
            tick_count += 1
            if tick_count > self.max_ticks:
                break

            # 1. Decide from the previous tick's snapshot
            intents = self.strategy.decide(snapshot)

            # 2. Advance one frame
            result = self.controller.tick(self.tick_resolution, intents)
            snapshot = self.controller.snapshot()

            # 3. Record metrics
            for action in result.accepted:
                if type(action.intent).__name__ in PURCHASE_ACTIONS:
                    self.context.last_purchase_time = snapshot.time_elapsed
                    self.context.total_purchases += 1
            self.collector.record_tick(snapshot, result)

        if self.terminal.is_met(snapshot, self.context):
            outcome = "Terminal condition met"
        elif snapshot.phase is Phase.FINISHED:
            outcome = "Game finished"
        else:
            outcome = "Max ticks reached"
        logger.info("Simulation ended after %d ticks: %s", tick_count, outcome)
        return self._build_report(outcome)

    def _build_report(self, outcome: str) -> SimulationReport:
        return build_report(
            collector=self.collector,
            strategy_description=self.strategy.describe(),
            terminal_description=self.terminal.describe(),
            outcome=outcome,
            total_time=self.controller.time_elapsed,
        )
