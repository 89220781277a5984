from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from clickerengine._types import compare
from clickerengine.snapshot import GameSnapshot, Phase


@dataclass
class SimulationContext:
    """Extra context available to terminal conditions during simulation."""

    last_purchase_time: float = 0.0
    total_purchases: int = 0


class TerminalCondition(ABC):
    """Base class for simulation stopping conditions."""

    @abstractmethod
    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...


class _TimeTerminal(TerminalCondition):
    def __init__(self, seconds: float) -> None:
        self.seconds = seconds

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return snapshot.time_elapsed >= self.seconds

    def describe(self) -> str:
        return f"time({self.seconds})"


class _FinishedTerminal(TerminalCondition):
    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return snapshot.phase is Phase.FINISHED

    def describe(self) -> str:
        return "finished()"


class _ClicksTerminal(TerminalCondition):
    def __init__(self, op: str, threshold: int) -> None:
        self.op = op
        self.threshold = threshold

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return compare(snapshot.economy.stored_clicks, self.op, self.threshold)

    def describe(self) -> str:
        return f'clicks("{self.op}", {self.threshold})'


class _BuildingsTerminal(TerminalCondition):
    def __init__(self, level: int) -> None:
        self.level = level

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return snapshot.economy.buildings >= self.level

    def describe(self) -> str:
        return f"buildings({self.level})"


class _StallTerminal(TerminalCondition):
    def __init__(self, max_idle_seconds: float) -> None:
        self.max_idle_seconds = max_idle_seconds

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        if context is None:
            return False
        gap = snapshot.time_elapsed - context.last_purchase_time
        return gap >= self.max_idle_seconds

    def describe(self) -> str:
        return f"stall({self.max_idle_seconds})"


class _AnyTerminal(TerminalCondition):
    def __init__(self, conditions: list[TerminalCondition]) -> None:
        self.conditions = conditions

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return any(c.is_met(snapshot, context) for c in self.conditions)

    def describe(self) -> str:
        return " OR ".join(c.describe() for c in self.conditions)


class _AllTerminal(TerminalCondition):
    def __init__(self, conditions: list[TerminalCondition]) -> None:
        self.conditions = conditions

    def is_met(self, snapshot: GameSnapshot, context: SimulationContext | None = None) -> bool:
        return all(c.is_met(snapshot, context) for c in self.conditions)

    def describe(self) -> str:
        return " AND ".join(c.describe() for c in self.conditions)


class Terminal:
    """Factory for built-in terminal conditions."""

    @staticmethod
    def time(seconds: float) -> TerminalCondition:
        return _TimeTerminal(seconds)

    @staticmethod
    def finished() -> TerminalCondition:
        return _FinishedTerminal()

    @staticmethod
    def clicks(op: str, threshold: int) -> TerminalCondition:
        return _ClicksTerminal(op, threshold)

    @staticmethod
    def buildings(level: int) -> TerminalCondition:
        return _BuildingsTerminal(level)

    @staticmethod
    def stall(max_idle_seconds: float = 600) -> TerminalCondition:
        return _StallTerminal(max_idle_seconds)

    @staticmethod
    def any(*conditions: TerminalCondition) -> TerminalCondition:
        return _AnyTerminal(list(conditions))

    @staticmethod
    def all(*conditions: TerminalCondition) -> TerminalCondition:
        return _AllTerminal(list(conditions))
