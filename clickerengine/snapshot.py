from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from clickerengine._types import ClickerId, HandId
from clickerengine.economy import EconomyStatus
from clickerengine.entity import HandStatus


class Phase(Enum):
    WELCOME = auto()
    RUNNING = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class GameSnapshot:
    """Consistent read-only view of progression state between ticks."""

    phase: Phase
    time_elapsed: float
    economy: EconomyStatus
    hands: tuple[HandStatus, ...]
    message: str = ""

    def get_hand(self, hand_id: HandId) -> HandStatus | None:
        for hand in self.hands:
            if hand.id == hand_id:
                return hand
        return None

    @property
    def clicker_count(self) -> int:
        return sum(len(h.clickers) for h in self.hands)

    def find_clicker_hand(self, clicker_id: ClickerId) -> HandId | None:
        for hand in self.hands:
            if clicker_id in hand.clicker_ids:
                return hand.id
        return None
