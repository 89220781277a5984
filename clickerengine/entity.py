from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from clickerengine._types import ClickerId, HandId
from clickerengine.timer import CooldownTimer


class HandState(Enum):
    FILLING = auto()
    COMBINED = auto()
    AUTOED = auto()


@dataclass
class Hand:
    """Producer group owning an ordered list of Clickers."""

    id: HandId
    state: HandState = HandState.FILLING
    clickers: list[ClickerId] = field(default_factory=list)
    clap_timer: CooldownTimer = field(default_factory=CooldownTimer)

    @property
    def clapping(self) -> bool:
        """Whether the clap timer is live (Combined or Autoed)."""
        return self.state is not HandState.FILLING


@dataclass
class Clicker:
    """Leaf producer activated manually once its cooldown elapses."""

    id: ClickerId
    hand: HandId
    per_click: int = 1
    timer: CooldownTimer = field(default_factory=CooldownTimer)


@dataclass(frozen=True)
class ClickerStatus:
    """Read-only snapshot of a Clicker."""

    id: ClickerId
    hand: HandId
    per_click: int
    progress: float
    ready: bool


@dataclass(frozen=True)
class HandStatus:
    """Read-only snapshot of a Hand and its Clickers."""

    id: HandId
    state: HandState
    clap_progress: float
    clap_ready: bool
    clickers: tuple[ClickerStatus, ...]

    @property
    def clicker_ids(self) -> tuple[ClickerId, ...]:
        return tuple(c.id for c in self.clickers)
