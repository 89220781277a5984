from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.intent import Intent


class Rejection(Enum):
    """Why an intent was turned down. Every rejection leaves state unchanged."""

    INSUFFICIENT_RESOURCE = auto()
    ENTITY_NOT_FOUND = auto()
    TIMER_NOT_READY = auto()
    PRESTIGE_EXHAUSTED = auto()
    WRONG_STATE = auto()
    NOT_STARTED = auto()
    GAME_FINISHED = auto()
    UNKNOWN_INTENT = auto()


class EntityNotFound(KeyError):
    """Raised by the entity store for a stale or never-issued id."""

    def __init__(self, kind: str, entity_id: int) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class InvalidConfig(ValueError):
    """Raised when a GameConfig fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            "Invalid GameConfig:\n" + "\n".join(f"  - {e}" for e in errors)
        )
        self.errors = errors


@dataclass(frozen=True)
class ActionResult:
    """Outcome of applying one intent."""

    intent: Intent
    success: bool
    reason: Rejection | None = None
    cost: int = 0
    amount: int = 0

    @classmethod
    def ok(cls, intent: Intent, cost: int = 0, amount: int = 0) -> ActionResult:
        return cls(intent=intent, success=True, cost=cost, amount=amount)

    @classmethod
    def rejected(cls, intent: Intent, reason: Rejection) -> ActionResult:
        return cls(intent=intent, success=False, reason=reason)
