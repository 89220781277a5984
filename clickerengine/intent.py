from __future__ import annotations

from dataclasses import dataclass

from clickerengine._types import ClickerId, HandId


class Intent:
    """Base class for player action requests."""


@dataclass(frozen=True)
class Start(Intent):
    pass


@dataclass(frozen=True)
class BuyFinger(Intent):
    hand_id: HandId


@dataclass(frozen=True)
class CombineHand(Intent):
    hand_id: HandId


@dataclass(frozen=True)
class Click(Intent):
    hand_id: HandId
    clicker_id: ClickerId


@dataclass(frozen=True)
class MakeAuto(Intent):
    hand_id: HandId


@dataclass(frozen=True)
class Clap(Intent):
    hand_id: HandId


@dataclass(frozen=True)
class BuyHand(Intent):
    pass


@dataclass(frozen=True)
class Cashout(Intent):
    pass
