from __future__ import annotations

import itertools
from typing import Iterator

from clickerengine._types import ClickerId, HandId
from clickerengine.entity import Clicker, Hand, HandState
from clickerengine.errors import EntityNotFound
from clickerengine.timer import CooldownTimer


class EntityStore:
    """Arenas of Hands and Clickers keyed by opaque ids.

    Ids are never reused, so an id that outlives its entity always fails
    lookup with EntityNotFound. A Hand owns its Clickers; a Clicker only
    records the id of its Hand.
    """

    def __init__(self, timer_duration: float = 1.0) -> None:
        self.timer_duration = timer_duration
        self._hands: dict[HandId, Hand] = {}
        self._clickers: dict[ClickerId, Clicker] = {}
        self._hand_ids = itertools.count(1)
        self._clicker_ids = itertools.count(1)

    # ── Creation / destruction ───────────────────────────────────────

    def create_hand(self) -> HandId:
        hand_id = HandId(next(self._hand_ids))
        self._hands[hand_id] = Hand(
            id=hand_id, clap_timer=CooldownTimer(self.timer_duration)
        )
        return hand_id

    def create_clicker(self, parent: HandId) -> ClickerId:
        hand = self.get_hand(parent)
        clicker_id = ClickerId(next(self._clicker_ids))
        self._clickers[clicker_id] = Clicker(
            id=clicker_id, hand=parent, timer=CooldownTimer(self.timer_duration)
        )
        hand.clickers.append(clicker_id)
        return clicker_id

    def destroy_hand(self, hand_id: HandId) -> None:
        hand = self.get_hand(hand_id)
        for clicker_id in hand.clickers:
            del self._clickers[clicker_id]
        del self._hands[hand_id]

    def clear(self) -> None:
        """Destroy every Hand, and with them every Clicker."""
        for hand_id in list(self._hands):
            self.destroy_hand(hand_id)

    # ── Lookup ───────────────────────────────────────────────────────

    def get_hand(self, hand_id: HandId) -> Hand:
        hand = self._hands.get(hand_id)
        if hand is None:
            raise EntityNotFound("Hand", hand_id)
        return hand

    def get_clicker(self, clicker_id: ClickerId) -> Clicker:
        clicker = self._clickers.get(clicker_id)
        if clicker is None:
            raise EntityNotFound("Clicker", clicker_id)
        return clicker

    def children_of(self, hand_id: HandId) -> tuple[ClickerId, ...]:
        return tuple(self.get_hand(hand_id).clickers)

    def set_state(self, hand_id: HandId, new_state: HandState) -> None:
        self.get_hand(hand_id).state = new_state

    def hands(self) -> Iterator[Hand]:
        """Live Hands in creation order."""
        return iter(list(self._hands.values()))

    def clickers(self) -> Iterator[Clicker]:
        return iter(list(self._clickers.values()))

    def has_hand(self, hand_id: HandId) -> bool:
        return hand_id in self._hands

    def has_clicker(self, clicker_id: ClickerId) -> bool:
        return clicker_id in self._clickers

    @property
    def hand_count(self) -> int:
        return len(self._hands)

    @property
    def clicker_count(self) -> int:
        return len(self._clickers)
