from __future__ import annotations

from abc import ABC, abstractmethod

from clickerengine.entity import HandState
from clickerengine.intent import (
    BuyFinger,
    BuyHand,
    Cashout,
    Clap,
    Click,
    CombineHand,
    Intent,
    MakeAuto,
    Start,
)
from clickerengine.snapshot import GameSnapshot, Phase


class Strategy(ABC):
    """Base class for automated players used in headless runs."""

    @abstractmethod
    def decide(self, snapshot: GameSnapshot) -> list[Intent]:
        """Return the intents to submit on the next tick."""
        ...

    @abstractmethod
    def describe(self) -> str: ...


class ActiveClicker(Strategy):
    """Click every ready Clicker and clap every ready Hand. Never buys."""

    def decide(self, snapshot: GameSnapshot) -> list[Intent]:
        if snapshot.phase is Phase.WELCOME:
            return [Start()]
        if snapshot.phase is not Phase.RUNNING:
            return []

        intents: list[Intent] = []
        for hand in snapshot.hands:
            if hand.state is HandState.FILLING:
                for clicker in hand.clickers:
                    if clicker.ready:
                        intents.append(Click(hand.id, clicker.id))
            elif hand.state is HandState.COMBINED and hand.clap_ready:
                intents.append(Clap(hand.id))
        return intents

    def describe(self) -> str:
        return "ActiveClicker"


class GreedyProgression(ActiveClicker):
    """Play actively and buy the next step of the progression as soon as possible.

    Each Hand is filled to *fingers_per_hand* Clickers, combined, then
    automated; a new Hand is bought once no Hand is still filling. At
    most one purchase is made per tick.
    """

    def __init__(
        self,
        fingers_per_hand: int = 5,
        prestige_mode: str = "first_opportunity",
    ) -> None:
        if prestige_mode not in ("never", "first_opportunity"):
            raise ValueError(f"Unknown prestige mode: {prestige_mode!r}")
        self.fingers_per_hand = fingers_per_hand
        self.prestige_mode = prestige_mode

    def decide(self, snapshot: GameSnapshot) -> list[Intent]:
        intents = super().decide(snapshot)
        if snapshot.phase is not Phase.RUNNING:
            return intents

        purchase = self._next_purchase(snapshot)
        if purchase is not None:
            intents.append(purchase)
        return intents

    def _next_purchase(self, snapshot: GameSnapshot) -> Intent | None:
        eco = snapshot.economy
        balance = eco.stored_clicks

        if (
            self.prestige_mode == "first_opportunity"
            and eco.cashout_cost is not None
            and balance >= eco.cashout_cost
        ):
            return Cashout()

        filling = False
        for hand in snapshot.hands:
            if hand.state is HandState.FILLING:
                filling = True
                if len(hand.clickers) < self.fingers_per_hand:
                    if balance >= eco.finger_cost:
                        return BuyFinger(hand.id)
                elif balance >= eco.combine_cost:
                    return CombineHand(hand.id)
            elif hand.state is HandState.COMBINED and balance >= eco.auto_cost:
                return MakeAuto(hand.id)

        if not filling and balance >= eco.hand_cost:
            return BuyHand()
        return None

    def describe(self) -> str:
        return (
            f"GreedyProgression(fingers_per_hand={self.fingers_per_hand}, "
            f"prestige={self.prestige_mode})"
        )


STRATEGY_REGISTRY: dict[str, type[Strategy]] = {
    "active": ActiveClicker,
    "greedy": GreedyProgression,
}
