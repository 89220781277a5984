from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable

from clickerengine._types import HandId, checked_sub, saturating_add, saturating_mul
from clickerengine.definition import GameConfig
from clickerengine.economy import EconomyModel, EconomyState
from clickerengine.entity import ClickerStatus, HandState, HandStatus
from clickerengine.errors import ActionResult, EntityNotFound, InvalidConfig, Rejection
from clickerengine.events import ClicksEmitted, EventLog
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
from clickerengine.store import EntityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Everything one tick did, in application order."""

    results: tuple[ActionResult, ...] = ()
    events: tuple[ClicksEmitted, ...] = ()
    folded: int = 0
    phase: Phase = Phase.RUNNING

    @property
    def accepted(self) -> list[ActionResult]:
        return [r for r in self.results if r.success]

    @property
    def rejected(self) -> list[ActionResult]:
        return [r for r in self.results if not r.success]


class ProgressionController:
    """Sole writer of progression state.

    One call to tick() is one frame: advance timers, apply intents in
    order, fire automatic Hands, fold the frame's events into
    stored_clicks, then check the win condition.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        config = config if config is not None else GameConfig()
        errors = config.validate()
        if errors:
            raise InvalidConfig(errors)

        self.config = config
        self.model = EconomyModel(config)
        self.economy = EconomyState()
        self.store = EntityStore(config.timer_duration)
        self.events = EventLog()
        self.phase = Phase.RUNNING if config.skip_welcome else Phase.WELCOME
        self.time_elapsed = 0.0
        self._pending: list[Intent] = []
        self._handlers: dict[type, Callable[[Intent], ActionResult]] = {
            BuyFinger: self._buy_finger,
            CombineHand: self._combine_hand,
            Click: self._click,
            MakeAuto: self._make_auto,
            Clap: self._clap,
            BuyHand: self._buy_hand,
            Cashout: self._cashout,
        }

        self._spawn_starting_hand()

    # ── Core loop ────────────────────────────────────────────────────

    def submit(self, intent: Intent) -> None:
        """Queue an intent for the next tick."""
        self._pending.append(intent)

    def tick(self, delta: float, intents: Iterable[Intent] = ()) -> TickResult:
        """Advance the game by *delta* seconds, applying *intents* in order."""
        if not math.isfinite(delta) or delta < 0:
            raise ValueError(f"delta must be finite and >= 0, got {delta!r}")

        batch = self._pending + list(intents)
        self._pending = []

        if self.phase is Phase.FINISHED:
            return TickResult(
                results=tuple(
                    ActionResult.rejected(i, Rejection.GAME_FINISHED) for i in batch
                ),
                phase=self.phase,
            )

        if self.phase is Phase.RUNNING:
            self._advance_timers(delta)
            self.time_elapsed += delta

        results = tuple(self._apply(intent) for intent in batch)

        if self.phase is Phase.RUNNING:
            self._fire_auto_hands()

        events = self.events.drain()
        folded = self.model.fold(self.economy, events)

        self._check_win()

        return TickResult(
            results=results,
            events=tuple(events),
            folded=folded,
            phase=self.phase,
        )

    # ── Queries ──────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        hands = []
        for hand in self.store.hands():
            clickers = tuple(
                ClickerStatus(
                    id=c.id,
                    hand=c.hand,
                    per_click=c.per_click,
                    progress=c.timer.progress(),
                    ready=c.timer.finished(),
                )
                for c in (self.store.get_clicker(cid) for cid in hand.clickers)
            )
            hands.append(
                HandStatus(
                    id=hand.id,
                    state=hand.state,
                    clap_progress=hand.clap_timer.progress() if hand.clapping else 0.0,
                    clap_ready=hand.clapping and hand.clap_timer.finished(),
                    clickers=clickers,
                )
            )
        return GameSnapshot(
            phase=self.phase,
            time_elapsed=self.time_elapsed,
            economy=self.model.status(self.economy),
            hands=tuple(hands),
            message=self.config.win_message if self.phase is Phase.FINISHED else "",
        )

    def hand_ids(self) -> list[HandId]:
        return [h.id for h in self.store.hands()]

    # ── Intent dispatch ──────────────────────────────────────────────

    def _apply(self, intent: Intent) -> ActionResult:
        result = self._dispatch(intent)
        if not result.success:
            logger.debug("Rejected %r: %s", intent, result.reason.name)
        return result

    def _dispatch(self, intent: Intent) -> ActionResult:
        if self.phase is Phase.FINISHED:
            return ActionResult.rejected(intent, Rejection.GAME_FINISHED)

        if isinstance(intent, Start):
            if self.phase is not Phase.WELCOME:
                return ActionResult.rejected(intent, Rejection.WRONG_STATE)
            self.phase = Phase.RUNNING
            logger.info("Game started")
            return ActionResult.ok(intent)

        if self.phase is Phase.WELCOME:
            return ActionResult.rejected(intent, Rejection.NOT_STARTED)

        handler = self._handlers.get(type(intent))
        if handler is None:
            return ActionResult.rejected(intent, Rejection.UNKNOWN_INTENT)

        # Handlers resolve every id before mutating, so a stale id is a no-op
        try:
            return handler(intent)
        except EntityNotFound:
            return ActionResult.rejected(intent, Rejection.ENTITY_NOT_FOUND)

    # ── Hand actions ─────────────────────────────────────────────────

    def _buy_finger(self, intent: BuyFinger) -> ActionResult:
        hand = self.store.get_hand(intent.hand_id)
        if hand.state is not HandState.FILLING:
            return ActionResult.rejected(intent, Rejection.WRONG_STATE)

        cost = self.model.finger_cost(self.economy)
        if not self._spend(cost):
            return ActionResult.rejected(intent, Rejection.INSUFFICIENT_RESOURCE)

        self.store.create_clicker(hand.id)
        self.economy.total_fingers = saturating_add(self.economy.total_fingers, 1)
        return ActionResult.ok(intent, cost=cost)

    def _combine_hand(self, intent: CombineHand) -> ActionResult:
        hand = self.store.get_hand(intent.hand_id)
        if hand.state is not HandState.FILLING:
            return ActionResult.rejected(intent, Rejection.WRONG_STATE)

        cost = self.model.combine_cost()
        if not self._spend(cost):
            return ActionResult.rejected(intent, Rejection.INSUFFICIENT_RESOURCE)

        self.store.set_state(hand.id, HandState.COMBINED)
        hand.clap_timer.reset()
        self.economy.total_hands = saturating_add(self.economy.total_hands, 1)
        return ActionResult.ok(intent, cost=cost)

    def _click(self, intent: Click) -> ActionResult:
        hand = self.store.get_hand(intent.hand_id)
        clicker = self.store.get_clicker(intent.clicker_id)
        if clicker.hand != hand.id:
            return ActionResult.rejected(intent, Rejection.ENTITY_NOT_FOUND)
        if hand.state is not HandState.FILLING:
            return ActionResult.rejected(intent, Rejection.WRONG_STATE)
        if not clicker.timer.finished():
            return ActionResult.rejected(intent, Rejection.TIMER_NOT_READY)

        clicker.timer.reset()
        amount = saturating_mul(clicker.per_click, self.model.multiplier(self.economy))
        self.events.emit(amount)
        return ActionResult.ok(intent, amount=amount)

    def _make_auto(self, intent: MakeAuto) -> ActionResult:
        hand = self.store.get_hand(intent.hand_id)
        if hand.state is not HandState.COMBINED:
            return ActionResult.rejected(intent, Rejection.WRONG_STATE)

        cost = self.model.auto_cost()
        if not self._spend(cost):
            return ActionResult.rejected(intent, Rejection.INSUFFICIENT_RESOURCE)

        self.store.set_state(hand.id, HandState.AUTOED)
        return ActionResult.ok(intent, cost=cost)

    def _clap(self, intent: Clap) -> ActionResult:
        hand = self.store.get_hand(intent.hand_id)
        if hand.state is not HandState.COMBINED:
            return ActionResult.rejected(intent, Rejection.WRONG_STATE)
        if not hand.clap_timer.finished():
            return ActionResult.rejected(intent, Rejection.TIMER_NOT_READY)

        hand.clap_timer.reset()
        amount = self._clap_yield(len(hand.clickers))
        self.events.emit(amount)
        return ActionResult.ok(intent, amount=amount)

    # ── Global actions ───────────────────────────────────────────────

    def _buy_hand(self, intent: BuyHand) -> ActionResult:
        cost = self.model.hand_cost(self.economy)
        if not self._spend(cost):
            return ActionResult.rejected(intent, Rejection.INSUFFICIENT_RESOURCE)

        hand_id = self.store.create_hand()
        self.economy.total_hands = saturating_add(self.economy.total_hands, 1)
        logger.info("Bought hand %d for %d clicks", hand_id, cost)
        return ActionResult.ok(intent, cost=cost)

    def _cashout(self, intent: Cashout) -> ActionResult:
        cost = self.model.cashout_cost(self.economy)
        if cost is None:
            return ActionResult.rejected(intent, Rejection.PRESTIGE_EXHAUSTED)

        remaining = checked_sub(self.economy.stored_clicks, cost)
        if remaining is None:
            return ActionResult.rejected(intent, Rejection.INSUFFICIENT_RESOURCE)
        if self.config.cashout_zeroes_balance:
            remaining = 0

        buildings = self.model.next_building(self.economy)
        self.economy.reset_cycle()
        self.economy.stored_clicks = remaining
        self.economy.buildings = buildings
        self.store.clear()
        self._spawn_starting_hand()

        logger.info(
            "Cashed out for %d clicks, buildings now %d", cost, self.economy.buildings
        )
        return ActionResult.ok(intent, cost=cost)

    # ── Private helpers ──────────────────────────────────────────────

    def _spend(self, cost: int) -> bool:
        """Deduct *cost* from stored_clicks if affordable."""
        remaining = checked_sub(self.economy.stored_clicks, cost)
        if remaining is None:
            return False
        self.economy.stored_clicks = remaining
        return True

    def _clap_yield(self, children: int) -> int:
        return saturating_mul(children, self.model.multiplier(self.economy))

    def _spawn_starting_hand(self) -> None:
        hand_id = self.store.create_hand()
        self.store.create_clicker(hand_id)

    def _advance_timers(self, delta: float) -> None:
        for clicker in self.store.clickers():
            clicker.timer.tick(delta)
        for hand in self.store.hands():
            if hand.clapping:
                hand.clap_timer.tick(delta)

    def _fire_auto_hands(self) -> None:
        for hand in self.store.hands():
            if hand.state is not HandState.AUTOED:
                continue
            if not hand.clap_timer.finished():
                continue
            hand.clap_timer.reset()
            amount = self._clap_yield(len(hand.clickers))
            self.events.emit(amount)
            logger.debug("Hand %d auto-clapped for %d", hand.id, amount)

    def _check_win(self) -> None:
        if self.phase is Phase.RUNNING and self.model.has_won(self.economy):
            self.phase = Phase.FINISHED
            logger.info(
                "Win threshold %d reached after %.1fs",
                self.config.win_threshold,
                self.time_elapsed,
            )
