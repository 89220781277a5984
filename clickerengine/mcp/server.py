"""MCP server wrapping ProgressionController for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from clickerengine._types import ClickerId, HandId
from clickerengine.controller import ProgressionController
from clickerengine.definition import GameConfig
from clickerengine.economy import EconomyStatus
from clickerengine.entity import HandStatus
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

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400


@dataclass
class _GameHolder:
    """Holds the active config and controller."""

    config: GameConfig
    controller: ProgressionController


def _hand_dict(hand: HandStatus) -> dict[str, Any]:
    return {
        "id": hand.id,
        "state": hand.state.name,
        "clap_progress": round(hand.clap_progress, 3),
        "clap_ready": hand.clap_ready,
        "clickers": [
            {
                "id": c.id,
                "per_click": c.per_click,
                "progress": round(c.progress, 3),
                "ready": c.ready,
            }
            for c in hand.clickers
        ],
    }


def _economy_dict(eco: EconomyStatus) -> dict[str, Any]:
    return {
        "stored_clicks": eco.stored_clicks,
        "total_fingers": eco.total_fingers,
        "total_hands": eco.total_hands,
        "buildings": eco.buildings,
        "multiplier": eco.multiplier,
        "next_multiplier_threshold": eco.next_multiplier_threshold,
        "finger_cost": eco.finger_cost,
        "hand_cost": eco.hand_cost,
        "combine_cost": eco.combine_cost,
        "auto_cost": eco.auto_cost,
        "cashout_cost": eco.cashout_cost,
    }


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    cfg = holder.config
    return {
        "name": cfg.name,
        "timer_duration": cfg.timer_duration,
        "combine_cost": cfg.combine_cost,
        "auto_cost": cfg.auto_cost,
        "multiplier_thresholds": list(cfg.multiplier_thresholds),
        "cashout_costs": list(cfg.cashout_costs),
        "win_threshold": cfg.win_threshold,
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    snapshot = holder.controller.snapshot()
    result: dict[str, Any] = {
        "phase": snapshot.phase.name,
        "time_elapsed": round(snapshot.time_elapsed, 2),
        "economy": _economy_dict(snapshot.economy),
        "hands": [_hand_dict(h) for h in snapshot.hands],
    }
    if snapshot.message:
        result["message"] = snapshot.message
    return result


def _tool_act(holder: _GameHolder, intent: Intent) -> dict[str, Any]:
    """Apply one intent in a zero-length tick."""
    tick = holder.controller.tick(0.0, [intent])
    action = tick.results[0]
    result: dict[str, Any] = {
        "success": action.success,
        "action": type(intent).__name__,
        "stored_clicks": holder.controller.economy.stored_clicks,
        "phase": tick.phase.name,
    }
    if action.success:
        if action.cost:
            result["cost"] = action.cost
        if action.amount:
            result["earned"] = action.amount
    else:
        result["reason"] = action.reason.name
    return result


def _tool_wait(holder: _GameHolder, seconds: float) -> dict[str, Any]:
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    before = holder.controller.economy.stored_clicks

    # Subdivide into 1-second ticks
    remaining = seconds
    while remaining > 0:
        dt = min(1.0, remaining)
        holder.controller.tick(dt)
        remaining -= dt

    snapshot = holder.controller.snapshot()
    return {
        "waited": seconds,
        "time_elapsed": round(snapshot.time_elapsed, 2),
        "phase": snapshot.phase.name,
        "earned": snapshot.economy.stored_clicks - before,
        "stored_clicks": snapshot.economy.stored_clicks,
    }


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.controller = ProgressionController(holder.config)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(config: GameConfig) -> FastMCP:
    """Create an MCP server wrapping a ProgressionController for the given config."""
    holder = _GameHolder(config=config, controller=ProgressionController(config))

    mcp = FastMCP(
        name=f"ClickerEngine: {config.name}",
    )

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: costs, multiplier thresholds, cashout table, win threshold."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current snapshot: phase, economy, hands with their clickers and timers."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def start() -> dict[str, Any]:
        """Leave the welcome screen and start the game."""
        return _tool_act(holder, Start())

    @mcp.tool()
    def buy_finger(hand_id: int) -> dict[str, Any]:
        """Buy a clicker for a filling hand."""
        return _tool_act(holder, BuyFinger(HandId(hand_id)))

    @mcp.tool()
    def combine_hand(hand_id: int) -> dict[str, Any]:
        """Combine a filling hand so it can clap."""
        return _tool_act(holder, CombineHand(HandId(hand_id)))

    @mcp.tool()
    def click(hand_id: int, clicker_id: int) -> dict[str, Any]:
        """Click a ready clicker on a filling hand."""
        return _tool_act(holder, Click(HandId(hand_id), ClickerId(clicker_id)))

    @mcp.tool()
    def make_auto(hand_id: int) -> dict[str, Any]:
        """Automate a combined hand so it claps on its own."""
        return _tool_act(holder, MakeAuto(HandId(hand_id)))

    @mcp.tool()
    def clap(hand_id: int) -> dict[str, Any]:
        """Clap a combined hand whose timer is ready."""
        return _tool_act(holder, Clap(HandId(hand_id)))

    @mcp.tool()
    def buy_hand() -> dict[str, Any]:
        """Buy a new empty hand."""
        return _tool_act(holder, BuyHand())

    @mcp.tool()
    def cashout() -> dict[str, Any]:
        """Prestige: reset progress for a permanent x10 multiplier."""
        return _tool_act(holder, Cashout())

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400). Time is subdivided into 1s ticks."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
