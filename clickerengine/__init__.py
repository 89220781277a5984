# clickerengine: incremental clicker progression engine and headless simulation

from clickerengine._types import HandId, ClickerId, U64_MAX, compare
from clickerengine.timer import CooldownTimer
from clickerengine.entity import Hand, Clicker, HandState, HandStatus, ClickerStatus
from clickerengine.store import EntityStore
from clickerengine.events import ClicksEmitted, EventLog
from clickerengine.definition import GameConfig
from clickerengine.economy import EconomyState, EconomyModel, EconomyStatus
from clickerengine.errors import ActionResult, Rejection, EntityNotFound, InvalidConfig
from clickerengine.intent import (
    Intent,
    Start,
    BuyFinger,
    CombineHand,
    Click,
    MakeAuto,
    Clap,
    BuyHand,
    Cashout,
)
from clickerengine.snapshot import Phase, GameSnapshot
from clickerengine.controller import ProgressionController, TickResult
from clickerengine.terminal import TerminalCondition, Terminal, SimulationContext
from clickerengine.strategy import Strategy, ActiveClicker, GreedyProgression
from clickerengine.metrics import MetricsCollector
from clickerengine.simulation import Simulation
from clickerengine.report import SimulationReport, build_report
from clickerengine.formatting import format_text_report

__all__ = [
    # Types
    "HandId",
    "ClickerId",
    "U64_MAX",
    "compare",
    # Timer
    "CooldownTimer",
    # Entities
    "Hand",
    "Clicker",
    "HandState",
    "HandStatus",
    "ClickerStatus",
    "EntityStore",
    # Events
    "ClicksEmitted",
    "EventLog",
    # Economy
    "GameConfig",
    "EconomyState",
    "EconomyModel",
    "EconomyStatus",
    # Errors
    "ActionResult",
    "Rejection",
    "EntityNotFound",
    "InvalidConfig",
    # Intents
    "Intent",
    "Start",
    "BuyFinger",
    "CombineHand",
    "Click",
    "MakeAuto",
    "Clap",
    "BuyHand",
    "Cashout",
    # Controller
    "Phase",
    "GameSnapshot",
    "ProgressionController",
    "TickResult",
    # Terminal
    "TerminalCondition",
    "Terminal",
    "SimulationContext",
    # Strategy
    "Strategy",
    "ActiveClicker",
    "GreedyProgression",
    # Simulation
    "MetricsCollector",
    "Simulation",
    "SimulationReport",
    "build_report",
    "format_text_report",
]
