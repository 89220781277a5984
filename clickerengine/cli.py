from __future__ import annotations

import argparse
import importlib
import logging
import sys

from clickerengine.definition import GameConfig
from clickerengine.formatting import format_text_report
from clickerengine.simulation import Simulation
from clickerengine.strategy import ActiveClicker, GreedyProgression, Strategy
from clickerengine.terminal import Terminal, TerminalCondition


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickerengine",
        description="ClickerEngine: Progression Simulation CLI",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run a headless simulation")
    sim.add_argument(
        "game_module",
        nargs="?",
        default=None,
        help="Python module with define_game() (default: built-in config)",
    )
    sim.add_argument(
        "--strategy",
        default="greedy",
        choices=["active", "greedy"],
        help="Strategy to use (default: greedy)",
    )
    sim.add_argument(
        "--fingers-per-hand",
        type=int,
        default=5,
        help="Clickers bought per Hand before combining (greedy only)",
    )
    sim.add_argument(
        "--prestige",
        default="first_opportunity",
        choices=["never", "first_opportunity"],
        help="When the greedy strategy cashes out",
    )
    sim.add_argument(
        "--tick-resolution", type=float, default=0.1, help="Seconds per tick"
    )
    sim.add_argument(
        "--terminal-time", type=float, default=3600, help="Max simulation time (s)"
    )
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def load_game(module_path: str | None) -> GameConfig:
    """Import module and call define_game(); None gives the default config."""
    if module_path is None:
        return GameConfig()
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_game"):
        print(f"Error: module {module_path!r} has no define_game() function")
        sys.exit(1)
    return mod.define_game()


def build_strategy(name: str, fingers_per_hand: int, prestige_mode: str) -> Strategy:
    if name == "active":
        return ActiveClicker()
    return GreedyProgression(
        fingers_per_hand=fingers_per_hand, prestige_mode=prestige_mode
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "simulate":
        config = load_game(args.game_module)

        terminal: TerminalCondition = Terminal.any(
            Terminal.finished(), Terminal.time(args.terminal_time)
        )
        strategy = build_strategy(args.strategy, args.fingers_per_hand, args.prestige)

        sim = Simulation(
            config=config,
            strategy=strategy,
            terminal=terminal,
            tick_resolution=args.tick_resolution,
        )
        report = sim.run()
        print(format_text_report(report))

        if args.export_csv:
            from clickerengine.export import export_csv
            export_csv(report, args.export_csv)
            print(f"\nCSV exported to {args.export_csv}_*.csv")

        if args.export_json:
            from clickerengine.export import export_json
            export_json(report, args.export_json)
            print(f"\nJSON exported to {args.export_json}")

        if args.plot:
            from clickerengine.visualization import plot_simulation
            plot_simulation(report, args.plot)
            print(f"\nPlot saved to {args.plot}")


if __name__ == "__main__":
    main()
