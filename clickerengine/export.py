from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path

from clickerengine.report import SimulationReport


def export_csv(report: SimulationReport, path: str | Path) -> None:
    """Export simulation data as CSV files.

    Creates three files:
      - {path}_economy.csv
      - {path}_purchases.csv
      - {path}_prestiges.csv
    """
    base = str(path)

    with open(f"{base}_economy.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "time",
            "stored_clicks",
            "multiplier",
            "total_fingers",
            "total_hands",
            "buildings",
            "hands",
            "clickers",
        ])
        for s in report.samples:
            writer.writerow([
                s.time,
                s.stored_clicks,
                s.multiplier,
                s.total_fingers,
                s.total_hands,
                s.buildings,
                s.hands,
                s.clickers,
            ])

    with open(f"{base}_purchases.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "action", "cost", "stored_end_of_tick"])
        for p in report.purchases:
            writer.writerow([p.time, p.action, p.cost, p.stored_end_of_tick])

    with open(f"{base}_prestiges.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "buildings", "cost", "run_duration"])
        for p in report.prestiges:
            writer.writerow([p.time, p.buildings, p.cost, p.run_duration])


def export_json(report: SimulationReport, path: str | Path) -> None:
    """Export full simulation report as JSON."""
    data = {
        "strategy": report.strategy_description,
        "terminal": report.terminal_description,
        "outcome": report.outcome,
        "total_time": report.total_time,
        "finish_time": report.finish_time,
        "clicks_emitted": report.clicks_emitted,
        "purchase_count": len(report.purchases),
        "purchase_counts": report.purchase_counts(),
        "purchases_per_minute": report.purchases_per_minute,
        "max_purchase_gap": report.max_purchase_gap,
        "mean_purchase_gap": report.mean_purchase_gap,
        "rejections": report.rejections,
        "prestiges": [asdict(p) for p in report.prestiges],
        "purchases": [asdict(p) for p in report.purchases],
    }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)
