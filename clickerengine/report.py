from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.metrics import (
    EconomySample,
    MetricsCollector,
    PrestigeEvent,
    PurchaseEvent,
)


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    strategy_description: str = ""
    terminal_description: str = ""
    outcome: str = ""
    total_time: float = 0.0
    finish_time: float | None = None

    # Raw metrics
    samples: list[EconomySample] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)
    prestiges: list[PrestigeEvent] = field(default_factory=list)
    rejections: dict[str, int] = field(default_factory=dict)
    clicks_emitted: int = 0

    # Derived metrics
    prestige_times: list[float] = field(default_factory=list)
    purchase_gaps: list[float] = field(default_factory=list)
    max_purchase_gap: float = 0.0
    mean_purchase_gap: float = 0.0
    purchases_per_minute: float = 0.0

    @property
    def finished(self) -> bool:
        return self.finish_time is not None

    def series(self, attr: str) -> list[tuple[float, int]]:
        """Return (time, value) series for an EconomySample attribute."""
        return [(s.time, getattr(s, attr)) for s in self.samples]

    def purchase_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for p in self.purchases:
            counts[p.action] = counts.get(p.action, 0) + 1
        return counts


def build_report(
    collector: MetricsCollector,
    strategy_description: str,
    terminal_description: str,
    outcome: str,
    total_time: float,
) -> SimulationReport:
    """Build a SimulationReport from collected metrics."""
    # Purchase gaps
    purchase_gaps: list[float] = []
    purchase_times = sorted(p.time for p in collector.purchases)
    if purchase_times:
        purchase_gaps.append(purchase_times[0])  # gap from t=0 to first purchase
        for i in range(1, len(purchase_times)):
            purchase_gaps.append(purchase_times[i] - purchase_times[i - 1])

    max_gap = max(purchase_gaps) if purchase_gaps else 0.0
    mean_gap = (sum(purchase_gaps) / len(purchase_gaps)) if purchase_gaps else 0.0

    ppm = (len(collector.purchases) / total_time * 60.0) if total_time > 0 else 0.0

    return SimulationReport(
        strategy_description=strategy_description,
        terminal_description=terminal_description,
        outcome=outcome,
        total_time=total_time,
        finish_time=collector.finish_time,
        samples=collector.samples,
        purchases=collector.purchases,
        prestiges=collector.prestiges,
        rejections=dict(collector.rejections),
        clicks_emitted=collector.clicks_emitted,
        prestige_times=[p.time for p in collector.prestiges],
        purchase_gaps=purchase_gaps,
        max_purchase_gap=max_gap,
        mean_purchase_gap=mean_gap,
        purchases_per_minute=ppm,
    )
