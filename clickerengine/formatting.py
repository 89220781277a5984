from __future__ import annotations

from clickerengine.report import SimulationReport


def format_text_report(report: SimulationReport) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " ClickerEngine Simulation Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Terminal: {report.terminal_description}")
    lines.append(f"Result: {report.outcome} at {report.total_time:.1f}s")
    if report.finish_time is not None:
        lines.append(f"Win threshold reached at {report.finish_time:.1f}s")
    lines.append("")

    if report.samples:
        last = report.samples[-1]
        lines.append("ECONOMY:")
        lines.append(f"  Stored clicks: {last.stored_clicks:,}")
        lines.append(f"  Multiplier: x{last.multiplier:,}")
        lines.append(f"  Fingers: {last.total_fingers}  Hands: {last.total_hands}")
        lines.append(f"  Buildings: {last.buildings}")
        lines.append(f"  Clicks emitted: {report.clicks_emitted:,}")
        lines.append("")

    if report.prestiges:
        lines.append("PRESTIGE:")
        for p in report.prestiges:
            label = f"buildings {p.buildings}"
            lines.append(f"  * {label:.<30s} {p.time:.1f}s (run {p.run_duration:.1f}s)")
        lines.append("")

    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    for action, count in sorted(report.purchase_counts().items()):
        lines.append(f"    {action}: {count}")
    lines.append(f"  Rate: {report.purchases_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_purchase_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_purchase_gap:.1f}s")

    if report.rejections:
        lines.append("")
        lines.append("REJECTED INTENTS:")
        for reason, count in sorted(report.rejections.items()):
            lines.append(f"  {reason}: {count}")

    return "\n".join(lines)
