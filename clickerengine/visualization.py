from __future__ import annotations

from clickerengine.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 4-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install clickerengine[viz]"
        )

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(
        f"ClickerEngine Simulation: {report.strategy_description}",
        fontsize=14,
    )

    # 1. Stored clicks over time (log scale)
    ax1 = axes[0][0]
    series = report.series("stored_clicks")
    if series:
        times, values = zip(*series)
        ax1.plot(times, [max(v, 1) for v in values], label="stored clicks")
    for t in report.prestige_times:
        ax1.axvline(t, color="purple", linestyle=":", alpha=0.6)
    ax1.set_yscale("log")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Clicks")
    ax1.set_title("Stored Clicks")
    ax1.legend(fontsize=8)
    ax1.grid(True, alpha=0.3)

    # 2. Multiplier over time
    ax2 = axes[0][1]
    series = report.series("multiplier")
    if series:
        times, values = zip(*series)
        ax2.step(times, values, where="post")
    ax2.set_yscale("log")
    ax2.set_xlabel("Time (s)")
    ax2.set_ylabel("Multiplier")
    ax2.set_title("Multiplier")
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[1][0]
    if report.purchases:
        times = [p.time for p in report.purchases]
        actions = [p.action for p in report.purchases]
        action_types = sorted(set(actions))
        y_map = {a: i for i, a in enumerate(action_types)}
        ax3.scatter(times, [y_map[a] for a in actions], s=10, alpha=0.6)
        ax3.set_yticks(range(len(action_types)))
        ax3.set_yticklabels(action_types, fontsize=7)
        ax3.set_xlabel("Time (s)")
        ax3.set_title("Purchase Timeline")
        ax3.grid(True, alpha=0.3)

    # 4. Entity counts
    ax4 = axes[1][1]
    for attr in ("hands", "clickers"):
        series = report.series(attr)
        if series:
            times, values = zip(*series)
            ax4.plot(times, values, label=attr)
    ax4.set_xlabel("Time (s)")
    ax4.set_ylabel("Count")
    ax4.set_title("Live Entities")
    ax4.legend(fontsize=8)
    ax4.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()
