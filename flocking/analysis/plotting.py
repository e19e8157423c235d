"""
Plotting functions for visualizing flock metrics.
"""

from typing import Dict, List

try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


def plot_group_metrics(rows: List[Dict], output_file: str = "flock_metrics.png") -> str:
    """
    Plot spread and polarization over time, one line per color group.

    Each line is drawn in its group's own color.

    Args:
        rows: Rows produced by ``group_metrics``
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" if matplotlib is unavailable
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    by_group: Dict[str, List[Dict]] = {}
    for row in rows:
        by_group.setdefault(row["group"], []).append(row)

    fig, (ax_spread, ax_polar) = plt.subplots(2, 1, figsize=(12, 9), sharex=True)

    for group, group_rows in by_group.items():
        ticks = [r["tick"] for r in group_rows]
        ax_spread.plot(ticks, [r["spread"] for r in group_rows],
                       label=group, linewidth=2, color=group)
        ax_polar.plot(ticks, [r["polarization"] for r in group_rows],
                      label=group, linewidth=2, color=group)

    ax_spread.set_ylabel('Spread (avg dist to group centroid)', fontsize=10)
    ax_spread.set_title('Group Spread', fontsize=12, fontweight='bold')
    ax_spread.legend(fontsize=8, loc='upper right')
    ax_spread.grid(True, alpha=0.3, linestyle='--')

    ax_polar.set_xlabel('Tick', fontsize=10)
    ax_polar.set_ylabel('Polarization', fontsize=10)
    ax_polar.set_ylim(0, 1.05)
    ax_polar.set_title('Heading Alignment', fontsize=12, fontweight='bold')
    ax_polar.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle('Flocking Over Time\n(Lower spread = tighter groups)',
                 fontsize=14, fontweight='bold')
    fig.tight_layout()

    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\nPlot saved to: {output_file}")
    return output_file
