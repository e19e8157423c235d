"""
Per-group flock metrics computed with numpy.
"""

from typing import Dict, List, Sequence

import numpy as np


def group_metrics(boids: Sequence, tick: int) -> List[Dict]:
    """
    Measure each color group of the flock.

    Args:
        boids: Boids with position, velocity and color
        tick: Tick number recorded in every row

    Returns:
        One row per color (in first-seen order) with the group size, its
        spread (mean distance to the group centroid), mean speed and
        polarization (length of the mean unit heading, 1 = all aligned)
    """
    groups: Dict[str, list] = {}
    for boid in boids:
        groups.setdefault(boid.color, []).append(boid)

    rows = []
    for color, members in groups.items():
        positions = np.array([[b.position.x, b.position.y] for b in members])
        velocities = np.array([[b.velocity.x, b.velocity.y] for b in members])

        centroid = positions.mean(axis=0)
        spread = float(np.linalg.norm(positions - centroid, axis=1).mean())

        speeds = np.linalg.norm(velocities, axis=1)
        moving = speeds > 0
        if moving.any():
            headings = velocities[moving] / speeds[moving][:, None]
            polarization = float(np.linalg.norm(headings.mean(axis=0)))
        else:
            polarization = 0.0

        rows.append({
            "tick": tick,
            "group": color,
            "count": len(members),
            "spread": spread,
            "mean_speed": float(speeds.mean()),
            "polarization": polarization,
        })
    return rows


def calculate_aggregate_stats(rows: List[Dict]) -> Dict[str, Dict[str, float]]:
    """
    Calculate mean and standard deviation of each metric per group.

    Args:
        rows: Rows produced by ``group_metrics`` over many ticks

    Returns:
        Mapping of group color to ``{"<metric>_mean": ..., "<metric>_std": ...}``
    """
    by_group: Dict[str, List[Dict]] = {}
    for row in rows:
        by_group.setdefault(row["group"], []).append(row)

    aggregates = {}
    for group, group_rows in by_group.items():
        stats = {}
        for metric in ("spread", "mean_speed", "polarization"):
            values = np.array([r[metric] for r in group_rows], dtype=float)
            stats[f"{metric}_mean"] = float(values.mean())
            stats[f"{metric}_std"] = float(values.std(ddof=1)) if len(values) > 1 else 0.0
        aggregates[group] = stats
    return aggregates
