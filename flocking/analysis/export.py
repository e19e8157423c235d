"""
Export functions for saving flock metrics to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List

METRIC_FIELDS = ['tick', 'group', 'count', 'spread', 'mean_speed', 'polarization']


def export_metrics_to_csv(rows: List[Dict], filename: str = "flock_metrics.csv") -> str:
    """
    Export per-group metric rows to CSV format.

    Args:
        rows: Rows produced by ``group_metrics``
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=METRIC_FIELDS)
        writer.writeheader()

        for row in rows:
            writer.writerow({
                'tick': row['tick'],
                'group': row['group'],
                'count': row['count'],
                'spread': f"{row['spread']:.2f}",
                'mean_speed': f"{row['mean_speed']:.3f}",
                'polarization': f"{row['polarization']:.3f}",
            })

    print(f"\nCSV metrics saved to: {filename}")
    return filename


def export_run_report(report: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        report: Run results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(report, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename
