"""
Analysis module for measuring, plotting and exporting flock runs.
"""

from .metrics import group_metrics, calculate_aggregate_stats
from .plotting import plot_group_metrics
from .export import export_metrics_to_csv, export_run_report

__all__ = [
    'group_metrics',
    'calculate_aggregate_stats',
    'plot_group_metrics',
    'export_metrics_to_csv',
    'export_run_report',
]
