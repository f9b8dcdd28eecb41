"""
Reporting — display scaling, metric cards, chart frames and compare-mode summaries.
"""

from .metrics import (
    MetricCards,
    build_metric_cards,
    economic_summary,
    format_billions,
    format_millions,
    format_roi,
    years_to_target,
)
from .frames import (
    barrier_frame,
    country_overview_frame,
    impact_breakdown_frame,
    policy_cost_lines,
    trajectory_comparison_frame,
    trajectory_frame,
)
from .summary import comparison_frame, summary_flags

__all__ = [
    "MetricCards",
    "build_metric_cards",
    "economic_summary",
    "format_billions",
    "format_millions",
    "format_roi",
    "years_to_target",
    "barrier_frame",
    "country_overview_frame",
    "impact_breakdown_frame",
    "policy_cost_lines",
    "trajectory_comparison_frame",
    "trajectory_frame",
    "comparison_frame",
    "summary_flags",
]
