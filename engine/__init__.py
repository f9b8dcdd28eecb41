"""
Projection engine — pure policy-impact model + multi-country runner.
"""

from .projection import ProjectionResult, adjust_factors, project
from .runner import project_country, run_projection
from .trajectory import TrajectoryPoint, build_trajectory, trajectory_to_dataframe

__all__ = [
    "ProjectionResult",
    "adjust_factors",
    "project",
    "project_country",
    "run_projection",
    "TrajectoryPoint",
    "build_trajectory",
    "trajectory_to_dataframe",
]
