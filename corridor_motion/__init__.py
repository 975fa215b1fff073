"""2D point transforms and closed-form trajectories for moving shapes."""

from .geometry import as_point, rotate, translate
from .shapes import Square
from .trajectory import (
    Trajectory,
    TrajectoryError,
    TrajectoryException,
    TrajectoryKind,
    circular_trajectory,
    segment_trajectory,
)

__all__ = [
    "Square",
    "Trajectory",
    "TrajectoryError",
    "TrajectoryException",
    "TrajectoryKind",
    "as_point",
    "circular_trajectory",
    "rotate",
    "segment_trajectory",
    "translate",
]
