"""Closed-form motion laws for points moving about the origin."""

from .trajectories import (
    Trajectory,
    TrajectoryError,
    TrajectoryException,
    TrajectoryKind,
    canonical_frame,
    circle_position,
    circle_velocity,
    circular_trajectory,
    segment_position,
    segment_trajectory,
    segment_velocity,
)

__all__ = [
    "Trajectory",
    "TrajectoryError",
    "TrajectoryException",
    "TrajectoryKind",
    "canonical_frame",
    "circle_position",
    "circle_velocity",
    "circular_trajectory",
    "segment_position",
    "segment_trajectory",
    "segment_velocity",
]
