"""Example scenes sampled offline and written to CSV."""

from corridor_motion.trajectory import circular_trajectory, segment_trajectory

from .common import analyze_history, run_scene_example

__all__ = [
    "analyze_history",
    "circular_trajectory",
    "run_scene_example",
    "segment_trajectory",
]
