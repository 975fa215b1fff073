from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

import numpy as np

from corridor_motion.geometry import Point2D
from corridor_motion.shapes import Square
from corridor_motion.trajectory import Trajectory

from .config import AnimationConfig


@dataclass(frozen=True)
class MovingSquare:
    """Square whose center follows a trajectory."""

    square: Square
    trajectory: Trajectory

    def square_at(self, elapsed_time: float) -> Square:
        return self.square.moved_to(self.trajectory.compute_new_point(elapsed_time))


@dataclass(frozen=True, eq=False)
class FrameSample:
    time: float
    name: str
    position: Point2D
    velocity: Point2D
    corners: np.ndarray


class FrameSampler:
    """Evaluate moving squares on a fixed frame grid."""

    def __init__(self, config: AnimationConfig | None = None) -> None:
        self.config = config or AnimationConfig()

    def frame_times(self) -> np.ndarray:
        config = self.config
        steps = int(np.ceil((config.final_time - config.start_time) / config.frame_dt))
        return config.start_time + config.frame_dt * np.arange(steps, dtype=float)

    def sample(self, name: str, actor: MovingSquare, time: float) -> FrameSample:
        square = actor.square_at(time)
        return FrameSample(
            time=float(time),
            name=name,
            position=square.center,
            velocity=actor.trajectory.velocity(time),
            corners=square.corners(),
        )

    def run(
        self,
        actors: Mapping[str, MovingSquare],
        progress_callback: Callable[[FrameSample], None] | None = None,
    ) -> list[FrameSample]:
        history: list[FrameSample] = []
        for time in self.frame_times():
            for name, actor in actors.items():
                result = self.sample(name, actor, time)
                history.append(result)
                if progress_callback is not None:
                    progress_callback(result)
        return history
