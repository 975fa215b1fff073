from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnimationConfig:
    """Sampling window for offline frame evaluation.

    Times are in elapsed-time units: degrees for circular trajectories,
    distance units for linear ones.
    """

    frame_dt: float = 1.0
    start_time: float = 0.0
    final_time: float = 360.0

    def __post_init__(self) -> None:
        if self.frame_dt <= 0.0:
            raise ValueError("frame_dt must be positive.")
        if self.final_time <= self.start_time:
            raise ValueError("final_time must be later than start_time.")
