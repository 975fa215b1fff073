"""Offline frame sampling and telemetry for moving shapes."""

from .config import AnimationConfig
from .sampler import FrameSample, FrameSampler, MovingSquare
from .telemetry import FrameTelemetryLogger

__all__ = [
    "AnimationConfig",
    "FrameSample",
    "FrameSampler",
    "FrameTelemetryLogger",
    "MovingSquare",
]
