from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from corridor_motion.geometry import Point2D, as_point, rotate

DEGREES_TO_RADIANS = math.pi / 180.0


class TrajectoryKind(Enum):
    """Closed set of motion laws; values are the legacy string tags."""

    CIRCULAR = "circle"
    LINEAR = "segment"


class TrajectoryError(Enum):
    DEGENERATE_TRAJECTORY = "degenerate_trajectory"
    UNKNOWN_TRAJECTORY_KIND = "unknown_trajectory_kind"


class TrajectoryException(ValueError):
    def __init__(self, error: TrajectoryError, message: str):
        super().__init__(message)
        self.error = error


def canonical_frame(start_point: Sequence[float] | np.ndarray) -> tuple[float, Point2D]:
    """Return the frame angle and ``start_point`` rotated onto the positive X axis."""

    angle = math.atan2(start_point[1], start_point[0])
    return angle, rotate(start_point, -angle)


def _circle_point(angle: float, radius: float, t: float) -> Point2D:
    return rotate((radius * math.cos(t), radius * math.sin(t)), angle)


def _circle_tangent(angle: float, radius: float, t: float, rate: float) -> Point2D:
    speed = radius * rate
    return rotate((-speed * math.sin(t), speed * math.cos(t)), angle)


def _segment_phase(half_length: float, distance: float) -> float:
    # Floored modulo keeps the phase in [0, 4d) for negative distances too.
    return distance % (4.0 * half_length)


def _segment_point(angle: float, half_length: float, distance: float) -> Point2D:
    phase = _segment_phase(half_length, distance)
    if phase < 2.0 * half_length:
        x = half_length - phase
    else:
        x = -3.0 * half_length + phase
    return rotate((x, 0.0), angle)


def _segment_direction(angle: float, half_length: float, distance: float) -> Point2D:
    phase = _segment_phase(half_length, distance)
    direction = -1.0 if phase < 2.0 * half_length else 1.0
    return rotate((direction, 0.0), angle)


def circle_position(start_point: Sequence[float] | np.ndarray, t: float) -> Point2D:
    """Point on the origin-centred circle through ``start_point``, ``t`` radians further on."""

    angle, projected = canonical_frame(start_point)
    return _circle_point(angle, projected[0], t)


def circle_velocity(start_point: Sequence[float] | np.ndarray, t: float, rate: float) -> Point2D:
    angle, projected = canonical_frame(start_point)
    return _circle_tangent(angle, projected[0], t, rate)


def segment_position(start_point: Sequence[float] | np.ndarray, distance: float) -> Point2D:
    """Point on the segment from ``start_point`` through the origin to its mirror.

    The point leaves ``start_point`` at unit speed, reaches the mirror point
    after ``2d`` and comes back after ``4d``, with ``d = |start_point|``.
    """

    angle, projected = canonical_frame(start_point)
    return _segment_point(angle, projected[0], distance)


def segment_velocity(start_point: Sequence[float] | np.ndarray, distance: float) -> Point2D:
    angle, projected = canonical_frame(start_point)
    return _segment_direction(angle, projected[0], distance)


def _circular_point(angle: float, radius: float, elapsed: float) -> Point2D:
    return _circle_point(angle, radius, elapsed * DEGREES_TO_RADIANS)


def _circular_velocity(angle: float, radius: float, elapsed: float) -> Point2D:
    return _circle_tangent(angle, radius, elapsed * DEGREES_TO_RADIANS, DEGREES_TO_RADIANS)


# Laws take the cached frame angle, the canonical X distance and the elapsed time.
MotionLaw = Callable[[float, float, float], Point2D]

_POSITION_LAWS: dict[TrajectoryKind, MotionLaw] = {
    TrajectoryKind.CIRCULAR: _circular_point,
    TrajectoryKind.LINEAR: _segment_point,
}

_VELOCITY_LAWS: dict[TrajectoryKind, MotionLaw] = {
    TrajectoryKind.CIRCULAR: _circular_velocity,
    TrajectoryKind.LINEAR: _segment_direction,
}


def _parse_kind(kind: TrajectoryKind | str) -> TrajectoryKind:
    try:
        return TrajectoryKind(kind)
    except ValueError:
        tags = ", ".join(repr(member.value) for member in TrajectoryKind)
        raise TrajectoryException(
            TrajectoryError.UNKNOWN_TRAJECTORY_KIND,
            f"Unknown trajectory kind {kind!r}; expected one of {tags}.",
        ) from None


@dataclass(frozen=True, eq=False)
class Trajectory:
    """Motion law anchored at ``start_point`` and ``start_time``.

    ``kind`` accepts a :class:`TrajectoryKind` or its string tag. Elapsed time
    counts degrees for circular trajectories and distance units for linear
    ones. Trajectories compare and hash by value.
    """

    kind: TrajectoryKind
    start_point: Point2D
    start_time: float = 0.0
    _frame_angle: float = field(default=0.0, init=False, repr=False)
    _half_length: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", _parse_kind(self.kind))
        start_point = as_point(self.start_point)
        if not np.any(start_point):
            raise TrajectoryException(
                TrajectoryError.DEGENERATE_TRAJECTORY,
                "start_point must not be the origin.",
            )
        object.__setattr__(self, "start_point", start_point)
        object.__setattr__(self, "start_time", float(self.start_time))
        angle, projected = canonical_frame(start_point)
        object.__setattr__(self, "_frame_angle", angle)
        object.__setattr__(self, "_half_length", float(projected[0]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.start_time == other.start_time
            and np.array_equal(self.start_point, other.start_point)
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.start_time, tuple(self.start_point.tolist())))

    @property
    def period(self) -> float:
        if self.kind is TrajectoryKind.CIRCULAR:
            return 360.0
        return 4.0 * self._half_length

    def compute_new_point(self, elapsed_time: float) -> Point2D:
        law = _POSITION_LAWS[self.kind]
        return law(self._frame_angle, self._half_length, float(elapsed_time) - self.start_time)

    def velocity(self, elapsed_time: float) -> Point2D:
        law = _VELOCITY_LAWS[self.kind]
        return law(self._frame_angle, self._half_length, float(elapsed_time) - self.start_time)


def circular_trajectory(
    start_point: Sequence[float] | np.ndarray,
    start_time: float = 0.0,
) -> Trajectory:
    return Trajectory(TrajectoryKind.CIRCULAR, start_point, start_time)


def segment_trajectory(
    start_point: Sequence[float] | np.ndarray,
    start_time: float = 0.0,
) -> Trajectory:
    return Trajectory(TrajectoryKind.LINEAR, start_point, start_time)
