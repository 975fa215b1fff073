from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

import numpy as np

from corridor_motion.geometry import Point2D, as_point, rotate_points

# Bottom-left, top-left, top-right, bottom-right of the unit square.
_UNIT_CORNERS = np.array(
    [
        [-0.5, -0.5],
        [-0.5, 0.5],
        [0.5, 0.5],
        [0.5, -0.5],
    ],
    dtype=float,
)

EDGE_INDICES: tuple[tuple[int, int], ...] = ((0, 1), (1, 2), (2, 3), (3, 0))


def square_corners(side: float, angle: float, center: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return the four corners of a square as a read-only ``(4, 2)`` array."""

    corners = rotate_points(_UNIT_CORNERS * float(side), angle) + np.asarray(center, dtype=float)
    corners.flags.writeable = False
    return corners


@dataclass(frozen=True, eq=False)
class Square:
    """Drawable square. ``size_max`` is carried for the renderer only.

    Squares compare and hash by value.
    """

    side: float
    angle: float
    center: Point2D
    size_max: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_point(self.center))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return (
            self.side == other.side
            and self.angle == other.angle
            and self.size_max == other.size_max
            and np.array_equal(self.center, other.center)
        )

    def __hash__(self) -> int:
        return hash((self.side, self.angle, self.size_max, tuple(self.center.tolist())))

    def corners(self) -> np.ndarray:
        return square_corners(self.side, self.angle, self.center)

    def edges(self) -> list[tuple[Point2D, Point2D]]:
        """Corner pairs for a line-drawing primitive, closing the outline."""

        corners = self.corners()
        return [(corners[start], corners[end]) for start, end in EDGE_INDICES]

    def moved_to(self, center: Sequence[float] | np.ndarray) -> Square:
        return replace(self, center=center)
