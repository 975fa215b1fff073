"""Stateless 2D point transforms."""

from .transforms import (
    Point2D,
    Vector2D,
    as_point,
    negate,
    norm,
    rotate,
    rotate_points,
    translate,
)

__all__ = [
    "Point2D",
    "Vector2D",
    "as_point",
    "negate",
    "norm",
    "rotate",
    "rotate_points",
    "translate",
]
