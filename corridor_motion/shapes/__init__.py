from .square import EDGE_INDICES, Square, square_corners

__all__ = ["EDGE_INDICES", "Square", "square_corners"]
