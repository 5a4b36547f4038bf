import typing as t

import numpy as np

from quickhull import data


class DegenerateLineError(ArithmeticError):
    """The two points defining a line coincide, so it has no direction."""

    def __init__(self, a: data.Point, b: data.Point):
        super().__init__(f"degenerate line through {a} and {b}")
        self.a = a
        self.b = b


def _cross(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    # z component of the 3D cross product, rows of v broadcast against u
    return u[..., 0] * v[..., 1] - u[..., 1] * v[..., 0]


def _direction(a: data.Point, b: data.Point) -> t.Tuple[np.ndarray, float]:
    ab = np.subtract(b.array(), a.array())
    length = float(np.hypot(*ab))
    if length == 0.0:
        raise DegenerateLineError(a, b)
    return ab, length


def distance(a: data.Point, b: data.Point, p: data.Point) -> float:
    """
    Perpendicular distance from ``p`` to the infinite line through ``a`` and
    ``b``. Raises ``DegenerateLineError`` when ``a`` and ``b`` coincide.
    """
    ab, length = _direction(a, b)
    ap = np.subtract(p.array(), a.array())
    return abs(float(_cross(ab, ap))) / length


def find_max_distance_point(points: data.PointSet, a: int, b: int) -> int:
    """
    Index of the point furthest from the line through ``points[a]`` and
    ``points[b]``. The whole collection is scanned, not just the range
    between ``a`` and ``b``; the first of equally distant points wins.
    Returns -1 for an empty collection.
    """
    if not points:
        return -1
    origin = points[a]
    ab, length = _direction(origin, points[b])
    offsets = data.to_array(points) - np.array(origin.array())
    distances = np.abs(_cross(ab, offsets)) / length
    return int(np.argmax(distances))
