import logging
import typing as t

from dataclasses import dataclass

from quickhull import data, geometry, util

logger = logging.getLogger(__name__)

Range = t.Tuple[int, int]


@dataclass(frozen=True)
class HullStep:
    left: int
    right: int
    split_index: int
    pivot: data.Point
    probe_index: t.Optional[int]


def _swap(points: data.PointSet, i: int, j: int):
    points[i], points[j] = points[j], points[i]


class HullBuilder:
    """
    QuickHull variant that splits each index range on its minimum-x point.

    Every range ``[left, right]`` with more than one point is partitioned in
    place around its referential point (the first point with the smallest x),
    the referential point is appended to the result, and the two ranges on
    either side of its resting index are processed, left before right.

    The point furthest from the line through ``points[left]`` and the
    referential point is located after each partition and recorded in
    ``steps``, but it never decides the sub-ranges.
    """
    points: data.PointSet
    result: data.HullResult
    steps: t.List[HullStep]

    def __init__(self, points: data.PointSet):
        self.points = points
        self.result = []
        self.steps = []

    def build(self) -> data.HullResult:
        # explicit stack instead of recursion, pending ranges pushed right
        # first so the left range resolves first
        pending: t.List[Range] = [(0, len(self.points) - 1)]
        while pending:
            left, right = pending.pop()
            if left >= right:
                continue
            split_index = self._partition(left, right)
            pending.append((split_index + 1, right))
            pending.append((left, split_index - 1))
        logger.debug("Hull of %s points has %s entries", len(self.points),
                     len(self.result))
        return self.result

    def _referential_index(self, left: int, right: int) -> int:
        points = self.points
        referential_index = left
        for i in range(left, right + 1):
            if points[i].x < points[referential_index].x:
                referential_index = i
        return referential_index

    def _partition(self, left: int, right: int) -> int:
        points = self.points
        _swap(points, self._referential_index(left, right), right)
        pivot = points[right]

        split_index = left
        for i in range(left, right):
            if points[i].x < pivot.x:
                _swap(points, i, split_index)
                split_index += 1
        _swap(points, right, split_index)

        self.result.append(pivot)
        self.steps.append(HullStep(left, right, split_index, pivot,
                                   self._probe(left, split_index)))
        return split_index

    def _probe(self, left: int, split_index: int) -> t.Optional[int]:
        try:
            return geometry.find_max_distance_point(self.points, left,
                                                    split_index)
        except geometry.DegenerateLineError as e:
            logger.debug("No furthest point for [%s, %s]: %s", left,
                         split_index, e)
            return None


@util.timeit
def compute_hull(points: data.PointSet) -> data.HullResult:
    """
    Hull points of ``points`` in the order they were selected.

    ``points`` is consumed: it is permuted in place, so callers needing the
    original order must keep a copy (or call ``convex_hull``).
    """
    return HullBuilder(points).build()


def convex_hull(points: t.Iterable[data.Point]) -> data.HullResult:
    return compute_hull(list(points))
