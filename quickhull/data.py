import logging
import typing as t

import numpy as np
from dataclasses import dataclass

from quickhull import constants, util

logger = logging.getLogger(__name__)

Coords = t.Tuple[float, float]
NPCoords = t.List[float]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def array(self) -> NPCoords:
        return [self.x, self.y]

    def __repr__(self):
        return f'{self.__class__.__name__}({self.x}, {self.y})'

    __str__ = __repr__


def create_point(x: float, y: float) -> Point:
    return Point(float(x), float(y))


# Ordered, mutable and owned by the caller for one hull computation.
PointSet = t.List[Point]

# Append-only, no deduplication.
HullResult = t.List[Point]


def from_coords(coords: t.Iterable[Coords]) -> PointSet:
    return [create_point(x, y) for x, y in coords]


def to_array(points: t.Sequence[Point]) -> np.ndarray:
    return np.array([p.array() for p in points], dtype=float).reshape(-1, 2)


def format_point(point: Point) -> str:
    return "(%g, %g)" % point.coords


@util.timeit
def load_datafile(path_name: str) -> t.Tuple[t.Optional[str], PointSet]:
    with open(path_name) as fh:
        meta_data = _read_metadata(fh)
        name = meta_data.get("name")
        points = _read_points(fh)

    dimension = meta_data.get("dimension")
    if dimension is not None and dimension.isdigit() \
            and int(dimension) != len(points):
        logger.warning("%s declares %s points, read %s", path_name,
                       dimension, len(points))
    logger.info("Loaded %s points", len(points))
    return name, points


def _read_metadata(fh: t.TextIO) -> t.Mapping[str, str]:
    meta_data = {}
    for read_line in fh:
        if constants.COORD_DELIMITER in read_line:
            break
        if ":" not in read_line:
            continue
        field, value = read_line.split(":", 1)
        meta_data[field.strip().lower()] = value.strip()
    return meta_data


def _read_points(fh: t.TextIO) -> PointSet:
    points = []
    for read_line in fh:
        stripped = read_line.strip()
        if stripped == constants.EOF_MARKER:
            break
        try:
            _, x, y = stripped.split()
            points.append(create_point(float(x), float(y)))
        except ValueError:
            logger.debug("Skipping coordinate line %r", stripped)
    return points


def read_points(fh: t.TextIO) -> PointSet:
    """
    Read a point count followed by that many whitespace separated ``x y``
    pairs, the format accepted on standard input.
    """
    tokens = fh.read().split()
    if not tokens:
        raise ValueError("missing point count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError(f"negative point count: {count}")
    values = tokens[1:1 + 2 * count]
    if len(values) < 2 * count:
        raise ValueError(f"expected {count} points, got {len(values) // 2}")
    coords = [float(v) for v in values]
    return from_coords(zip(coords[0::2], coords[1::2]))
