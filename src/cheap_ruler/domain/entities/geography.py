from collections.abc import Iterator, Sequence
from dataclasses import dataclass


# Core geometry types used by the ruler
@dataclass(frozen=True)
class Point:
    lon: float  # degrees
    lat: float

    def __iter__(self) -> Iterator[float]:
        yield self.lon
        yield self.lat

    def __getitem__(self, i: int) -> float:
        return (self.lon, self.lat)[i]

    def __len__(self) -> int:
        return 2


Pt = Point | tuple[float, float] | Sequence[float]

# (west, south, east, north)
Bbox = tuple[float, float, float, float]

Line = Sequence[Pt]

# ring 0 is the outer boundary, the rest are holes
Polygon = Sequence[Line]


@dataclass(frozen=True)
class PointOnLine:
    """Snap result: closest point, start index of its segment, position t in [0, 1] on that segment."""

    point: Point
    index: int
    t: float


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


def to_line(line: Line) -> list[Point]:
    return [to_point(p) for p in line]


def to_bbox(b: Sequence[float]) -> Bbox:
    w, s, e, n = b
    return (float(w), float(s), float(e), float(n))


def interpolate(a: Point, b: Point, t: float) -> Point:
    return Point(a.lon + (b.lon - a.lon) * t, a.lat + (b.lat - a.lat) * t)
