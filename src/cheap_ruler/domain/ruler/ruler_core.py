# cheap_ruler/domain/ruler/ruler_core.py
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from cheap_ruler.app.protocols import Ruler
from cheap_ruler.domain.entities.geography import Bbox, Line, Point, PointOnLine, Polygon, Pt
from cheap_ruler.domain.ruler import ruler_areas, ruler_lines, ruler_points
from cheap_ruler.domain.units import DEFAULT_UNIT, UNITS


def ruler_factors(lat: float, multiplier: float = 1.0) -> tuple[float, float]:
    """
    (kx, ky) for a reference latitude: ruler units per degree of longitude and of latitude.

    Polynomial fit to the ellipsoidal projection formulas; cos(n*lat) comes from the
    Chebyshev recurrence cos_n = 2*cos*cos_(n-1) - cos_(n-2), so only one cos() is evaluated.
    """
    cos = math.cos(lat * math.pi / 180)
    cos2 = 2 * cos * cos - 1
    cos3 = 2 * cos * cos2 - cos
    cos4 = 2 * cos * cos3 - cos2
    cos5 = 2 * cos * cos4 - cos3

    kx = multiplier * (111.41513 * cos - 0.09455 * cos3 + 0.00012 * cos5)
    ky = multiplier * (111.13209 - 0.56605 * cos2 + 0.0012 * cos4)
    return kx, ky


@dataclass(frozen=True)
class CheapRuler(Ruler):
    """
    Flat-earth approximation anchored to one latitude.
    Good to a few hundred kilometers away from the poles. Immutable, safe to share.
    """

    kx: float
    ky: float

    units: ClassVar[dict[str, float]] = UNITS

    @classmethod
    def from_latitude(
        cls, lat: float, unit: str = DEFAULT_UNIT, *, strict: bool = False
    ) -> "CheapRuler":
        from cheap_ruler.domain.ruler.ruler_factory import new_ruler

        ruler, err = new_ruler(lat, unit)
        if err is not None and strict:
            raise err
        return ruler

    # --------------- Points -----------------------------

    def distance(self, a: Pt, b: Pt) -> float:
        return ruler_points.distance(self, a, b)

    def bearing(self, a: Pt, b: Pt) -> float:
        return ruler_points.bearing(self, a, b)

    def offset(self, p: Pt, dx: float, dy: float) -> Point:
        return ruler_points.offset(self, p, dx, dy)

    def destination(self, p: Pt, d: float, bearing: float) -> Point:
        return ruler_points.destination(self, p, d, bearing)

    # --------------- Lines ------------------------------

    def line_distance(self, line: Line) -> float:
        return ruler_lines.line_distance(self, line)

    def along(self, line: Line, dist: float) -> Point:
        return ruler_lines.along(self, line, dist)

    def point_on_line(self, line: Line, p: Pt) -> PointOnLine:
        return ruler_lines.point_on_line(self, line, p)

    def line_slice(self, start: Pt, stop: Pt, line: Line) -> list[Point]:
        return ruler_lines.line_slice(self, start, stop, line)

    def line_slice_along(self, start: float, stop: float, line: Line) -> list[Point]:
        return ruler_lines.line_slice_along(self, start, stop, line)

    # --------------- Areas & bboxes ---------------------

    def area(self, polygon: Polygon) -> float:
        return ruler_areas.area(self, polygon)

    def buffer_point(self, p: Pt, buffer: float) -> Bbox:
        return ruler_areas.buffer_point(self, p, buffer)

    def buffer_bbox(self, bbox: Sequence[float], buffer: float) -> Bbox:
        return ruler_areas.buffer_bbox(self, bbox, buffer)

    def inside_bbox(self, p: Pt, bbox: Sequence[float]) -> bool:
        return ruler_areas.inside_bbox(p, bbox)
