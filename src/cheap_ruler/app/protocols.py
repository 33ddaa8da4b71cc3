from typing import Protocol, runtime_checkable

from cheap_ruler.domain.entities.geography import Bbox, Line, Point, PointOnLine, Polygon, Pt


@runtime_checkable
class Scale(Protocol):
    """
    Degrees-to-distance multipliers at a fixed reference latitude.
    kx: ruler units per degree of longitude.
    ky: ruler units per degree of latitude.
    """

    kx: float
    ky: float


@runtime_checkable
class Ruler(Protocol):
    """
    Responsibilities:
      • Measure distances, bearings and areas in ruler units.
      • Move points by distance/bearing or by projected offsets.
      • Walk, snap onto and slice polylines.
      • Buffer points and bboxes, test bbox containment.
    Coordinates are (lon, lat) degrees; everything else is in ruler units.
    """

    kx: float
    ky: float

    def distance(self, a: Pt, b: Pt) -> float: ...
    def bearing(self, a: Pt, b: Pt) -> float: ...
    def offset(self, p: Pt, dx: float, dy: float) -> Point: ...
    def destination(self, p: Pt, d: float, bearing: float) -> Point: ...
    def line_distance(self, line: Line) -> float: ...
    def along(self, line: Line, dist: float) -> Point: ...
    def point_on_line(self, line: Line, p: Pt) -> PointOnLine: ...
    def line_slice(self, start: Pt, stop: Pt, line: Line) -> list[Point]: ...
    def line_slice_along(self, start: float, stop: float, line: Line) -> list[Point]: ...
    def area(self, polygon: Polygon) -> float: ...
    def buffer_point(self, p: Pt, buffer: float) -> Bbox: ...
    def buffer_bbox(self, bbox: Bbox, buffer: float) -> Bbox: ...
    def inside_bbox(self, p: Pt, bbox: Bbox) -> bool: ...
