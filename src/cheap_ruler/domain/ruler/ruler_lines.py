import math

from cheap_ruler.app.protocols import Scale
from cheap_ruler.domain.entities.geography import (
    Line,
    Point,
    PointOnLine,
    Pt,
    interpolate,
    to_line,
)
from cheap_ruler.domain.errors import DegenerateInputError
from cheap_ruler.domain.ruler.ruler_points import distance


def _at(p0: Point, p1: Point, dist: float, d: float) -> Point:
    # zero-length segments collapse onto their start
    return interpolate(p0, p1, dist / d) if d else p0


def line_distance(r: Scale, line: Line) -> float:
    pts = to_line(line)
    total = 0.0
    for p0, p1 in zip(pts, pts[1:]):
        total += distance(r, p0, p1)
    return total


def along(r: Scale, line: Line, dist: float) -> Point:
    pts = to_line(line)
    if not pts:
        raise DegenerateInputError("along() needs a non-empty line")
    if dist <= 0:
        return pts[0]

    total = 0.0
    for p0, p1 in zip(pts, pts[1:]):
        d = distance(r, p0, p1)
        total += d
        if total > dist:
            return _at(p0, p1, dist - (total - d), d)
    return pts[-1]


def point_on_line(r: Scale, line: Line, p: Pt) -> PointOnLine:
    """
    Snap p onto the line.
    Projection runs in scaled space; the first segment at minimal distance wins.
    """
    pts = to_line(line)
    if not pts:
        raise DegenerateInputError("point_on_line() needs a non-empty line")
    if len(pts) == 1:
        return PointOnLine(point=pts[0], index=0, t=0.0)

    px, py = p[0], p[1]
    kx, ky = r.kx, r.ky
    min_dist = math.inf
    min_x, min_y, min_t, min_i = pts[0].lon, pts[0].lat, 0.0, 0

    for i in range(len(pts) - 1):
        x, y = pts[i].lon, pts[i].lat
        dx = (pts[i + 1].lon - x) * kx
        dy = (pts[i + 1].lat - y) * ky
        t = 0.0

        if dx != 0 or dy != 0:
            t = ((px - x) * kx * dx + (py - y) * ky * dy) / (dx * dx + dy * dy)
            if t > 1:
                x, y = pts[i + 1].lon, pts[i + 1].lat
            elif t > 0:
                x += (dx / kx) * t
                y += (dy / ky) * t

        dx = (px - x) * kx
        dy = (py - y) * ky
        sq_dist = dx * dx + dy * dy
        if sq_dist < min_dist:
            min_dist = sq_dist
            min_x, min_y, min_t, min_i = x, y, t, i

    return PointOnLine(point=Point(min_x, min_y), index=min_i, t=max(0.0, min(1.0, min_t)))


def line_slice(r: Scale, start: Pt, stop: Pt, line: Line) -> list[Point]:
    """Part of the line between the snapped start and stop, in the line's own direction."""
    pts = to_line(line)
    if len(pts) < 2:
        raise DegenerateInputError("line_slice() needs a line of at least 2 points")

    p1 = point_on_line(r, pts, start)
    p2 = point_on_line(r, pts, stop)
    if p1.index > p2.index or (p1.index == p2.index and p1.t > p2.t):
        p1, p2 = p2, p1

    out = [p1.point]
    left, right = p1.index + 1, p2.index

    if left <= right and pts[left] != out[0]:
        out.append(pts[left])
    out.extend(pts[left + 1 : right + 1])

    if pts[right] != p2.point:
        out.append(p2.point)
    return out


def line_slice_along(r: Scale, start: float, stop: float, line: Line) -> list[Point]:
    """
    Part of the line between two distances from its start.
    A stop beyond the line's length leaves the slice open-ended at the last vertex.
    """
    pts = to_line(line)
    out: list[Point] = []
    total = 0.0

    for p0, p1 in zip(pts, pts[1:]):
        d = distance(r, p0, p1)
        total += d

        if total > start and not out:
            out.append(_at(p0, p1, start - (total - d), d))
        if total >= stop:
            out.append(_at(p0, p1, stop - (total - d), d))
            return out
        if total > start:
            out.append(p1)
    return out
