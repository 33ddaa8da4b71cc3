import math

from cheap_ruler.app.protocols import Scale
from cheap_ruler.domain.entities.geography import Point, Pt, to_point


def distance(r: Scale, a: Pt, b: Pt) -> float:
    dx = (a[0] - b[0]) * r.kx
    dy = (a[1] - b[1]) * r.ky
    return math.hypot(dx, dy)


def bearing(r: Scale, a: Pt, b: Pt) -> float:
    """Degrees clockwise from north, in (-180, 180]. Coincident points give 0."""
    dx = (b[0] - a[0]) * r.kx
    dy = (b[1] - a[1]) * r.ky
    if dx == 0 and dy == 0:
        return 0.0
    brg = math.atan2(dx, dy) * 180 / math.pi
    if brg > 180:
        brg -= 360
    return brg


def offset(r: Scale, p: Pt, dx: float, dy: float) -> Point:
    p = to_point(p)
    return Point(p.lon + dx / r.kx, p.lat + dy / r.ky)


def destination(r: Scale, p: Pt, d: float, brg: float) -> Point:
    a = brg * math.pi / 180
    return offset(r, p, math.sin(a) * d, math.cos(a) * d)
