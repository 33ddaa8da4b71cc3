from collections.abc import Sequence

from cheap_ruler.app.protocols import Scale
from cheap_ruler.domain.entities.geography import Bbox, Polygon, Pt, to_bbox


def area(r: Scale, polygon: Polygon) -> float:
    """
    Shoelace sum over every ring, holes subtracted.
    Rings must be wound consistently with each other; the outer ring's direction does not matter.
    """
    total = 0.0
    for i, ring in enumerate(polygon):
        sign = 1.0 if i == 0 else -1.0
        k = len(ring) - 1
        for j in range(len(ring)):
            total += (ring[j][0] - ring[k][0]) * (ring[j][1] + ring[k][1]) * sign
            k = j
    return (abs(total) / 2) * r.kx * r.ky


def buffer_point(r: Scale, p: Pt, buffer: float) -> Bbox:
    h = buffer / r.kx
    v = buffer / r.ky
    return (p[0] - h, p[1] - v, p[0] + h, p[1] + v)


def buffer_bbox(r: Scale, bbox: Sequence[float], buffer: float) -> Bbox:
    h = buffer / r.kx
    v = buffer / r.ky
    w, s, e, n = to_bbox(bbox)
    return (w - h, s - v, e + h, n + v)


def inside_bbox(p: Pt, bbox: Sequence[float]) -> bool:
    w, s, e, n = to_bbox(bbox)
    return w <= p[0] <= e and s <= p[1] <= n
