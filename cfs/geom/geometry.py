"""Geometry engine for figures.

Stateless helpers: euclidean distance, in-place translation, bounding boxes
and full-containment predicates against a rectangle or circle boundary.

Design constraints
- Integer coordinates in, integer coordinates out (translate never rounds).
- Containment means *full* containment; every comparison is inclusive.
- Unknown figure/boundary combinations answer False (fail-closed), never raise.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, Optional, Tuple

from cfs.core.boundary import BoundaryKind, coerce_boundary_kind
from cfs.core.models import Circle, Figure, Line, Rectangle

BBox = Tuple[int, int, int, int]


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def translate(figure: Optional[Figure], dx: int, dy: int) -> None:
    """Shift every x field by dx and every y field by dy, in place.

    A Line moves both endpoints. None is a no-op.
    """
    if figure is None:
        return
    if isinstance(figure, Line):
        figure.x1 += dx
        figure.y1 += dy
        figure.x2 += dx
        figure.y2 += dy
        return
    figure.x += dx
    figure.y += dy


def bounding_box(figure: Figure) -> BBox:
    """Axis-aligned bbox as (x0, y0, x1, y1)."""
    if isinstance(figure, Circle):
        r = figure.radius
        return (figure.x - r, figure.y - r, figure.x + r, figure.y + r)
    if isinstance(figure, Rectangle):
        return (figure.x, figure.y, figure.x + figure.width, figure.y + figure.height)
    if isinstance(figure, Line):
        return (
            min(figure.x1, figure.x2),
            min(figure.y1, figure.y2),
            max(figure.x1, figure.x2),
            max(figure.y1, figure.y2),
        )
    raise TypeError(f"Not a figure: {type(figure).__name__}")


def figures_bounding_box(figures: Iterable[Figure]) -> Optional[BBox]:
    """Union bbox of all figures, or None when there are none."""
    out: Optional[BBox] = None
    for f in figures:
        b = bounding_box(f)
        if out is None:
            out = b
        else:
            out = (min(out[0], b[0]), min(out[1], b[1]), max(out[2], b[2]), max(out[3], b[3]))
    return out


# ----------------------------
# Containment rules
# ----------------------------

def _point_in_rect(px: int, py: int, bx: int, by: int, w: int, h: int) -> bool:
    return bx <= px <= bx + w and by <= py <= by + h


def _point_in_circle(px: int, py: int, cx: int, cy: int, r: int) -> bool:
    return distance(cx, cy, px, py) <= r


def _bbox_in_rect(box: BBox, bx: int, by: int, w: int, h: int) -> bool:
    return _point_in_rect(box[0], box[1], bx, by, w, h) and _point_in_rect(box[2], box[3], bx, by, w, h)


def _circle_in_rect(c: Circle, bx: int, by: int, w: int, h: int) -> bool:
    return _bbox_in_rect(bounding_box(c), bx, by, w, h)


def _rectangle_in_rect(r: Rectangle, bx: int, by: int, w: int, h: int) -> bool:
    return _bbox_in_rect(bounding_box(r), bx, by, w, h)


def _line_in_rect(ln: Line, bx: int, by: int, w: int, h: int) -> bool:
    return _point_in_rect(ln.x1, ln.y1, bx, by, w, h) and _point_in_rect(ln.x2, ln.y2, bx, by, w, h)


def _circle_in_circle(c: Circle, cx: int, cy: int, radius: int, _unused: int) -> bool:
    return distance(cx, cy, c.x, c.y) + c.radius <= radius


def _rectangle_in_circle(r: Rectangle, cx: int, cy: int, radius: int, _unused: int) -> bool:
    x0, y0, x1, y1 = bounding_box(r)
    corners = ((x0, y0), (x1, y0), (x0, y1), (x1, y1))
    return all(_point_in_circle(px, py, cx, cy, radius) for px, py in corners)


def _line_in_circle(ln: Line, cx: int, cy: int, radius: int, _unused: int) -> bool:
    return _point_in_circle(ln.x1, ln.y1, cx, cy, radius) and _point_in_circle(ln.x2, ln.y2, cx, cy, radius)


# (figure type, boundary kind) -> rule(figure, bx, by, p1, p2)
CONTAINMENT_RULES: Dict[Tuple[type, BoundaryKind], Callable[..., bool]] = {
    (Circle, BoundaryKind.RECTANGLE): _circle_in_rect,
    (Rectangle, BoundaryKind.RECTANGLE): _rectangle_in_rect,
    (Line, BoundaryKind.RECTANGLE): _line_in_rect,
    (Circle, BoundaryKind.CIRCLE): _circle_in_circle,
    (Rectangle, BoundaryKind.CIRCLE): _rectangle_in_circle,
    (Line, BoundaryKind.CIRCLE): _line_in_circle,
}


def is_within_boundary(
    figure: Optional[Figure],
    boundary_kind: str | BoundaryKind,
    bx: int,
    by: int,
    p1: int,
    p2: int = 0,
) -> bool:
    """True when the whole figure lies inside the boundary (edges included).

    boundary_kind "rectangle": (bx, by) top-left, p1 width, p2 height.
    boundary_kind "circle": (bx, by) center, p1 radius, p2 unused.
    Unknown figure or boundary kind -> False.
    """
    kind = coerce_boundary_kind(boundary_kind)
    if figure is None or kind is None:
        return False
    rule = CONTAINMENT_RULES.get((type(figure), kind))
    if rule is None:
        return False
    return bool(rule(figure, bx, by, p1, p2))
