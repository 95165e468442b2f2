"""svgelements adapter for document bbox (cross-check tooling).

Reads a saved document with a real SVG parser (`svgelements`) and reports
the bbox of every drawable element plus their union. Comparing this with
`cfs.geom.geometry.figures_bounding_box` catches serializer regressions
(wrong attribute names, swapped coordinates, broken quoting).

Notes
- svgelements skips degenerate shapes (r=0, width=0, height=0), so those
  figures have no entry in `elements`.
- Must never raise for a bad document: failures land in `error`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

from svgelements import SVG, Shape

FloatBBox = Tuple[float, float, float, float]


@dataclass(frozen=True)
class DocumentBBox:
    bbox: Optional[FloatBBox] = None
    elements: List[FloatBBox] = field(default_factory=list)
    doc_size: Optional[Tuple[float, float]] = None
    error: Optional[str] = None


def _safe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        # Length-like objects might store a numeric `.value`
        try:
            return float(getattr(v, "value"))
        except (AttributeError, TypeError, ValueError):
            return None


def _union(boxes: List[FloatBBox]) -> Optional[FloatBBox]:
    if not boxes:
        return None
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


def compute_document_bbox(svg_path: str | Path, *, ppi: float = 96.0) -> DocumentBBox:
    """Per-element bboxes (document order) and their union, without stroke."""
    try:
        svg = SVG.parse(str(svg_path), ppi=float(ppi), reify=True)
    except Exception as e:  # svgelements raises ParseError, OSError, ValueError...
        return DocumentBBox(error=f"{type(e).__name__}: {e}")

    boxes: List[FloatBBox] = []
    for el in svg.elements():
        if not isinstance(el, Shape):
            continue
        b = el.bbox(with_stroke=False)
        if b is None:
            continue
        boxes.append((float(b[0]), float(b[1]), float(b[2]), float(b[3])))

    doc_w = _safe_float(getattr(svg, "width", None))
    doc_h = _safe_float(getattr(svg, "height", None))
    doc_size = (doc_w, doc_h) if doc_w is not None and doc_h is not None else None

    return DocumentBBox(bbox=_union(boxes), elements=boxes, doc_size=doc_size)
