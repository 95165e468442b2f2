"""Geometry helpers.

This package is intentionally small and dependency-light.

`geometry` is the runtime engine used by the drawing store; `svgelements_bbox`
is an independent reading of saved documents (svgelements) used to
cross-check our own bounding boxes.
"""

from __future__ import annotations
