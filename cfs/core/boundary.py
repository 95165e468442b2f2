# File: cfs/core/boundary.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Tipos de límite para consultas de contención (rectángulo/círculo).
# Notes: El límite no se persiste; solo se usa para filtrar figuras.

from __future__ import annotations

from enum import Enum
from typing import Optional


class BoundaryKind(str, Enum):
    """Forma del límite de una consulta.

    - rectangle: (bx, by) = esquina superior izquierda, p1 = ancho, p2 = alto.
    - circle: (bx, by) = centro, p1 = radio, p2 no se usa.
    """

    RECTANGLE = "rectangle"
    CIRCLE = "circle"


def coerce_boundary_kind(v: object) -> Optional[BoundaryKind]:
    """Normaliza el tipo de límite (sin distinguir mayúsculas). None si no se reconoce."""
    if isinstance(v, BoundaryKind):
        return v
    if not isinstance(v, str):
        return None
    s = v.strip().lower()
    for k in BoundaryKind:
        if k.value == s:
            return k
    return None
