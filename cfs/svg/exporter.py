# File: cfs/svg/exporter.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Serialización de figuras al documento SVG canónico.
# Notes: Siempre regenera el formato canónico (orden fijo de atributos).
from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Iterable

from cfs.core.models import Circle, Figure, Line, Rectangle
from cfs.core.version import DOCUMENT_HEIGHT, DOCUMENT_WIDTH, SVG_NAMESPACE
from cfs.svg.importer import CLOSING_TAG
from cfs.utils.errors import CfsIOError, CfsValidationError

log = logging.getLogger(__name__)

HEADER = f"<svg xmlns='{SVG_NAMESPACE}' width='{DOCUMENT_WIDTH}' height='{DOCUMENT_HEIGHT}'>"
INDENT = "  "


def figure_to_svg(figure: Figure) -> str:
    """Una línea por figura, atributos en orden fijo."""
    if isinstance(figure, Circle):
        return f"<circle cx='{figure.x}' cy='{figure.y}' r='{figure.radius}' fill='{figure.color}' />"
    if isinstance(figure, Rectangle):
        return (
            f"<rect x='{figure.x}' y='{figure.y}' width='{figure.width}' "
            f"height='{figure.height}' fill='{figure.color}' />"
        )
    if isinstance(figure, Line):
        return (
            f"<line x1='{figure.x1}' y1='{figure.y1}' x2='{figure.x2}' "
            f"y2='{figure.y2}' stroke='{figure.color}' />"
        )
    raise CfsValidationError(f"No se puede serializar: {type(figure).__name__}")


def serialize_figures(figures: Iterable[Figure]) -> str:
    lines = [HEADER]
    lines.extend(INDENT + figure_to_svg(f) for f in figures)
    lines.append(CLOSING_TAG)
    return "\n".join(lines) + "\n"


def save_figures(figures: Iterable[Figure], path: str | Path, *, atomic: bool = True) -> Path:
    """Escribe el documento completo (pisa lo que hubiera).

    - atomic=True: escribe `<archivo>.tmp` y luego replace (no deja archivos a medias).
    - atomic=False: escritura directa (puede quedar truncado si falla a mitad).
    """
    p = Path(path)
    txt = serialize_figures(figures)

    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        if atomic:
            tmp.write_text(txt, encoding="utf-8")
            tmp.replace(p)
        else:
            p.write_text(txt, encoding="utf-8")
    except OSError as e:
        if atomic:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
        raise CfsIOError(f"No se pudo guardar el documento: {p}") from e

    log.info("Documento guardado: %s", p)
    return p
