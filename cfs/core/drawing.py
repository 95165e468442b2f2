# File: cfs/core/drawing.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Dibujo en memoria (lista ordenada de figuras) respaldado por un documento SVG.
# Notes: Único estado mutable. Índices de UI 1-based.
from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Optional

from cfs.core.boundary import BoundaryKind
from cfs.core.models import Figure, is_figure
from cfs.core.settings import CfsSettings
from cfs.geom.geometry import BBox, figures_bounding_box, is_within_boundary, translate
from cfs.geom.svgelements_bbox import DocumentBBox, compute_document_bbox
from cfs.svg.exporter import save_figures
from cfs.svg.importer import ParseWarning, load_figures
from cfs.utils.errors import CfsValidationError

log = logging.getLogger(__name__)


class Drawing:
    """Colección ordenada de figuras + documento de respaldo.

    - load_from_file() reemplaza todo el contenido (no mergea).
    - save_to_file() serializa la lista completa y pisa el documento.
    - El dibujo es dueño de sus figuras: guarda copias y entrega copias.
    """

    def __init__(self, file_path: str | Path, *, atomic_save: bool = True) -> None:
        self.file_path = Path(file_path)
        self.atomic_save = atomic_save
        self.last_warnings: list[ParseWarning] = []
        self._figures: list[Figure] = []

    @classmethod
    def from_settings(cls, settings: CfsSettings) -> "Drawing":
        return cls(settings.document_path, atomic_save=settings.atomic_save)

    # ----------------------------
    # Persistencia
    # ----------------------------
    def load_from_file(self) -> list[ParseWarning]:
        """Descarta lo que hay en memoria y carga el documento (vacío si no existe).

        Devuelve los warnings de parseo (también quedan en `last_warnings`).
        Un error de E/S se propaga como CfsIOError y deja el dibujo intacto.
        """
        result = load_figures(self.file_path)
        self._figures = list(result.figures)
        self.last_warnings = list(result.warnings)
        return list(self.last_warnings)

    def save_to_file(self) -> Path:
        return save_figures(self._figures, self.file_path, atomic=self.atomic_save)

    # ----------------------------
    # Figuras
    # ----------------------------
    def add_figure(self, figure: Optional[Figure]) -> None:
        if figure is None:
            return
        if not is_figure(figure):
            raise CfsValidationError(f"No es una figura: {type(figure).__name__}")
        self._figures.append(copy.copy(figure))

    def get_figure(self, index: int) -> Optional[Figure]:
        i = self._slot(index)
        if i is None:
            return None
        return copy.copy(self._figures[i])

    def remove_figure(self, index: int) -> bool:
        i = self._slot(index)
        if i is None:
            return False
        removed = self._figures.pop(i)
        log.debug("Figura %d eliminada: %r", index, removed)
        return True

    def get_all_figures(self) -> list[Figure]:
        return [copy.copy(f) for f in self._figures]

    def get_figure_count(self) -> int:
        return len(self._figures)

    def __len__(self) -> int:
        return len(self._figures)

    # ----------------------------
    # Geometría
    # ----------------------------
    def translate_all_figures(self, dx: int, dy: int) -> None:
        for f in self._figures:
            translate(f, dx, dy)

    def translate_single_figure(self, index: int, dx: int, dy: int) -> bool:
        i = self._slot(index)
        if i is None:
            return False
        translate(self._figures[i], dx, dy)
        return True

    def get_figures_within_boundary(
        self,
        kind: str | BoundaryKind,
        x: int,
        y: int,
        p1: int,
        p2: int = 0,
    ) -> list[Figure]:
        return [copy.copy(f) for f in self._figures if is_within_boundary(f, kind, x, y, p1, p2)]

    def bounding_box(self) -> Optional[BBox]:
        return figures_bounding_box(self._figures)

    def document_bbox(self) -> DocumentBBox:
        """Bbox del documento guardado según svgelements (puede diferir si hay cambios sin guardar)."""
        return compute_document_bbox(self.file_path)

    def _slot(self, index: int) -> Optional[int]:
        """Índice 1-based -> 0-based, o None si está fuera de rango."""
        if 0 < index <= len(self._figures):
            return index - 1
        return None
