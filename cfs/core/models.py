# File: cfs/core/models.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Modelos de figuras (Circle, Rectangle, Line) y factory genérica.
# Notes: Datos puros; solo las posiciones son mutables. La geometría vive en cfs.geom.geometry.
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Any, ClassVar, Union

from cfs.utils.errors import CfsInvalidColor, CfsInvalidDimension, CfsValidationError

# Caracteres que no pueden aparecer en un color: se embebe sin escapar en fill='...'.
_FORBIDDEN_COLOR_CHARS = ("'", '"')


class _FigureFields:
    """Validación por campo en cada asignación.

    Las posiciones (`positions`) se pueden reasignar (las mueve translate), siempre como int.
    Tamaños y color se fijan en el constructor y después son de solo lectura.
    """

    kind: ClassVar[str]
    positions: ClassVar[tuple[str, ...]]
    dimensions: ClassVar[tuple[str, ...]] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        field_name = f"{self.kind}.{name}"
        if name in self.positions:
            value = _as_int(value, field_name)
        elif name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        elif name in self.dimensions:
            value = _as_dimension(value, field_name)
        elif name == "color":
            value = _as_color(value, field_name)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")


@dataclass
class Circle(_FigureFields):
    """Círculo: (x, y) es el centro."""

    kind: ClassVar[str] = "circle"
    tag: ClassVar[str] = "circle"
    positions: ClassVar[tuple[str, ...]] = ("x", "y")
    dimensions: ClassVar[tuple[str, ...]] = ("radius",)

    x: int
    y: int
    radius: int
    color: str


@dataclass
class Rectangle(_FigureFields):
    """Rectángulo: (x, y) es la esquina superior izquierda."""

    kind: ClassVar[str] = "rectangle"
    tag: ClassVar[str] = "rect"
    positions: ClassVar[tuple[str, ...]] = ("x", "y")
    dimensions: ClassVar[tuple[str, ...]] = ("width", "height")

    x: int
    y: int
    width: int
    height: int
    color: str


@dataclass
class Line(_FigureFields):
    """Segmento entre (x1, y1) y (x2, y2). El color se guarda como stroke."""

    kind: ClassVar[str] = "line"
    tag: ClassVar[str] = "line"
    positions: ClassVar[tuple[str, ...]] = ("x1", "y1", "x2", "y2")

    x1: int
    y1: int
    x2: int
    y2: int
    color: str


Figure = Union[Circle, Rectangle, Line]

FIGURE_TYPES: tuple[type, ...] = (Circle, Rectangle, Line)

FIGURE_KINDS: dict[str, type] = {cls.kind: cls for cls in FIGURE_TYPES}


def is_figure(obj: Any) -> bool:
    return isinstance(obj, FIGURE_TYPES)


def make_figure(kind: str, x: int, y: int, color: str, p1: int, p2: int = 0) -> Figure:
    """Crea una figura a partir de los datos genéricos que junta la UI.

    - circle: p1 = radio (p2 se ignora)
    - rectangle: p1 = ancho, p2 = alto
    - line: (x, y) es el primer extremo y (p1, p2) el segundo
    """
    k = str(kind or "").strip().lower()
    if k == Circle.kind:
        return Circle(x, y, p1, color)
    if k == Rectangle.kind:
        return Rectangle(x, y, p1, p2, color)
    if k == Line.kind:
        return Line(x, y, p1, p2, color)
    raise CfsValidationError(f"Tipo de figura inválido: {kind!r}")


# ----------------------------
# Helpers
# ----------------------------

def _as_int(value: Any, field: str) -> int:
    # bool es subclase de int: no lo aceptamos como coordenada.
    if isinstance(value, bool) or not isinstance(value, int):
        raise CfsValidationError(f"Campo {field} inválido (int): {value!r}")
    return value


def _as_dimension(value: Any, field: str) -> int:
    n = _as_int(value, field)
    if n < 0:
        raise CfsInvalidDimension(f"Campo {field} no puede ser negativo: {n}")
    return n


def _as_color(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise CfsInvalidColor(f"Campo {field} vacío o inválido: {value!r}")
    if any(ch.isspace() for ch in value) or any(ch in value for ch in _FORBIDDEN_COLOR_CHARS):
        raise CfsInvalidColor(f"Campo {field} no puede tener espacios ni comillas: {value!r}")
    return value
