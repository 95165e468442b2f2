# File: cfs/svg/importer.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Parseo del documento SVG (subset restringido) a figuras.
# Notes: Tolerante a errores: una línea mala se saltea con warning, nunca aborta.
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NamedTuple, Optional

from cfs.core.models import Circle, Figure, Line, Rectangle
from cfs.svg.attributes import missing_attributes, parse_int, tokenize_line
from cfs.utils.errors import CfsIOError, CfsValidationError

log = logging.getLogger(__name__)

CLOSING_TAG = "</svg>"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ParseWarning:
    """Diagnóstico de parseo. line_no es 1-based (None = problema estructural)."""

    line_no: Optional[int]
    line: str
    reason: str

    def __str__(self) -> str:
        if self.line_no is None:
            return self.reason
        return f"línea {self.line_no}: {self.reason}: {self.line}"


class ParseResult(NamedTuple):
    figures: list[Figure]
    warnings: list[ParseWarning]


@dataclass(frozen=True)
class _TagSpec:
    numeric: tuple[str, ...]
    color: str
    build: Callable[..., Figure]


# tag -> atributos requeridos. El orden de `numeric` es el orden de los args del constructor.
TAG_SPECS: dict[str, _TagSpec] = {
    Circle.tag: _TagSpec(("cx", "cy", "r"), "fill", Circle),
    Rectangle.tag: _TagSpec(("x", "y", "width", "height"), "fill", Rectangle),
    Line.tag: _TagSpec(("x1", "y1", "x2", "y2"), "stroke", Line),
}


def parse_document(text: str) -> ParseResult:
    """Parsea el texto completo del documento.

    Cuerpo = lo que hay entre el primer '>' (fin de <svg ...>) y el último </svg>.
    Sin '>' o sin </svg> (o invertidos): lista vacía + warning estructural.
    """
    figures: list[Figure] = []
    warnings: list[ParseWarning] = []

    start = text.find(">")
    end = text.rfind(CLOSING_TAG)
    if start < 0 or end < 0 or start >= end:
        w = ParseWarning(None, "", "Estructura SVG inválida o vacía: no se cargan figuras")
        log.warning("%s", w)
        warnings.append(w)
        return ParseResult(figures, warnings)

    # El cuerpo arranca en la misma línea física que el '>' del header.
    first_line_no = len(_LINE_BREAK_RE.findall(text, 0, start)) + 1
    body = text[start + 1:end]

    for offset, raw_line in enumerate(_LINE_BREAK_RE.split(body)):
        line = raw_line.strip()
        if not line:
            continue
        line_no = first_line_no + offset
        figure, reason = _parse_line(line)
        if figure is not None:
            figures.append(figure)
        elif reason is not None:
            w = ParseWarning(line_no, line, reason)
            log.warning("Línea ignorada: %s", w)
            warnings.append(w)

    return ParseResult(figures, warnings)


def _parse_line(line: str) -> tuple[Optional[Figure], Optional[str]]:
    """Devuelve (figura, None) o (None, motivo). (None, None) = ignorar sin warning."""
    tl = tokenize_line(line)
    if not tl.looks_like_tag:
        log.debug("Texto suelto ignorado: %r", line)
        return None, None

    spec = TAG_SPECS.get(tl.tag or "")
    if spec is None:
        return None, f"tag no reconocido <{tl.tag}>" if tl.tag else "tag no reconocido"

    # Un solo tag por línea.
    if tl.trailing:
        return None, f"contenido extra después del tag: {tl.trailing!r}"

    missing = missing_attributes(tl.attributes, (*spec.numeric, spec.color))
    if missing:
        return None, "faltan atributos: {}".format(", ".join(missing))

    numbers: list[int] = []
    for name in spec.numeric:
        value = tl.attributes[name]
        n = parse_int(value)
        if n is None:
            return None, f"valor no entero en {name}: {value!r}"
        numbers.append(n)

    # Tamaños negativos / color inválido: error de línea (no se construye la figura).
    try:
        return spec.build(*numbers, tl.attributes[spec.color]), None
    except CfsValidationError as e:
        return None, str(e)


def load_figures(path: str | Path) -> ParseResult:
    """Lee y parsea el documento. Archivo inexistente = documento vacío."""
    p = Path(path)
    if not p.exists():
        log.info("Documento inexistente, se arranca vacío: %s", p)
        return ParseResult([], [])

    try:
        raw = p.read_bytes()
    except OSError as e:
        raise CfsIOError(f"No se pudo leer el documento: {p}") from e

    decode_warning: Optional[ParseWarning] = None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        # fallback: reemplazar bytes inválidos y seguir
        text = raw.decode("utf-8", errors="replace")
        decode_warning = ParseWarning(None, "", f"El documento no es UTF-8 válido, se reemplazaron bytes: {p}")
        log.warning("%s", decode_warning)

    result = parse_document(text)
    if decode_warning is not None:
        result.warnings.insert(0, decode_warning)
    log.info("Documento cargado: %s (%d figuras, %d warnings)", p, len(result.figures), len(result.warnings))
    return result
