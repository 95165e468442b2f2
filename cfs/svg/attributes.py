# File: cfs/svg/attributes.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Tokenizer de líneas del documento: nombre de tag + pares name='value'.
# Notes: No es un parser XML. Solo comillas simples, sin escapes.
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

# Caracteres válidos en un nombre de tag/atributo (subset de XML Name).
_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_:.")

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class TagLine:
    tag: Optional[str]
    attributes: dict[str, str] = field(default_factory=dict)
    # Lo que queda después del '>' que cierra el tag (sin espacios).
    trailing: str = ""

    @property
    def looks_like_tag(self) -> bool:
        return self.tag is not None


def tokenize_line(line: str) -> TagLine:
    """Parte una línea (ya trimmeada) en tag + atributos + resto.

    - Si la línea no empieza con '<', tag=None (texto suelto).
    - `<!-- ...` o `<?xml ...` dan un tag vacío/raro: se reportan como no reconocidos.
    - El tag termina en el primer '>' fuera de comillas (o `/>`). Sin '>' se toma la línea entera.
    """
    s = line.strip()
    if not s.startswith("<"):
        return TagLine(tag=None)

    i = 1
    while i < len(s) and s[i] in _NAME_CHARS:
        i += 1
    tag = s[1:i]

    end = _tag_end(s, i)
    if end < 0:
        return TagLine(tag=tag, attributes=tokenize_attributes(s[i:]))
    return TagLine(
        tag=tag,
        attributes=tokenize_attributes(s[i:end]),
        trailing=s[end + 1:].strip(),
    )


def _tag_end(s: str, pos: int) -> int:
    """Índice del '>' que cierra el tag, ignorando los que estén dentro de '...'. -1 si no hay."""
    in_quote = False
    for j in range(pos, len(s)):
        ch = s[j]
        if ch == "'":
            in_quote = not in_quote
        elif ch == ">" and not in_quote:
            return j
    return -1


def tokenize_attributes(text: str) -> dict[str, str]:
    """Extrae pares name='value' en orden de aparición.

    Si un nombre se repite, gana la primera aparición.
    Una comilla sin cerrar corta el scan (el resto se ignora).
    """
    attrs: dict[str, str] = {}
    pos = 0
    while True:
        eq = text.find("='", pos)
        if eq < 0:
            break
        end = text.find("'", eq + 2)
        if end < 0:
            break

        start = eq
        while start > pos and text[start - 1] in _NAME_CHARS:
            start -= 1
        name = text[start:eq]
        if name and name not in attrs:
            attrs[name] = text[eq + 2:end]
        pos = end + 1
    return attrs


def missing_attributes(attrs: dict[str, str], required: Iterable[str]) -> list[str]:
    return [name for name in required if name not in attrs]


def parse_int(value: str) -> Optional[int]:
    """Entero estricto: [+-]?dígitos ASCII. None si no matchea."""
    if _INT_RE.fullmatch(value) is None:
        return None
    return int(value)
