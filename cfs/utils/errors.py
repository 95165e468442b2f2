# File: cfs/utils/errors.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: Los problemas de parseo NO son errores: se reportan como ParseWarning.
from __future__ import annotations


class CfsError(Exception):
    """Error base del proyecto."""


class CfsValidationError(CfsError):
    """Error de validación (input/figura/parámetros)."""


class CfsInvalidDimension(CfsValidationError):
    """Radio/ancho/alto negativo."""


class CfsInvalidColor(CfsValidationError):
    """Color vacío o con espacios/comillas (no se puede embeber en un atributo)."""


class CfsIOError(CfsError):
    """Error de E/S (lectura/escritura del documento)."""
