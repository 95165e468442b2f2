# File: cfs/app.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Punto de entrada del core: settings + logging + dibujo cargado.
# Notes: El loop de menú/prompt vive afuera; llama a open_drawing() una vez por sesión.
from __future__ import annotations

from pathlib import Path

from cfs.core.drawing import Drawing
from cfs.core.settings import load_settings
from cfs.core.version import APP_VERSION
from cfs.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def open_drawing(start: Path | None = None, *, load: bool = True) -> Drawing:
    """Arma la sesión: lee cfs_settings.json/env, configura logging y carga el documento."""
    settings = load_settings(start)
    setup_logging(settings.log_dir, settings.log_level)

    drawing = Drawing.from_settings(settings)
    if load:
        drawing.load_from_file()
    log.info("CFS iniciado (v%s): %s (%d figuras)", APP_VERSION, drawing.file_path, drawing.get_figure_count())
    return drawing
