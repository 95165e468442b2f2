# File: cfs/utils/log.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging del core (consola + cfs.log) configurado desde CfsSettings.
# Notes: Los warnings de parseo salen por acá; setup_logging se llama una vez por sesión (cfs.app).
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILENAME = "cfs.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int | str = logging.INFO) -> None:
    """Engancha handlers al root logger (solo la primera vez).

    - `level` acepta int o nombre ("debug", "WARNING"...); un nombre desconocido cae a INFO.
    - `log_dir=None` deja solo la consola.
    - Si cfs.log no se puede abrir se sigue con consola y un warning.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    lvl = _coerce_level(level)
    root = logging.getLogger()
    root.setLevel(lvl)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root.addHandler(_with_format(logging.StreamHandler(), lvl, fmt))

    if log_dir is not None:
        log_path = Path(log_dir) / LOG_FILENAME
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            root.addHandler(_with_format(logging.FileHandler(log_path, encoding="utf-8"), lvl, fmt))
        except OSError as e:
            logging.getLogger(__name__).warning("Log solo por consola, no se pudo abrir %s: %s", log_path, e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    n = logging.getLevelName(str(level).strip().upper())
    return n if isinstance(n, int) else logging.INFO


def _with_format(handler: logging.Handler, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler
