# File: cfs/core/settings.py
# Project: CreadorFigurasSvg (CFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Configuración (JSON repo-local + overrides por variables de entorno).
# Notes: Tolerante a errores: un valor inválido se ignora con warning.
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from cfs.core.version import DEFAULT_DOCUMENT_NAME

log = logging.getLogger(__name__)

# Archivo esperado: cfs_settings.json en el CWD (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "cfs_settings.json"

ENV_DOCUMENT_PATH = "CFS_DOCUMENT_PATH"
ENV_ATOMIC_SAVE = "CFS_ATOMIC_SAVE"
ENV_LOG_DIR = "CFS_LOG_DIR"
ENV_LOG_LEVEL = "CFS_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass
class CfsSettings:
    document_path: str = DEFAULT_DOCUMENT_NAME
    # Guardado atómico (tmp + replace). En False se pisa el archivo directo.
    atomic_save: bool = True
    # None = solo consola.
    log_dir: Optional[str] = "logs"
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca cfs_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_settings(start: Path | None = None, *, prefer_env: bool = True) -> CfsSettings:
    """Arma la configuración: defaults <- cfs_settings.json <- env vars.

    - Si `prefer_env=True`, las env vars pisan al JSON (overrides manuales).
    - Si `prefer_env=False`, el JSON gana sobre las env vars.
    """
    out = CfsSettings()
    file_data = _read_settings_file(start)
    env_data = _read_env()

    layers = (file_data, env_data) if prefer_env else (env_data, file_data)
    for layer in layers:
        _apply(out, layer)
    return out


def save_settings(settings: CfsSettings, path: str | Path | None = None) -> Path:
    """Guarda la configuración como JSON (por defecto en el CWD)."""
    p = Path(path) if path else Path.cwd() / PROJECT_SETTINGS_FILENAME
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(settings.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return p


def _read_settings_file(start: Path | None) -> Dict[str, Any]:
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Settings inválidos en %s: se espera un objeto JSON", p)
        return {}
    log.debug("Settings leídos desde %s: %s", p, data)
    return data


def _read_env() -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if os.environ.get(ENV_DOCUMENT_PATH):
        data["document_path"] = os.environ[ENV_DOCUMENT_PATH]
    if os.environ.get(ENV_ATOMIC_SAVE):
        data["atomic_save"] = os.environ[ENV_ATOMIC_SAVE]
    if ENV_LOG_DIR in os.environ:
        # Vacío = sin archivo de log.
        data["log_dir"] = os.environ[ENV_LOG_DIR] or None
    if os.environ.get(ENV_LOG_LEVEL):
        data["log_level"] = os.environ[ENV_LOG_LEVEL]
    return data


def _apply(out: CfsSettings, data: Dict[str, Any]) -> None:
    doc = data.get("document_path")
    if doc is not None:
        if isinstance(doc, str) and doc.strip():
            out.document_path = doc.strip()
        else:
            log.warning("document_path inválido: %r", doc)

    if "atomic_save" in data:
        flag = _coerce_bool(data["atomic_save"])
        if flag is None:
            log.warning("atomic_save inválido: %r", data["atomic_save"])
        else:
            out.atomic_save = flag

    if "log_dir" in data:
        d = data["log_dir"]
        if d is None or (isinstance(d, str) and not d.strip()):
            out.log_dir = None
        elif isinstance(d, str):
            out.log_dir = d.strip()
        else:
            log.warning("log_dir inválido: %r", d)

    lvl = data.get("log_level")
    if lvl is not None:
        s = str(lvl).strip().upper()
        if s in VALID_LOG_LEVELS:
            out.log_level = s
        else:
            log.warning("log_level inválido: %r", lvl)


def _coerce_bool(v: Any) -> Optional[bool]:
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return None
