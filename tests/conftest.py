from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from cfs.core.models import Circle, Line, Rectangle


@pytest.fixture
def sample_figures() -> list:
    return [
        Circle(10, 10, 5, "red"),
        Rectangle(0, 0, 20, 10, "blue"),
        Line(1, 2, 30, 40, "black"),
    ]


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "drawing.svg") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def fresh_root(monkeypatch: pytest.MonkeyPatch):
    """Root logger limpio: permite llamar setup_logging() de nuevo y deshace sus handlers."""
    from cfs.utils import log as cfs_log

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(cfs_log, "_LOGGER_CONFIGURED", False)
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
