from __future__ import annotations

from pathlib import Path

import pytest

from cfs.core.drawing import Drawing
from cfs.core.models import Circle, Line, Rectangle
from cfs.geom.geometry import bounding_box
from cfs.geom.svgelements_bbox import compute_document_bbox


def test_saved_document_matches_own_bboxes(tmp_path: Path) -> None:
    d = Drawing(tmp_path / "doc.svg")
    figures = [Circle(50, 60, 10, "red"), Rectangle(5, 6, 30, 40, "blue"), Line(200, 10, 100, 300, "black")]
    for f in figures:
        d.add_figure(f)
    d.translate_all_figures(3, -2)
    d.save_to_file()

    report = d.document_bbox()
    assert report.error is None
    assert report.doc_size == pytest.approx((500.0, 500.0))
    assert len(report.elements) == 3
    for got, fig in zip(report.elements, d.get_all_figures()):
        assert got == pytest.approx(bounding_box(fig), abs=1e-3)
    assert report.bbox == pytest.approx(d.bounding_box(), abs=1e-3)


def test_document_bbox_reflects_last_save(tmp_path: Path) -> None:
    d = Drawing(tmp_path / "doc.svg")
    d.add_figure(Rectangle(0, 0, 10, 10, "blue"))
    d.save_to_file()
    d.translate_all_figures(100, 100)
    assert d.document_bbox().bbox == pytest.approx((0, 0, 10, 10), abs=1e-3)
    d.save_to_file()
    assert d.document_bbox().bbox == pytest.approx((100, 100, 110, 110), abs=1e-3)


def test_missing_document_reports_error(tmp_path: Path) -> None:
    report = compute_document_bbox(tmp_path / "nope.svg")
    assert report.bbox is None
    assert report.error
