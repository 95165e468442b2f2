from __future__ import annotations

from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import given

from cfs.core.models import Circle, Line, Rectangle
from cfs.core.settings import CfsSettings
from cfs.core.drawing import Drawing
from cfs.utils.errors import CfsIOError, CfsValidationError


@pytest.fixture
def drawing(tmp_path: Path, sample_figures) -> Drawing:
    d = Drawing(tmp_path / "drawing.svg")
    for f in sample_figures:
        d.add_figure(f)
    return d


def test_index_semantics(drawing: Drawing, sample_figures) -> None:
    assert drawing.get_figure_count() == 3
    assert drawing.remove_figure(0) is False
    assert drawing.remove_figure(4) is False
    assert drawing.remove_figure(-1) is False
    assert drawing.get_figure(0) is None
    assert drawing.get_figure(4) is None

    assert drawing.remove_figure(2) is True
    assert drawing.get_figure_count() == 2
    assert drawing.get_figure(2) == sample_figures[2]
    assert drawing.get_figure(1) == sample_figures[0]


def test_scenario_empty_add_save_reload(write_document) -> None:
    p = write_document("<svg xmlns='http://www.w3.org/2000/svg' width='500' height='500'></svg>")
    d = Drawing(p)
    assert d.load_from_file() == []
    assert d.get_figure_count() == 0

    d.add_figure(Circle(5, 5, 2, "green"))
    assert d.get_figure_count() == 1
    d.save_to_file()

    fresh = Drawing(p)
    fresh.load_from_file()
    assert fresh.get_all_figures() == [Circle(5, 5, 2, "green")]


def test_load_replaces_contents(drawing: Drawing, write_document) -> None:
    drawing.file_path = write_document("<svg>\n<line x1='0' y1='0' x2='1' y2='1' stroke='red' />\n</svg>")
    drawing.load_from_file()
    assert drawing.get_all_figures() == [Line(0, 0, 1, 1, "red")]


def test_load_missing_document_gives_empty(drawing: Drawing) -> None:
    assert not drawing.file_path.exists()
    drawing.load_from_file()
    assert drawing.get_figure_count() == 0


def test_load_keeps_warnings(write_document) -> None:
    d = Drawing(write_document("<svg>\n<circle cx='1' cy='2' r='3' fill='red' />\n<garbage>\n</svg>"))
    warnings = d.load_from_file()
    assert d.get_figure_count() == 1
    assert len(warnings) == 1
    assert d.last_warnings == warnings


def test_load_io_error_keeps_state(drawing: Drawing, tmp_path: Path) -> None:
    before = drawing.get_all_figures()
    drawing.file_path = tmp_path
    with pytest.raises(CfsIOError):
        drawing.load_from_file()
    assert drawing.get_all_figures() == before


def test_translate_single(drawing: Drawing) -> None:
    assert drawing.translate_single_figure(3, 1, -1) is True
    assert drawing.get_figure(3) == Line(2, 1, 31, 39, "black")
    assert drawing.get_figure(1) == Circle(10, 10, 5, "red")
    assert drawing.translate_single_figure(0, 1, 1) is False
    assert drawing.translate_single_figure(4, 1, 1) is False


def test_translate_all(drawing: Drawing) -> None:
    drawing.translate_all_figures(-10, 5)
    assert drawing.get_all_figures() == [
        Circle(0, 15, 5, "red"),
        Rectangle(-10, 5, 20, 10, "blue"),
        Line(-9, 7, 20, 45, "black"),
    ]


coord = st.integers(min_value=-1000, max_value=1000)
figure_strat = st.one_of(
    st.builds(Circle, coord, coord, st.integers(0, 100), st.just("red")),
    st.builds(Rectangle, coord, coord, st.integers(0, 100), st.integers(0, 100), st.just("blue")),
    st.builds(Line, coord, coord, coord, coord, st.just("black")),
)


@given(st.lists(figure_strat, max_size=10), coord, coord)
def test_translate_all_equals_translate_each(figures, dx: int, dy: int) -> None:
    a = Drawing("unused.svg")
    b = Drawing("unused.svg")
    for f in figures:
        a.add_figure(f)
        b.add_figure(f)
    a.translate_all_figures(dx, dy)
    for i in range(1, b.get_figure_count() + 1):
        assert b.translate_single_figure(i, dx, dy)
    assert a.get_all_figures() == b.get_all_figures()


def test_figures_within_boundary_preserves_order(drawing: Drawing) -> None:
    drawing.add_figure(Circle(100, 100, 1, "green"))
    drawing.add_figure(Rectangle(1, 1, 2, 2, "pink"))
    inside = drawing.get_figures_within_boundary("rectangle", 0, 0, 20, 20)
    assert inside == [Circle(10, 10, 5, "red"), Rectangle(0, 0, 20, 10, "blue"), Rectangle(1, 1, 2, 2, "pink")]
    assert drawing.get_figures_within_boundary("circle", 100, 100, 1) == [Circle(100, 100, 1, "green")]
    assert drawing.get_figures_within_boundary("hexagon", 0, 0, 1000, 1000) == []


def test_returned_figures_are_copies(drawing: Drawing) -> None:
    figs = drawing.get_all_figures()
    figs.clear()
    assert drawing.get_figure_count() == 3

    first = drawing.get_figure(1)
    first.x = 999
    assert drawing.get_figure(1).x == 10

    within = drawing.get_figures_within_boundary("rectangle", 0, 0, 100, 100)
    within[0].y = -100
    assert drawing.get_figure(1).y == 10


def test_added_figure_is_not_aliased(tmp_path: Path) -> None:
    d = Drawing(tmp_path / "x.svg")
    c = Circle(1, 1, 1, "red")
    d.add_figure(c)
    c.x = 50
    assert d.get_figure(1) == Circle(1, 1, 1, "red")


def test_add_figure_ignores_none_and_rejects_others(tmp_path: Path) -> None:
    d = Drawing(tmp_path / "x.svg")
    d.add_figure(None)
    assert len(d) == 0
    with pytest.raises(CfsValidationError):
        d.add_figure("circle")  # type: ignore[arg-type]


def test_bounding_box(drawing: Drawing) -> None:
    assert drawing.bounding_box() == (0, 0, 30, 40)
    assert Drawing("x.svg").bounding_box() is None


def test_save_is_full_overwrite(drawing: Drawing) -> None:
    drawing.save_to_file()
    drawing.remove_figure(1)
    drawing.remove_figure(1)
    drawing.save_to_file()
    reloaded = Drawing(drawing.file_path)
    reloaded.load_from_file()
    assert reloaded.get_all_figures() == [Line(1, 2, 30, 40, "black")]


def test_from_settings(tmp_path: Path) -> None:
    s = CfsSettings(document_path=str(tmp_path / "doc.svg"), atomic_save=False)
    d = Drawing.from_settings(s)
    assert d.file_path == tmp_path / "doc.svg"
    assert d.atomic_save is False


def test_mutated_figures_cannot_corrupt_the_document(tmp_path: Path) -> None:
    d = Drawing(tmp_path / "doc.svg")
    a = Circle(1, 1, 1, "red")
    b = Circle(2, 2, 2, "blue")
    with pytest.raises(AttributeError):
        a.radius = -5
    with pytest.raises(AttributeError):
        b.color = "x'y"
    d.add_figure(a)
    d.add_figure(b)
    d.save_to_file()

    reloaded = Drawing(d.file_path)
    assert reloaded.load_from_file() == []
    assert reloaded.get_all_figures() == [Circle(1, 1, 1, "red"), Circle(2, 2, 2, "blue")]
