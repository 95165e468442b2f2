from __future__ import annotations

import string
from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import given

from cfs.core.models import Circle, Line, Rectangle
from cfs.svg.exporter import HEADER, figure_to_svg, save_figures, serialize_figures
from cfs.svg.importer import parse_document
from cfs.utils.errors import CfsIOError, CfsValidationError

EXPECTED = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='500' height='500'>\n"
    "  <circle cx='10' cy='10' r='5' fill='red' />\n"
    "  <rect x='0' y='0' width='20' height='10' fill='blue' />\n"
    "  <line x1='1' y1='2' x2='30' y2='40' stroke='black' />\n"
    "</svg>\n"
)

coord = st.integers(min_value=-(10**6), max_value=10**6)
size = st.integers(min_value=0, max_value=10**6)
color = st.text(alphabet=string.ascii_letters + string.digits + "#(),.-", min_size=1, max_size=16)

figure_strat = st.one_of(
    st.builds(Circle, coord, coord, size, color),
    st.builds(Rectangle, coord, coord, size, size, color),
    st.builds(Line, coord, coord, coord, coord, color),
)


def test_serialize_canonical(sample_figures) -> None:
    assert serialize_figures(sample_figures) == EXPECTED


def test_serialize_empty() -> None:
    assert serialize_figures([]) == HEADER + "\n</svg>\n"


def test_figure_to_svg_rejects_unknown() -> None:
    with pytest.raises(CfsValidationError):
        figure_to_svg("circle")  # type: ignore[arg-type]


@given(st.lists(figure_strat, max_size=20))
def test_round_trip(figures) -> None:
    parsed, warnings = parse_document(serialize_figures(figures))
    assert parsed == figures
    assert warnings == []


def test_reordered_input_is_canonicalized_on_save() -> None:
    text = "<svg>\n<circle fill='red' r='5' cy='10' cx='10'/>\n</svg>"
    figures, _ = parse_document(text)
    assert serialize_figures(figures).splitlines()[1] == "  <circle cx='10' cy='10' r='5' fill='red' />"


def test_save_overwrites(tmp_path: Path, sample_figures) -> None:
    p = tmp_path / "out.svg"
    p.write_text("contenido viejo " * 100, encoding="utf-8")
    assert save_figures(sample_figures, p) == p
    assert p.read_text(encoding="utf-8") == EXPECTED
    assert not (tmp_path / "out.svg.tmp").exists()


def test_save_non_atomic(tmp_path: Path, sample_figures) -> None:
    p = tmp_path / "sub" / "out.svg"
    save_figures(sample_figures, p, atomic=False)
    assert p.read_text(encoding="utf-8") == EXPECTED


def test_save_to_directory_raises(tmp_path: Path, sample_figures) -> None:
    target = tmp_path / "dir.svg"
    target.mkdir()
    with pytest.raises(CfsIOError):
        save_figures(sample_figures, target)
    assert not (tmp_path / "dir.svg.tmp").exists()
