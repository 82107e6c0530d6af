from pathlib import Path

import pytest

from primepath.core.builder import build_pyramid_graph
from primepath.core.exceptions import InvalidCellError, PyramidShapeError, SourceUnavailableError
from primepath.sources import read_pyramid_file


def test_reads_rows_and_values(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_text("1\n8 4\n2 6 9\n\n", encoding="utf-8")
    rows, values = read_pyramid_file(path)
    assert rows == 3
    assert list(values) == [1, 8, 4, 2, 6, 9]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        read_pyramid_file(tmp_path / "nope.txt")


def test_line_with_wrong_count(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_text("1\n8 4 3\n", encoding="utf-8")
    rows, values = read_pyramid_file(path)
    with pytest.raises(PyramidShapeError):
        list(values)


def test_non_integer_token(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_text("1\n8 x\n", encoding="utf-8")
    rows, values = read_pyramid_file(path)
    with pytest.raises(InvalidCellError):
        list(values)


def test_prime_top_leaves_rest_unparsed(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_text("7\nnot numbers\n", encoding="utf-8")
    rows, values = read_pyramid_file(path)
    graph = build_pyramid_graph(rows, values)
    assert graph.edge_count == 0


def test_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_bytes(b"4\n\xff\xfe 6\n")
    with pytest.raises(InvalidCellError, match="not UTF-8"):
        read_pyramid_file(path)


def test_blank_lines_between_rows_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "pyramid.txt"
    path.write_text("1\n\n   \n8 4\n", encoding="utf-8")
    rows, values = read_pyramid_file(path)
    assert rows == 2
    assert list(values) == [1, 8, 4]
