"""
Pyramid input suppliers: a triangle-shaped text file or interactive prompts.

Both hand the builder a row count plus a lazy iterator of integers, so
values the builder never asks for are never read or parsed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import typer

from .core.exceptions import (
    InputExhaustedError,
    InvalidCellError,
    PyramidShapeError,
    SourceUnavailableError,
)

logger = logging.getLogger(__name__)


def _parse_cell(token: str, row: int, col: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidCellError(f"Row {row}, number {col + 1}: {token!r} is not an integer") from None


def _iter_rows(lines: List[str]) -> Iterator[int]:
    for row, line in enumerate(lines, start=1):
        tokens = line.split()
        if len(tokens) != row:
            raise PyramidShapeError(f"Line {row} holds {len(tokens)} numbers, expected {row}")
        for col, token in enumerate(tokens):
            yield _parse_cell(token, row, col)


def read_pyramid_file(path: Union[str, Path]) -> Tuple[int, Iterator[int]]:
    """Return ``(rows, values)`` for a pyramid file.

    ``rows`` is the number of non-blank lines; line ``i`` must hold exactly
    ``i`` whitespace-separated integers.
    """

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise SourceUnavailableError(f"Can not open input file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidCellError(f"{path} is not UTF-8 text: {exc.reason} at byte {exc.start}") from exc

    lines = [line for line in text.splitlines() if line.strip()]
    logger.info(f"Read {len(lines)} pyramid rows from {path}")
    return len(lines), _iter_rows(lines)


def prompt_row_count() -> int:
    try:
        return typer.prompt("Please enter the level count of pyramid", type=int)
    except typer.Abort:
        raise InputExhaustedError("Input ended before the level count was supplied") from None


def prompt_pyramid_values(rows: int) -> Iterator[int]:
    """Prompt for each cell in row-major order; stops quietly at end of input."""

    for row in range(1, rows + 1):
        for col in range(row):
            try:
                yield typer.prompt(f"Level {row}, Number {col + 1}", type=int)
            except typer.Abort:
                logger.debug(f"Interactive input ended at row {row}, number {col + 1}")
                return
