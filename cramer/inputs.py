"""Input processing for comma-separated matrix files."""
from __future__ import annotations

from pathlib import Path
from typing import List, Union


class MatrixParseError(ValueError):
    """Raised when matrix text cannot be turned into a rectangular grid."""

    def __init__(self, line_number: int, message: str):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number


def _parse_row(line: str, line_number: int) -> List[float]:
    row = []
    for position, token in enumerate(line.split(","), start=1):
        token = token.strip()
        try:
            row.append(float(token))
        except ValueError:
            raise MatrixParseError(
                line_number, f"field {position} is not a number: {token!r}"
            ) from None
    return row


def parse_matrix_text(text: str) -> List[List[float]]:
    """
    Parse row-per-line, comma-separated numbers into a matrix.

    Blank lines are ignored.  Integers, decimals and exponent notation are
    accepted; every value is returned as ``float``.

    Args:
        text: Matrix source, e.g. ``"1,1,3\\n1,-1,1"``.

    Returns:
        List of rows, all with the same length.

    Raises:
        MatrixParseError: On a non-numeric field or a row whose length
            differs from the first row.
    """
    matrix: List[List[float]] = []
    width = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        row = _parse_row(line, line_number)
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise MatrixParseError(
                line_number, f"expected {width} values, found {len(row)}"
            )
        matrix.append(row)

    return matrix


def load_matrix_file(path: Union[str, Path]) -> List[List[float]]:
    """Read a matrix text file (see :func:`parse_matrix_text`)."""

    return parse_matrix_text(Path(path).read_text(encoding="utf-8"))


def format_matrix(matrix: List[List[float]]) -> List[str]:
    """Return one display line per row with values in ``%g`` form."""

    return [" ".join(f"{value:g}" for value in row) for row in matrix]


__all__ = [
    "MatrixParseError",
    "format_matrix",
    "load_matrix_file",
    "parse_matrix_text",
]
