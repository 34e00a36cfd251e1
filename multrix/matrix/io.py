"""
Comma-separated text format.

One matrix row per line, entries separated by commas:

    1.0,2.0,3.0,
    4.0,5.0,6.0,

On read, the trailing comma after the last entry is optional and
surrounding whitespace is ignored. The column count comes from the first
row; every other row must match it. On write, every entry is followed by
a comma and every row by a newline. Values are written with repr(), the
shortest string that reads back to the same float. Arithmetic can
overflow to inf or produce nan; those are written as `inf`, `-inf` and
`nan` and read back unchanged.
"""

from os import PathLike
from pathlib import Path
import logging

import numpy as np

from multrix.core.exceptions import DimensionError, ParseError, ValidationError
from multrix.matrix.matrix import Matrix

logger = logging.getLogger(__name__)

DELIMITER = ','


def parse_matrix(text: str) -> Matrix:
    """
    Parse the text format into a Matrix.

    Raises:
        ValidationError: If text holds no rows
        ParseError: If a token is not a number (inf and nan are accepted)
        DimensionError: If a row's entry count differs from the first row's
    """
    lines = text.rstrip().splitlines()
    if not lines:
        raise ValidationError("matrix text is empty")

    values: list[float] = []
    cols = 0
    for line_no, line in enumerate(lines, start=1):
        tokens = line.strip().split(DELIMITER)
        if len(tokens) > 1 and tokens[-1].strip() == '':
            tokens.pop()
        row = [_parse_token(token, line_no) for token in tokens]
        if line_no == 1:
            cols = len(row)
        elif len(row) != cols:
            raise DimensionError(
                f"line {line_no}: expected {cols} entries (from line 1), got {len(row)}",
                shape=(len(lines), cols),
            )
        values.extend(row)

    return Matrix._from_buffer(np.array(values, dtype=np.float64), len(lines), cols)


def _parse_token(token: str, line_no: int) -> float:
    stripped = token.strip()
    try:
        return float(stripped)
    except ValueError:
        raise ParseError(
            f"line {line_no}: cannot parse {stripped!r} as a number",
            line=line_no,
            token=stripped,
        ) from None


def format_matrix(m: Matrix) -> str:
    """Render m in the text format (trailing comma on every entry)."""
    lines = []
    for row in m.to_nested():
        lines.append(''.join(f"{value!r}{DELIMITER}" for value in row))
    return '\n'.join(lines) + '\n'


def read_matrix(path: str | PathLike[str]) -> Matrix:
    """
    Read a matrix file.

    Raises:
        OSError: If the file cannot be read
        ValidationError, ParseError, DimensionError: As parse_matrix()
    """
    path = Path(path)
    m = parse_matrix(path.read_text(encoding='utf-8'))
    logger.debug("read %dx%d matrix from %s", m.rows, m.cols, path)
    return m


def write_matrix(m: Matrix, path: str | PathLike[str]) -> None:
    """
    Write a matrix file, replacing any existing content.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_text(format_matrix(m), encoding='utf-8')
    logger.debug("wrote %dx%d matrix to %s", m.rows, m.cols, path)
