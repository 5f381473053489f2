"""
Reading and writing matrices in the entry-list text format.

A file holds two header lines followed by one entry per line::

    rows=3
    cols=3
    (0, 1, 5)
    (2, 0, -2)

Surrounding whitespace and blank lines are ignored, and lines starting with
``#`` are comments.
"""

import contextlib
import os

from ._dok import SparseMatrix
from ._errors import MalformedInput


def _open(file, mode):
    if isinstance(file, (str, bytes, os.PathLike)):
        return open(file, mode, encoding="utf-8")

    return contextlib.nullcontext(file)


def _parse_header(lineno, line, name):
    key, sep, value = line.partition("=")

    if not sep or key.strip() != name:
        raise MalformedInput(f"Expected '{name}=<N>' header", lineno, line)

    try:
        n = int(value)
    except ValueError:
        raise MalformedInput(f"Invalid number format in '{name}' header", lineno, line) from None

    if n < 0:
        raise MalformedInput(f"Negative '{name}' header", lineno, line)

    return n


def _parse_entry(lineno, line):
    if not line.startswith("(") or not line.endswith(")"):
        raise MalformedInput("Invalid format", lineno, line)

    fields = line[1:-1].split(",")
    if len(fields) != 3:
        raise MalformedInput("Expected three values", lineno, line)

    try:
        row, col, value = (int(f) for f in fields)
    except ValueError:
        raise MalformedInput("Invalid number format", lineno, line) from None

    return row, col, value


def parse_lines(lines, sum_duplicates=False):
    """
    Build a :obj:`SparseMatrix` from the lines of an entry-list text file.

    Parameters
    ----------
    lines : Iterable[str]
        The lines, with or without trailing newlines.
    sum_duplicates : bool, optional
        Sum the values of repeated coordinates instead of keeping the last.

    Returns
    -------
    SparseMatrix
        The parsed matrix.

    Raises
    ------
    MalformedInput
        If a header or an entry line is malformed.

    Examples
    --------
    >>> m = parse_lines(["rows=3", "cols=3", "(0, 1, 5)", "(2, 0, -2)"])
    >>> m.entries()
    [(0, 1, 5), (2, 0, -2)]
    """
    numbered = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if line and not line.startswith("#"):
            numbered.append((lineno, line))

    if len(numbered) < 2:
        raise MalformedInput("Missing 'rows=' and 'cols=' header lines")

    num_rows = _parse_header(*numbered[0], "rows")
    num_cols = _parse_header(*numbered[1], "cols")

    entries = (_parse_entry(lineno, line) for lineno, line in numbered[2:])

    return SparseMatrix.from_entries((num_rows, num_cols), entries, sum_duplicates=sum_duplicates)


def loads(text, sum_duplicates=False):
    """
    Parse a matrix from a string in the entry-list text format.
    """
    return parse_lines(text.splitlines(), sum_duplicates=sum_duplicates)


def load_txt(file, sum_duplicates=False):
    """
    Load a matrix stored in the entry-list text format.

    Parameters
    ----------
    file : file-like object, string, or pathlib.Path
        The file to read.
    sum_duplicates : bool, optional
        Sum the values of repeated coordinates instead of keeping the last.

    Returns
    -------
    SparseMatrix
        The matrix stored in ``file``.

    See Also
    --------
    save_txt
    """
    with _open(file, "r") as fp:
        return parse_lines(fp, sum_duplicates=sum_duplicates)


def dumps(matrix):
    """
    Format a matrix in the entry-list text format, entries in row-major order.

    Examples
    --------
    >>> print(dumps(SparseMatrix((2, 2), [(1, 0, 4)])), end="")
    rows=2
    cols=2
    (1, 0, 4)
    """
    lines = [f"rows={matrix.num_rows}", f"cols={matrix.num_cols}"]
    lines.extend(f"({row}, {col}, {value})" for row, col, value in matrix.entries())
    return "\n".join(lines) + "\n"


def save_txt(file, matrix):
    """
    Save a matrix to disk in the entry-list text format.

    Parameters
    ----------
    file : file-like object, string, or pathlib.Path
        Either the file name or an open text file where the data will be saved.
    matrix : SparseMatrix
        The matrix to save.

    See Also
    --------
    load_txt
    """
    with _open(file, "w") as fp:
        fp.write(dumps(matrix))
