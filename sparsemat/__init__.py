from ._version import __version__  # noqa: F401
from ._dok import SparseMatrix
from ._errors import DimensionMismatch, MalformedInput, OutOfBounds, SparseMatrixError
from ._io import dumps, load_txt, loads, parse_lines, save_txt
from ._utils import random

__all__ = [
    "SparseMatrix",
    "SparseMatrixError",
    "DimensionMismatch",
    "MalformedInput",
    "OutOfBounds",
    "random",
    "parse_lines",
    "loads",
    "dumps",
    "load_txt",
    "save_txt",
]
