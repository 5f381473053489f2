class SparseMatrixError(Exception):
    """
    Base class for all errors raised by :mod:`sparsemat`.
    """


class DimensionMismatch(SparseMatrixError, ValueError):
    """
    The shapes of two operands are incompatible for an operation.

    Parameters
    ----------
    op : str
        The name of the operation, one of ``"add"``, ``"subtract"`` or
        ``"multiply"``.
    shape_a, shape_b : tuple[int, int]
        The shapes of the left and right operands.

    Examples
    --------
    >>> err = DimensionMismatch("multiply", (2, 3), (2, 2))
    >>> str(err)
    'Matrix dimensions do not match for multiply: (2, 3) and (2, 2).'
    >>> err.op, err.shape_a, err.shape_b
    ('multiply', (2, 3), (2, 2))
    """

    def __init__(self, op, shape_a, shape_b):
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
        super().__init__(f"Matrix dimensions do not match for {op}: {self.shape_a} and {self.shape_b}.")

    def __reduce__(self):
        return type(self), (self.op, self.shape_a, self.shape_b)


class MalformedInput(SparseMatrixError, ValueError):
    """
    Text input that does not follow the entry-list format.

    Parameters
    ----------
    message : str
        What is wrong with the input.
    lineno : int, optional
        The 1-based line number the error refers to.
    line : str, optional
        The offending line, already stripped.
    """

    def __init__(self, message, lineno=None, line=None):
        self.message = message
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"{message} at line {lineno}: {line}"
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.message, self.lineno, self.line)


class OutOfBounds(SparseMatrixError, IndexError):
    """
    A coordinate lies outside the shape of a matrix.
    """

    def __init__(self, row, col, shape):
        self.row = row
        self.col = col
        self.shape = tuple(shape)
        super().__init__(f"index ({row}, {col}) is out of bounds for matrix with shape {self.shape}")

    def __reduce__(self):
        return type(self), (self.row, self.col, self.shape)
