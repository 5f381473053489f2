import operator
import warnings
from collections import defaultdict
from collections.abc import Iterable, Mapping
from numbers import Integral

import numpy as np
import scipy.sparse

from . import _settings
from ._errors import DimensionMismatch, OutOfBounds
from ._sparse_array import SparseArray

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


def _as_int(value):
    if isinstance(value, np.generic):
        value = value.item()

    if not isinstance(value, Integral):
        raise TypeError(f"SparseMatrix values must be integers, got {type(value).__name__}.")

    return int(value)


def _fits_int64(values):
    return all(_INT64_MIN <= v <= _INT64_MAX for v in values)


def _warn_if_too_dense(x):
    if _settings.WARN_ON_TOO_DENSE and x.density > _settings.DENSITY_WARN_THRESHOLD:
        warnings.warn(
            f"{x!r} has density {x.density:.3f}, above {_settings.DENSITY_WARN_THRESHOLD}. "
            "A dense array may be a better fit.",
            RuntimeWarning,
            stacklevel=3,
        )


class SparseMatrix(SparseArray):
    """
    A two-dimensional sparse integer matrix stored as a dictionary of keys.

    Only nonzero entries are stored. Assigning zero to a coordinate removes
    it, so no stored entry is ever zero. Values are kept as Python integers,
    which makes all arithmetic exact.

    Parameters
    ----------
    shape : tuple[int, int]
        The shape of the matrix, ``(num_rows, num_cols)``.
    data : dict or Iterable, optional
        Either a dict mapping ``(row, col)`` to a value, or an iterable of
        ``(row, col, value)`` triples. Entries are applied in order, so for a
        repeated coordinate the last value wins. Zeros are ignored.

    Attributes
    ----------
    shape : tuple[int, int]
        The shape of this matrix.
    data : dict
        The keys of this dictionary are ``(row, col)`` tuples and the values
        are the nonzero entries.

    See Also
    --------
    scipy.sparse.dok_matrix : The Scipy equivalent class.

    Examples
    --------
    >>> s = SparseMatrix((3, 3), [(0, 1, 5), (2, 0, -2)])
    >>> s
    <SparseMatrix: shape=(3, 3), nnz=2>
    >>> s[0, 1], s[1, 1]
    (5, 0)

    Zeros are never stored.

    >>> s[0, 1] = 0
    >>> s.nnz
    1

    You can also create them from Numpy arrays.

    >>> x = np.eye(3, dtype=np.int64)
    >>> x[2, 1] = 4
    >>> SparseMatrix(x).entries()
    [(0, 0, 1), (1, 1, 1), (2, 1, 4), (2, 2, 1)]
    """

    def __init__(self, shape, data=None):
        self.data = dict()

        if isinstance(shape, SparseMatrix):
            self._make_shallow_copy_of(shape.copy())
            return

        if isinstance(shape, np.ndarray):
            self._make_shallow_copy_of(SparseMatrix.from_numpy(shape))
            return

        if scipy.sparse.issparse(shape):
            self._make_shallow_copy_of(SparseMatrix.from_scipy_sparse(shape))
            return

        super().__init__(shape)

        if self.ndim != 2:
            raise ValueError(f"SparseMatrix must be two-dimensional, got shape {self.shape}.")

        if data is None:
            return

        if isinstance(data, Mapping):
            for c, d in data.items():
                self[c] = d
        elif isinstance(data, Iterable) and not isinstance(data, (str, bytes)):
            for row, col, value in data:
                self.set_element(row, col, value)
        else:
            raise ValueError("data must be a dict or an iterable of (row, col, value) triples.")

    @classmethod
    def from_entries(cls, shape, entries, sum_duplicates=False):
        """
        Build a matrix from ``(row, col, value)`` triples.

        Parameters
        ----------
        shape : tuple[int, int]
            The shape of the matrix.
        entries : Iterable[tuple[int, int, int]]
            The entries, applied in order.
        sum_duplicates : bool, optional
            If ``True``, values given for the same coordinate are summed.
            Otherwise the last one wins.

        Returns
        -------
        SparseMatrix
            The new matrix.

        Examples
        --------
        >>> entries = [(0, 0, 2), (0, 0, 3), (1, 1, 0)]
        >>> SparseMatrix.from_entries((2, 2), entries).entries()
        [(0, 0, 3)]
        >>> SparseMatrix.from_entries((2, 2), entries, sum_duplicates=True).entries()
        [(0, 0, 5)]
        """
        if not sum_duplicates:
            return cls(shape, entries)

        ar = cls(shape)
        for row, col, value in entries:
            ar.set_element(row, col, ar.get_element(row, col) + _as_int(value))

        return ar

    @classmethod
    def from_numpy(cls, x):
        """
        Get a :obj:`SparseMatrix` from a two-dimensional integer Numpy array.

        Parameters
        ----------
        x : np.ndarray
            The array to convert. Must have an integer, boolean or object
            dtype holding integers.

        Returns
        -------
        SparseMatrix
            The equivalent matrix.

        Raises
        ------
        TypeError
            If the array holds non-integer values.

        Examples
        --------
        >>> SparseMatrix.from_numpy(np.eye(4, dtype=np.int8))
        <SparseMatrix: shape=(4, 4), nnz=4>
        """
        x = np.asarray(x)

        if x.ndim != 2:
            raise ValueError(f"SparseMatrix must be two-dimensional, got shape {x.shape}.")

        if not (np.issubdtype(x.dtype, np.integer) or x.dtype == np.bool_ or x.dtype == object):
            raise TypeError(f"Cannot build an integer SparseMatrix from an array of dtype {x.dtype}.")

        ar = cls(x.shape)

        for row, col in zip(*(c.tolist() for c in np.nonzero(x))):
            ar.set_element(row, col, x[row, col])

        return ar

    @classmethod
    def from_scipy_sparse(cls, x):
        """
        Create a :obj:`SparseMatrix` from a :obj:`scipy.sparse` matrix or array.

        Duplicate coordinates in ``x`` are summed, following Scipy's own
        semantics.

        Parameters
        ----------
        x : scipy.sparse.spmatrix
            The matrix to convert. Must have an integer or boolean dtype.

        Returns
        -------
        SparseMatrix
            The equivalent matrix.

        Examples
        --------
        >>> import scipy.sparse
        >>> x = scipy.sparse.identity(3, dtype=np.int64, format="csr")
        >>> SparseMatrix.from_scipy_sparse(x).entries()
        [(0, 0, 1), (1, 1, 1), (2, 2, 1)]
        """
        if not (np.issubdtype(x.dtype, np.integer) or x.dtype == np.bool_):
            raise TypeError(f"Cannot build an integer SparseMatrix from a sparse matrix of dtype {x.dtype}.")

        x = x.tocoo(copy=True)
        x.sum_duplicates()

        ar = cls(x.shape)

        for row, col, value in zip(x.row.tolist(), x.col.tolist(), x.data.tolist()):
            ar.set_element(row, col, value)

        return ar

    def to_scipy_sparse(self, format="coo"):
        """
        Convert this matrix to a :obj:`scipy.sparse` matrix of dtype ``int64``.

        Parameters
        ----------
        format : str, optional
            Any format accepted by :obj:`scipy.sparse.coo_matrix.asformat`.

        Returns
        -------
        scipy.sparse.spmatrix
            The equivalent Scipy matrix.

        Raises
        ------
        OverflowError
            If a value does not fit into ``int64``.
        OutOfBounds
            If this matrix stores coordinates outside of its shape.
        """
        self._check_in_bounds()

        if not _fits_int64(self.data.values()):
            raise OverflowError("SparseMatrix values do not fit into int64.")

        rows, cols, values = [], [], []
        for row, col, value in self.entries():
            rows.append(row)
            cols.append(col)
            values.append(value)

        coo = scipy.sparse.coo_matrix(
            (
                np.asarray(values, dtype=np.int64),
                (np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)),
            ),
            shape=self.shape,
        )

        return coo.asformat(format)

    @property
    def num_rows(self):
        return self.shape[0]

    @property
    def num_cols(self):
        return self.shape[1]

    @property
    def nnz(self):
        """
        The number of nonzero elements in this matrix.

        Returns
        -------
        int
            The number of nonzero elements.

        Examples
        --------
        >>> s = SparseMatrix((5, 5), {(1, 2): 4, (3, 2): 0})
        >>> s.nnz
        1
        """
        return len(self.data)

    def _key(self, row, col):
        if not all(isinstance(i, Integral) and not isinstance(i, bool) for i in (row, col)):
            raise IndexError("All indices must be integers.")

        key = (int(row), int(col))

        if _settings.CHECK_BOUNDS and not (0 <= key[0] < self.shape[0] and 0 <= key[1] < self.shape[1]):
            raise OutOfBounds(key[0], key[1], self.shape)

        return key

    def _check_in_bounds(self):
        for row, col in self.data:
            if not (0 <= row < self.shape[0] and 0 <= col < self.shape[1]):
                raise OutOfBounds(row, col, self.shape)

    def get_element(self, row, col):
        """
        Return the value at ``(row, col)``, or ``0`` when nothing is stored there.
        """
        return self.data.get(self._key(row, col), 0)

    def set_element(self, row, col, value):
        """
        Store ``value`` at ``(row, col)``. Storing ``0`` removes the entry.
        """
        key = self._key(row, col)
        value = _as_int(value)

        if value:
            self.data[key] = value
        else:
            self.data.pop(key, None)

    def __getitem__(self, key):
        row, col = self._unpack_key(key)
        return self.get_element(row, col)

    def __setitem__(self, key, value):
        row, col = self._unpack_key(key)
        self.set_element(row, col, value)

    def _unpack_key(self, key):
        if not isinstance(key, tuple) or len(key) != self.ndim:
            raise IndexError(f"Can only index single elements. Expected a (row, col) pair, got {key!r}.")

        return key

    def entries(self):
        """
        The stored entries as ``(row, col, value)`` triples in row-major order.

        Returns
        -------
        list[tuple[int, int, int]]
            The entries. Every value is nonzero.
        """
        return [(row, col, self.data[row, col]) for row, col in sorted(self.data)]

    def row_index(self):
        """
        Group the stored entries of this matrix by row.

        Returns
        -------
        dict[int, list[tuple[int, int]]]
            Maps each row holding at least one entry to its
            ``(col, value)`` pairs. Rows without entries are absent.

        Examples
        --------
        >>> s = SparseMatrix((3, 3), [(0, 0, 3), (1, 0, 4), (0, 2, 1)])
        >>> s.row_index()
        {0: [(0, 3), (2, 1)], 1: [(0, 4)]}
        """
        index = defaultdict(list)

        for (row, col), value in self.data.items():
            index[row].append((col, value))

        return dict(index)

    def _check_operand(self, other, op):
        if not isinstance(other, SparseMatrix):
            raise TypeError(f"Cannot {op} SparseMatrix and {type(other).__name__}.")

    def _merge(self, other, op, combine):
        self._check_operand(other, op)

        if self.shape != other.shape:
            raise DimensionMismatch(op, self.shape, other.shape)

        result = SparseMatrix(self.shape)
        data = result.data = dict(self.data)

        for key, value in other.data.items():
            combined = combine(data.get(key, 0), value)
            if combined:
                data[key] = combined
            else:
                data.pop(key, None)

        return result

    def add(self, other):
        """
        Add two matrices of the same shape.

        Parameters
        ----------
        other : SparseMatrix
            The matrix to add.

        Returns
        -------
        SparseMatrix
            A new matrix holding ``self + other``. Entries that cancel out are
            not stored.

        Raises
        ------
        DimensionMismatch
            If the shapes differ.

        Examples
        --------
        >>> a = SparseMatrix((3, 3), [(0, 1, 5), (2, 0, -2)])
        >>> b = SparseMatrix((3, 3), [(0, 1, -5), (1, 1, 7)])
        >>> a.add(b).entries()
        [(1, 1, 7), (2, 0, -2)]
        """
        return self._merge(other, "add", operator.add)

    def subtract(self, other):
        """
        Subtract ``other`` from this matrix. Both must have the same shape.

        Raises
        ------
        DimensionMismatch
            If the shapes differ.

        Examples
        --------
        >>> a = SparseMatrix((2, 2), [(0, 0, 2), (0, 1, 3)])
        >>> b = SparseMatrix((2, 2), [(0, 0, 1)])
        >>> a.subtract(b).entries()
        [(0, 0, 1), (0, 1, 3)]
        """
        return self._merge(other, "subtract", operator.sub)

    def multiply(self, other):
        """
        Matrix product of this ``(m, k)`` matrix and a ``(k, n)`` matrix.

        The rows of ``other`` are indexed once, so each nonzero ``self[i, p]``
        only visits the nonzero entries of row ``p`` of ``other``.

        Parameters
        ----------
        other : SparseMatrix
            The right operand.

        Returns
        -------
        SparseMatrix
            A new ``(m, n)`` matrix. Sums that net to zero are not stored.

        Raises
        ------
        DimensionMismatch
            If ``self.num_cols != other.num_rows``.

        Examples
        --------
        >>> a = SparseMatrix((2, 2), [(0, 0, 1), (0, 1, 2)])
        >>> b = SparseMatrix((2, 2), [(0, 0, 3), (1, 0, 4)])
        >>> a.multiply(b).entries()
        [(0, 0, 11)]
        """
        self._check_operand(other, "multiply")

        if self.num_cols != other.num_rows:
            raise DimensionMismatch("multiply", self.shape, other.shape)

        result = SparseMatrix((self.num_rows, other.num_cols))
        data = result.data
        other_rows = other.row_index()

        for (i, p), a in self.data.items():
            row = other_rows.get(p)
            if row is None:
                continue

            for j, b in row:
                key = (i, j)
                total = data.get(key, 0) + a * b
                if total:
                    data[key] = total
                else:
                    data.pop(key, None)

        _warn_if_too_dense(result)

        return result

    def __add__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        result = SparseMatrix(self.shape)
        result.data = {key: -value for key, value in self.data.items()}
        return result

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    __hash__ = None

    def copy(self):
        """
        Return a copy of this matrix that does not share storage with it.
        """
        result = SparseMatrix(self.shape)
        result.data = dict(self.data)
        return result

    def transpose(self):
        """
        Return the transpose of this matrix.

        Examples
        --------
        >>> SparseMatrix((2, 3), [(0, 2, 7)]).T.entries()
        [(2, 0, 7)]
        """
        result = SparseMatrix(self.shape[::-1])
        result.data = {(col, row): value for (row, col), value in self.data.items()}
        return result

    @property
    def T(self):
        return self.transpose()

    def __str__(self):
        return f"<SparseMatrix: shape={self.shape}, nnz={self.nnz}>"

    __repr__ = __str__

    def todense(self):
        """
        Convert this matrix into a Numpy array.

        The dtype is ``int64`` unless some value does not fit, in which case
        an ``object`` array of Python integers is returned.

        Returns
        -------
        numpy.ndarray
            The equivalent dense array.

        Raises
        ------
        OutOfBounds
            If this matrix stores coordinates outside of its shape.

        Examples
        --------
        >>> s = SparseMatrix((2, 3), [(0, 1, 5), (1, 2, -1)])
        >>> s.todense()  # doctest: +NORMALIZE_WHITESPACE
        array([[ 0,  5,  0],
               [ 0,  0, -1]])
        """
        self._check_in_bounds()
        _warn_if_too_dense(self)

        dtype = np.int64 if _fits_int64(self.data.values()) else object
        result = np.zeros(self.shape, dtype=dtype)

        for c, d in self.data.items():
            result[c] = d

        return result
