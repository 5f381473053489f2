import operator
import warnings
from abc import ABCMeta, abstractmethod
from collections.abc import Iterable
from functools import reduce
from numbers import Integral

import numpy as np


class SparseArray(metaclass=ABCMeta):
    """
    An abstract base class for the sparse containers in this package.

    Attributes
    ----------
    shape : tuple[int]
        The shape of this array.
    """

    def __init__(self, shape):
        if not isinstance(shape, Iterable):
            shape = (shape,)

        shape = tuple(shape)
        if not all(isinstance(sh, Integral) and not isinstance(sh, bool) and int(sh) >= 0 for sh in shape):
            raise ValueError("shape must be an non-negative integer or a tuple of non-negative integers.")

        self.shape = tuple(int(sh) for sh in shape)

    @property
    @abstractmethod
    def nnz(self):
        """
        The number of nonzero elements in this array.

        Returns
        -------
        int
            The number of nonzero elements in this array.

        See Also
        --------
        numpy.count_nonzero : A similar Numpy function.
        scipy.sparse.dok_matrix.nnz : The Scipy equivalent property.
        """

    @property
    def ndim(self):
        """
        The number of dimensions of this array.

        Returns
        -------
        int
            The number of dimensions of this array.

        Examples
        --------
        >>> from sparsemat import SparseMatrix
        >>> SparseMatrix((3, 4)).ndim
        2
        """
        return len(self.shape)

    @property
    def size(self):
        """
        The number of all elements (including zeros) in this array.

        Returns
        -------
        int
            The number of elements.

        Examples
        --------
        >>> from sparsemat import SparseMatrix
        >>> SparseMatrix((10, 10)).size
        100
        """
        # We use this instead of np.prod because np.prod
        # overflows for large logical shapes.
        return reduce(operator.mul, self.shape, 1)

    @property
    def density(self):
        """
        The ratio of nonzero to all elements in this array.

        Returns
        -------
        float
            The ratio of nonzero to all elements. ``nan`` for an empty shape.

        Examples
        --------
        >>> from sparsemat import SparseMatrix
        >>> s = SparseMatrix((8, 8), {(0, j): 1 for j in range(8)})
        >>> s.density
        0.125
        """
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", category=RuntimeWarning)
            return float(np.float64(self.nnz) / np.float64(self.size))

    @abstractmethod
    def todense(self):
        """
        Convert this array to a dense :obj:`numpy.ndarray`. Note that
        this may take a large amount of memory and time.

        Returns
        -------
        numpy.ndarray
            The converted dense array.
        """

    def _make_shallow_copy_of(self, other):
        self.__dict__ = other.__dict__.copy()

    def __array__(self, *args, **kwargs):
        from ._settings import AUTO_DENSIFY

        if not AUTO_DENSIFY:
            raise RuntimeError(
                "Cannot convert a sparse array to dense automatically. To manually densify, use the todense method."
            )

        return np.asarray(self.todense(), *args, **kwargs)
