from numbers import Integral

import numpy as np


def assert_eq(x, y, check_nnz=True):
    """
    Assert that two matrices hold the same values.

    Either side may be a :obj:`SparseMatrix`, a Scipy sparse matrix or
    anything :obj:`numpy.asarray` accepts. Every :obj:`SparseMatrix` involved
    is also checked for stored zeros.
    """
    from ._dok import SparseMatrix

    assert x.shape == y.shape

    if isinstance(x, SparseMatrix):
        assert is_canonical(x)
    if isinstance(y, SparseMatrix):
        assert is_canonical(y)

    if isinstance(x, SparseMatrix) and isinstance(y, SparseMatrix):
        assert x.data == y.data
        return

    xx = _densify(x, check_nnz)
    yy = _densify(y, check_nnz)

    assert np.array_equal(xx, yy)


def _densify(x, check_nnz):
    from ._dok import SparseMatrix

    if isinstance(x, SparseMatrix):
        xx = x.todense()
        if check_nnz:
            assert_nnz(x, xx)
        return xx

    if hasattr(x, "todense"):
        return np.asarray(x.todense())

    return np.asarray(x)


def assert_nnz(s, x):
    assert np.count_nonzero(x) == s.nnz


def is_canonical(x):
    return all(
        isinstance(value, int) and value != 0 and len(key) == 2 and all(isinstance(k, int) for k in key)
        for key, value in x.data.items()
    )


def _default_data_rvs(random_state):
    def data_rvs(n):
        magnitudes = random_state.integers(1, 10, size=n)
        signs = random_state.choice([-1, 1], size=n)
        return magnitudes * signs

    return data_rvs


def random(shape, density=None, nnz=None, random_state=None, data_rvs=None):
    """Generate a random sparse integer matrix.

    Parameters
    ----------
    shape : Tuple[int, int]
        Shape of the matrix.
    density : float, optional
        Density of the generated matrix; default is 0.01.
        Mutually exclusive with `nnz`.
    nnz : int, optional
        Number of nonzero elements in the generated matrix.
        Mutually exclusive with `density`.
    random_state : Union[numpy.random.Generator, int], optional
        Random number generator or random seed. If not given, a fresh
        generator is used.
    data_rvs : Callable
        Data generation callback. Must accept one single parameter: number of
        nonzero elements, and return that many integers. Zeros it returns are
        dropped, so the result may hold fewer entries than requested. By
        default values are drawn uniformly from ``[-9, -1] U [1, 9]``.

    Returns
    -------
    SparseMatrix
        The generated random matrix.

    See Also
    --------
    scipy.sparse.random : Equivalent Scipy function.

    Examples
    --------
    >>> from sparsemat import random
    >>> s = random((10, 10), density=0.2, random_state=42)
    >>> s.shape, s.nnz
    ((10, 10), 20)
    """
    from ._dok import SparseMatrix

    if density is not None and nnz is not None:
        raise ValueError("'density' and 'nnz' are mutually exclusive")

    ar = SparseMatrix(shape)
    elements = ar.size

    if density is None:
        density = 0.01
    if not (0 <= density <= 1):
        raise ValueError(f"density {density} is not in the unit interval")

    if nnz is None:
        nnz = int(elements * density)
    if not (0 <= nnz <= elements):
        raise ValueError(f"cannot generate {nnz} nonzero elements for a matrix with {elements} total elements")

    if elements > np.iinfo(np.int64).max:
        raise ValueError(f"cannot sample from a matrix with {elements} total elements")

    if random_state is None:
        random_state = np.random.default_rng()
    elif isinstance(random_state, Integral):
        random_state = np.random.default_rng(random_state)
    if data_rvs is None:
        data_rvs = _default_data_rvs(random_state)

    if nnz == 0:
        return ar

    ind = random_state.choice(elements, size=nnz, replace=False)
    data = data_rvs(nnz)

    num_cols = ar.num_cols
    for i, d in zip(ind.tolist(), data):
        ar.set_element(i // num_cols, i % num_cols, d)

    return ar
