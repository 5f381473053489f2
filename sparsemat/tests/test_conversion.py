import pytest
from hypothesis import given
from _utils import gen_sparse_matrix

import numpy as np
import scipy.sparse

import sparsemat
from sparsemat import OutOfBounds, SparseMatrix
from sparsemat._utils import assert_eq


def test_todense(scenario_a):
    x = scenario_a.todense()

    assert x.dtype == np.int64
    assert np.array_equal(x, [[0, 5, 0], [0, 0, 0], [-2, 0, 0]])


def test_todense_out_of_bounds():
    s = SparseMatrix((2, 2))
    s.set_element(3, 0, 1)

    with pytest.raises(OutOfBounds):
        s.todense()

    with pytest.raises(OutOfBounds):
        s.to_scipy_sparse()


@pytest.mark.parametrize("dtype", [np.int8, np.int64, np.uint16, np.bool_])
def test_from_numpy(dtype):
    x = np.array([[0, 1, 0], [1, 0, 1]], dtype=dtype)
    s = SparseMatrix.from_numpy(x)

    assert s.entries() == [(0, 1, 1), (1, 0, 1), (1, 2, 1)]
    assert all(type(v) is int for v in s.data.values())


def test_from_numpy_object_dtype():
    x = np.array([[0, 2**70], [3, 0]], dtype=object)
    s = SparseMatrix(x)

    assert s.entries() == [(0, 1, 2**70), (1, 0, 3)]
    assert np.array_equal(s.todense(), x)


@pytest.mark.parametrize("x", [np.eye(2), np.array([[0, 1.5]], dtype=object)])
def test_from_numpy_non_integer(x):
    with pytest.raises(TypeError):
        SparseMatrix.from_numpy(x)


def test_from_numpy_not_two_dimensional():
    with pytest.raises(ValueError):
        SparseMatrix.from_numpy(np.arange(3))


@given(gen_sparse_matrix())
def test_numpy_roundtrip(s):
    assert SparseMatrix(s.todense()) == s


@pytest.mark.parametrize("format", ["coo", "csr", "csc", "dok"])
def test_to_scipy_sparse(format, scenario_a):
    x = scenario_a.to_scipy_sparse(format=format)

    assert x.format == format
    assert x.dtype == np.int64
    assert x.shape == (3, 3)
    assert_eq(scenario_a, x)


def test_to_scipy_sparse_overflow():
    s = SparseMatrix((1, 1), [(0, 0, 2**64)])

    with pytest.raises(OverflowError):
        s.to_scipy_sparse()


def test_from_scipy_sparse_sums_duplicates():
    x = scipy.sparse.coo_matrix(
        (np.array([1, 2, -4], dtype=np.int64), (np.array([0, 0, 1]), np.array([1, 1, 1]))),
        shape=(2, 2),
    )
    s = SparseMatrix(x)

    assert s.entries() == [(0, 1, 3), (1, 1, -4)]
    assert x.nnz == 3


def test_from_scipy_sparse_drops_explicit_zeros():
    x = scipy.sparse.csr_matrix(np.array([[1, 0], [0, 2]], dtype=np.int32))
    x.data[0] = 0

    assert SparseMatrix.from_scipy_sparse(x).entries() == [(1, 1, 2)]


def test_from_scipy_sparse_float():
    with pytest.raises(TypeError):
        SparseMatrix.from_scipy_sparse(scipy.sparse.identity(3, format="csr"))


def test_scipy_matmul_agrees():
    a = sparsemat.random((30, 20), density=0.1, random_state=1)
    b = sparsemat.random((20, 25), density=0.1, random_state=2)

    expected = a.to_scipy_sparse("csr") @ b.to_scipy_sparse("csr")

    assert_eq(a @ b, expected)


def test_asarray_disabled(scenario_a):
    with pytest.raises(RuntimeError):
        np.asarray(scenario_a)


def test_asarray_auto_densify(monkeypatch, scenario_a):
    from sparsemat import _settings

    monkeypatch.setattr(_settings, "AUTO_DENSIFY", True)

    assert np.array_equal(np.asarray(scenario_a), scenario_a.todense())


def test_warn_on_too_dense(warn_on_too_dense):
    dense = SparseMatrix((2, 2), [(0, 0, 1), (0, 1, 1), (1, 0, 1)])

    with pytest.warns(RuntimeWarning):
        dense.todense()

    with pytest.warns(RuntimeWarning):
        dense @ dense


def test_no_warning_below_threshold(warn_on_too_dense, recwarn):
    s = SparseMatrix((4, 4), [(0, 0, 1)])
    s.todense()
    s @ s

    assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]
