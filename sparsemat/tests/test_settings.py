import pickle
import re
from pathlib import Path

import pytest

import sparsemat

from sparsemat import DimensionMismatch, MalformedInput, OutOfBounds, SparseMatrixError
from sparsemat._settings import _env_flag, _env_float


@pytest.mark.parametrize("value, expected", [("0", False), ("1", True), ("2", True)])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("SPARSEMAT_TEST_FLAG", value)

    assert _env_flag("SPARSEMAT_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("SPARSEMAT_TEST_FLAG", raising=False)

    assert _env_flag("SPARSEMAT_TEST_FLAG") is False


def test_env_flag_invalid(monkeypatch):
    monkeypatch.setenv("SPARSEMAT_TEST_FLAG", "yes")

    with pytest.warns(UserWarning):
        assert _env_flag("SPARSEMAT_TEST_FLAG") is False


def test_env_float(monkeypatch):
    monkeypatch.setenv("SPARSEMAT_TEST_FLOAT", "0.25")

    assert _env_float("SPARSEMAT_TEST_FLOAT", 0.5) == 0.25


def test_env_float_invalid(monkeypatch):
    monkeypatch.setenv("SPARSEMAT_TEST_FLOAT", "dense")

    with pytest.warns(UserWarning):
        assert _env_float("SPARSEMAT_TEST_FLOAT", 0.5) == 0.5


@pytest.mark.parametrize(
    "err",
    [
        DimensionMismatch("add", (2, 2), (3, 3)),
        MalformedInput("Invalid format", 4, "(1, 2"),
        MalformedInput("Missing header"),
        OutOfBounds(5, 1, (2, 2)),
    ],
)
def test_errors_pickle(err):
    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is type(err)
    assert str(restored) == str(err)
    assert isinstance(restored, SparseMatrixError)


def test_error_hierarchy():
    assert issubclass(DimensionMismatch, ValueError)
    assert issubclass(MalformedInput, ValueError)
    assert issubclass(OutOfBounds, IndexError)


def test_version_readable_without_exec():
    root = Path(sparsemat.__file__).parent
    text = (root / "_version.py").read_text()

    match = re.search(r"^__version__ = \"([^\"]+)\"", text, re.M)
    assert match.group(1) == sparsemat.__version__

    setup_py = root.parent / "setup.py"
    if setup_py.exists():
        assert "exec(" not in setup_py.read_text()
