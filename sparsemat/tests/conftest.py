import sparsemat
from sparsemat import _settings

import pytest


@pytest.fixture
def check_bounds(monkeypatch):
    monkeypatch.setattr(_settings, "CHECK_BOUNDS", True)


@pytest.fixture
def warn_on_too_dense(monkeypatch):
    monkeypatch.setattr(_settings, "WARN_ON_TOO_DENSE", True)
    monkeypatch.setattr(_settings, "DENSITY_WARN_THRESHOLD", 0.5)


@pytest.fixture
def scenario_a():
    return sparsemat.SparseMatrix((3, 3), [(0, 1, 5), (2, 0, -2)])


@pytest.fixture
def write_matrix(tmp_path):
    def write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return path

    return write
