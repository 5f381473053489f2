import pytest


@pytest.fixture(scope="session", autouse=True)
def add_doctest_modules(doctest_namespace):
    import sparsemat

    import numpy as np

    doctest_namespace["np"] = np
    doctest_namespace["sparsemat"] = sparsemat
    doctest_namespace["SparseMatrix"] = sparsemat.SparseMatrix
