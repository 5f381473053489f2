import sparsemat

from utils import benchmark

import numpy as np
import scipy.sparse as sps

LEN = 100000
DENSITY = 0.00001
ITERS = 3
rng = np.random.default_rng(0)


if __name__ == "__main__":
    print("Matmul Example:\n")

    a = sparsemat.random((LEN, LEN - 10), density=DENSITY, random_state=rng)
    b = sparsemat.random((LEN - 10, LEN), density=DENSITY, random_state=rng)

    # ======= sparsemat =======
    def matmul_sparsemat(a, b):
        return a @ b

    result_sparsemat = benchmark(matmul_sparsemat, args=[a, b], info="sparsemat", iters=ITERS)

    # ======= SciPy =======
    def matmul_scipy(a, b):
        return a @ b

    a_sps = a.to_scipy_sparse("csr")
    b_sps = b.to_scipy_sparse("csr")

    result_scipy = benchmark(matmul_scipy, args=[a_sps, b_sps], info="SciPy", iters=ITERS)

    assert result_sparsemat == sparsemat.SparseMatrix.from_scipy_sparse(sps.csr_matrix(result_scipy))
