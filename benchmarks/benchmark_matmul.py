import sparsemat

import numpy as np


class Matmul_Sparse:
    params = ([100, 1000, 10000], [0.001, 0.01])

    def setup(self, side, density):
        rng = np.random.default_rng(0)
        self.x = sparsemat.random((side, side), density=density, random_state=rng)
        self.y = sparsemat.random((side, side), density=density, random_state=rng)

    def time_matmul(self, side, density):
        self.x @ self.y

    def time_row_index(self, side, density):
        self.y.row_index()


class ElemwiseSuite:
    def setup(self):
        rng = np.random.default_rng(0)
        self.x = sparsemat.random((1000, 1000), density=0.01, random_state=rng)
        self.y = sparsemat.random((1000, 1000), density=0.01, random_state=rng)

    def time_add(self):
        self.x + self.y

    def time_subtract(self):
        self.x - self.y

    def time_index(self):
        self.x[5, 5]
