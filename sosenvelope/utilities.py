"""
   Copyright 2019 Riley John Murray

   Licensed under the Apache License, Version 2.0 (the "License");
   you may not use this file except in compliance with the License.
   You may obtain a copy of the License at

     http://www.apache.org/licenses/LICENSE-2.0

   Unless required by applicable law or agreed to in writing, software
   distributed under the License is distributed on an "AS IS" BASIS,
   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
   See the License for the specific language governing permissions and
   limitations under the License.
"""
import time
import numpy as np
import scipy.linalg as la


def kernel_basis(mat, tol=1e-6):
    """
    Return a matrix whose columns form an orthonormal basis for the kernel of ``mat``.
    Singular values no larger than ``tol`` are treated as zero.
    """
    mat = np.atleast_2d(mat)
    u, s, vh = la.svd(mat)
    rank = np.count_nonzero(s > tol)
    basis = vh[rank:, :].T
    return basis


def relative_residual(mat, x, rhs):
    denom = max(np.linalg.norm(rhs), 1.0)
    return np.linalg.norm(mat @ x - rhs) / denom


class Timer(object):
    """
    Records wall-clock durations (in seconds) into a ``timings`` dict, under ``key``. ::

        with Timer(self.timings, 'inverse'):
            Q_inv = la.inv(Q)
    """

    def __init__(self, timings, key):
        self.timings = timings
        self.key = key
        self.tic = None

    def __enter__(self):
        self.tic = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timings[self.key] = time.time() - self.tic
        return False
