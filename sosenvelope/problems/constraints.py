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
import numpy as np
import scipy.linalg as la
import scipy.sparse as sp
from sosenvelope.utilities import kernel_basis


class Constraints(object):
    """
    A linear system ``A @ x == b`` together with a linear objective ``c @ x`` (to be minimized).
    The cone which ``x`` must belong to is described separately, by a Barrier.

    Parameters
    ----------
    A : ndarray or scipy sparse matrix
        Has shape ``(m, n)``.
    b : ndarray
        Has shape ``(m,)``.
    c : ndarray
        Has shape ``(n,)``.
    """

    def __init__(self, A, b, c):
        A = sp.csc_matrix(A, dtype=float)
        b = np.asarray(b, dtype=float).ravel()
        c = np.asarray(c, dtype=float).ravel()
        if A.shape[0] != b.size:
            raise RuntimeError('Incompatible dimensions for A ' + str(A.shape) + ' and b (' + str(b.size) + ').')
        if A.shape[1] != c.size:
            raise RuntimeError('Incompatible dimensions for A ' + str(A.shape) + ' and c (' + str(c.size) + ').')
        self.A = A
        self.b = b
        self.c = c

    @property
    def num_variables(self):
        return self.A.shape[1]

    @property
    def num_constraints(self):
        return self.A.shape[0]

    def residual(self, x):
        return np.linalg.norm(self.A @ x - self.b)

    def objective(self, x):
        return self.c @ x

    def dual_system(self):
        """
        Return the Constraints for the dual of ``min{ c @ x : A @ x == b, x in K }``.

        The dual problem is ``max{ b @ y : c - A.T @ y in K* }``. With ``s = c - A.T @ y``,
        this is ``min{ x0 @ s : Z @ s == Z @ c, s in K* }``, where the rows of ``Z`` span
        the kernel of ``A`` and ``x0`` is any solution of ``A @ x0 == b``. We use the
        least-squares solution for ``x0``. The optimal values of the two problems differ
        by the constant ``x0 @ c``.
        """
        A = self.A.toarray()
        Z = kernel_basis(A).T
        x0 = la.lstsq(A, self.b)[0]
        return Constraints(Z, Z @ self.c, x0)

    def summary(self):
        lines = ['A (%d x %d) =' % self.A.shape, str(self.A.toarray()),
                 'b =', str(self.b), 'c =', str(self.c)]
        return '\n'.join(lines)

    def __repr__(self):
        return 'Constraints(m=%d, n=%d)' % (self.num_constraints, self.num_variables)


class Instance(object):
    """
    The unit handed to an interior-point solver: ``constraints`` together with the
    ``barrier`` describing the cone.

    Attributes
    ----------
    constraints : Constraints
        The system the solver works with.
    barrier : Barrier
        Acts on vectors of length ``constraints.num_variables``.
    primal : Constraints or None
        The system from which ``constraints`` was derived, if any.
    """

    def __init__(self, constraints, barrier, primal=None):
        if barrier.len != constraints.num_variables:
            msg = 'Incompatible dimensions for barrier (' + str(barrier.len) + ')'
            msg += ' and constraints (' + str(constraints.num_variables) + ').'
            raise RuntimeError(msg)
        self.constraints = constraints
        self.barrier = barrier
        self.primal = primal


class Solution(object):
    """
    What an interior-point solver returns. Only ``s`` is required; it has length
    ``instance.constraints.num_variables``.
    """

    def __init__(self, s, x=None, status=None):
        self.s = np.asarray(s, dtype=float).ravel()
        self.x = None if x is None else np.asarray(x, dtype=float).ravel()
        self.status = status


class Solver(object):
    """
    This is currently only an interface, and contains no executable code.
    """

    def solve(self, instance):
        raise NotImplementedError()
