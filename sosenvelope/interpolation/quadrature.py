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
from sosenvelope.errors import UsageError
from sosenvelope.symbolic.polynomials import cheb_integrate


def clenshaw_curtis_weights(L, U):
    """
    Clenshaw-Curtis weights for the ``U`` Chebyshev extrema on :math:`[-1, 1]`.

    Parameters
    ----------
    L : int
        Number of weights computed directly; the remaining ``L - 1`` follow by symmetry.
    U : int
        Number of nodes. We require ``U == 2 * L - 1``.

    Returns
    -------
    w : ndarray
        Has shape ``(U,)``. If ``v[k]`` is the value of a polynomial of degree at most
        ``U - 1`` at :math:`\\cos(k \\pi / (U - 1))`, then ``w @ v`` is the integral of
        that polynomial over :math:`[-1, 1]`.

    Notes
    -----
    The weights for the first half of the nodes are ``D.T @ F``, where ``D`` is an
    ``(L, L)`` matrix of cosines with halved boundary columns and ``F`` holds the
    integrals of even-degree Chebyshev polynomials. This costs :math:`O(L^2)` operations,
    rather than the :math:`O(U^2)` needed to integrate each basis polynomial term by term.
    """
    L, U = int(L), int(U)
    if L < 2:
        raise UsageError('Clenshaw-Curtis weights need L >= 2; got L=' + str(L) + '.')
    if U != 2 * L - 1:
        raise UsageError('Clenshaw-Curtis weights need U == 2L - 1; got L=%d, U=%d.' % (L, U))
    k = np.arange(L)
    scale = np.ones(L)
    scale[0] = 0.5
    scale[L - 1] = 0.5
    D = np.cos(np.outer(k, k) * np.pi / (L - 1)) * scale
    D /= (L - 1)

    F = np.zeros(L)
    F[0] = 1.0
    m = np.arange(1, L - 1)
    F[1:L - 1] = 2.0 / (1 - 4 * m ** 2)
    F[L - 1] = 1.0 / (1 - (U - 1) ** 2)

    w = np.zeros(U)
    w[:L] = D.T @ F
    w[L:] = w[:L - 1][::-1]
    # the middle node is shared by both halves
    w[L - 1] *= 2
    return w


def objective_vector(L, U, interval=None):
    """
    Return the negated Clenshaw-Curtis weights for ``interval``. For coordinates ``v`` of a
    polynomial in the interpolant basis, ``-objective_vector(L, U, interval) @ v`` is the
    integral of that polynomial over ``interval``.
    """
    w = clenshaw_curtis_weights(L, U)
    if interval is not None:
        w = w * interval.half_length
    return -w


def exact_basis_integrals(basis_polys, interval):
    """
    Integrate each basis polynomial, given by Chebyshev coefficients in the reference variable,
    term by term over ``interval``. This is slower than ``clenshaw_curtis_weights``, and serves
    as a check on it.
    """
    return np.array([cheb_integrate(poly) for poly in basis_polys]) * interval.half_length
