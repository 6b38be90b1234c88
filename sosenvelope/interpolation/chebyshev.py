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
import logging
import numpy as np
from numpy.polynomial import chebyshev as cheb
from tqdm import tqdm
from sosenvelope.errors import UsageError
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.symbolic.polynomials import poly_eval, cheb_mul_linear
from sosenvelope.symbolic.polynomials import monomial_to_chebyshev, chebyshev_to_monomial
from sosenvelope.utilities import Timer


def chebyshev_extrema(U, interval=None):
    """
    Return the ``U`` extrema of the Chebyshev polynomial of degree ``U - 1``.

    Parameters
    ----------
    U : int
        The number of nodes. Must be at least 2.
    interval : Interval or None
        If given, the nodes are mapped affinely from :math:`[-1, 1]` onto this interval.

    Returns
    -------
    nodes : ndarray
        Has shape ``(U,)``. The entry ``nodes[k]`` is the image of :math:`\\cos(k \\pi / (U-1))`,
        so the nodes are listed in decreasing order.
    """
    U = int(U)
    if U < 2:
        raise UsageError('At least two Chebyshev extrema are required; got U=' + str(U) + '.')
    N = U - 1
    k = np.arange(U)
    # same as cos(k * pi / N), but exactly symmetric about zero
    nodes = np.sin(np.pi * (N - 2 * k) / (2 * N))
    if interval is not None:
        nodes = interval.from_reference(nodes)
    return nodes


def leja_order(nodes):
    """
    Return a permutation of ``range(nodes.size)`` in which each node maximizes the product
    of its distances to the nodes before it. The first node has the largest magnitude.

    Multiplying linear factors ``(t - nodes[j])`` in this order keeps every partial product
    of moderate size, which is what makes the running products in
    ``lagrange_basis_polynomials`` accurate (L. Reichel, "Newton interpolation at Leja
    points", BIT 30, 1990).
    """
    nodes = np.asarray(nodes, dtype=float).ravel()
    order = [int(np.argmax(np.abs(nodes)))]
    with np.errstate(divide='ignore'):
        log_dist = np.log(np.abs(nodes - nodes[order[0]]))
        for _ in range(1, nodes.size):
            log_dist[order] = -np.inf
            nxt = int(np.argmax(log_dist))
            order.append(nxt)
            log_dist += np.log(np.abs(nodes - nodes[nxt]))
    return order


def lagrange_basis_polynomials(nodes, verbose=False):
    """
    Compute Chebyshev coefficients for the Lagrange polynomials of the given nodes.

    Parameters
    ----------
    nodes : ndarray
        Distinct interpolation nodes in :math:`[-1, 1]`, of shape ``(U,)``.
    verbose : bool
        Show a progress bar.

    Returns
    -------
    basis_polys : ndarray
        Has shape ``(U, U)``. Row ``i`` holds the coefficients on :math:`T_0, \\ldots, T_{U-1}`
        of the polynomial of degree ``U - 1`` which equals one at ``nodes[i]`` and zero at every
        other node.

    Notes
    -----
    Each row is built as a running product of linear factors ``(t - nodes[j])``, while
    the product of ``(nodes[i] - nodes[j])`` is accumulated separately. Only the finished
    numerator is divided by the denominator. The factors are taken in Leja order.
    """
    nodes = np.asarray(nodes, dtype=float).ravel()
    U = nodes.size
    if np.unique(nodes).size < U:
        raise UsageError('Interpolation nodes must be distinct.')
    order = leja_order(nodes)
    basis_polys = np.zeros(shape=(U, U))
    rows = tqdm(range(U)) if verbose else range(U)
    for i in rows:
        poly_i = np.zeros(U)
        poly_i[0] = 1.0
        denom = 1.0
        for j in order:
            if i != j:
                denom *= nodes[i] - nodes[j]
                poly_i = cheb_mul_linear(poly_i, nodes[j])
        basis_polys[i, :] = poly_i / denom
    return basis_polys


def transform_matrix(basis_polys):
    """
    Return ``Q`` where ``Q[:, j]`` holds the coefficients of the j-th basis polynomial. If ``v``
    are the coordinates of a polynomial in the interpolant basis, then ``Q @ v`` are its
    coefficients in the basis of the rows of ``basis_polys``.
    """
    return np.array(basis_polys, dtype=float).T.copy()


class ChebyshevBasis(object):
    """
    The Lagrange interpolant basis at Chebyshev extrema, for polynomials of degree at most
    ``2 * degree`` over a given interval.

    Parameters
    ----------
    degree : int
        The parameter :math:`d`. Must be a positive integer.
    interval : Interval or tuple
        The domain over which the basis is defined. Defaults to :math:`[-1, 1]`.
    verbose : bool
        Show a progress bar while computing the basis polynomials.
    logger : logging.Logger or None
        Diagnostics sink. Defaults to this module's logger.

    Attributes
    ----------
    L : int
        Number of Chebyshev extrema used by the quadrature rule's half-space, ``degree + 1``.
    U : int
        Dimension of the coefficient space, ``2 * degree + 1``.
    reference_nodes : ndarray
        The ``U`` interpolation nodes in :math:`[-1, 1]`.
    nodes : ndarray
        The ``U`` interpolation nodes, in the interval's coordinates.
    basis_polys : ndarray
        Row ``i`` holds Chebyshev coefficients, in the reference variable, of the i-th basis polynomial.
    Q : ndarray
        The ``(U, U)`` transformation matrix from the interpolant basis to Chebyshev coefficients
        in the reference variable. Its inverse is the matrix of Chebyshev polynomial values
        at the nodes, so ``Q`` is well conditioned for every degree.
    timings : dict
        Seconds spent building the basis polynomials.

    Notes
    -----
    Callers see monomial coefficients in the interval's own variable x. ``to_chebyshev`` and
    ``to_monomial`` apply the change of variables ``x = midpoint + half_length * t`` together
    with the change between monomial and Chebyshev coefficients.
    """

    def __init__(self, degree, interval=None, verbose=False, logger=None):
        if int(degree) != degree or degree < 1:
            raise UsageError('The degree must be a positive integer; got ' + str(degree) + '.')
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.degree = int(degree)
        self.interval = Interval.reference() if interval is None else Interval.parse(interval)
        self.L = self.degree + 1
        self.U = 2 * self.degree + 1
        self.timings = dict()
        self.reference_nodes = chebyshev_extrema(self.U)
        self.nodes = self.interval.from_reference(self.reference_nodes)
        self.logger.info('Construct transformation matrix')
        with Timer(self.timings, 'basis_polys'):
            self.basis_polys = lagrange_basis_polynomials(self.reference_nodes, verbose)
        self.logger.info('Finished construction in %s seconds.', self.timings['basis_polys'])
        if self.logger.isEnabledFor(logging.DEBUG):
            for k, poly in enumerate(self.basis_polys):
                self.logger.debug('The %d-th polynomial is: %s', k, poly)
        self.Q = transform_matrix(self.basis_polys)
        pass

    def evaluate(self, i, x):
        """
        Evaluate the i-th basis polynomial at ``x``, given in the interval's coordinates.
        """
        t = self.interval.to_reference(np.asarray(x, dtype=float))
        return cheb.chebval(t, self.basis_polys[i])

    def values_at_nodes(self, coeffs):
        """
        Return the coordinates, in the interpolant basis, of the polynomial with the given
        monomial coefficients. This is evaluation at the nodes, and does not involve ``Q``.
        """
        return poly_eval(coeffs, self.nodes)

    def evaluation_scale(self, coeffs):
        """
        Return the largest value at a node of the polynomial whose monomial coefficients are
        the absolute values of ``coeffs``. Rounding errors in ``values_at_nodes`` are
        proportional to this quantity.
        """
        return np.max(poly_eval(np.abs(coeffs), np.abs(self.nodes)))

    def to_chebyshev(self, coeffs):
        """
        Map monomial coefficients in x to Chebyshev coefficients in the reference variable.
        """
        return monomial_to_chebyshev(coeffs, self.interval, self.U)

    def to_monomial(self, series):
        """
        Map Chebyshev coefficients in the reference variable to monomial coefficients in x.
        Trailing coefficients at the level of rounding error are treated as zero.
        """
        series = np.asarray(series, dtype=float).ravel()
        tol = 1000 * self.U * np.finfo(float).eps * np.max(np.abs(series), initial=0.0)
        return chebyshev_to_monomial(series, self.interval, self.U, tol)
