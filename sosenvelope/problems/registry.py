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
import warnings
import numpy as np
import scipy.linalg as la
from sosenvelope.errors import ConversionError, NumericWarning, UsageError
from sosenvelope.settings import SETTINGS
from sosenvelope.utilities import Timer, relative_residual


class PolynomialRegistry(object):
    """
    An append-only list of polynomials, stored by their coordinates in the interpolant basis.
    The polynomial at position 0 is the reference polynomial.

    Parameters
    ----------
    basis : ChebyshevBasis
        Supplies the transformation matrix ``Q``, the interpolation nodes, and the maps between
        monomial coefficients in x and Chebyshev coefficients in the reference variable.
    logger : logging.Logger or None
        Diagnostics sink. Defaults to this module's logger.

    Other Parameters
    ----------------
    inversion_tolerance : float
        Report a NumericWarning when :math:`\\|Q Q^{-1} - I\\|` exceeds this value. Defaults to
        ``SETTINGS['inversion_tolerance']``.
    conversion_tolerance : float
        Raise a ConversionError when a basis conversion has relative residual, or relative
        disagreement with direct evaluation at the nodes, above this value. Defaults to
        ``SETTINGS['conversion_tolerance']``.

    Notes
    -----
    A monomial vector ``p`` is converted by computing its Chebyshev coefficients ``a`` and then
    solving ``Q @ vec == a`` with a QR factorization with column pivoting. The explicit inverse
    of ``Q`` is only computed as a diagnostic, and its error is recorded in
    ``last_inversion_error``. The solution is compared with the values of ``p`` at the nodes.
    """

    __VALID_KWARGS__ = {'inversion_tolerance', 'conversion_tolerance'}

    def __init__(self, basis, logger=None, **kwargs):
        for kw in kwargs:
            if kw not in PolynomialRegistry.__VALID_KWARGS__:
                raise UsageError('Unrecognized keyword argument "' + kw + '".')
        self.basis = basis
        self.Q = np.asarray(basis.Q, dtype=float)
        if self.Q.ndim != 2 or self.Q.shape[0] != self.Q.shape[1]:
            raise UsageError('The transformation matrix must be square; got shape ' + str(self.Q.shape) + '.')
        self.U = self.Q.shape[0]
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.inversion_tolerance = kwargs.get('inversion_tolerance', SETTINGS['inversion_tolerance'])
        self.conversion_tolerance = kwargs.get('conversion_tolerance', SETTINGS['conversion_tolerance'])
        self.last_inversion_error = None
        self.timings = dict()
        self._polynomials = []
        self._in_interpolant_basis = []

    def __len__(self):
        return len(self._polynomials)

    def __getitem__(self, item):
        return self._polynomials[item].copy()

    def __iter__(self):
        return iter([p.copy() for p in self._polynomials])

    @property
    def reference(self):
        if len(self._polynomials) == 0:
            raise UsageError('No polynomials have been registered.')
        return self._polynomials[0].copy()

    @property
    def polynomials(self):
        return [p.copy() for p in self._polynomials]

    @property
    def in_interpolant_basis(self):
        return list(self._in_interpolant_basis)

    def all_interpolant(self):
        return all(self._in_interpolant_basis)

    def zero_polynomial(self):
        return np.zeros(self.U)

    def register(self, polynomial, in_interpolant_basis=False):
        """
        Append a polynomial to the registry.

        Parameters
        ----------
        polynomial : ndarray
            Coefficients of length ``U``; either monomial coefficients in ascending powers of x,
            or coordinates in the interpolant basis.
        in_interpolant_basis : bool
            Whether ``polynomial`` is already expressed in the interpolant basis.

        Returns
        -------
        vec : ndarray
            The stored coordinates in the interpolant basis.
        """
        polynomial = np.asarray(polynomial, dtype=float).ravel()
        if polynomial.size != self.U:
            msg = 'Expected a coefficient vector of length ' + str(self.U)
            msg += ', but got one of length ' + str(polynomial.size) + '.'
            raise UsageError(msg)
        self.logger.info('Transformation matrix has norm %s', np.linalg.norm(self.Q))
        if in_interpolant_basis:
            vec = polynomial.copy()
        else:
            vec = self.to_interpolant(polynomial)
        self._polynomials.append(vec)
        self._in_interpolant_basis.append(bool(in_interpolant_basis))
        return vec.copy()

    def to_interpolant(self, polynomial):
        """
        Return the interpolant coordinates of the polynomial with monomial coefficients
        ``polynomial``, and report the inversion error of ``Q``.
        """
        polynomial = np.asarray(polynomial, dtype=float).ravel()
        series = self.basis.to_chebyshev(polynomial)
        self.logger.info('Invert transformation matrix to add polynomial ...')
        self.inversion_error()
        with Timer(self.timings, 'solve'):
            vec, _, rank, _ = la.lstsq(self.Q, series, lapack_driver='gelsy')
        self.logger.info('Solving system took %s seconds.', self.timings['solve'])
        if rank < self.U:
            msg = 'The transformation matrix has rank ' + str(rank) + ' < ' + str(self.U) + '.'
            raise ConversionError(msg)
        if not np.all(np.isfinite(vec)):
            raise ConversionError('Conversion to the interpolant basis produced non-finite values.')
        residual = relative_residual(self.Q, vec, series)
        if residual > self.conversion_tolerance:
            msg = 'Conversion to the interpolant basis has relative residual ' + str(residual)
            msg += ', which exceeds the tolerance ' + str(self.conversion_tolerance) + '.'
            raise ConversionError(msg)
        discrepancy = self.node_discrepancy(polynomial, vec)
        self.logger.debug('Discrepancy with values at the nodes is %s', discrepancy)
        if discrepancy > self.conversion_tolerance:
            msg = 'Conversion to the interpolant basis differs from evaluation at the nodes by '
            msg += str(discrepancy) + ', which exceeds the tolerance ' + str(self.conversion_tolerance) + '.'
            raise ConversionError(msg)
        return vec

    def node_discrepancy(self, polynomial, vec):
        """
        Compare interpolant coordinates ``vec`` with the values of the monomial vector
        ``polynomial`` at the nodes, relative to the scale of those values.
        """
        values = self.basis.values_at_nodes(polynomial)
        scale = max(self.basis.evaluation_scale(polynomial), 1.0)
        return np.max(np.abs(vec - values)) / scale

    def to_monomial(self, vec):
        return self.basis.to_monomial(self.Q @ np.asarray(vec, dtype=float))

    def inversion_error(self):
        """
        Return :math:`\\|Q Q^{-1} - I\\|` for the explicit inverse of ``Q``. A large value
        is reported with a NumericWarning, but is not fatal.
        """
        with Timer(self.timings, 'inverse'):
            try:
                Q_inv = la.inv(self.Q)
            except la.LinAlgError as err:
                raise ConversionError('The transformation matrix is singular.') from err
        self.logger.info('Inversion took %s seconds.', self.timings['inverse'])
        inv_error = np.linalg.norm(self.Q @ Q_inv - np.eye(self.U))
        self.logger.info('Inversion error is %s', inv_error)
        self.last_inversion_error = inv_error
        if inv_error > self.inversion_tolerance:
            msg = 'Inverting the transformation matrix has error ' + str(inv_error)
            msg += ', which exceeds ' + str(self.inversion_tolerance) + '.'
            warnings.warn(msg, NumericWarning)
        return inv_error
