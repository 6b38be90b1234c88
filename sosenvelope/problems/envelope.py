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
import scipy.sparse as sp
from sosenvelope.errors import UsageError, EmptyInstanceError, TrivialInstanceError, NumericWarning
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.symbolic.polynomials import poly_eval
from sosenvelope.interpolation.chebyshev import ChebyshevBasis
from sosenvelope.interpolation.quadrature import objective_vector
from sosenvelope.barriers.barrier import ProductBarrier, SumBarrier, SOSBarrier
from sosenvelope.problems.constraints import Constraints, Instance
from sosenvelope.problems.registry import PolynomialRegistry
from sosenvelope.problems.recovery import project_solution
from sosenvelope.settings import SETTINGS
from sosenvelope.utilities import Timer

TRACE = 5


def _check_kwargs(kwargs, allowed):
    for kw in kwargs:
        if kw not in allowed:
            msg = 'Provided keyword argument "' + kw + '" is not in the list'
            msg += ' of allowed keyword arguments: \n'
            msg += '\t ' + str(allowed)
            raise UsageError(msg)


class EnvelopeProblem(object):
    """
    Formulate the problem of finding a polynomial which lies below a given family of
    polynomials over an interval, while having the largest possible integral over that interval.

    Parameters
    ----------
    num_variables : int
        Must equal 1; only univariate polynomials are supported.
    max_degree : int
        The parameter :math:`d`. Registered polynomials and the envelope have degree at most
        :math:`2d`, and are represented by :math:`U = 2d + 1` coefficients.
    interval : Interval or tuple
        The domain :math:`[lo, hi]`.
    logger : logging.Logger or None
        Diagnostics sink, passed on to the basis and the registry. Defaults to this module's logger.

    Other Parameters
    ----------------
    weighted : bool
        Whether the cone for each non-reference polynomial also contains the SOS polynomials
        multiplied by ``weight_polynomial``. Defaults to ``SETTINGS['weighted']``.
    weight_polynomial : ndarray
        Monomial coefficients of the multiplier for weighted SOS cones. Defaults to
        ``(x - lo)(hi - x)``, which is ``1 - x**2`` on :math:`[-1, 1]`.
    verbose : bool
        Show a progress bar while computing the basis polynomials.
    inversion_tolerance : float
        Passed to PolynomialRegistry.
    conversion_tolerance : float
        Passed to PolynomialRegistry.

    Examples
    --------
    Bound ``x ** 2`` and ``(x - 1/2) ** 2`` from below on :math:`[-1, 1]`. ::

        prob = EnvelopeProblem(1, 1, (-1, 1))
        prob.add_polynomial(np.array([0, 0, 1]))
        prob.add_polynomial(np.array([0.25, -1, 1]))
        instance = prob.construct_instance()
        # ... solve ``instance`` with an interior-point method, obtaining ``sol`` ...
        envelope_coeffs = prob.project(sol)
    """

    __VALID_KWARGS__ = {'weighted', 'weight_polynomial', 'verbose',
                        'inversion_tolerance', 'conversion_tolerance'}

    def __init__(self, num_variables, max_degree, interval, logger=None, **kwargs):
        _check_kwargs(kwargs, EnvelopeProblem.__VALID_KWARGS__)
        if num_variables != 1:
            raise UsageError('Only univariate polynomials are supported; got num_variables=' + str(num_variables) + '.')
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.n = 1
        self.interval = Interval.parse(interval)
        self.options = SETTINGS.copy()
        self.options.update(kwargs)
        self.timings = dict()
        self.basis = ChebyshevBasis(max_degree, self.interval, kwargs.get('verbose', False), self.logger)
        self.d = self.basis.degree
        self.L = self.basis.L
        self.U = self.basis.U
        self.timings['basis'] = self.basis.timings['basis_polys']
        self.logger.info('Construct objectives vector...')
        self.objective = objective_vector(self.L, self.U, self.interval)
        self.weight_polynomial = self._parse_weight(kwargs.get('weight_polynomial', None))
        self.registry = PolynomialRegistry(self.basis, self.logger,
                                           inversion_tolerance=self.options['inversion_tolerance'],
                                           conversion_tolerance=self.options['conversion_tolerance'])
        pass

    @property
    def weighted(self):
        return bool(self.options['weighted'])

    @property
    def Q(self):
        return self.basis.Q

    def _parse_weight(self, weight):
        if weight is None:
            return self.interval.weight_polynomial()
        weight = np.asarray(weight, dtype=float).ravel()
        endpoint_vals = poly_eval(weight, np.array([self.interval.lo, self.interval.hi]))
        if np.any(np.abs(endpoint_vals) > 1e-12):
            msg = 'The weight polynomial ' + str(weight.tolist()) + ' does not vanish at the endpoints of '
            msg += str(self.interval) + '. Nonnegativity certificates will not match this domain.'
            warnings.warn(msg, NumericWarning)
            self.logger.warning(msg)
        return weight

    def add_polynomial(self, polynomial, in_interpolant_basis=False):
        """
        Register a polynomial which the envelope must lie below. The first registered
        polynomial is the reference polynomial. Returns its coordinates in the interpolant basis.
        """
        return self.registry.register(polynomial, in_interpolant_basis)

    def zero_polynomial(self):
        return self.registry.zero_polynomial()

    def integrate(self, vec):
        """
        Integrate a polynomial, given by coordinates in the interpolant basis, over the domain.
        """
        return -self.objective @ np.asarray(vec, dtype=float)

    def construct_primal(self):
        """
        Return the Constraints ``(A, b, c)`` of the envelope problem. The variable is a stack of
        ``N`` blocks of length ``U``: the block ``X`` for the reference polynomial, and a block
        ``Y_i`` for every other registered polynomial. There is one block of equations
        ``-X + Y_i == P_i - P_0`` for each ``i >= 1``.
        """
        num_polys = len(self.registry)
        if num_polys == 0:
            self.logger.error('Please provide a polynomial.')
            raise EmptyInstanceError('Cannot build an instance without any polynomials.')
        if num_polys == 1:
            self.logger.warning('Instance trivial. Please detrivialize.')
            raise TrivialInstanceError('Cannot build an instance from one polynomial; nothing to bound against.')
        U = self.U
        c = np.zeros(num_polys * U)
        # c @ z is the integral of X, so minimizing it maximizes the integral of P_0 - X
        c[:U] = -self.objective
        identity = sp.identity(U, format='csc')
        zero = sp.csc_matrix((U, U))
        A_rows = []
        b = np.zeros((num_polys - 1) * U)
        reference = self.registry.reference
        for poly_idx in range(1, num_polys):
            row = [-identity] + [zero] * (num_polys - 1)
            row[poly_idx] = identity
            A_rows.append(row)
            b[(poly_idx - 1) * U:poly_idx * U] = self.registry[poly_idx] - reference
        A = sp.bmat(A_rows, format='csc')
        return Constraints(A, b, c)

    def construct_barrier(self):
        """
        Return a ProductBarrier with one factor per registered polynomial. The reference factor is
        an unweighted SOSBarrier. Every other factor is a SumBarrier of an unweighted SOSBarrier and,
        when ``self.weighted`` is True, an SOSBarrier weighted by ``self.weight_polynomial``.
        """
        product_barrier = ProductBarrier()
        product_barrier.add_barrier(SOSBarrier(self.d, self.interval))
        for _ in range(1, len(self.registry)):
            sum_barrier = SumBarrier(self.U)
            sum_barrier.add_barrier(SOSBarrier(self.d, self.interval))
            if self.weighted:
                sum_barrier.add_barrier(SOSBarrier(self.d, self.interval, self.weight_polynomial))
            product_barrier.add_barrier(sum_barrier)
        return product_barrier

    def construct_instance(self):
        """
        Build the Instance handed to the solver. The solver works with the dual of the system
        returned by ``construct_primal``; the primal system is kept as ``instance.primal``.
        """
        with Timer(self.timings, 'construct_instance'):
            primal = self.construct_primal()
            self.logger.info('Original SOS instance created.')
            if self.logger.isEnabledFor(TRACE):
                self.logger.log(TRACE, primal.summary())
            barrier = self.construct_barrier()
            dual = primal.dual_system()
            instance = Instance(dual, barrier, primal=primal)
        self.logger.info('Dual formulation created.')
        if self.logger.isEnabledFor(TRACE):
            self.logger.log(TRACE, dual.summary())
        return instance

    def project(self, solution, to_monomial=None):
        """
        Return the envelope polynomial encoded by ``solution``. Refer to ``project_solution``.
        """
        return project_solution(solution, self.registry, to_monomial)
