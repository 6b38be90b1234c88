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
from sosenvelope.symbolic.polynomials import poly_eval


def project_solution(solution, registry, to_monomial=None):
    """
    Recover the lower-envelope polynomial from a solver's output.

    Parameters
    ----------
    solution : Solution
        The first ``registry.U`` entries of ``solution.s`` are the block of the
        reference polynomial's constraint.
    registry : PolynomialRegistry
        The registry used to build the instance which was solved.
    to_monomial : bool or None
        Whether to return monomial coefficients. If None, we return monomial coefficients
        exactly when some registered polynomial was given in the monomial basis.

    Returns
    -------
    coeffs : ndarray
        The envelope ``P_0 - s[:U]``, in the requested basis.
    """
    U = registry.U
    s = np.asarray(solution.s, dtype=float).ravel()
    if s.size < U:
        raise UsageError('The solution has ' + str(s.size) + ' entries, but at least ' + str(U) + ' are needed.')
    envelope = registry.reference - s[:U]
    if to_monomial is None:
        to_monomial = not registry.all_interpolant()
    if to_monomial:
        envelope = registry.to_monomial(envelope)
    return envelope


def evaluate_envelope(coeffs, x):
    """
    Evaluate monomial coefficients returned by ``project_solution`` at the points ``x``.
    """
    return poly_eval(coeffs, x)
