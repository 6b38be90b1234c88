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
import unittest
import numpy as np
from sosenvelope.errors import UsageError
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.interpolation.chebyshev import ChebyshevBasis, chebyshev_extrema
from sosenvelope.interpolation.quadrature import clenshaw_curtis_weights, objective_vector
from sosenvelope.interpolation.quadrature import exact_basis_integrals


class TestClenshawCurtis(unittest.TestCase):

    def test_simpson(self):
        # three nodes recovers Simpson's rule
        w = clenshaw_curtis_weights(2, 3)
        assert np.allclose(w, [1 / 3, 4 / 3, 1 / 3])

    def test_constant(self):
        for L in range(2, 12):
            w = clenshaw_curtis_weights(L, 2 * L - 1)
            self.assertAlmostEqual(np.sum(w), 2.0, places=12)

    def test_symmetric_and_positive(self):
        w = clenshaw_curtis_weights(6, 11)
        assert np.allclose(w, w[::-1])
        assert np.all(w > 0)

    def test_exact_for_monomials(self):
        L, U = 5, 9
        w = clenshaw_curtis_weights(L, U)
        nodes = chebyshev_extrema(U)
        for k in range(U):
            expect = (1 - (-1) ** (k + 1)) / (k + 1)
            self.assertAlmostEqual(w @ nodes ** k, expect, places=12)

    def test_invalid_sizes(self):
        self.assertRaises(UsageError, clenshaw_curtis_weights, 1, 1)
        self.assertRaises(UsageError, clenshaw_curtis_weights, 3, 6)


class TestObjectiveVector(unittest.TestCase):

    def test_reference_interval(self):
        obj = objective_vector(2, 3)
        assert np.allclose(obj, [-1 / 3, -4 / 3, -1 / 3])
        self.assertAlmostEqual(-np.sum(obj), 2.0)

    def test_mapped_interval(self):
        for lo, hi in [(0, 1), (-3, 5), (2, 2.5)]:
            X = Interval(lo, hi)
            obj = objective_vector(4, 7, X)
            self.assertAlmostEqual(-np.sum(obj), hi - lo, places=12)

    def test_matches_exact_integrals(self):
        for X, d in [(Interval(0, 2), 3), (Interval(5, 6), 10), (Interval(-1, 1), 20)]:
            basis = ChebyshevBasis(d, X)
            exact = exact_basis_integrals(basis.basis_polys, X)
            obj = objective_vector(basis.L, basis.U, X)
            assert np.allclose(-obj, exact, atol=1e-10)


if __name__ == '__main__':
    unittest.main()
