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
import scipy.linalg as la
from sosenvelope.errors import UsageError
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.interpolation.chebyshev import ChebyshevBasis, chebyshev_extrema, leja_order
from sosenvelope.interpolation.chebyshev import lagrange_basis_polynomials, transform_matrix


class TestChebyshevExtrema(unittest.TestCase):

    def test_reference_nodes(self):
        nodes = chebyshev_extrema(5)
        expect = np.cos(np.arange(5) * np.pi / 4)
        assert np.allclose(nodes, expect)
        assert nodes[0] == 1 and nodes[-1] == -1
        assert nodes[2] == 0
        assert np.all(np.diff(nodes) < 0)
        assert np.allclose(nodes, -nodes[::-1])

    def test_mapped_nodes(self):
        X = Interval(0, 4)
        nodes = chebyshev_extrema(3, X)
        assert np.allclose(nodes, [4, 2, 0])

    def test_reproducible(self):
        assert np.all(chebyshev_extrema(9) == chebyshev_extrema(9))

    def test_too_few_nodes(self):
        self.assertRaises(UsageError, chebyshev_extrema, 1)


class TestLagrangeBasis(unittest.TestCase):

    @staticmethod
    def lagrange_error(basis):
        vals = np.array([basis.evaluate(i, basis.nodes) for i in range(basis.U)])
        return np.max(np.abs(vals - np.eye(basis.U)))

    def test_lagrange_property_reference(self):
        for d in range(1, 13):
            basis = ChebyshevBasis(d)
            self.assertLessEqual(self.lagrange_error(basis), 1e-9)

    def test_lagrange_property_mapped(self):
        for X in [(0, 2), (5, 6), (0, 100)]:
            for d in range(1, 7):
                basis = ChebyshevBasis(d, X)
                self.assertLessEqual(self.lagrange_error(basis), 1e-9)

    def test_small_example(self):
        # nodes 1, 0, -1; the basis polynomials are t(1 + t)/2, 1 - t^2, t(t - 1)/2
        basis_polys = lagrange_basis_polynomials(np.array([1.0, 0.0, -1.0]))
        expect = np.array([[0.25, 0.5, 0.25],
                           [0.5, 0, -0.5],
                           [0.25, -0.5, 0.25]])
        assert np.allclose(basis_polys, expect)
        Q = transform_matrix(basis_polys)
        assert np.allclose(Q, expect.T)

    def test_leja_order(self):
        nodes = chebyshev_extrema(5)
        order = leja_order(nodes)
        assert sorted(order) == list(range(5))
        assert order[:3] == [0, 4, 2]

    def test_verbose(self):
        nodes = chebyshev_extrema(7)
        quiet = lagrange_basis_polynomials(nodes)
        loud = lagrange_basis_polynomials(nodes, verbose=True)
        assert np.all(quiet == loud)

    def test_repeated_nodes(self):
        self.assertRaises(UsageError, lagrange_basis_polynomials, np.array([0.0, 1.0, 0.0]))


class TestChebyshevBasis(unittest.TestCase):

    def test_dimensions(self):
        basis = ChebyshevBasis(3)
        assert basis.L == 4 and basis.U == 7
        assert basis.U == 2 * basis.L - 1
        assert basis.nodes.shape == (7,)
        assert basis.Q.shape == (7, 7)
        assert 'basis_polys' in basis.timings

    def test_invalid_degree(self):
        self.assertRaises(UsageError, ChebyshevBasis, 0)
        self.assertRaises(UsageError, ChebyshevBasis, -2)
        self.assertRaises(UsageError, ChebyshevBasis, 1.5)

    def test_transform_matrix_invertible(self):
        for d in range(1, 21):
            Q = ChebyshevBasis(d).Q
            err = np.linalg.norm(Q @ la.inv(Q) - np.eye(Q.shape[0]))
            self.assertLess(err, 1e-6)

    def test_transform_matrix_invertible_shifted(self):
        for X in [(5, 6), (0, 100)]:
            for d in [4, 10, 20]:
                Q = ChebyshevBasis(d, X).Q
                err = np.linalg.norm(Q @ la.inv(Q) - np.eye(Q.shape[0]))
                self.assertLess(err, 1e-6)

    def test_inverse_is_chebyshev_vandermonde(self):
        basis = ChebyshevBasis(5, (0, 100))
        V = np.polynomial.chebyshev.chebvander(basis.reference_nodes, basis.U - 1)
        assert np.allclose(basis.Q @ V, np.eye(basis.U))

    def test_columns_are_basis_polynomials(self):
        basis = ChebyshevBasis(2, (-3, 1))
        for j in range(basis.U):
            assert np.all(basis.Q[:, j] == basis.basis_polys[j])

    def test_values_at_nodes(self):
        basis = ChebyshevBasis(2)
        p = np.array([1, -2, 0, 0.5, 1])
        v = basis.values_at_nodes(p)
        assert np.allclose(basis.to_monomial(basis.Q @ v), p)
        basis = ChebyshevBasis(4, (5, 6))
        p = np.zeros(9)
        p[:2] = [1, 1]
        v = basis.values_at_nodes(p)
        assert np.allclose(v, 1 + basis.nodes)
        assert np.allclose(basis.to_monomial(basis.Q @ v), p)

    def test_monomial_maps(self):
        basis = ChebyshevBasis(3, (0, 100))
        p = np.array([2.0, -1.0, 0.01, 0, 0, 0, 0])
        series = basis.to_chebyshev(p)
        assert series.size == basis.U
        assert np.allclose(basis.to_monomial(series), p)
        self.assertAlmostEqual(basis.evaluation_scale([1, -1]), 101)


if __name__ == '__main__':
    unittest.main()
