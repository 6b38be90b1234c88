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
import scipy.sparse as sp
from sosenvelope.barriers.barrier import ProductBarrier, SOSBarrier
from sosenvelope.problems.constraints import Constraints, Instance, Solution


class TestConstraints(unittest.TestCase):

    def test_dimensions(self):
        A = np.random.randn(2, 5)
        cons = Constraints(A, np.zeros(2), np.ones(5))
        assert sp.issparse(cons.A)
        assert cons.num_constraints == 2
        assert cons.num_variables == 5
        self.assertRaises(RuntimeError, Constraints, A, np.zeros(3), np.ones(5))
        self.assertRaises(RuntimeError, Constraints, A, np.zeros(2), np.ones(4))

    def test_residual_and_objective(self):
        A = np.array([[1.0, 1.0, 0.0], [0.0, 1.0, -1.0]])
        cons = Constraints(A, np.array([2.0, 0.0]), np.array([1.0, 2.0, 3.0]))
        x = np.array([1.0, 1.0, 1.0])
        self.assertAlmostEqual(cons.residual(x), 0.0)
        self.assertAlmostEqual(cons.objective(x), 6.0)

    def test_dual_system(self):
        np.random.seed(0)
        A = np.random.randn(3, 7)
        b = np.random.randn(3)
        c = np.random.randn(7)
        primal = Constraints(A, b, c)
        dual = primal.dual_system()
        assert dual.num_variables == 7
        assert dual.num_constraints == 4
        # rows of the dual matrix span ker(A)
        self.assertLessEqual(np.linalg.norm(dual.A.toarray() @ A.T), 1e-10)
        # the dual objective solves the primal equations
        self.assertLessEqual(np.linalg.norm(A @ dual.c - b), 1e-10)
        # s = c is feasible for the dual system
        self.assertLessEqual(dual.residual(c), 1e-10)
        # for s = c - A.T y, the objectives differ by the constant x0 @ c
        y = np.random.randn(3)
        s = c - A.T @ y
        self.assertAlmostEqual(dual.objective(s), dual.c @ c - b @ y)

    def test_summary(self):
        cons = Constraints(np.eye(2), np.ones(2), np.zeros(2))
        text = cons.summary()
        assert text.startswith('A (2 x 2) =')
        assert repr(cons) == 'Constraints(m=2, n=2)'


class TestInstance(unittest.TestCase):

    def test_barrier_length(self):
        barrier = ProductBarrier()
        barrier.add_barrier(SOSBarrier(1))
        cons = Constraints(np.ones((1, 3)), np.ones(1), np.zeros(3))
        inst = Instance(cons, barrier)
        assert inst.primal is None
        barrier.add_barrier(SOSBarrier(1))
        self.assertRaises(RuntimeError, Instance, cons, barrier)

    def test_solution(self):
        sol = Solution([[1, 2], [3, 4]])
        assert sol.s.shape == (4,)
        assert sol.x is None


if __name__ == '__main__':
    unittest.main()
