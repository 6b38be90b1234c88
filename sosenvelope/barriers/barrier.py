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
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.symbolic.polynomials import poly_eval
from sosenvelope.interpolation.chebyshev import chebyshev_extrema


def build_barrier_selectors(barrier):
    """
    :param barrier: a ProductBarrier

    :return: a list of slices, where the i-th slice selects the coordinates of a
    vector which the i-th factor of ``barrier`` acts upon.
    """
    selectors = []
    running_idx = 0
    for b in barrier.barriers:
        selectors.append(slice(running_idx, running_idx + b.len))
        running_idx += b.len
    return selectors


class Barrier(object):
    """
    A node in the tree describing a composite cone and its barrier. Node kinds are
    'sos' for an elementary cone of polynomials which are (weighted) sums of squares,
    'sum' for a sum of cones over one shared block of coordinates, and 'product' for
    a cartesian product of cones over consecutive blocks of coordinates.

    The barrier function of each cone is evaluated by the solver, not by this package.
    """

    kind = None

    @property
    def len(self):
        raise NotImplementedError()

    def add_barrier(self, barrier):
        raise NotImplementedError()


class SOSBarrier(Barrier):
    """
    The cone of polynomials of degree at most ``2 * degree`` over ``interval`` which can be
    written as ``weight * sigma``, where ``sigma`` is a sum of squares. Polynomials in this
    cone are represented by their values at the ``2 * degree + 1`` Chebyshev extrema of
    ``interval``, which are available as ``nodes``.

    Parameters
    ----------
    degree : int
        Half the degree of the polynomials in this cone.
    interval : Interval or tuple or None
        The domain of the polynomials. Defaults to :math:`[-1, 1]`.
    weight : ndarray or None
        Monomial coefficients (ascending powers of the interval's variable) of a fixed
        multiplier. If None, then the multiplier is the constant polynomial ``1``.
    """

    kind = 'sos'

    def __init__(self, degree, interval=None, weight=None):
        self.degree = int(degree)
        self.interval = Interval.reference() if interval is None else Interval.parse(interval)
        if weight is not None:
            weight = np.asarray(weight, dtype=float).ravel()
        self.weight = weight

    @property
    def len(self):
        return 2 * self.degree + 1

    @property
    def is_weighted(self):
        return self.weight is not None

    @property
    def nodes(self):
        return chebyshev_extrema(self.len, self.interval)

    def weight_values(self, nodes=None):
        """
        Evaluate the multiplier at ``nodes``, which default to this cone's own nodes.
        """
        if nodes is None:
            nodes = self.nodes
        if self.weight is None:
            return np.ones(np.asarray(nodes).size)
        return poly_eval(self.weight, nodes)

    def add_barrier(self, barrier):
        raise RuntimeError('An SOSBarrier is a leaf; wrap it in a SumBarrier or ProductBarrier.')

    def __eq__(self, other):
        if not isinstance(other, SOSBarrier) or self.degree != other.degree:
            return False
        if self.interval != other.interval:
            return False
        if self.weight is None or other.weight is None:
            return self.weight is None and other.weight is None
        return self.weight.shape == other.weight.shape and np.all(self.weight == other.weight)

    def __repr__(self):
        if self.weight is None:
            return 'SOSBarrier(%d, %s)' % (self.degree, self.interval)
        return 'SOSBarrier(%d, %s, weight=%s)' % (self.degree, self.interval, self.weight.tolist())


class SumBarrier(Barrier):
    """
    The Minkowski sum of the cones of its children. Every child acts on the same
    block of ``length`` coordinates.
    """

    kind = 'sum'

    def __init__(self, length):
        self.length = int(length)
        self.barriers = []

    @property
    def len(self):
        return self.length

    def add_barrier(self, barrier):
        if barrier.len != self.length:
            msg = 'Incompatible dimensions for SumBarrier (' + str(self.length) + ')'
            msg += ' and summand (' + str(barrier.len) + ').'
            raise RuntimeError(msg)
        self.barriers.append(barrier)

    def __eq__(self, other):
        if isinstance(other, SumBarrier):
            return self.length == other.length and self.barriers == other.barriers
        return False

    def __repr__(self):
        return 'SumBarrier(%d, %s)' % (self.length, self.barriers)


class ProductBarrier(Barrier):
    """
    The cartesian product of the cones of its children, in order.
    """

    kind = 'product'

    def __init__(self):
        self.barriers = []

    @property
    def len(self):
        return sum(b.len for b in self.barriers)

    def add_barrier(self, barrier):
        self.barriers.append(barrier)

    def __eq__(self, other):
        if isinstance(other, ProductBarrier):
            return self.barriers == other.barriers
        return False

    def __repr__(self):
        return 'ProductBarrier(%s)' % self.barriers
