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


class Interval(object):
    """
    A closed and bounded interval :math:`[\\texttt{lo}, \\texttt{hi}]` of the real line,
    with ``lo < hi``. Interval objects are immutable.

    Parameters
    ----------
    lo : float
        The left endpoint.
    hi : float
        The right endpoint.

    Notes
    -----
    Polynomials in this package are represented by monomial coefficients in the
    actual variable ``x``, not in the variable of the reference interval :math:`[-1, 1]`.
    The affine maps ``to_reference`` and ``from_reference`` move between the two.
    """

    def __init__(self, lo, hi):
        lo, hi = float(lo), float(hi)
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise UsageError('Interval endpoints must be finite; got [%s, %s].' % (lo, hi))
        if not lo < hi:
            raise UsageError('Interval endpoints must satisfy lo < hi; got [%s, %s].' % (lo, hi))
        self._lo = lo
        self._hi = hi

    @staticmethod
    def reference():
        return Interval(-1, 1)

    @staticmethod
    def parse(arg):
        if isinstance(arg, Interval):
            return arg
        try:
            lo, hi = arg
        except (TypeError, ValueError):
            raise UsageError('Expected an Interval or a pair (lo, hi); got ' + str(arg) + '.')
        return Interval(lo, hi)

    @property
    def lo(self):
        return self._lo

    @property
    def hi(self):
        return self._hi

    @property
    def length(self):
        return self._hi - self._lo

    @property
    def midpoint(self):
        return (self._lo + self._hi) / 2

    @property
    def half_length(self):
        return (self._hi - self._lo) / 2

    def is_reference(self):
        return self._lo == -1 and self._hi == 1

    def to_reference(self, x):
        return (np.asarray(x, dtype=float) - self.midpoint) / self.half_length

    def from_reference(self, t):
        return self.midpoint + self.half_length * np.asarray(t, dtype=float)

    def contains(self, x, tol=0.0):
        x = np.asarray(x, dtype=float)
        return np.logical_and(self._lo - tol <= x, x <= self._hi + tol)

    def weight_polynomial(self):
        """
        Monomial coefficients (ascending powers) of :math:`x \\mapsto (x - lo)(hi - x)`.
        This quadratic is nonnegative exactly on the interval and vanishes at both
        endpoints. On :math:`[-1, 1]` it is :math:`1 - x^2`.
        """
        return np.array([-self._lo * self._hi, self._lo + self._hi, -1.0])

    def __eq__(self, other):
        if isinstance(other, Interval):
            return self._lo == other._lo and self._hi == other._hi
        return False

    def __hash__(self):
        return hash((self._lo, self._hi))

    def __repr__(self):
        return 'Interval(%s, %s)' % (self._lo, self._hi)
