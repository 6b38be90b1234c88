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
from sosenvelope import symbolic
from sosenvelope import interpolation
from sosenvelope import barriers
from sosenvelope import problems

from sosenvelope.errors import UsageError, EmptyInstanceError, TrivialInstanceError
from sosenvelope.errors import ConversionError, NumericWarning
from sosenvelope.symbolic.intervals import Interval
from sosenvelope.interpolation.chebyshev import ChebyshevBasis
from sosenvelope.barriers.barrier import ProductBarrier, SumBarrier, SOSBarrier
from sosenvelope.problems.constraints import Constraints, Instance, Solution
from sosenvelope.problems.registry import PolynomialRegistry
from sosenvelope.problems.envelope import EnvelopeProblem
from sosenvelope.problems.recovery import project_solution

from sosenvelope.settings import SETTINGS

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())


def use_weighted_barriers(true_or_false=True):
    """
    Set the default for whether EnvelopeProblem adds weighted SOS cones to the cone of each
    non-reference polynomial. Individual problems override this with the ``weighted`` keyword.

    The default value for ``true_or_false`` in this function's signature represents
    sosenvelope's default behavior for this setting.
    """
    SETTINGS['weighted'] = true_or_false


def inversion_error_tolerance(tol=1e-6):
    """
    Set the threshold on :math:`\\|Q Q^{-1} - I\\|` above which a NumericWarning is reported
    when a polynomial is converted from the monomial basis.

    The default value for ``tol`` in this function's signature represents
    sosenvelope's default behavior for this setting.
    """
    SETTINGS['inversion_tolerance'] = tol


def conversion_residual_tolerance(tol=1e-8):
    """
    Set the relative residual above which converting a polynomial from the monomial basis
    raises a ConversionError.

    The default value for ``tol`` in this function's signature represents
    sosenvelope's default behavior for this setting.
    """
    SETTINGS['conversion_tolerance'] = tol
