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
# Univariate polynomials are stored as 1darrays of coefficients, in order of ascending
# degree. Monomial coefficients refer to the caller's variable x. Chebyshev coefficients
# refer to the reference variable t, which ranges over [-1, 1] as x ranges over an Interval.
import numpy as np
from numpy.polynomial import chebyshev as cheb
from numpy.polynomial import Chebyshev, Polynomial


def poly_eval(coeffs, x):
    """
    Evaluate the polynomial with monomial coefficients ``coeffs`` at ``x`` (a scalar or an
    ndarray) by Horner's rule.
    """
    coeffs = np.asarray(coeffs, dtype=float)
    x = np.asarray(x, dtype=float)
    val = np.zeros(x.shape)
    for ck in coeffs[::-1]:
        val = val * x + ck
    return val


def pad_coefficients(coeffs, length):
    coeffs = np.asarray(coeffs, dtype=float).ravel()
    if coeffs.size > length:
        raise ValueError('Cannot pad ' + str(coeffs.size) + ' coefficients to length ' + str(length) + '.')
    padded = np.zeros(length)
    padded[:coeffs.size] = coeffs
    return padded


def cheb_mul_linear(coeffs, root):
    """
    Multiply a Chebyshev series by ``(t - root)``. The result has the same length as
    ``coeffs``, so the leading coefficient of ``coeffs`` must be zero.
    """
    coeffs = np.asarray(coeffs, dtype=float)
    return cheb.chebmulx(coeffs)[:coeffs.size] - root * coeffs


def cheb_integrate(coeffs):
    """
    Integrate a Chebyshev series over :math:`[-1, 1]`.
    """
    antiderivative = cheb.chebint(np.asarray(coeffs, dtype=float))
    return cheb.chebval(1.0, antiderivative) - cheb.chebval(-1.0, antiderivative)


def monomial_to_chebyshev(coeffs, interval, length=None):
    """
    Convert monomial coefficients in x to Chebyshev coefficients in the reference variable
    ``t = interval.to_reference(x)``.

    Parameters
    ----------
    coeffs : ndarray
        Monomial coefficients, ascending powers of x.
    interval : Interval
        The domain which is mapped onto :math:`[-1, 1]`.
    length : int or None
        Zero-pad the result to this length. Defaults to ``coeffs.size``.

    Returns
    -------
    series : ndarray
        ``series[k]`` is the coefficient on :math:`T_k(t)`.
    """
    coeffs = np.asarray(coeffs, dtype=float).ravel()
    length = coeffs.size if length is None else length
    domain = [interval.lo, interval.hi]
    series = Polynomial(coeffs).convert(kind=Chebyshev, domain=domain)
    return pad_coefficients(series.coef, length)


def chebyshev_to_monomial(series, interval, length=None, tol=0.0):
    """
    Convert Chebyshev coefficients in the reference variable of ``interval`` to monomial
    coefficients in x. This is the inverse of ``monomial_to_chebyshev``.

    Trailing Chebyshev coefficients with absolute value at most ``tol`` are dropped before
    the conversion. The monomial coefficients of :math:`T_k` grow like :math:`(1 + \\sqrt{2})^k`,
    so rounding noise in high-order coefficients would otherwise swamp the result.
    """
    series = np.asarray(series, dtype=float).ravel()
    length = series.size if length is None else length
    if tol > 0:
        series = cheb.chebtrim(series, tol)
    domain = [interval.lo, interval.hi]
    poly = Chebyshev(series, domain=domain).convert(kind=Polynomial)
    return pad_coefficients(poly.coef, length)
