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
from sosenvelope.interpolation.chebyshev import ChebyshevBasis, chebyshev_extrema, leja_order
from sosenvelope.interpolation.chebyshev import lagrange_basis_polynomials, transform_matrix
from sosenvelope.interpolation.quadrature import clenshaw_curtis_weights, objective_vector
from sosenvelope.interpolation.quadrature import exact_basis_integrals
