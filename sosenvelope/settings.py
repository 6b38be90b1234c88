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
# Package-wide defaults. EnvelopeProblem copies this dict on construction, and
# PolynomialRegistry reads the tolerances from it when they are not given explicitly.
# The setter functions in ``sosenvelope/__init__.py`` modify it in place.
SETTINGS = {
    'weighted': True,
    'inversion_tolerance': 1e-6,
    'conversion_tolerance': 1e-8,
}
