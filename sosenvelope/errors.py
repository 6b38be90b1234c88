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


class UsageError(RuntimeError):
    """
    The caller configured a problem in a way that cannot be fixed at this layer
    (e.g. the wrong number of variables, or too few polynomials to build an instance).
    """
    pass


class EmptyInstanceError(UsageError):
    pass


class TrivialInstanceError(UsageError):
    pass


class ConversionError(RuntimeError):
    """
    A polynomial could not be converted from the monomial basis into the
    interpolant basis (singular or badly conditioned transformation matrix).
    """
    pass


class NumericWarning(RuntimeWarning):
    pass
