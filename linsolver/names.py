#!/usr/bin/env python3
#
# Copyright 2026 The linsolver developers
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Static strings used in the linsolver package

    Solving methods

        GAUSS = 'gauss'

        SIMPLE = 'simple'

        ZEIDEL = 'zeidel'

    Status codes

        SOLVED = 'solved'

        INCOMPATIBLE = 'incompatible'

        CONVERGED = 'converged'

        NOT_CONVERGED = 'not_converged'

    Number types

        FRACTION = 'fraction'

        DECIMAL = 'decimal'

        SYMPY = 'sympy'

        FLOAT = 'float'

    Solver setup

        METHODS = 'methods'

        ACCURACY = 'accuracy'

        MAX_ITER = 'max_iter'

        SETUP = 'setup'
"""
# Solving methods
GAUSS = 'gauss'
SIMPLE = 'simple'
ZEIDEL = 'zeidel'
ALL_METHODS = (GAUSS, SIMPLE, ZEIDEL)
# Status codes
SOLVED = 'solved'
INCOMPATIBLE = 'incompatible'
CONVERGED = 'converged'
NOT_CONVERGED = 'not_converged'
# Number types
FRACTION = 'fraction'
DECIMAL = 'decimal'
SYMPY = 'sympy'
FLOAT = 'float'
# Solver setup
METHODS = 'methods'
ACCURACY = 'accuracy'
MAX_ITER = 'max_iter'
SETUP = 'setup'
# Defaults
DEFAULT_ACCURACY = '0.000001'
DEFAULT_MAX_ITER = 10000
DEFAULT_PRECISION = 5
