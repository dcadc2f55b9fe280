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
"""Solving pipeline running the direct and the iterative methods on one system"""

import json
import logging
from typing import Dict, Optional

from .names import *
from .math import (Matrix, Gauss, DirectSolution, IterativeSolution, calc_accuracy, solve_simple_iterations,
                   solve_zeidel_iterations)

LOG = logging.getLogger(__name__)

__all__ = ["SolutionReport", "solve_system"]

_ITERATIVE_SOLVERS = {
    SIMPLE: solve_simple_iterations,
    ZEIDEL: solve_zeidel_iterations,
}


class SolutionReport:
    """Results of all requested solving methods for one augmented matrix

    Attributes:
        matrix (Matrix):
            The original augmented matrix.

        direct (DirectSolution or None):
            Result of the Gauss-Jordan method (None if the method was not requested).

        direct_residual:
            Residual of the direct solution on the original matrix (None if not solved).

        iterative (dict):
            Results of the iterative methods, keyed by method name.
    """

    def __init__(self, matrix: Matrix):
        self.matrix = matrix
        self.direct: Optional[DirectSolution] = None
        self.direct_residual = None
        self.iterative: Dict[str, IterativeSolution] = {}

    def is_incompatible(self) -> bool:
        return self.direct is not None and self.direct.status == INCOMPATIBLE

    def summary(self) -> dict:
        """Status, residual and iteration count (None for the direct method) per method"""
        result = {}
        if self.direct is not None:
            result[GAUSS] = (self.direct.status, self.direct_residual, None)
        for method, sol in self.iterative.items():
            result[method] = (sol.status, sol.residual, sol.iterations)
        return result

    def __repr__(self):
        return f"SolutionReport({self.summary()})"


def _read_setup(setup) -> dict:
    if isinstance(setup, str):
        with open(setup, 'r') as fs:
            return json.load(fs)
    return dict(setup)


def solve_system(matrix: Matrix, **kwargs) -> SolutionReport:
    """Solve an augmented linear system with the direct and the iterative methods

    The direct method (Gauss-Jordan elimination to canonical form) runs on a copy
    of the matrix. The iterative methods only run if the direct method finds the
    system solvable and the coefficient matrix has no zero on its diagonal, since
    they would divide by zero otherwise. All residuals are computed on the
    original matrix.

    Example:
        report = solve_system(matrix, methods=['gauss', 'zeidel'], accuracy='1e-8')

    Args:
        matrix (Matrix):
            Augmented matrix [A | b] with one more column than rows.

        methods (list of str): (Default: ['gauss', 'simple', 'zeidel'])
            Solving methods to run.

        accuracy: (Default: '0.000001')
            Residual at which the iterative methods stop. Converted to the
            element type of the matrix.

        max_iter (int): (Default: 10000)
            Iteration cap of the iterative methods.

        setup (dict or str):
            Options as a dict or as the path to a JSON file. Replaces all other
            keyword arguments.

    Returns:
        (SolutionReport):
            Results of the requested methods.
    """
    allowed_keys = {METHODS, ACCURACY, MAX_ITER, SETUP}
    if SETUP in kwargs:
        kwargs = _read_setup(kwargs[SETUP])
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")

    methods = kwargs.get(METHODS, ALL_METHODS)
    if isinstance(methods, str):
        methods = [methods]
    for method in methods:
        if method not in ALL_METHODS:
            raise ValueError(f"Unknown solving method: {method}. Supported methods are {', '.join(ALL_METHODS)}.")
    accuracy = kwargs.get(ACCURACY, DEFAULT_ACCURACY)
    max_iter = int(kwargs.get(MAX_ITER, DEFAULT_MAX_ITER))

    if not matrix.is_augmented():
        raise ValueError(f"expected an augmented matrix with {matrix.get_row_count() + 1} columns, "
                         f"but found {matrix.get_column_count()}")

    report = SolutionReport(matrix)
    gauss = Gauss.get_instance(matrix.get_number_operations())
    solvable = True
    if GAUSS in methods:
        LOG.info(f"Solving {matrix.get_row_count()}x{matrix.get_column_count()} system with Gauss-Jordan elimination.")
        report.direct = gauss.solve(matrix)
        if report.direct.is_solved():
            report.direct_residual = calc_accuracy(report.direct.solution, matrix)
            LOG.info(f"  Residual {report.direct_residual}.")
        else:
            LOG.warning("Incompatible matrix: zero on the main diagonal after reduction. Skipping iterative methods.")
            solvable = False
    if not solvable:
        return report
    if gauss.are_zeros_at_maindiag(matrix):
        LOG.warning("Zero on the main diagonal of the coefficient matrix. Skipping iterative methods.")
        return report

    ops = matrix.get_number_operations()
    accuracy = ops.value_of(accuracy)
    for method in methods:
        if method not in _ITERATIVE_SOLVERS:
            continue
        LOG.info(f"Solving with {method} iterations (accuracy {accuracy}, at most {max_iter} iterations).")
        solution, iters = _ITERATIVE_SOLVERS[method](matrix, accuracy, max_iter)
        residual = calc_accuracy(solution, matrix)
        report.iterative[method] = IterativeSolution(method, solution, iters, residual, bool(residual <= accuracy))
        if report.iterative[method].is_converged():
            LOG.info(f"  Converged after {iters} iterations, residual {ops.to_float(residual):.3e}.")
        else:
            LOG.warning(f"{method} iterations did not converge, stopped after {iters} iterations "
                        f"(residual {ops.to_float(residual):.3e}).")
    return report
