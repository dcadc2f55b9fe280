"""
Matrix engine

This module provides the numeric core of the linear system solvers:
- number operations for exact (Fraction, sympy.Rational), decimal and float arithmetic
- a dense row-major matrix container
- Gauss-Jordan reduction to canonical form
- simple (Jacobi) and Zeidel (Gauss-Seidel) iterations
- the residual used to score every solution
"""

from .number_operations import (NumberOperations, FractionOperations, DecimalOperations, SympyRationalOperations,
                                FloatOperations, get_number_operations, to_fraction)
from .matrix import Matrix
from .gauss import Gauss, DirectSolution
from .iterations import IterativeSolution, solve_simple_iterations, solve_zeidel_iterations
from .accuracy import calc_accuracy

__all__ = [
    'NumberOperations',
    'FractionOperations',
    'DecimalOperations',
    'SympyRationalOperations',
    'FloatOperations',
    'get_number_operations',
    'to_fraction',
    'Matrix',
    'Gauss',
    'DirectSolution',
    'IterativeSolution',
    'solve_simple_iterations',
    'solve_zeidel_iterations',
    'calc_accuracy',
]
