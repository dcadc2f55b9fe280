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
"""Reading, generating and printing augmented matrices

Matrix files are plain text. The first number is the number of columns; all
following numbers are the matrix values in row-major order. Numbers may be
separated by spaces, commas or line breaks, and the number of rows is inferred:

    3
    2, 1, 5
    1, 3, 10
"""

import logging
import re
from typing import List, Optional, Sequence

import numpy as np

from .names import *
from .math import Matrix, NumberOperations, get_number_operations

LOG = logging.getLogger(__name__)

__all__ = ["parse_matrix", "load_matrix", "generate_random_matrix", "format_solution", "format_report"]

_SEPARATORS = re.compile(r"[\s,]+")


def parse_matrix(text: str, number_operations: Optional[NumberOperations] = None) -> Matrix:
    """Parse a matrix from the text format described in the module documentation

    Values are converted from their text, so decimal fractions like 0.1 are
    represented exactly by the exact number types.

    Args:
        text (str):
            File contents.

        number_operations (NumberOperations or str): (Default: Fraction)
            Element type of the matrix.

    Returns:
        (Matrix):
            The parsed matrix.

    Raises:
        ValueError: If the column count is missing or invalid, a value is not a
            number, or the value count is not a multiple of the column count.
    """
    ops = get_number_operations(number_operations)
    tokens = [t for t in _SEPARATORS.split(text) if t]
    if not tokens:
        raise ValueError("matrix data is empty, expected the number of columns first")
    try:
        columns = int(tokens[0])
    except ValueError:
        raise ValueError(f"expected the number of columns as first value, found {tokens[0]!r}") from None
    if columns <= 0:
        raise ValueError(f"number of columns must be positive, found {columns}")
    values = []
    for token in tokens[1:]:
        try:
            values.append(ops.value_of(token))
        except (ValueError, ArithmeticError, TypeError):
            raise ValueError(f"invalid matrix value {token!r}") from None
    if len(values) % columns != 0:
        raise ValueError(f"{len(values)} values cannot be arranged in rows of {columns} columns")
    return Matrix.with_data(values, len(values) // columns, columns, ops)


def load_matrix(path: str, number_operations: Optional[NumberOperations] = None) -> Matrix:
    """Read a matrix file (see ``parse_matrix``)"""
    with open(path, 'r') as fs:
        matrix = parse_matrix(fs.read(), number_operations)
    LOG.info(f"Loaded {matrix.get_row_count()}x{matrix.get_column_count()} matrix from {path}.")
    return matrix


def generate_random_matrix(rows: int = 6,
                           cols: int = 7,
                           seed: Optional[int] = None,
                           low: int = -10,
                           high: int = 10,
                           number_operations: Optional[NumberOperations] = None) -> Matrix:
    """Generate a matrix of uniformly distributed integers in [low, high)

    Args:
        rows, cols (int): (Default: 6, 7)
            Matrix shape. The default is an augmented system of 6 unknowns.

        seed (int): (Default: None)
            Seed of the random generator. The same seed yields the same matrix.

        low, high (int): (Default: -10, 10)
            Value range, upper bound exclusive.

        number_operations (NumberOperations or str): (Default: Fraction)
            Element type of the matrix.

    Returns:
        (Matrix):
            The generated matrix.
    """
    if high <= low:
        raise ValueError(f"empty value range [{low}, {high})")
    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=(rows, cols))
    LOG.info(f"Generated random {rows}x{cols} matrix (seed {seed}).")
    return Matrix.from_numpy(values, number_operations)


def format_solution(solution: Sequence, number_operations: Optional[NumberOperations] = None,
                    precision: int = DEFAULT_PRECISION) -> List[str]:
    """One line ``x<i> = <value>`` per unknown"""
    ops = get_number_operations(number_operations)
    return [f"x{i} = {ops.format(value, precision)}" for i, value in enumerate(solution)]


_TITLES = {
    GAUSS: "Gauss",
    SIMPLE: "Simple Iters",
    ZEIDEL: "Zeidel",
}


def format_report(report, precision: int = DEFAULT_PRECISION) -> str:
    """Render a SolutionReport as text

    Prints the original matrix, the reduced matrix of the direct method, and per
    method the solution, its residual and (for iterative methods) the number of
    steps.
    """
    ops = report.matrix.get_number_operations()
    lines = [report.matrix.to_multiline_string()]
    if report.direct is not None:
        lines.append(report.direct.matrix.to_multiline_string())
        if report.is_incompatible():
            lines.append("Incompatible matrix")
            return "\n".join(lines) + "\n"
        lines.append(f"Accuracy of a solution with {_TITLES[GAUSS]}: ")
        lines.extend(format_solution(report.direct.solution, ops, precision))
        lines.append(f"is {ops.format(report.direct_residual, precision)}")
    for method, sol in report.iterative.items():
        lines.append(f"Accuracy of a solution with {_TITLES[method]}: ")
        lines.extend(format_solution(sol.solution, ops, precision))
        lines.append(f"is {ops.format(sol.residual, precision)}")
        lines.append(f"obtained with {sol.iterations} steps")
        if not sol.is_converged():
            lines.append("(did not converge)")
    return "\n".join(lines) + "\n"
