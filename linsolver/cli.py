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
"""Command line entry point: solve a linear system from a file or a random one"""

import logging
import sys
from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter

from .names import *
from .math import get_number_operations
from .matrix_io import load_matrix, generate_random_matrix, format_report
from .solver import solve_system

DEFAULT_SEED = 15756240


def main(inputfile, number_type, accuracy, max_iter, methods, precision, rows, cols, seed):
    """
    Load or generate the matrix, run the solvers and print the report.

    :return: int exit code - 0 if the system was solved, 2 if it is incompatible
    """
    ops = get_number_operations(number_type)
    if inputfile:
        matrix = load_matrix(inputfile, ops)
    else:
        matrix = generate_random_matrix(rows, cols, seed=seed, number_operations=ops)
    report = solve_system(matrix, methods=methods, accuracy=accuracy, max_iter=max_iter)
    print(format_report(report, precision), end='')
    return 2 if report.is_incompatible() else 0


def build_parser():
    usage = '''usage: linsolver [-i <matrix file>] [--number-type fraction|decimal|sympy|float] [--accuracy 1e-6]'''
    parser = ArgumentParser(prog='linsolver',
                            description='Solve a linear system given as augmented matrix with Gauss-Jordan\n'
                            'elimination, simple iterations and Zeidel iterations',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--inputfile", help="path to matrix file; a random matrix is solved if omitted")
    parser.add_argument("--number-type", default=DECIMAL, choices=[FRACTION, DECIMAL, SYMPY, FLOAT],
                        help="number type used for the computation (default: decimal)")
    parser.add_argument("--accuracy", default=DEFAULT_ACCURACY,
                        help="residual at which the iterative methods stop (default: " + DEFAULT_ACCURACY + ")")
    parser.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITER,
                        help="iteration cap of the iterative methods (default: " + str(DEFAULT_MAX_ITER) + ")")
    parser.add_argument("--methods", nargs='+', default=list(ALL_METHODS), choices=list(ALL_METHODS),
                        help="solving methods to run (default: all)")
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION,
                        help="decimal places of printed results (default: " + str(DEFAULT_PRECISION) + ")")
    parser.add_argument("--rows", type=int, default=6, help="rows of a random matrix (default: 6)")
    parser.add_argument("--cols", type=int, default=7, help="columns of a random matrix (default: 7)")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="seed of a random matrix")
    parser.add_argument("-v", "--verbose", action='count', default=0, help="log progress (-vv for debug output)")
    parser.add_argument("-q", "--quiet", action='store_true', help="only log errors")
    return parser


def start_from_command_line(argv=None):
    """
    Entry point for the command line call. Parses the arguments, configures
    logging and calls main.
    :return: None
    """
    args = build_parser().parse_args(argv)
    if args.quiet:
        level = logging.ERROR
    else:
        level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    try:
        code = main(args.inputfile, args.number_type, args.accuracy, args.max_iter, args.methods, args.precision,
                    args.rows, args.cols, args.seed)
    except (OSError, ValueError, ArithmeticError) as exc:
        logging.error(exc)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    start_from_command_line()
