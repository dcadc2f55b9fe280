"""Tests of the matrix file format, the random generator, the report and the command line."""
from fractions import Fraction

import pytest

from linsolver import solve_system
from linsolver.names import *
from linsolver.math import Matrix
from linsolver.matrix_io import parse_matrix, load_matrix, generate_random_matrix, format_solution, format_report
from linsolver.cli import start_from_command_line

MATRIX_2X3 = "3\n2, 1, 5\n1 3 10\n"
SINGULAR_3X4 = "4\n1,2,3,4\n0,0,0,0\n2,1,1,1\n"


def test_parse_matrix_separators(number_ops):
    mx = parse_matrix(MATRIX_2X3, number_ops)
    assert mx.get_number_operations() is number_ops
    assert mx.to_rows() == [[2, 1, 5], [1, 3, 10]]
    assert parse_matrix("3,2,1,5,1,3,10", number_ops) == mx
    assert parse_matrix("  3 2 1 5\n\n1 3 10  \n", number_ops) == mx


def test_parse_matrix_exact_decimals(exact_ops):
    mx = parse_matrix("2 0.1 -1.25", exact_ops)
    assert mx.to_rows() == [[exact_ops.value_of("1/10"), exact_ops.value_of("-5/4")]]


@pytest.mark.parametrize("text, message", [
    ("", "empty"),
    (" \n ", "empty"),
    ("x 1 2", "number of columns"),
    ("0 1 2", "positive"),
    ("-2 1 2", "positive"),
    ("2 1 a", "invalid matrix value"),
    ("3 1 2 3 4", "cannot be arranged"),
])
def test_parse_matrix_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_matrix(text)


def test_load_matrix(tmp_path):
    path = tmp_path / "matrix.txt"
    path.write_text(MATRIX_2X3)
    mx = load_matrix(str(path), DECIMAL)
    assert mx.get_number_operations().name == DECIMAL
    assert mx.to_rows() == [[2, 1, 5], [1, 3, 10]]
    with pytest.raises(OSError):
        load_matrix(str(tmp_path / "missing.txt"))


def test_generate_random_matrix():
    mx = generate_random_matrix(seed=42)
    assert mx.get_row_count() == 6 and mx.get_column_count() == 7
    assert mx == generate_random_matrix(seed=42)
    assert all(isinstance(v, Fraction) and v.denominator == 1 and -10 <= v < 10 for v in mx)
    small = generate_random_matrix(3, 4, seed=1, low=0, high=2)
    assert small.get_row_count() == 3 and small.get_column_count() == 4
    assert all(v in (0, 1) for v in small)
    with pytest.raises(ValueError):
        generate_random_matrix(low=5, high=5)


def test_format_solution():
    assert format_solution([Fraction(1), Fraction(1, 3)], precision=3) == ["x0 = 1.000", "x1 = 0.333"]
    assert format_solution([Fraction(-2, 3)]) == ["x0 = -0.66667"]


def test_format_report_solved():
    mx = parse_matrix(MATRIX_2X3)
    text = format_report(solve_system(mx))
    assert text.startswith(mx.to_multiline_string())
    assert "Accuracy of a solution with Gauss: \nx0 = 1.00000\nx1 = 3.00000\nis 0.00000\n" in text
    assert "Accuracy of a solution with Simple Iters: \n" in text
    assert "Accuracy of a solution with Zeidel: \n" in text
    assert text.count("obtained with ") == 2
    assert "did not converge" not in text
    assert "Incompatible matrix" not in text


def test_format_report_not_converged():
    mx = Matrix.from_rows([[1, 2, 3], [3, 1, 4]])
    text = format_report(solve_system(mx, methods=[SIMPLE], max_iter=10), precision=2)
    assert "obtained with 10 steps\n(did not converge)\n" in text


def test_format_report_incompatible():
    text = format_report(solve_system(parse_matrix(SINGULAR_3X4)))
    assert text.endswith("Incompatible matrix\n")
    assert "Accuracy" not in text


@pytest.mark.timeout(60)
def test_command_line_solved(tmp_path, capsys):
    path = tmp_path / "matrix.txt"
    path.write_text(MATRIX_2X3)
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["-i", str(path), "-q"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "x1 = 3.00000" in out
    assert "Accuracy of a solution with Zeidel" in out


def test_command_line_incompatible(tmp_path, capsys):
    path = tmp_path / "singular.txt"
    path.write_text(SINGULAR_3X4)
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["-i", str(path), "--number-type", FRACTION, "-q"])
    assert exc.value.code == 2
    assert "Incompatible matrix" in capsys.readouterr().out


def test_command_line_errors(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("3 1 2")
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["-i", str(path), "-q"])
    assert exc.value.code == 1
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["-i", str(tmp_path / "missing.txt"), "-q"])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_command_line_random(capsys):
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["--rows", "3", "--cols", "4", "--seed", "7", "--methods", GAUSS, "-q"])
    assert exc.value.code in (0, 2)
    out = capsys.readouterr().out
    assert out.startswith(generate_random_matrix(3, 4, seed=7).to_multiline_string())


def test_command_line_float_random(capsys):
    with pytest.raises(SystemExit) as exc:
        start_from_command_line(["--number-type", FLOAT, "--methods", GAUSS, "-q"])
    assert exc.value.code in (0, 2)
    out = capsys.readouterr().out
    assert "nan" not in out and "inf" not in out
