#!/usr/bin/env python3
"""
Tests for DIMACS input/output, result formatting, the command line entry
point and the PySAT cross-check harness.
"""

import contextlib
import gzip
import io
import json
import os
import sys
import tempfile

from dpll_sat import (
    DPLLSolver,
    DimacsParseError,
    CrossCheckError,
    fmt_dimacs,
    fmt_model,
    fmt_result,
    fmt_solver_result,
    fmt_verdict,
    parse_dimacs,
    read_dimacs,
    write_dimacs,
)


SAMPLE = """c simple example
c with two comment lines
p cnf 3 3
1 -2 0
2 3
-1 0
-3 0
"""


def parse_text(text):
    return parse_dimacs(io.StringIO(text))


def test_parse_sample():
    """Comments, headers and clauses spanning lines."""
    print("\nTesting DIMACS sample...")
    clauses, num_vars = parse_text(SAMPLE)
    assert num_vars == 3
    assert clauses == [[1, -2], [2, 3, -1], [-3]]
    print("  Sample: PASS")


def test_parse_edge_cases():
    """Several clauses per line, stray zeros, unterminated tail, SATLIB end marker."""
    print("\nTesting DIMACS edge cases...")

    clauses, num_vars = parse_text("p cnf 4 2\n1 2 0 -3 4 0\n")
    assert clauses == [[1, 2], [-3, 4]]
    assert num_vars == 4

    clauses, _ = parse_text("p cnf 2 1\n0\n0 1 0 0\n")
    assert clauses == [[1]]

    clauses, _ = parse_text("p cnf 2 2\n1 0\n\n   \n2 -1\n")
    assert clauses == [[1]]

    clauses, _ = parse_text("p cnf 3 2\n1 -3 0\n2 0\n%\n0\n\n")
    assert clauses == [[1, -3], [2]]

    clauses, num_vars = parse_text("c nothing here\n")
    assert clauses == []
    assert num_vars == 0
    print("  Edge cases: PASS")


def test_parse_errors():
    """Malformed input is rejected with the line number."""
    print("\nTesting DIMACS errors...")
    bad_inputs = [
        ("p cnf\n1 0\n", 1),
        ("p cnf x 1\n1 0\n", 1),
        ("p cnf 2 1\n1 two 0\n", 2),
        ("1 2 0\np cnf 2 1\n", 1),
        ("p cnf 2 1\n1 3 0\n", 2),
        ("p cnf -1 0\n", 1),
    ]
    for text, line_number in bad_inputs:
        try:
            parse_text(text)
        except DimacsParseError as e:
            assert e.line_number == line_number, (text, e.line_number)
            assert "DIMACS parse error" in str(e)
        else:
            raise AssertionError(f"accepted {text!r}")

    stream = io.TextIOWrapper(io.BytesIO(b"c ok\np cnf 1 1\n\xff 1 0\n"), encoding="utf-8")
    try:
        parse_dimacs(stream)
    except DimacsParseError as e:
        assert "UTF-8" in str(e)
        assert e.line_number >= 1
    else:
        raise AssertionError("accepted bytes that are not UTF-8")
    print("  Errors: PASS")


def test_read_write_files():
    """Plain and gzip files, and the writer's output parses back."""
    print("\nTesting DIMACS files...")
    clauses = [[1, -2], [2, 3, -1], [-3]]

    text = fmt_dimacs(clauses, 3, comments=["generated"])
    assert text.splitlines()[:2] == ["c generated", "p cnf 3 3"]
    assert text.splitlines()[2] == "1 -2 0"

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "f.cnf")
        write_dimacs(clauses, 3, path)
        assert read_dimacs(path) == (clauses, 3)

        gz_path = os.path.join(tmp, "f.cnf.gz")
        with gzip.open(gz_path, "wt", encoding="utf-8") as f:
            f.write(SAMPLE)
        assert read_dimacs(gz_path) == ([[1, -2], [2, 3, -1], [-3]], 3)
    print("  Files: PASS")


def test_format():
    """Verdict and model lines."""
    print("\nTesting result formatting...")
    assert fmt_verdict(True) == "SATISFIABLE"
    assert fmt_verdict(False) == "UNSATISFIABLE"
    assert fmt_model({1: True, 2: False, 3: None}, 3) == "1 -2 3"
    assert fmt_model({}, 2) == "1 2"
    assert fmt_result(False) == "UNSATISFIABLE"
    assert fmt_result(True, {1: False}, 1) == "SATISFIABLE\n-1"

    solver = DPLLSolver([[1], [-1, 2], [-3, -2]], 4)
    solver.solve()
    assert fmt_solver_result(solver) == "SATISFIABLE\n1 2 -3 4"

    solver = DPLLSolver([[1], [-1]], 1)
    solver.solve()
    assert fmt_solver_result(solver) == "UNSATISFIABLE"

    try:
        fmt_solver_result(DPLLSolver([[1]], 1))
    except ValueError:
        pass
    else:
        raise AssertionError("formatted a solver that never ran")
    print("  Formatting: PASS")


def run_cli(argv):
    import solve

    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        status = solve.main(argv)
    return status, out.getvalue()


def test_cli():
    """solve.py reads a file and prints the verdict and model."""
    print("\nTesting command line...")
    with tempfile.TemporaryDirectory() as tmp:
        sat_path = os.path.join(tmp, "sat.cnf")
        write_dimacs([[1], [-1, 2]], 3, sat_path)
        status, output = run_cli([sat_path, "--verify"])
        assert status == 0
        assert output.splitlines() == ["SATISFIABLE", "1 2 3"]

        unsat_path = os.path.join(tmp, "unsat.cnf")
        write_dimacs([[1, 2], [-1, 2], [1, -2], [-1, -2]], 2, unsat_path)
        status, output = run_cli([unsat_path, "--search", "iterative"])
        assert status == 0
        assert output.strip() == "UNSATISFIABLE"

        bad_path = os.path.join(tmp, "bad.cnf")
        with open(bad_path, "w") as f:
            f.write("p cnf 1 1\n1 2 0\n")
        status, output = run_cli([bad_path])
        assert status == 1
        assert output == ""

        status, _ = run_cli([os.path.join(tmp, "missing.cnf")])
        assert status == 1

        binary_path = os.path.join(tmp, "binary.cnf")
        with open(binary_path, "wb") as f:
            f.write(b"p cnf 1 1\n\xff\xfe 1 0\n")
        status, output = run_cli([binary_path])
        assert status == 1
        assert output == ""

    stdin = sys.stdin
    sys.stdin = io.StringIO(SAMPLE)
    try:
        status, output = run_cli([])
    finally:
        sys.stdin = stdin
    assert status == 0
    assert output.splitlines() == ["SATISFIABLE", "1 2 -3"]
    print("  Command line: PASS")


def test_pysat_cross_check():
    """Random 3-SAT verdicts agree with Glucose."""
    print("\nTesting PySAT cross-check...")
    from dpll_sat.collector import check_instance, collect_results, save_results

    record = check_instance([[1, 2], [-1, 2], [1, -2], [-1, -2]], 2)
    assert record["satisfiable"] is False
    assert record["num_clauses"] == 4
    assert record["search"] == "recursive"

    data = collect_results(var_min=5, var_max=12, count=30, seed=3)
    summary = data["summary"]
    assert summary["count"] == 30
    assert summary["sat"] + summary["unsat"] == 30
    assert all(r["seconds"] >= 0 for r in data["results"])

    with tempfile.TemporaryDirectory() as tmp:
        save_results(data, tmp, prefix="t_")
        with open(os.path.join(tmp, "t_results.json")) as f:
            assert len(json.load(f)) == 30
        with open(os.path.join(tmp, "t_summary.json")) as f:
            assert json.load(f)["count"] == 30
    print("  PySAT cross-check: PASS")


def test_cross_check_mismatch():
    """A disagreeing reference verdict raises with the formula attached."""
    print("\nTesting cross-check mismatch...")
    from dpll_sat import collector

    reference = collector.pysat_satisfiable
    collector.pysat_satisfiable = lambda clauses: True
    try:
        collector.check_instance([[1], [-1]], 1)
    except CrossCheckError as e:
        assert e.expected == "PySAT True"
        assert e.actual == "DPLL False"
        assert e.context == "1 vars, 2 clauses: [[1], [-1]]"
    else:
        raise AssertionError("mismatch not reported")
    finally:
        collector.pysat_satisfiable = reference
    print("  Cross-check mismatch: PASS")


def test_cross_check_error():
    """CrossCheckError carries both sides of the disagreement."""
    print("\nTesting cross-check error...")
    error = CrossCheckError("PySAT True", "DPLL False", "2 vars")
    assert error.expected == "PySAT True"
    assert error.actual == "DPLL False"
    assert "Context:  2 vars" in str(error)
    print("  Cross-check error: PASS")


TESTS = [
    test_parse_sample,
    test_parse_edge_cases,
    test_parse_errors,
    test_read_write_files,
    test_format,
    test_cli,
    test_pysat_cross_check,
    test_cross_check_mismatch,
    test_cross_check_error,
]


def main():
    """Run all tests."""
    print("=" * 50)
    print("DIMACS and Tooling Tests")
    print("=" * 50)

    all_passed = True
    for test in TESTS:
        try:
            test()
        except AssertionError as e:
            print(f"  FAIL: {test.__name__}: {e}")
            all_passed = False

    print("\n" + "=" * 50)
    if all_passed:
        print("ALL TESTS PASSED")
    else:
        print("SOME TESTS FAILED")
    print("=" * 50)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
