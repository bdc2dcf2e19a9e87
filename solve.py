#!/usr/bin/env python3
"""
Solve a DIMACS CNF formula.

Prints SATISFIABLE and the signed value of every variable on one line,
or UNSATISFIABLE.

Usage:
    python solve.py problem.cnf
    python solve.py problem.cnf.gz --search iterative
    cat problem.cnf | python solve.py
"""

import argparse
import logging
import sys

from dpll_sat import (
    DPLLSolver,
    DimacsParseError,
    SEARCH_MODES,
    fmt_solver_result,
    read_dimacs,
    read_dimacs_stream,
    verify_solver_model,
)

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="DPLL SAT solver")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="DIMACS CNF file, optionally .gz (default: stdin)"
    )
    parser.add_argument(
        "--search",
        choices=SEARCH_MODES,
        default="auto",
        help="Search driver (default: auto)"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the model against the input before printing"
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print search statistics to stderr"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    try:
        if args.input == "-":
            clauses, num_vars = read_dimacs_stream(sys.stdin)
        else:
            clauses, num_vars = read_dimacs(args.input)
    except (DimacsParseError, OSError) as e:
        logger.error("%s", e)
        return 1

    solver = DPLLSolver(clauses, num_vars, search=args.search)
    result = solver.solve()

    if args.stats:
        for name, value in solver.stats.as_dict().items():
            print(f"c {name}: {value}", file=sys.stderr)

    if result and args.verify and not verify_solver_model(solver):
        logger.error("Model check failed")
        return 2

    print(fmt_solver_result(solver))
    return 0


if __name__ == "__main__":
    sys.exit(main())
