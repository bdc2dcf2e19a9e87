#!/usr/bin/env python3
"""
Generate random k-SAT instances as DIMACS files.

Every generated formula is solved once so the verdict can be recorded in
the file header and in an index file.

Usage:
    python generate.py                      # 100 instances, 5-15 variables
    python generate.py --count 500 --var-min 20 --var-max 40
    python generate.py --test               # Quick self test, no files written
"""

import argparse
import json
import random
import sys
from pathlib import Path

from tqdm import tqdm

from dpll_sat import (
    DPLLSolver,
    brute_force_satisfiable,
    generate_random_formula,
    verify_solver_model,
    write_dimacs,
)


def main():
    parser = argparse.ArgumentParser(description="Generate random DIMACS CNF instances")
    parser.add_argument(
        "--test",
        action="store_true",
        help="Quick test mode: solve 100 small formulas and check them"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="instances",
        help="Output directory (default: instances)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=100,
        help="Number of instances"
    )
    parser.add_argument(
        "--var-min",
        type=int,
        default=5,
        help="Minimum number of variables"
    )
    parser.add_argument(
        "--var-max",
        type=int,
        default=15,
        help="Maximum number of variables"
    )
    parser.add_argument(
        "--clause-length",
        type=int,
        default=3,
        help="Literals per clause"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed"
    )

    args = parser.parse_args()

    if args.test:
        print("=== TEST MODE ===")
        return 0 if run_test(seed=args.seed) else 1

    rng = random.Random(args.seed)
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    index = []
    for i in tqdm(range(args.count), desc="Generating instances"):
        n_vars = rng.randint(args.var_min, args.var_max)
        clauses, n_vars = generate_random_formula(n_vars, clause_length=args.clause_length, rng=rng)

        solver = DPLLSolver(clauses, n_vars)
        verdict = "SAT" if solver.solve() else "UNSAT"

        name = f"rand_{i:05d}_v{n_vars}_c{len(clauses)}.cnf"
        write_dimacs(clauses, n_vars, output_dir / name, comments=[f"verdict {verdict}"])
        index.append({"file": name, "num_vars": n_vars, "num_clauses": len(clauses), "verdict": verdict})

    with open(output_dir / "index.json", 'w') as f:
        json.dump(index, f, indent=2)

    sat_count = sum(1 for entry in index if entry["verdict"] == "SAT")
    print(f"\n=== GENERATION COMPLETE ===")
    print(f"Output directory: {output_dir}")
    print(f"Instances: {len(index)} ({sat_count} SAT, {len(index) - sat_count} UNSAT)")
    return 0


def run_test(seed=None) -> bool:
    """Solve 100 random formulas and check each verdict and model."""
    print("Testing solver with 100 random formulas...")
    rng = random.Random(seed)

    agree_count = 0
    model_count = 0
    sat_count = 0

    for i in range(100):
        n_vars = 5 + (i % 10)  # 5-14 variables
        clauses, n_vars = generate_random_formula(n_vars, rng=rng)

        solver = DPLLSolver(clauses, n_vars)
        result = solver.solve()

        if result == brute_force_satisfiable(clauses, n_vars):
            agree_count += 1
        else:
            print(f"  Formula {i}: verdict disagrees with brute force")

        if result:
            sat_count += 1
            if verify_solver_model(solver):
                model_count += 1
            else:
                print(f"  Formula {i}: model check FAILED")

    print(f"\nVerdicts: {agree_count}/100 agree with brute force")
    print(f"Models: {model_count}/{sat_count} satisfying")

    # Show example
    print("\n=== EXAMPLE ===")
    clauses, n_vars = generate_random_formula(5, rng=rng)
    solver = DPLLSolver(clauses, n_vars)
    result = solver.solve()
    print(f"Clauses: {clauses}")
    print(f"Result: {'SAT' if result else 'UNSAT'}")
    if result:
        print(f"Model: {solver.model_literals()}")
    print(f"Stats: {solver.stats.as_dict()}")

    return agree_count == 100 and model_count == sat_count


if __name__ == "__main__":
    sys.exit(main())
