"""
Batch cross-checking of the solver against PySAT and brute force.
"""

import json
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Optional

from pysat.solvers import Glucose3
from tqdm import tqdm

from .errors import CrossCheckError
from .formula import generate_random_formula
from .solver import DPLLSolver
from .verifier import brute_force_satisfiable, verify_solver_model

logger = logging.getLogger(__name__)


def pysat_satisfiable(clauses: List[List[int]]) -> bool:
    """Reference verdict from Glucose 3."""
    with Glucose3(bootstrap_with=clauses) as g:
        return g.solve()


def _describe(clauses: List[List[int]], num_vars: int) -> str:
    return f"{num_vars} vars, {len(clauses)} clauses: {clauses}"


def check_instance(
    clauses: List[List[int]],
    num_vars: int,
    search: str = "auto",
    use_pysat: bool = True,
    brute_force_max_vars: int = 12
) -> Dict:
    """
    Solve one formula and check the answer.

    Returns:
        JSON-ready record with the verdict, timing and search counters.

    Raises:
        CrossCheckError: If a reference verdict disagrees or a SAT model
            does not satisfy the formula.
    """
    solver = DPLLSolver(clauses, num_vars, search=search)
    start = time.perf_counter()
    is_satisfiable = solver.solve()
    elapsed = time.perf_counter() - start

    if use_pysat:
        expected = pysat_satisfiable(clauses)
        if expected != is_satisfiable:
            raise CrossCheckError(f"PySAT {expected}", f"DPLL {is_satisfiable}", _describe(clauses, num_vars))

    if num_vars <= brute_force_max_vars:
        expected = brute_force_satisfiable(clauses, num_vars)
        if expected != is_satisfiable:
            raise CrossCheckError(f"brute force {expected}", f"DPLL {is_satisfiable}", _describe(clauses, num_vars))

    if is_satisfiable and not verify_solver_model(solver):
        raise CrossCheckError("satisfying model", str(solver.model_literals()), _describe(clauses, num_vars))

    return {
        "num_vars": num_vars,
        "num_clauses": len(clauses),
        "satisfiable": is_satisfiable,
        "search": solver.search_mode,
        "seconds": elapsed,
        "stats": solver.stats.as_dict(),
    }


def collect_results(
    var_min: int,
    var_max: int,
    count: int,
    clause_length: int = 3,
    variance: float = 0.1,
    search: str = "auto",
    use_pysat: bool = True,
    brute_force_max_vars: int = 12,
    seed: Optional[int] = None
) -> Dict:
    """
    Generate random formulas, solve and check each one.

    Args:
        var_min: Minimum number of variables.
        var_max: Maximum number of variables.
        count: Number of formulas.
        clause_length: Literals per clause.
        variance: Relative spread of the clause count.
        search: Solver search mode.
        use_pysat: Whether to check verdicts against PySAT.
        brute_force_max_vars: Enumerate assignments for formulas up to this size.
        seed: Random seed for reproducible batches.

    Returns:
        Dictionary with per-instance results and summary statistics.
    """
    rng = random.Random(seed)
    results = []

    for _ in tqdm(range(count), desc="Solving formulas"):
        num_vars = rng.randint(var_min, var_max)
        clauses, num_vars = generate_random_formula(
            num_vars, clause_length=clause_length, variance=variance, rng=rng
        )
        results.append(check_instance(
            clauses, num_vars,
            search=search,
            use_pysat=use_pysat,
            brute_force_max_vars=brute_force_max_vars,
        ))

    sat_count = sum(1 for r in results if r["satisfiable"])
    total_seconds = sum(r["seconds"] for r in results)
    logger.info(
        "Checked %d formulas: %d SAT, %d UNSAT, %.3fs solving",
        len(results), sat_count, len(results) - sat_count, total_seconds,
    )

    return {
        "results": results,
        "summary": {
            "count": len(results),
            "sat": sat_count,
            "unsat": len(results) - sat_count,
            "total_seconds": total_seconds,
            "total_decisions": sum(r["stats"]["decisions"] for r in results),
            "var_min": var_min,
            "var_max": var_max,
            "clause_length": clause_length,
            "search": search,
            "pysat_checked": use_pysat,
        },
    }


def save_results(data: Dict, output_dir: str, prefix: str = "") -> None:
    """
    Save collected results to JSON files.

    Args:
        data: Dictionary from collect_results().
        output_dir: Output directory path.
        prefix: Prefix for filenames.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    with open(output_path / f"{prefix}results.json", 'w') as f:
        json.dump(data["results"], f, indent=2)

    with open(output_path / f"{prefix}summary.json", 'w') as f:
        json.dump(data["summary"], f, indent=2)

    logger.info("Saved %d results to %s", len(data["results"]), output_path)
