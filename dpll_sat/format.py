"""
Result formatting.

A satisfiable result is reported as the verdict line followed by one line
holding the signed value of every variable 1..n. Variables the search never
assigned are don't-care and print as true.
"""

from typing import Dict, Optional

SAT_VERDICT = "SATISFIABLE"
UNSAT_VERDICT = "UNSATISFIABLE"


def fmt_verdict(satisfiable: bool) -> str:
    """True -> 'SATISFIABLE', False -> 'UNSATISFIABLE'"""
    return SAT_VERDICT if satisfiable else UNSAT_VERDICT


def fmt_value(var: int, value: Optional[bool]) -> str:
    """Format a variable value: (3, False) -> '-3', (3, True) / (3, None) -> '3'"""
    return f"-{var}" if value is False else str(var)


def fmt_model(model: Dict[int, Optional[bool]], num_vars: int) -> str:
    """Format a model: {1: True, 2: False, 3: None} -> '1 -2 3'"""
    return " ".join(fmt_value(var, model.get(var)) for var in range(1, num_vars + 1))


def fmt_result(satisfiable: bool, model: Optional[Dict[int, Optional[bool]]] = None, num_vars: int = 0) -> str:
    """Verdict line, plus the model line when satisfiable."""
    if not satisfiable:
        return UNSAT_VERDICT
    return f"{SAT_VERDICT}\n{fmt_model(model or {}, num_vars)}"


def fmt_solver_result(solver) -> str:
    """
    Format the outcome of a solved DPLLSolver.

    Args:
        solver: DPLLSolver instance after solve() has been called.

    Raises:
        ValueError: If solve() has not been called.
    """
    if solver.result is None:
        raise ValueError("solver has no result; call solve() first")
    return fmt_result(bool(solver.result), solver.model(), solver.num_vars)
