"""
Model verification and brute-force reference solving.

Used to check solver answers: a SAT verdict must come with a model that
satisfies every input clause, and on small formulas the verdict must
match exhaustive enumeration.
"""

import itertools
from typing import Dict, List, Optional, Sequence


class ModelVerifier:
    """
    Checks models against the input clause set.

    Unassigned (None) variables are treated as true, matching the way
    models are reported.
    """

    def __init__(self, clauses: Sequence[Sequence[int]]):
        self.clauses = [list(c) for c in clauses]

    def _literal_true(self, lit: int, model: Dict[int, Optional[bool]]) -> bool:
        value = model.get(abs(lit))
        if value is None:
            value = True
        return value if lit > 0 else not value

    def unsatisfied_clauses(self, model: Dict[int, Optional[bool]]) -> List[int]:
        """Indices of clauses with no true literal under `model`."""
        return [
            idx for idx, clause in enumerate(self.clauses)
            if not any(self._literal_true(lit, model) for lit in clause)
        ]

    def verify(self, model: Dict[int, Optional[bool]]) -> bool:
        """True if every clause has a true literal."""
        return not self.unsatisfied_clauses(model)


def brute_force_satisfiable(clauses: Sequence[Sequence[int]], num_vars: int) -> bool:
    """
    Decide satisfiability by trying all 2^n assignments.

    Only meant for small n (tests and cross-checks).
    """
    for values in itertools.product((False, True), repeat=num_vars):
        if all(any((lit > 0) == values[abs(lit) - 1] for lit in clause) for clause in clauses):
            return True
    return False


def verify_solver_model(solver) -> bool:
    """
    Verify the model of a satisfiable DPLLSolver against its input clauses.

    Args:
        solver: DPLLSolver instance after solve() returned True.

    Returns:
        True if the model satisfies the input formula, False otherwise.
    """
    verifier = ModelVerifier(solver.formula.clauses)
    return verifier.verify(solver.model())
