"""
CNF problem model and random formula generation.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidLiteralError


Clause = Tuple[int, ...]


@dataclass(frozen=True)
class Formula:
    """
    Immutable clause set over variables 1..num_vars.

    Build instances through `from_clauses`, which checks that every
    literal is nonzero and within the declared variable range.
    """
    clauses: Tuple[Clause, ...]
    num_vars: int

    @classmethod
    def from_clauses(cls, clauses: Sequence[Sequence[int]], num_vars: int) -> "Formula":
        """
        Validate and freeze a clause list.

        Raises:
            ValueError: If num_vars is negative.
            InvalidLiteralError: If a literal is 0 or its magnitude exceeds num_vars.
        """
        if num_vars < 0:
            raise ValueError(f"Variable count must be non-negative, got {num_vars}")

        frozen = []
        for index, clause in enumerate(clauses):
            for lit in clause:
                if lit == 0 or abs(lit) > num_vars:
                    raise InvalidLiteralError(lit, num_vars, index)
            frozen.append(tuple(clause))
        return cls(tuple(frozen), num_vars)

    def __len__(self) -> int:
        return len(self.clauses)

    def variables(self) -> range:
        return range(1, self.num_vars + 1)


# Empirically determined clause counts for balanced (phase transition) 3-SAT
BALANCED_CLAUSE_COUNTS = {
    3: 19, 4: 24, 5: 28, 6: 33, 7: 37, 8: 41, 9: 45, 10: 50,
    11: 54, 12: 58, 13: 63, 14: 67, 15: 71, 16: 76, 17: 79,
    18: 83, 19: 87, 20: 92
}


def generate_random_formula(
    n_vars: int,
    clause_length: int = 3,
    variance: float = 0.1,
    n_clauses: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> Tuple[List[List[int]], int]:
    """
    Generate a random k-SAT formula near the phase transition.

    Args:
        n_vars: Number of variables.
        clause_length: Number of literals per clause (default 3 for 3-SAT).
            Clipped to n_vars.
        variance: Relative standard deviation in clause count (e.g., 0.1 = +/-10%).
        n_clauses: Fixed number of clauses. If None, uses phase transition estimate.
        rng: Random source. Defaults to the module-level generator.

    Returns:
        Tuple of (clauses, n_vars) where clauses use variables 1..n_vars.
    """
    if n_vars < 1:
        raise ValueError(f"Need at least one variable, got {n_vars}")
    rng = rng or random.Random()

    if n_clauses is None:
        base = BALANCED_CLAUSE_COUNTS.get(n_vars, int(n_vars * 4.26))
        delta = int(base * variance)
        n_clauses = rng.randint(base - delta, base + delta)

    variables = list(range(1, n_vars + 1))
    width = min(clause_length, n_vars)

    clauses = []
    for _ in range(n_clauses):
        clause_vars = rng.sample(variables, width)
        clause = [var if rng.random() < 0.5 else -var for var in clause_vars]
        clauses.append(clause)

    return clauses, n_vars
