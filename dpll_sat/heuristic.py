"""
Branching variable selection.
"""

from typing import List, Optional, Sequence

from .formula import Clause
from .trail import Trail


class BranchingHeuristic:
    """
    Picks the unassigned variable occurring most often in unresolved clauses.

    Branch polarity follows the static occurrence counts gathered during
    preprocessing, which are never updated as the search moves on.
    """

    def __init__(
        self,
        clauses: Sequence[Clause],
        trail: Trail,
        positives: Sequence[int],
        negatives: Sequence[int]
    ):
        self.clauses = clauses
        self.trail = trail
        self.positives = positives
        self.negatives = negatives

    def scores(self) -> List[int]:
        """Per-variable count of unassigned occurrences in clauses with no true literal."""
        scores = [0] * (self.trail.num_vars + 1)
        trail = self.trail
        for clause in self.clauses:
            if any(trail.value(lit) is True for lit in clause):
                continue
            for lit in clause:
                var = abs(lit)
                if not trail.is_assigned(var):
                    scores[var] += 1
        return scores

    def pick_variable(self) -> Optional[int]:
        """
        Highest-scoring unassigned variable, lowest id on ties.

        Returns None when no unassigned variable occurs in an unresolved clause.
        """
        scores = self.scores()
        best_var = None
        best_score = 0
        for var in range(1, self.trail.num_vars + 1):
            if not self.trail.is_assigned(var) and scores[var] > best_score:
                best_score = scores[var]
                best_var = var
        return best_var

    def preferred_literal(self, var: int) -> int:
        """Positive literal unless the variable occurs more often negated."""
        return var if self.positives[var] >= self.negatives[var] else -var
