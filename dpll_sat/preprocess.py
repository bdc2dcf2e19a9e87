"""
One-shot clause preprocessing.

Drops tautologies, orders clauses shortest first and counts the static
polarity of every variable. The counts are computed once and never
refreshed during search.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .formula import Clause, Formula

logger = logging.getLogger(__name__)


PURE_POSITIVE = 1
PURE_NEGATIVE = -1
MIXED = 0


@dataclass(frozen=True)
class PreprocessedFormula:
    """
    Result of preprocessing.

    Attributes:
        clauses: Surviving clauses, ascending by length (stable).
        num_vars: Declared variable count.
        positives: positives[v] = positive occurrences of v (index 0 unused).
        negatives: negatives[v] = negative occurrences of v (index 0 unused).
        polarity: PURE_POSITIVE, PURE_NEGATIVE or MIXED per variable.
            Variables that occur nowhere are MIXED.
        tautologies_dropped: Number of clauses removed as tautologies.
    """
    clauses: Tuple[Clause, ...]
    num_vars: int
    positives: Tuple[int, ...]
    negatives: Tuple[int, ...]
    polarity: Tuple[int, ...]
    tautologies_dropped: int = 0

    def pure_literals(self) -> List[int]:
        """Literals of the pure variables, in variable order."""
        return [v * self.polarity[v] for v in range(1, self.num_vars + 1) if self.polarity[v] != MIXED]


def is_tautology(clause: Clause) -> bool:
    """Check whether a clause holds both a literal and its negation."""
    lits = set(clause)
    return any(-lit in lits for lit in lits)


def preprocess(formula: Formula) -> PreprocessedFormula:
    """Run the preprocessing steps over a validated formula."""
    survivors = [clause for clause in formula.clauses if not is_tautology(clause)]
    dropped = len(formula.clauses) - len(survivors)

    # stable: equal lengths keep their input order
    survivors.sort(key=len)

    n = formula.num_vars
    positives = [0] * (n + 1)
    negatives = [0] * (n + 1)
    for clause in survivors:
        for lit in clause:
            if lit > 0:
                positives[lit] += 1
            else:
                negatives[-lit] += 1

    polarity = [MIXED] * (n + 1)
    for v in range(1, n + 1):
        if positives[v] > 0 and negatives[v] == 0:
            polarity[v] = PURE_POSITIVE
        elif negatives[v] > 0 and positives[v] == 0:
            polarity[v] = PURE_NEGATIVE

    logger.debug(
        "Preprocessed %d clauses: %d tautologies dropped, %d pure variables",
        len(formula.clauses), dropped, sum(1 for p in polarity if p != MIXED),
    )

    return PreprocessedFormula(
        clauses=tuple(survivors),
        num_vars=n,
        positives=tuple(positives),
        negatives=tuple(negatives),
        polarity=tuple(polarity),
        tautologies_dropped=dropped,
    )
