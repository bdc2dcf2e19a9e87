"""
Boolean constraint propagation.

Unit propagation runs as a fixpoint of full clause scans. Each scan
classifies every clause from its true / false / unassigned literal counts,
forces the literal of each unit clause and stops at the first conflict.
"""

import logging
from enum import Enum, auto
from typing import Optional, Sequence, Tuple

from .formula import Clause
from .trail import Trail
from .watches import WatchIndex

logger = logging.getLogger(__name__)


class ClauseStatus(Enum):
    """State of a clause under the current partial assignment."""
    SATISFIED = auto()
    CONFLICT = auto()
    UNIT = auto()
    UNRESOLVED = auto()


def classify(clause: Clause, trail: Trail) -> Tuple[ClauseStatus, Optional[int]]:
    """
    Classify a clause.

    Returns:
        (status, literal) where literal is the remaining unassigned literal
        for UNIT clauses and None otherwise.
    """
    unassigned = 0
    last_unassigned = None
    for lit in clause:
        val = trail.value(lit)
        if val is True:
            return ClauseStatus.SATISFIED, None
        if val is None:
            unassigned += 1
            last_unassigned = lit

    if unassigned == 0:
        return ClauseStatus.CONFLICT, None
    if unassigned == 1:
        return ClauseStatus.UNIT, last_unassigned
    return ClauseStatus.UNRESOLVED, None


class Propagator:
    """
    Unit propagation over a fixed clause set.

    Assignments made here are left on the trail when a conflict is found;
    rolling them back is the caller's job.
    """

    def __init__(self, clauses: Sequence[Clause], trail: Trail, watches: WatchIndex):
        self.clauses = clauses
        self.trail = trail
        self.watches = watches

        # Counters
        self.propagations = 0
        self.conflicts = 0
        self.passes = 0

    def force(self, lit: int) -> bool:
        """
        Assign `lit` and update the watch index.

        Does not look for unit clauses or conflicts.

        Returns:
            False if `lit` is already false, True otherwise.
        """
        current = self.trail.value(lit)
        if current is not None:
            return current

        self.trail.assign(lit)
        self.watches.on_assign(lit, self.trail)
        return True

    def propagate(self) -> bool:
        """
        Force unit clauses until nothing changes.

        Returns:
            True at the fixpoint, False on the first conflicting clause.
        """
        changed = True
        while changed:
            changed = False
            self.passes += 1

            for clause_idx, clause in enumerate(self.clauses):
                status, lit = classify(clause, self.trail)

                if status is ClauseStatus.CONFLICT:
                    self.conflicts += 1
                    logger.debug("Conflict in clause %d %s", clause_idx, clause)
                    return False

                if status is ClauseStatus.UNIT:
                    self.force(lit)
                    self.propagations += 1
                    changed = True

        return True

    def reset_counters(self) -> None:
        self.propagations = 0
        self.conflicts = 0
        self.passes = 0
