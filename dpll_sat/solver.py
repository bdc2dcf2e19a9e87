"""
DPLL SAT solver.

The search is plain chronological backtracking over unit propagation:

1. At the root, force the literal of every pure variable.
2. Propagate unit clauses to a fixpoint; a conflict fails the node.
3. Pick a branching variable; if none is left the formula is satisfied.
4. Try the preferred literal, then its negation, rolling the trail back
   between the branches and on failure.

Two drivers implement the same search: native recursion, and an explicit
stack of decision frames for instances deeper than the interpreter's
recursion limit allows.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidLiteralError
from .formula import Formula
from .heuristic import BranchingHeuristic
from .preprocess import preprocess
from .propagation import Propagator
from .search_stack import DecisionFrame, DecisionStack
from .trail import Trail
from .watches import WatchIndex

logger = logging.getLogger(__name__)


SEARCH_MODES = ("auto", "recursive", "iterative")

# "auto" switches to the explicit stack from this many variables on
RECURSION_SAFE_VARS = 500


class NodeOutcome(Enum):
    """Result of opening a search node."""
    SAT = auto()
    CONFLICT = auto()
    BRANCH = auto()


@dataclass
class SolverStats:
    """Search counters for one solve() call."""
    decisions: int = 0
    propagations: int = 0
    conflicts: int = 0
    bcp_passes: int = 0
    max_depth: int = 0
    pure_literals: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class DPLLSolver:
    """
    DPLL solver over a fixed CNF formula.

    The solver maintains:
    - trail: assigned literals in order, with the tri-state assignment
    - watches: two-watched-literal placement per clause
    - propagator: fixpoint unit propagation over the preprocessed clauses
    - heuristic: branching variable and polarity choice
    """

    def __init__(self, clauses: Sequence[Sequence[int]], num_vars: int, search: str = "auto"):
        if search not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode {search!r}, expected one of {SEARCH_MODES}")

        # Input
        self.formula = Formula.from_clauses(clauses, num_vars)
        self.num_vars = num_vars
        self.search = search

        # Preprocessing (once)
        self.preprocessed = preprocess(self.formula)
        self.clauses = self.preprocessed.clauses

        # State
        self.trail = Trail(num_vars)
        self.watches = WatchIndex(self.clauses, num_vars)
        self.propagator = Propagator(self.clauses, self.trail, self.watches)
        self.heuristic = BranchingHeuristic(
            self.clauses, self.trail, self.preprocessed.positives, self.preprocessed.negatives
        )
        self.stats = SolverStats()
        self.result: Optional[bool] = None

        logger.debug(
            "Solver built: %d variables, %d clauses (%d tautologies dropped)",
            num_vars, len(self.clauses), self.preprocessed.tautologies_dropped,
        )

    @property
    def search_mode(self) -> str:
        """Driver actually used by solve()."""
        if self.search != "auto":
            return self.search
        return "recursive" if self.num_vars < RECURSION_SAFE_VARS else "iterative"

    def solve(self) -> bool:
        """
        Decide satisfiability.

        Returns True if satisfiable, False if unsatisfiable. Any state left
        by a previous call is reset first.
        """
        if self.result is not None or len(self.trail):
            self.reset()

        if self.search_mode == "recursive":
            result = self._search_recursive(0)
        else:
            result = self._search_iterative()

        self.stats.propagations = self.propagator.propagations
        self.stats.bcp_passes = self.propagator.passes
        self.stats.conflicts += self.propagator.conflicts
        self.result = result

        logger.info(
            "%s (%s search): %d decisions, %d propagations, %d conflicts",
            "SAT" if result else "UNSAT", self.search_mode,
            self.stats.decisions, self.stats.propagations, self.stats.conflicts,
        )
        return result

    def reset(self) -> None:
        """Drop the assignment, restore the initial watches and clear the counters."""
        self.trail.clear()
        self.watches.reset()
        self.propagator.reset_counters()
        self.stats = SolverStats()
        self.result = None

    def value(self, lit: int) -> Optional[bool]:
        """
        Truth value of a literal after solve().

        Returns None for variables the search never had to assign.

        Raises:
            InvalidLiteralError: If lit is 0 or beyond the variable count.
        """
        if lit == 0 or abs(lit) > self.num_vars:
            raise InvalidLiteralError(lit, self.num_vars)
        return self.trail.value(lit)

    def model(self) -> Dict[int, Optional[bool]]:
        """Value of every variable 1..n (None = don't care)."""
        return {var: self.trail.value(var) for var in range(1, self.num_vars + 1)}

    def model_literals(self) -> List[int]:
        """Signed literal per variable, don't-care variables reported positive."""
        return [-var if self.trail.value(var) is False else var for var in range(1, self.num_vars + 1)]

    def _open_node(self) -> Tuple[NodeOutcome, Optional[DecisionFrame]]:
        """
        Enter a search node: pure literals at the root, then propagation,
        then the branching choice.

        On CONFLICT the trail is already rolled back to the node entry.
        """
        entry = self.trail.snapshot()

        if entry == 0:
            for lit in self.preprocessed.pure_literals():
                if not self.propagator.force(lit):
                    self.stats.conflicts += 1
                    self.trail.rollback(entry)
                    return NodeOutcome.CONFLICT, None
                self.stats.pure_literals += 1

        if not self.propagator.propagate():
            self.trail.rollback(entry)
            return NodeOutcome.CONFLICT, None

        var = self.heuristic.pick_variable()
        if var is None:
            return NodeOutcome.SAT, None

        frame = DecisionFrame(
            entry=entry,
            snapshot=self.trail.snapshot(),
            literal=self.heuristic.preferred_literal(var),
        )
        return NodeOutcome.BRANCH, frame

    def _decide(self, lit: int, depth: int) -> bool:
        """Force a branch literal."""
        self.stats.decisions += 1
        if depth > self.stats.max_depth:
            self.stats.max_depth = depth
        logger.debug("Decide %d at depth %d", lit, depth)

        if not self.propagator.force(lit):
            self.stats.conflicts += 1
            return False
        return True

    def _search_recursive(self, depth: int) -> bool:
        outcome, frame = self._open_node()
        if outcome is NodeOutcome.SAT:
            return True
        if outcome is NodeOutcome.CONFLICT:
            return False

        depth += 1
        if self._decide(frame.literal, depth) and self._search_recursive(depth):
            return True

        self.trail.rollback(frame.snapshot)
        frame.second_branch_tried = True
        logger.debug("Backtrack: trying %d at depth %d", -frame.literal, depth)
        if self._decide(-frame.literal, depth) and self._search_recursive(depth):
            return True

        self.trail.rollback(frame.entry)
        return False

    def _search_iterative(self) -> bool:
        stack = DecisionStack()
        outcome, frame = self._open_node()

        while True:
            if outcome is NodeOutcome.SAT:
                return True

            if outcome is NodeOutcome.BRANCH:
                stack.push(frame)
                if self._decide(frame.literal, stack.depth()):
                    outcome, frame = self._open_node()
                    continue

            # The innermost open branch failed: move to the next untried one
            while True:
                top = stack.peek()
                if top is None:
                    return False

                self.trail.rollback(top.snapshot)
                if not top.second_branch_tried:
                    top.second_branch_tried = True
                    logger.debug("Backtrack: trying %d at depth %d", -top.literal, stack.depth())
                    if self._decide(-top.literal, stack.depth()):
                        break
                    continue

                stack.pop()
                self.trail.rollback(top.entry)

            outcome, frame = self._open_node()
