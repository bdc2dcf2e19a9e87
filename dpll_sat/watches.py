"""
Two-watched-literal index.

Each clause watches up to two of its literal slots. When a literal becomes
false, clauses watching it try to move that watch to a literal that is not
false. Unit and conflict detection is not done here: the propagation engine
classifies clauses itself, so this index only decides where watches sit.
"""

from typing import List, Optional, Sequence, Tuple

from .formula import Clause
from .trail import Trail


def literal_key(lit: int) -> int:
    """Watch-list slot of a literal: 2v for +v, 2v+1 for -v."""
    return 2 * lit if lit > 0 else -2 * lit + 1


class WatchIndex:
    """
    Watch pairs per clause and clause lists per literal.

    Attributes:
        watches: watches[c] = [first, second] slot positions of clause c.
            `second` is None for unit clauses; empty clauses hold None.
        watch_lists: watch_lists[literal_key(l)] = clause indices watching l.
            Order carries no meaning.
    """

    def __init__(self, clauses: Sequence[Clause], num_vars: int):
        self.clauses = clauses
        self.num_vars = num_vars
        self.watches: List[Optional[List[Optional[int]]]] = []
        self.watch_lists: List[List[int]] = []
        self.reset()

    def reset(self) -> None:
        """Watch the first literal of every clause, and the second when there is one."""
        self.watches = []
        self.watch_lists = [[] for _ in range(2 * (self.num_vars + 1))]
        for idx, clause in enumerate(self.clauses):
            if not clause:
                self.watches.append(None)
                continue

            self.watch_lists[literal_key(clause[0])].append(idx)
            if len(clause) > 1:
                self.watches.append([0, 1])
                self.watch_lists[literal_key(clause[1])].append(idx)
            else:
                self.watches.append([0, None])

    def watchers(self, lit: int) -> List[int]:
        return self.watch_lists[literal_key(lit)]

    def watched_literals(self, clause_idx: int) -> Tuple[int, ...]:
        pair = self.watches[clause_idx]
        if pair is None:
            return ()
        clause = self.clauses[clause_idx]
        return tuple(clause[slot] for slot in pair if slot is not None)

    def on_assign(self, lit: int, trail: Trail) -> int:
        """
        Update watches after `lit` became true.

        Returns:
            Number of watches moved.
        """
        false_lit = -lit
        watching = self.watch_lists[literal_key(false_lit)]
        moved = 0

        i = 0
        while i < len(watching):
            clause_idx = watching[i]
            clause = self.clauses[clause_idx]
            pair = self.watches[clause_idx]

            # unit clause: nothing to move to
            if pair[1] is None:
                i += 1
                continue

            if clause[pair[0]] == false_lit:
                current, other = 0, 1
            else:
                current, other = 1, 0

            if trail.value(clause[pair[other]]) is True:
                i += 1
                continue

            replacement = None
            for slot, candidate in enumerate(clause):
                if slot == pair[0] or slot == pair[1]:
                    continue
                if trail.value(candidate) is not False:
                    replacement = slot
                    break

            if replacement is None:
                i += 1
                continue

            pair[current] = replacement
            # swap-with-last removal; the swapped-in entry is examined next
            watching[i] = watching[-1]
            watching.pop()
            self.watch_lists[literal_key(clause[replacement])].append(clause_idx)
            moved += 1

        return moved

    def check(self) -> bool:
        """Check that watch pairs and watch lists describe the same placement."""
        expected = [[] for _ in range(len(self.watch_lists))]
        for idx, pair in enumerate(self.watches):
            if pair is None:
                if self.clauses[idx]:
                    return False
                continue
            slots = [slot for slot in pair if slot is not None]
            if len(set(slots)) != len(slots):
                return False
            for slot in slots:
                expected[literal_key(self.clauses[idx][slot])].append(idx)

        for key, listed in enumerate(self.watch_lists):
            if sorted(listed) != sorted(expected[key]):
                return False
        return True
