"""
Variable assignment and the trail used to undo it.
"""

from typing import List, Optional


class Trail:
    """
    Tri-state assignment plus an append-only history of assigned literals.

    Every assignment goes through `assign` and every unassignment through
    `rollback`, so the trail length always equals the number of assigned
    variables.
    """

    def __init__(self, num_vars: int):
        self.num_vars = num_vars
        self._values: List[Optional[bool]] = [None] * (num_vars + 1)
        self._literals: List[int] = []

    def assign(self, lit: int) -> bool:
        """
        Make `lit` true if its variable is unassigned.

        Returns:
            True if the variable was assigned now, False if it already had a value.
        """
        var = abs(lit)
        if self._values[var] is not None:
            return False
        self._values[var] = lit > 0
        self._literals.append(lit)
        return True

    def value(self, lit: int) -> Optional[bool]:
        """Truth value of a literal, None if its variable is unassigned."""
        val = self._values[abs(lit)]
        if val is None:
            return None
        return val if lit > 0 else not val

    def is_assigned(self, var: int) -> bool:
        return self._values[var] is not None

    def snapshot(self) -> int:
        return len(self._literals)

    def rollback(self, snapshot: int) -> None:
        """Unassign the most recent literals until the trail is `snapshot` long."""
        while len(self._literals) > snapshot:
            lit = self._literals.pop()
            self._values[abs(lit)] = None

    def clear(self) -> None:
        self.rollback(0)

    @property
    def literals(self) -> List[int]:
        return list(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def __repr__(self) -> str:
        return f"Trail({self._literals})"
