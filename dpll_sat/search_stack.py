"""
Explicit decision stack for the non-recursive search.
"""

from dataclasses import dataclass
from typing import List, Optional

from .errors import SearchStackError


@dataclass
class DecisionFrame:
    """
    One open decision in the search.

    Attributes:
        entry: Trail length when the search node was entered.
        snapshot: Trail length right before the decision literal was forced.
        literal: The first branch literal; the second branch is its negation.
        second_branch_tried: Whether the negated literal has been tried.
    """
    entry: int
    snapshot: int
    literal: int
    second_branch_tried: bool = False

    @property
    def current_literal(self) -> int:
        return -self.literal if self.second_branch_tried else self.literal


class DecisionStack:
    """Stack of open decision frames, innermost on top."""

    def __init__(self):
        self.frames: List[DecisionFrame] = []

    def push(self, frame: DecisionFrame) -> None:
        self.frames.append(frame)

    def pop(self) -> DecisionFrame:
        """
        Pop the top frame.

        Raises:
            SearchStackError: If the stack is empty.
        """
        if not self.frames:
            raise SearchStackError("Cannot pop from empty decision stack")
        return self.frames.pop()

    def peek(self) -> Optional[DecisionFrame]:
        return self.frames[-1] if self.frames else None

    def depth(self) -> int:
        return len(self.frames)

    def is_empty(self) -> bool:
        return len(self.frames) == 0

    def clear(self) -> None:
        self.frames = []

    def __repr__(self) -> str:
        if not self.frames:
            return "DecisionStack(empty)"
        literals = " -> ".join(str(f.current_literal) for f in self.frames)
        return f"DecisionStack({literals})"
