"""
Custom exceptions for the DPLL solver.
"""


class InvalidLiteralError(Exception):
    """Raised when a literal is zero or outside the declared variable range."""

    def __init__(self, literal: int, num_vars: int, clause_index: int = -1):
        self.literal = literal
        self.num_vars = num_vars
        self.clause_index = clause_index
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Invalid literal {self.literal} for {self.num_vars} variables"
        if self.clause_index >= 0:
            msg += f" (clause {self.clause_index})"
        return msg


class DimacsParseError(Exception):
    """Raised when DIMACS input is malformed."""

    def __init__(self, reason: str, line_number: int = -1, line: str = ""):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"DIMACS parse error: {self.reason}"
        if self.line_number >= 0:
            msg += f"\n  Line {self.line_number}: {repr(self.line)}"
        return msg


class CrossCheckError(Exception):
    """Raised when the solver disagrees with a reference solver or verifier."""

    def __init__(self, expected: str, actual: str, context: str = ""):
        self.expected = expected
        self.actual = actual
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = "Cross-check mismatch:\n"
        msg += f"  Expected: {self.expected}\n"
        msg += f"  Actual:   {self.actual}"
        if self.context:
            msg += f"\n  Context:  {self.context}"
        return msg


class SearchStackError(Exception):
    """Raised when decision stack operations fail."""

    def __init__(self, message: str):
        super().__init__(message)
