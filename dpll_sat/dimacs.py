"""
DIMACS CNF reading and writing.

Reading rules:
- blank lines and lines starting with 'c' are skipped
- a line starting with 'p' gives the variable count as its third token
- every other token is a literal; 0 closes the current clause
- a clause still open at the end of input is dropped
- a line starting with '%' ends the data (SATLIB files)

Malformed input raises DimacsParseError, so no solver is ever built from it.
"""

import gzip
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import DimacsParseError

logger = logging.getLogger(__name__)


def _numbered_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    line_number = 0
    try:
        for line_number, raw in enumerate(lines, start=1):
            yield line_number, raw
    except UnicodeDecodeError:
        # lower bound: text streams decode ahead of the line being read
        raise DimacsParseError("input is not valid UTF-8", line_number + 1) from None


def parse_dimacs(lines: Iterable[str]) -> Tuple[List[List[int]], int]:
    """
    Parse DIMACS CNF lines.

    Args:
        lines: Iterable of text lines (a file object works).

    Returns:
        Tuple of (clauses, num_vars).

    Raises:
        DimacsParseError: On a bad 'p' line, a non-integer token, a literal
            before the 'p' line, a literal beyond the declared count or bytes
            that are not UTF-8.
    """
    clauses: List[List[int]] = []
    current: List[int] = []
    num_vars = 0
    seen_header = False

    for line_number, raw in _numbered_lines(lines):
        line = raw.strip()
        if not line or line.startswith("c"):
            continue
        if line.startswith("%"):
            break

        if line.startswith("p"):
            parts = line.split()
            if len(parts) < 3:
                raise DimacsParseError("problem line needs a variable count", line_number, raw)
            try:
                num_vars = int(parts[2])
            except ValueError:
                raise DimacsParseError(f"bad variable count {parts[2]!r}", line_number, raw) from None
            if num_vars < 0:
                raise DimacsParseError("negative variable count", line_number, raw)
            seen_header = True
            continue

        for token in line.split():
            try:
                lit = int(token)
            except ValueError:
                raise DimacsParseError(f"bad literal {token!r}", line_number, raw) from None

            if lit == 0:
                if current:
                    clauses.append(current)
                    current = []
                continue

            if not seen_header:
                raise DimacsParseError("literal before the problem line", line_number, raw)
            if abs(lit) > num_vars:
                raise DimacsParseError(
                    f"literal {lit} exceeds declared variable count {num_vars}", line_number, raw
                )
            current.append(lit)

    if current:
        logger.warning("Dropping unterminated final clause %s", current)

    return clauses, num_vars


def read_dimacs_stream(stream: IO[str]) -> Tuple[List[List[int]], int]:
    """Parse DIMACS from an open text stream (e.g. sys.stdin)."""
    return parse_dimacs(stream)


def read_dimacs(path: Union[str, Path]) -> Tuple[List[List[int]], int]:
    """
    Read a DIMACS file, gzip-compressed when the name ends in '.gz'.

    Returns:
        Tuple of (clauses, num_vars).
    """
    path = str(path)
    open_fn = gzip.open if path.endswith(".gz") else open
    with open_fn(path, "rt", encoding="utf-8") as f:
        clauses, num_vars = parse_dimacs(f)
    logger.debug("Read %s: %d variables, %d clauses", path, num_vars, len(clauses))
    return clauses, num_vars


def fmt_dimacs(clauses: Sequence[Sequence[int]], num_vars: int, comments: Sequence[str] = ()) -> str:
    """Format clauses as DIMACS CNF text."""
    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p cnf {num_vars} {len(clauses)}")
    for clause in clauses:
        lines.append(" ".join(str(lit) for lit in clause) + " 0")
    return "\n".join(lines) + "\n"


def write_dimacs(
    clauses: Sequence[Sequence[int]],
    num_vars: int,
    path: Union[str, Path],
    comments: Sequence[str] = ()
) -> None:
    """Write clauses to a DIMACS file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(fmt_dimacs(clauses, num_vars, comments))
